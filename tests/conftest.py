import sys
import os

import pytest

# Ensure the src directory is on sys.path so 'batchrvt' is importable without installing
SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC not in sys.path:
    sys.path.insert(0, SRC)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's config file, env and data folder."""
    for name in ("BATCHRVT_CONFIG", "BATCHRVT_DATA_FOLDER", "BATCHRVT_LOG_LEVEL", "BATCHRVT_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
