import sys

from batchrvt.presentation.cli import main

sys.exit(main())
