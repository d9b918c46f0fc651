"""Application layer package."""

from batchrvt.application import script_data_util

__all__ = ['script_data_util']
