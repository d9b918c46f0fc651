"""Script-data persistence for batch Revit processing sessions."""

__version__ = "1.0.0"
