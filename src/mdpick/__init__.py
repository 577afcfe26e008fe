"""mdpick - pick documents from a directory with a terminal checklist."""

__version__ = "0.1.0"
