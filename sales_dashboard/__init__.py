"""Sales performance dashboard core: spreadsheet rows -> normalized records, weekly series."""

__version__ = "0.1.0"
