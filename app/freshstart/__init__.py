"""freshstart - Export, check and rebuild a development machine."""

__version__ = "0.3.0"
