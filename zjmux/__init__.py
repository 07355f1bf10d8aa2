"""Status and tab bars, a file browser, input parsing and dispatch, and session lookup for a terminal workspace."""

__version__ = "0.1.0"