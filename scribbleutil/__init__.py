"""Character, string, string-view, option, record, error and HTTP utilities for scrobbling clients."""

__version__ = "0.1.0"