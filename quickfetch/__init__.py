"""Request building, ordered headers, string arrays and header-name helpers."""

__version__ = "0.1.0"
__all__ = ["text", "string_array", "headers", "request"]