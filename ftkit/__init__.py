"""ASCII character, string, number, formatted-output and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["charclass", "search", "transform", "numbers", "printf", "nextline"]