from .url import Record, format_records

__all__ = ["Record", "format_records"]
