"""Fixed-size tuples, zipping, unzipping, cross joins and helpers for empty and optional values."""

__version__ = "0.1.0"
__all__ = ["types", "type_manipulation", "tuples", "joins"]