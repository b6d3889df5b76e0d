"""String, sorting and searching algorithms on plain Python values."""

__version__ = "0.1.0"
__all__ = ["strings", "sorting", "searching"]