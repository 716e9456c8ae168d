"""Employee records API with a salary deduction calculator."""

__version__ = "0.1.0"
