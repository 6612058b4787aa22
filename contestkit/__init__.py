"""Solutions to classic algorithmic problems as plain functions and small classes."""

__version__ = "0.1.0"