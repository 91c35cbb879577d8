"""Compound interest solver backend."""

__version__ = "0.1.0"
