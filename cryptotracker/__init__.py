"""Cryptocurrency price list and portfolio tracker web application."""

__version__ = "0.1.0"