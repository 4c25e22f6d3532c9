"""Fundfolio: mutual fund portfolio tracker with a simulated wallet."""

__version__ = "0.1.0"
