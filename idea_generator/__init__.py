"""Generates business ideas from a completed Typeform survey response."""

__version__ = "0.1.0"
