"""Data service for the Forest Rights Act (FRA) progress dashboard."""

__version__ = "0.1.0"
