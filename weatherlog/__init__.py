"""WIGOS station weather-log validation service."""

__version__ = "1.0.0"
