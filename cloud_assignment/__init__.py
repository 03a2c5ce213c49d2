"""Cloud assignment greeter service."""

__version__ = "1.0.0"
