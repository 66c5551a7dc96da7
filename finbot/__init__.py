"""Knowledge-grounded market assistant with progressive profile collection."""

__version__ = "0.1.0"
