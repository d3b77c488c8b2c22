"""Personal tracking API: accounts, nutrition logging and activity statistics."""

__version__ = "0.1.0"
