"""Version information for neo-docs."""

__version__ = "0.1.0"
