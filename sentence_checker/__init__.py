"""sentence-checker — validates sentences against a fixed set of writing rules."""

__version__ = "1.0.0"
