"""Validation of .ber puzzle maps, with line-reading, string, memory and character helpers."""

__version__ = "0.1.0"