"""Configuration, constants and project loading for a MIPS interpreter engine."""

__version__ = "0.1.0"