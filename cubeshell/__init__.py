"""A small command shell with built-in commands, scripts and supporting utilities."""

__version__ = "0.1.0"