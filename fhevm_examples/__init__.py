"""Generators for standalone FHEVM example projects and their documentation."""

__version__ = "0.1.0"
