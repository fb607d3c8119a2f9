"""Test-prep quiz generation, administration and scoring."""

__version__ = "0.1.0"
