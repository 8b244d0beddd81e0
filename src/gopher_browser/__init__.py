"""Gopher Browser - a line-oriented Gopher protocol client."""

__version__ = "0.1.0"
