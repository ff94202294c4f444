"""Condition builder - typed rule composition with lossless config documents."""

__version__ = "0.1.0"
