"""Thin orchestration wrapper around the helm binary."""

__version__ = "0.1.0"
