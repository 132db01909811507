"""Recur - recurring date configurator."""

__version__ = "0.1.0"
