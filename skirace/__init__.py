"""Biathlon race event processing: configuration, event reading, event log and results."""

__version__ = "0.1.0"