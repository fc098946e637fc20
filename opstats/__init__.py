"""Latency statistics for CSV logs of repeated operation executions."""

__version__ = "1.0.0"
