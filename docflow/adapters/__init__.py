"""Adapters for delivering runner trace entries."""

from docflow.adapters.sinks import FanOutSink, FileSink, ListSink, LoggingSink, TraceSink
from docflow.adapters.trace_log import TraceLog

__all__ = [
    "TraceSink",
    "ListSink",
    "FileSink",
    "LoggingSink",
    "FanOutSink",
    "TraceLog",
]
