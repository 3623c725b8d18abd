"""Sinks receiving runner trace entries."""

import logging
from pathlib import Path
from typing import Protocol

from docflow.models.trace_entry import TraceEntry, TraceLevel


class TraceSink(Protocol):
    """Protocol for receiving trace entries."""

    def append(self, entry: TraceEntry) -> None:
        """Append an entry to the sink."""
        ...


class ListSink:
    """stores entries in a list."""

    def __init__(self) -> None:
        self.entries: list[TraceEntry] = []

    def append(self, entry: TraceEntry) -> None:
        """Append an entry to the list."""
        self.entries.append(entry)

    @property
    def messages(self) -> list[str]:
        return [entry.message for entry in self.entries]

    def clear(self) -> None:
        """Clear all entries."""
        self.entries.clear()


class FileSink:
    """writes entries to a JSONL file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, entry: TraceEntry) -> None:
        """Append an entry to the file."""
        with open(self.path, "a") as f:
            f.write(entry.model_dump_json() + "\n")


class LoggingSink:
    """forwards entries to the logging module."""

    def __init__(self, name: str = "docflow.trace") -> None:
        self._logger = logging.getLogger(name)

    def append(self, entry: TraceEntry) -> None:
        level = logging.WARNING if entry.level == TraceLevel.error else logging.INFO
        self._logger.log(level, "[%s #%d] %s", entry.session_id, entry.sequence, entry.message)


class FanOutSink:
    """copies every entry to several sinks."""

    def __init__(self, *sinks: TraceSink) -> None:
        self.sinks = list(sinks)

    def append(self, entry: TraceEntry) -> None:
        for sink in self.sinks:
            sink.append(entry)
