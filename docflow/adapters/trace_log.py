"""Trace emission API shared by sessions."""

from docflow.adapters.sinks import TraceSink
from docflow.models.trace_entry import TraceEntry, TraceLevel
from docflow.utils.identifiers import generate_entry_id, utc_timestamp


class TraceLog:
    """Builds sequenced trace entries and hands them to a sink."""

    def __init__(self, session_id: str, sink: TraceSink) -> None:
        self.session_id = session_id
        self.sink = sink
        self._sequence = 0

    def _next_sequence(self) -> int:
        """Get the next sequence number."""
        seq = self._sequence
        self._sequence += 1
        return seq

    def emit(self, message: str, level: TraceLevel = TraceLevel.info) -> TraceEntry:
        entry = TraceEntry(
            entry_id=generate_entry_id(),
            session_id=self.session_id,
            timestamp=utc_timestamp(),
            sequence=self._next_sequence(),
            level=level,
            message=message,
        )
        self.sink.append(entry)
        return entry

    def info(self, message: str) -> TraceEntry:
        return self.emit(message, TraceLevel.info)

    def result(self, message: str) -> TraceEntry:
        return self.emit(message, TraceLevel.result)

    def error(self, message: str) -> TraceEntry:
        return self.emit(message, TraceLevel.error)
