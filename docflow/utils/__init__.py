"""Utility functions for docflow."""

from docflow.utils.identifiers import (
    generate_doc_id,
    generate_entry_id,
    generate_session_id,
    utc_timestamp,
)
from docflow.utils.prompt_template import (
    INPUT_FALLBACK_TEXT,
    find_placeholders,
    render_prompt_template,
)

__all__ = [
    "generate_doc_id",
    "generate_entry_id",
    "generate_session_id",
    "utc_timestamp",
    "INPUT_FALLBACK_TEXT",
    "find_placeholders",
    "render_prompt_template",
]
