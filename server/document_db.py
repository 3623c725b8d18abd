"""SQLite storage for workspace documents."""

import os
import sqlite3
from pathlib import Path

from docflow.models.documents import Document, parse_document
from docflow.store.base import DocumentExistsError, DocumentNotFoundError
from docflow.utils.identifiers import generate_doc_id, utc_timestamp


DEFAULT_DB_PATH = Path(__file__).parent / "data" / "docflow.db"
DOCFLOW_DB_PATH = Path(os.getenv("DOCFLOW_DB_PATH", str(DEFAULT_DB_PATH)))


class SqliteDocumentStore:
    """Document store backed by a single sqlite table.

    Documents are kept as JSON next to a few indexed columns.
    """

    def __init__(self, db_path: Path | str = DOCFLOW_DB_PATH) -> None:
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                create table if not exists documents (
                    doc_id text primary key,
                    doc_type text not null,
                    title text not null,
                    doc_json text not null,
                    updated_at text not null
                )
                """
            )
            conn.execute(
                "create index if not exists idx_documents_doc_type on documents(doc_type)"
            )
            conn.commit()

    def get(self, doc_id: str) -> Document | None:
        with self._connect() as conn:
            row = conn.execute(
                "select doc_json from documents where doc_id = ?",
                (doc_id,),
            ).fetchone()
        if not row:
            return None
        return parse_document(row["doc_json"])

    def create(self, doc: Document) -> Document:
        """insert a new document."""
        if not doc.doc_id:
            doc = doc.model_copy(update={"doc_id": generate_doc_id()})
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    insert into documents (doc_id, doc_type, title, doc_json, updated_at)
                    values (?, ?, ?, ?, ?)
                    """,
                    (
                        doc.doc_id,
                        doc.doc_type,
                        doc.title,
                        doc.model_dump_json(),
                        utc_timestamp(),
                    ),
                )
                conn.commit()
        except sqlite3.IntegrityError as e:
            raise DocumentExistsError(f"Document already exists: {doc.doc_id}") from e
        return doc

    def update(self, doc: Document) -> Document:
        """replace an existing document."""
        with self._connect() as conn:
            cursor = conn.execute(
                """
                update documents
                set doc_type = ?, title = ?, doc_json = ?, updated_at = ?
                where doc_id = ?
                """,
                (
                    doc.doc_type,
                    doc.title,
                    doc.model_dump_json(),
                    utc_timestamp(),
                    doc.doc_id,
                ),
            )
            conn.commit()
        if cursor.rowcount == 0:
            raise DocumentNotFoundError(f"Document not found: {doc.doc_id}")
        return doc

    def delete(self, doc_id: str) -> None:
        with self._connect() as conn:
            cursor = conn.execute("delete from documents where doc_id = ?", (doc_id,))
            conn.commit()
        if cursor.rowcount == 0:
            raise DocumentNotFoundError(f"Document not found: {doc_id}")

    def list(self, doc_type: str | None = None) -> list[Document]:
        with self._connect() as conn:
            if doc_type is None:
                rows = conn.execute(
                    "select doc_json from documents order by updated_at desc"
                ).fetchall()
            else:
                rows = conn.execute(
                    "select doc_json from documents where doc_type = ? order by updated_at desc",
                    (doc_type,),
                ).fetchall()
        return [parse_document(row["doc_json"]) for row in rows]
