"""Document models for the workspace store.

Every stored document shares the same envelope (id, type tag, title) and
carries a typed content payload. The type tag discriminates the union, so a
raw dict from storage validates straight into the right concrete model.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from docflow.models.diagram import DiagramContent
from docflow.models.flow import FlowContent
from docflow.models.llm_settings import LLMSettings


class DocType(str, Enum):
    """Document type tags."""

    flow = "Flow"
    agent = "Agent"
    project = "Project"
    diagram = "Diagram"


class DocRef(BaseModel):
    """lightweight reference to a document owned by a project."""

    doc_id: str
    doc_type: DocType
    title: str | None = None


class AgentContent(BaseModel):
    prompt_template: str = ""


class ProjectContent(BaseModel):
    name: str
    documents: list[DocRef] = Field(default_factory=list)
    llm_settings: LLMSettings | None = None

    def refs_of_type(self, doc_type: DocType | str) -> list[DocRef]:
        """References to documents of one type, in stored order."""
        return [ref for ref in self.documents if ref.doc_type == doc_type]

    def add_reference(self, ref: DocRef) -> None:
        """Append a reference, replacing any existing one with the same doc_id."""
        self.documents = [r for r in self.documents if r.doc_id != ref.doc_id]
        self.documents.append(ref)


class BaseDocument(BaseModel):
    """Fields shared by every stored document."""

    doc_id: str = ""  # filled in by the store on create when empty
    title: str
    metadata: dict[str, Any] | None = None
    references: list[DocRef] | None = None

    def to_ref(self) -> DocRef:
        return DocRef(doc_id=self.doc_id, doc_type=self.doc_type, title=self.title)


class FlowDocument(BaseDocument):
    doc_type: Literal["Flow"] = "Flow"
    content: FlowContent = Field(default_factory=FlowContent)


class AgentDocument(BaseDocument):
    doc_type: Literal["Agent"] = "Agent"
    content: AgentContent = Field(default_factory=AgentContent)


class ProjectDocument(BaseDocument):
    doc_type: Literal["Project"] = "Project"
    content: ProjectContent


class DiagramDocument(BaseDocument):
    doc_type: Literal["Diagram"] = "Diagram"
    content: DiagramContent = Field(default_factory=DiagramContent)


Document = Annotated[
    FlowDocument | AgentDocument | ProjectDocument | DiagramDocument,
    Field(discriminator="doc_type"),
]

_document_adapter: TypeAdapter[Document] = TypeAdapter(Document)


def parse_document(data: dict | str | bytes) -> Document:
    """Validate raw data (dict or JSON) into the concrete document model.

    Raises pydantic.ValidationError for unknown doc_type values or content
    that does not match the shape for its type.
    """
    if isinstance(data, (str, bytes)):
        return _document_adapter.validate_json(data)
    return _document_adapter.validate_python(data)
