"""Raw document handed over by the upstream document-to-text converter."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SourceFormat(str, Enum):
    """Format the text was converted from."""

    PDF = "pdf"
    DOCX = "docx"
    TEXT = "text"


class DocumentMetadata(BaseModel):
    """Binary-level metadata reported by the converter. Unknown keys are kept."""

    model_config = ConfigDict(frozen=True, extra="allow")

    page_count: Optional[int] = Field(default=None, ge=0, description="Number of pages (PDF only)")
    file_size: int = Field(default=0, ge=0, description="Size of the uploaded file in bytes")
    title: Optional[str] = Field(default=None, description="Document title property")
    author: Optional[str] = Field(default=None, description="Document author property")
    subject: Optional[str] = Field(default=None, description="Document subject property")
    creator: Optional[str] = Field(default=None, description="Authoring application")
    producer: Optional[str] = Field(default=None, description="Producing application")


class RawDocument(BaseModel):
    """Plain text of an uploaded resume plus its metadata. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Extracted plain text")
    source_format: SourceFormat = Field(default=SourceFormat.TEXT, description="pdf, docx or text")
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata, description="Converter metadata")
