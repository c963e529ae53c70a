"""Uploaded resume document schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..text import format_size_mb


class Document(BaseModel):
    """One uploaded resume.

    ``content`` is carried as an opaque payload; nothing in the screening core
    reads it. Extension rules are applied by intake, not here, so that the
    evaluator can report unidentifiable documents built by other callers.
    """

    file_name: str
    mime_type: str | None = None
    size_bytes: int = Field(default=0, ge=0)
    content: bytes = Field(default=b"", repr=False)

    model_config = ConfigDict(frozen=True)

    @property
    def size_label(self) -> str:
        return format_size_mb(self.size_bytes)
