"""Job description schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..text import role_title


class JobDescription(BaseModel):
    """Free-text job description supplied alongside the resumes."""

    text: str

    model_config = ConfigDict(frozen=True)

    @property
    def role_title(self) -> str:
        return role_title(self.text)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()
