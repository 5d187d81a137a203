from typing import Any

from pydantic import BaseModel, field_validator


MERMAID_SEQUENCE_MARKER = "sequenceDiagram"


class GenerationResult(BaseModel):
    mermaid: str = ""
    notes: str = ""

    @field_validator("mermaid", "notes", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        # Anything the model sends that is not text counts as missing
        return value if isinstance(value, str) else ""

    @property
    def is_sequence_diagram(self) -> bool:
        return self.mermaid.startswith(MERMAID_SEQUENCE_MARKER)
