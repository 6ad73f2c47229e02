"""Scanned SVG element model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgNode(BaseModel):
    """One element start tag seen by the scanner."""

    tag: str  # local name, namespace stripped
    attributes: dict[str, str] = Field(default_factory=dict)
    line: int | None = None  # source line, when known

    @property
    def is_path(self) -> bool:
        return self.tag == "path"
