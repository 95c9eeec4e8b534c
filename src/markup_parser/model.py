# ============================================
# file: src/markup_parser/model.py
# ============================================
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from aria_auditor.model import ExtractionError, ExtractionErrorKind


class ExtractorSettings(BaseModel):
    # Unknown tags (custom elements, components) are skipped; their children are still visited.
    include_head: bool = True
    # Values containing any template interpolation are treated as dynamic.
    dynamic_markers: List[str] = Field(default_factory=lambda: [r"\{\{.*?\}\}", r"\{%.*?%\}", r"\$\{.*?\}"])
    # Units with these suffixes must close every {{ and {% they open; plain HTML may show them as text.
    template_extensions: List[str] = Field(
        default_factory=lambda: [".jinja", ".jinja2", ".j2", ".njk", ".hbs", ".vue", ".svelte"]
    )


class ExtractionFailure(Exception):
    """Raised by the extraction services, carrying the typed error."""

    def __init__(self, source_unit_id: str, kind: ExtractionErrorKind, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.error = ExtractionError(source_unit_id=source_unit_id, kind=kind, message=message, line=line)
