"""Build manifest models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputFileInfo(BaseModel):
    """One generated output file of a manifest item."""

    relative_path: str


class ManifestItem(BaseModel):
    """A source document and the files generated from it.

    Attributes:
        type: Document type reported by the generator (``Conceptual``,
            ``ManagedReference``, ``Toc``, ...).
        source_relative_path: Path of the source document, when reported.
        output: Generated files keyed by extension (``.html``, ``.raw.json``).
    """

    type: str = ""
    source_relative_path: str | None = None
    output: dict[str, OutputFileInfo] = Field(default_factory=dict)


class Manifest(BaseModel):
    """Site build manifest; unknown keys are ignored."""

    files: list[ManifestItem] = Field(default_factory=list)
