"""
Generated file model — produced by the repository generator.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by the generate phase.

    Attributes:
        path:      Relative path from project root.
        content:   Full file content.
        overwrite: Whether the file already exists and would be replaced.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""
