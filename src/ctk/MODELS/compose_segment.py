"""
Models for a compose template split into plain text and container regions.
"""
from typing import Optional
from pydantic import BaseModel


class ComposeSegment(BaseModel):
    """
    A contiguous piece of a compose template.

    Plain text has no identifier and keeps everything in ``body``. A container
    region carries the identifier of its markers and keeps the marker lines
    verbatim so the original text can be rebuilt exactly.
    """
    body: str
    identifier: Optional[str] = None
    start_marker: str = ""
    end_marker: str = ""

    @property
    def is_region(self) -> bool:
        return self.identifier is not None

    @property
    def text(self) -> str:
        """The segment exactly as it appeared in the source text."""
        return self.start_marker + self.body + self.end_marker
