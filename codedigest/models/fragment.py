"""
Output model: ordered fragments extracted from one source file.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from .enums import Language


class Fragment(BaseModel):
    """One completed unit of extracted text."""
    content: str

    def __str__(self) -> str:
        return self.content


class FileDigest(BaseModel):
    """Fragments for a single file, in extraction order.

    ``verbatim`` files were matched by an include glob and carry their raw
    content instead of fragments.
    """
    path: str
    language: Optional[Language] = None
    fragments: List[Fragment] = Field(default_factory=list)
    verbatim: bool = False
    raw_content: Optional[str] = None

    @property
    def contents(self) -> List[str]:
        return [fragment.content for fragment in self.fragments]
