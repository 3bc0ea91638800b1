from datetime import datetime
from typing import List
from pydantic import Field
from .base import Document, new_id, utcnow
from .file import File


class Commit(Document):
    """
    Represents a commit (snapshot in time).
    Unlike Git commits there is no tree or parent: each commit carries a full
    copy of every file in the repository at the moment it was recorded.
    """
    id: str = Field(default_factory=lambda: new_id(8))
    message: str
    timestamp: datetime = Field(default_factory=utcnow)
    files_snapshot: List[File] = Field(default_factory=list)

    def __repr__(self):
        return f"<Commit(id='{self.id}', message='{self.message[:50]}')>"
