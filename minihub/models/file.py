"""File model - a named text blob inside a repository."""
from datetime import datetime
from pydantic import Field
from .base import Document, new_id, utcnow


class File(Document):
    """A text file. Its name is unique within the owning repository."""
    id: str = Field(default_factory=new_id)
    name: str
    content: str = ''
    updated_at: datetime = Field(default_factory=utcnow)

    def snapshot(self) -> 'File':
        """Detached copy for recording in a commit"""
        return self.model_copy(deep=True)

    def __repr__(self):
        return f"<File(id='{self.id}', name='{self.name}')>"
