"""Repository model - a named container of files and their history."""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import Field
from .base import Document, new_id, utcnow
from .file import File
from .commit import Commit


class Visibility(str, Enum):
    """Informational only, nothing is access-controlled"""
    PUBLIC = 'public'
    PRIVATE = 'private'


class Repository(Document):
    id: str = Field(default_factory=new_id)
    name: str
    description: str = ''
    owner: str = 'guest'
    visibility: str = Visibility.PUBLIC.value
    created_at: datetime = Field(default_factory=utcnow)
    files: List[File] = Field(default_factory=list)
    commits: List[Commit] = Field(default_factory=list)

    def find_file(self, file_id: str) -> Optional[File]:
        for f in self.files:
            if f.id == file_id:
                return f
        return None

    def find_file_by_name(self, name: str) -> Optional[File]:
        for f in self.files:
            if f.name == name:
                return f
        return None

    def find_commit(self, commit_id: str) -> Optional[Commit]:
        for c in self.commits:
            if c.id == commit_id:
                return c
        return None

    def record_commit(self, message: str) -> Commit:
        """Append a commit holding a copy of the current file list"""
        commit = Commit(message=message, files_snapshot=[f.snapshot() for f in self.files])
        self.commits.append(commit)
        return commit

    @property
    def latest_commit(self) -> Optional[Commit]:
        return self.commits[-1] if self.commits else None

    def __repr__(self):
        return f"<Repository(id='{self.id}', name='{self.name}')>"


class Dataset(Document):
    """The whole persisted document"""
    repos: List[Repository] = Field(default_factory=list)
