from .base import Document
from .file import File
from .commit import Commit
from .repository import Repository, Dataset, Visibility

__all__ = ['Document', 'File', 'Commit', 'Repository', 'Dataset', 'Visibility']
