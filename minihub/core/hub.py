import logging
import threading
from typing import List, Optional

from minihub.errors import NotFoundError, ValidationError
from minihub.models import Commit, Dataset, File, Repository, Visibility
from minihub.models.base import new_id, utcnow
from minihub.storage import DatasetStorage

logger = logging.getLogger(__name__)

DEFAULT_OWNER = 'guest'
INITIAL_COMMIT_MESSAGE = 'Initial commit'
# Used when the form has no message field at all
DEFAULT_UPSERT_MESSAGE = 'Update file'
# Used when the message field is present but blank
BLANK_UPSERT_MESSAGE = 'Update'
README_NAME = 'readme.md'


class Hub:
    """
    Owns the in-memory dataset and every operation on it.

    The dataset is loaded once from storage when the hub is created. Each
    mutating operation changes the dataset in place and then writes the whole
    document back. Mutations are serialized with a lock, so only one
    mutate-then-save sequence runs at a time within a process.
    """

    def __init__(self, storage: DatasetStorage, dataset: Optional[Dataset] = None):
        self.storage = storage
        self.dataset = dataset if dataset is not None else storage.load()
        self._lock = threading.Lock()

    def save(self):
        self.storage.save(self.dataset)

    # Repositories

    def list_repos(self) -> List[Repository]:
        return list(self.dataset.repos)

    def find_repo(self, repo_id: str) -> Optional[Repository]:
        for repo in self.dataset.repos:
            if repo.id == repo_id:
                return repo
        return None

    def get_repo(self, repo_id: str) -> Repository:
        repo = self.find_repo(repo_id)
        if repo is None:
            raise NotFoundError('Repo not found')
        return repo

    def create_repo(
        self,
        name: Optional[str],
        description: Optional[str] = '',
        owner: Optional[str] = DEFAULT_OWNER,
        visibility: Optional[str] = Visibility.PUBLIC.value
    ) -> Repository:
        """
        Create a repository with its initial, empty commit.

        Args:
            name: Repository name, required
            description: Free text
            owner: Owner name, falls back to 'guest' when blank
            visibility: 'public', 'private' or any other label; blank means 'public'

        Returns:
            The new Repository

        Raises:
            ValidationError: if the name is blank
        """
        if not name or not name.strip():
            raise ValidationError('Repository name is required')

        # Informational only, any label is accepted
        visibility = (visibility or '').strip() or Visibility.PUBLIC.value

        with self._lock:
            repo = Repository(
                id=self._unused_repo_id(),
                name=name.strip(),
                description=(description or '').strip(),
                owner=(owner or '').strip() or DEFAULT_OWNER,
                visibility=visibility,
            )
            self.dataset.repos.append(repo)
            repo.record_commit(INITIAL_COMMIT_MESSAGE)
            self.save()

        logger.info(f"Created repository {repo.name} ({repo.id})")
        return repo

    def _unused_repo_id(self) -> str:
        while True:
            candidate = new_id()
            if self.find_repo(candidate) is None:
                return candidate

    # Files

    def get_file(self, repo_id: str, file_id: str) -> File:
        repo = self.get_repo(repo_id)
        file = repo.find_file(file_id)
        if file is None:
            raise NotFoundError('File not found')
        return file

    def upsert_file(
        self,
        repo_id: str,
        filename: Optional[str],
        content: Optional[str] = '',
        message: Optional[str] = None
    ) -> File:
        """
        Create a file, or replace the content of the file with the same name,
        then record a commit of the resulting file list.

        Args:
            repo_id: Repository id
            filename: File name, required; surrounding whitespace is dropped
            content: New content (replaces the old content entirely)
            message: Commit message; None means 'Update file', blank means 'Update'

        Returns:
            The created or updated File

        Raises:
            NotFoundError: if the repository does not exist
            ValidationError: if the filename is blank
        """
        repo = self.get_repo(repo_id)
        if not filename or not filename.strip():
            raise ValidationError('Filename is required')

        name = filename.strip()
        content = content or ''
        if message is None:
            message = DEFAULT_UPSERT_MESSAGE
        else:
            message = message.strip() or BLANK_UPSERT_MESSAGE

        with self._lock:
            file = repo.find_file_by_name(name)
            if file is None:
                file = File(name=name, content=content)
                repo.files.append(file)
                logger.info(f"Added {name} to {repo.id}")
            else:
                file.content = content
                file.updated_at = utcnow()
                logger.info(f"Updated {name} in {repo.id}")
            repo.record_commit(message)
            self.save()

        return file

    def delete_file(self, repo_id: str, file_id: str) -> File:
        """
        Remove a file and record a 'Delete <name>' commit.

        Returns:
            The removed File
        """
        repo = self.get_repo(repo_id)
        with self._lock:
            file = repo.find_file(file_id)
            if file is None:
                raise NotFoundError('File not found')
            repo.files.remove(file)
            repo.record_commit(f'Delete {file.name}')
            self.save()

        logger.info(f"Deleted {file.name} from {repo.id}")
        return file

    def get_readme(self, repo: Repository) -> Optional[File]:
        """The repository's README.md, matched case-insensitively"""
        for f in repo.files:
            if f.name.lower() == README_NAME:
                return f
        return None

    # Commits

    def list_commits(self, repo_id: str) -> List[Commit]:
        """Commits newest first. The stored order is left untouched."""
        return list(reversed(self.get_repo(repo_id).commits))

    def get_commit(self, repo_id: str, commit_id: str) -> Commit:
        commit = self.get_repo(repo_id).find_commit(commit_id)
        if commit is None:
            raise NotFoundError('Commit not found')
        return commit
