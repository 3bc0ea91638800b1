import json
import logging
from pathlib import Path
from pydantic import ValidationError as SchemaError
from minihub.errors import PersistenceError
from minihub.models import Dataset
from .base import DatasetStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(DatasetStorage):
    """
    Stores the dataset as a single JSON document on the local filesystem.

    Every save rewrites the whole file. There is no journal and no backup, so
    a crash in the middle of a write can leave a truncated document behind;
    the next load treats it as corrupt and starts over empty.
    """

    def __init__(self, path: str = 'data.json'):
        """
        Initialize filesystem storage.

        Args:
            path: Location of the JSON document
        """
        self.path = Path(path)

    def load(self) -> Dataset:
        if not self.path.exists():
            logger.info(f"No data file at {self.path}, creating an empty one")
            return self._reinitialize()

        try:
            raw = self.path.read_text(encoding='utf-8')
            return Dataset.model_validate_json(raw)
        except (OSError, ValueError, SchemaError):
            logger.error(f"Failed to load {self.path}, reinitializing", exc_info=True)
            return self._reinitialize()

    def save(self, dataset: Dataset) -> None:
        payload = json.dumps(dataset.model_dump(mode='json', by_alias=True), indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding='utf-8')
        except OSError as e:
            raise PersistenceError(f"Failed to write {self.path}: {e}") from e

    def _reinitialize(self) -> Dataset:
        dataset = Dataset()
        self.save(dataset)
        return dataset
