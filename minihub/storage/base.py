from abc import ABC, abstractmethod
from minihub.models import Dataset


class DatasetStorage(ABC):
    """
    Abstract base class for dataset storage.
    The whole dataset is read at once and written back in full.
    """

    @abstractmethod
    def load(self) -> Dataset:
        """
        Load the dataset, initializing the backing store if needed.

        Returns:
            The stored Dataset, or an empty one if nothing usable was stored
        """
        pass

    @abstractmethod
    def save(self, dataset: Dataset) -> None:
        """
        Replace the stored dataset.

        Args:
            dataset: Dataset to persist

        Raises:
            PersistenceError: if the write fails
        """
        pass
