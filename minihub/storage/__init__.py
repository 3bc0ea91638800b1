from .base import DatasetStorage
from .filesystem import JsonFileStorage

__all__ = ['DatasetStorage', 'JsonFileStorage']
