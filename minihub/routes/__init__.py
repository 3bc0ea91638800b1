"""Routes package for MiniHub"""
from .repo import repo_bp
from .files import files_bp

__all__ = ['repo_bp', 'files_bp']
