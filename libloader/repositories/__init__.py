from .library_repository import LibraryRepository

__all__ = [
    'LibraryRepository'
]
