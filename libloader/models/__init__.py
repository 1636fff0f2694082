from .coordinate import ArtifactCoordinate
from .library import Library
from .repository import RemoteRepository
from .request import ResolutionRequest
from .scope import DependencyScope
from .wrappers import LibrariesFile

__all__ = [
    "ArtifactCoordinate",
    "DependencyScope",
    "Library",
    "RemoteRepository",
    "ResolutionRequest",
    "LibrariesFile",
]
