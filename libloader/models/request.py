from dataclasses import dataclass

from .coordinate import ArtifactCoordinate
from .repository import RemoteRepository
from .scope import DependencyScope


@dataclass(frozen=True)
class ResolutionRequest:
    coordinate: ArtifactCoordinate
    scope: DependencyScope
    repository: RemoteRepository
