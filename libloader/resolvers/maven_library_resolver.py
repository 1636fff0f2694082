import logging
from pathlib import Path
from typing import Callable

from libloader.clients import ClasspathClient, MavenRepositoryClient
from libloader.models import ArtifactCoordinate, DependencyScope, RemoteRepository, ResolutionRequest

logger = logging.getLogger(__name__)


class MavenLibraryResolver:
    def __init__(
        self,
        cache_dir: str | Path,
        classpath: ClasspathClient | None = None,
        client_factory: Callable[[RemoteRepository], MavenRepositoryClient] = MavenRepositoryClient,
    ):
        self.cache_dir: Path = Path(cache_dir)
        self.classpath: ClasspathClient = classpath or ClasspathClient()
        self.client_factory: Callable[[RemoteRepository], MavenRepositoryClient] = client_factory

    def local_path(self, coordinate: ArtifactCoordinate) -> Path:
        return self.cache_dir / coordinate.path()

    def resolve(self, request: ResolutionRequest) -> Path | None:
        if request.scope == DependencyScope.TEST:
            logger.info(f"Skipping {request.coordinate}, test scope is never on the runtime path")
            return None

        local = self.local_path(request.coordinate)
        if local.is_file():
            logger.debug(f"Found {request.coordinate} in cache at {local}")
        else:
            client = self.client_factory(request.repository)
            client.download(request.coordinate, local)

        self.classpath.add_library(local)
        return local
