import logging
import sys
from typing import Sequence

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from libloader.errors import BootstrapError
from libloader.models import Library, RemoteRepository, ResolutionRequest
from libloader.resolvers import Resolver
from libloader.services.mirror_selector import MirrorSelector
from libloader.services.service import Service
from libloader.utils.logging import setup_logger

CENTRAL_REPOSITORY_ID = "central"
DEFAULT_LAYOUT = "default"


class LibraryBootstrapService(Service):
    def __init__(self, libraries: Sequence[Library], resolver: Resolver, mirror_selector: MirrorSelector | None = None):
        self.libraries: tuple[Library, ...] = tuple(libraries)
        self.resolver: Resolver = resolver
        self.mirror_selector: MirrorSelector = mirror_selector or MirrorSelector.from_environment()
        self.logger: logging.Logger = setup_logger("LibraryBootstrapService")

    @override
    def run(self) -> None:
        self.resolve_all()

    def central_repository(self) -> RemoteRepository:
        return RemoteRepository(id=CENTRAL_REPOSITORY_ID, layout=DEFAULT_LAYOUT, url=self.mirror_selector.select())

    def resolve_all(self) -> list[ResolutionRequest]:
        repository = self.central_repository()
        self.logger.info(f"Resolving {len(self.libraries)} libraries from {repository.id} ({repository.url})")

        submitted: list[ResolutionRequest] = []
        failures: list[tuple[ResolutionRequest, Exception]] = []
        for library in self.libraries:
            request = ResolutionRequest(coordinate=library.coordinate, scope=library.scope, repository=repository)
            submitted.append(request)
            self.logger.info(f"Submitting {request.coordinate} ({request.scope.value})")
            try:
                self.resolver.resolve(request)
            except Exception as e:
                # later libraries are still submitted, the run fails once all are in
                self.logger.error(f"Failed to resolve {request.coordinate}: {e}")
                failures.append((request, e))

        if failures:
            # chain the first cause so its traceback is kept
            raise BootstrapError(failures) from failures[0][1]
        return submitted
