import logging

from libloader.models import ResolutionRequest

logger = logging.getLogger(__name__)


class DryRunResolver:
    def __init__(self):
        self.requests: list[ResolutionRequest] = []

    def resolve(self, request: ResolutionRequest) -> None:
        self.requests.append(request)
        logger.info(
            f"Dry run mode. {request.coordinate} ({request.scope.value}) would be resolved from {request.repository.url}"
        )
