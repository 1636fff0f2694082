from libloader.models import ResolutionRequest


class ArtifactResolutionError(RuntimeError):
    """Raised when an artifact cannot be made available locally."""


class BootstrapError(RuntimeError):
    """Raised after a bootstrap run in which at least one library failed to resolve.

    Every declared library is still submitted before this is raised, so
    ``failures`` lists all of them, not just the first.
    """

    def __init__(self, failures: list[tuple[ResolutionRequest, Exception]]):
        self.failures: list[tuple[ResolutionRequest, Exception]] = failures
        details = "; ".join(f"{request.coordinate}: {error}" for request, error in failures)
        super().__init__(f"Failed to resolve {len(failures)} librar{'y' if len(failures) == 1 else 'ies'}: {details}")
