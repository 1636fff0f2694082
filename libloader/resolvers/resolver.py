from typing import Protocol

from libloader.models import ResolutionRequest


class Resolver(Protocol):
    """Makes one requested artifact reachable on the code-search path.

    Implementations report failure by raising.
    """

    def resolve(self, request: ResolutionRequest) -> object: ...
