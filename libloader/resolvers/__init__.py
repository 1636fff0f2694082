from .dry_run_resolver import DryRunResolver
from .maven_library_resolver import MavenLibraryResolver
from .resolver import Resolver

__all__ = [
    "DryRunResolver",
    "MavenLibraryResolver",
    "Resolver",
]
