from .classpath_client import ClasspathClient
from .maven_repository_client import MavenRepositoryClient

__all__ = [
    "ClasspathClient",
    "MavenRepositoryClient",
]
