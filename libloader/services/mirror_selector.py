"""Selection of the repository mirror that libraries are fetched from.

The mirror is picked from an ordered chain of sources. Each source is a
zero-argument callable evaluated only when it is reached; the first one
returning a non-blank string wins. Empty or whitespace-only values count
as unset.
"""
import os
from typing import Callable, Mapping, Sequence

DEFAULT_CENTRAL_REPOSITORY = "https://maven-central.storage-download.googleapis.com/maven2"
CENTRAL_REPOSITORY_ENV = "PAPER_DEFAULT_CENTRAL_REPOSITORY"
CENTRAL_REPOSITORY_PROPERTY = "org.bukkit.plugin.java.LibraryLoader.centralURL"

ConfigSource = Callable[[], str | None]


def env_source(name: str, environ: Mapping[str, str] | None = None) -> ConfigSource:
    # os.environ is looked up at call time so late overrides are honoured
    return lambda: (os.environ if environ is None else environ).get(name)


def property_source(key: str, properties: Mapping[str, str]) -> ConfigSource:
    return lambda: properties.get(key)


def literal_source(value: str) -> ConfigSource:
    return lambda: value


class MirrorSelector:
    def __init__(self, sources: Sequence[ConfigSource], default: str = DEFAULT_CENTRAL_REPOSITORY):
        if not default:
            raise ValueError("Default mirror URL must not be empty")
        self.sources: tuple[ConfigSource, ...] = tuple(sources)
        self.default: str = default

    @classmethod
    def from_environment(
        cls,
        properties: Mapping[str, str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "MirrorSelector":
        return cls([
            env_source(CENTRAL_REPOSITORY_ENV, environ),
            property_source(CENTRAL_REPOSITORY_PROPERTY, properties or {}),
            literal_source(DEFAULT_CENTRAL_REPOSITORY),
        ])

    def select(self) -> str:
        for source in self.sources:
            value = source()
            if isinstance(value, str) and value.strip():
                return value.strip()
        return self.default
