from pydantic.dataclasses import dataclass

from libloader.models.library import Library

@dataclass(frozen=True)
class LibrariesFile:
    libraries: list[Library]
