from typing import Any

from pydantic import field_validator
from pydantic.dataclasses import dataclass

from .coordinate import ArtifactCoordinate
from .scope import DependencyScope


@dataclass(frozen=True)
class Library:
    coordinate: ArtifactCoordinate
    scope: DependencyScope = DependencyScope.PROVIDED

    @field_validator("coordinate", mode="before")
    @classmethod
    def parse_coordinate(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ArtifactCoordinate.parse(value)
        return value
