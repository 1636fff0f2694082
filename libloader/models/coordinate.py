from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class ArtifactCoordinate:
    group: str
    name: str
    version: str
    extension: str = "jar"
    classifier: str | None = None

    @classmethod
    def parse(cls, text: str) -> "ArtifactCoordinate":
        """Parse <group>:<name>[:<extension>[:<classifier>]]:<version>."""
        parts = text.strip().split(":")
        if len(parts) < 3 or len(parts) > 5 or not all(parts):
            raise ValueError(f"Bad artifact coordinate '{text}', expected <group>:<name>[:<extension>[:<classifier>]]:<version>")
        group, name, *middle, version = parts
        extension = middle[0] if middle else "jar"
        classifier = middle[1] if len(middle) == 2 else None
        return cls(group=group, name=name, version=version, extension=extension, classifier=classifier)

    def file_name(self) -> str:
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.name}-{self.version}{suffix}.{self.extension}"

    def path(self) -> str:
        return "/".join([self.group.replace(".", "/"), self.name, self.version, self.file_name()])

    def __str__(self) -> str:
        parts = [self.group, self.name]
        if self.classifier:
            parts += [self.extension, self.classifier]
        elif self.extension != "jar":
            parts.append(self.extension)
        parts.append(self.version)
        return ":".join(parts)
