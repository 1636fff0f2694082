import os
from ruamel.yaml import YAML
from libloader.models import LibrariesFile, Library
from libloader.utils.yaml_loader import get_yaml_instance


class LibraryRepository:
    """Reads the declared libraries from a YAML manifest.

    A missing or blank manifest declares no libraries; anything else must
    match the ``libraries:`` schema.
    """

    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[Library]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            try:
                data = self.yaml.load(f)
            except Exception as e:
                raise ValueError(f"Invalid libraries.yaml structure: {e}") from e
        if data is None:
            return []
        if not isinstance(data, dict):
            raise ValueError(f"Invalid libraries.yaml structure: expected a mapping, got {type(data).__name__}")
        try:
            return LibrariesFile(**data).libraries
        except Exception as e:
            raise ValueError(f"Invalid libraries.yaml structure: {e}") from e
