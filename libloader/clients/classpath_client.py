import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


class ClasspathClient:
    def __init__(self, path: list[str] | None = None):
        self.path: list[str] = sys.path if path is None else path

    def add_library(self, library: Path) -> bool:
        entry = str(library)
        if entry in self.path:
            logger.debug(f"{entry} is already on the path")
            return False
        self.path.append(entry)
        logger.info(f"Added {entry} to the path")
        return True
