import logging
from pathlib import Path
from typing import Mapping

from libloader.repositories import LibraryRepository
from libloader.resolvers import DryRunResolver, MavenLibraryResolver, Resolver
from libloader.services.bootstrap_service import LibraryBootstrapService
from libloader.services.mirror_selector import MirrorSelector
from libloader.utils.logging import setup_logger


class LibraryLoader:
    """Host-facing entry point. ``classloader()`` is called once, before any other host code runs."""

    def __init__(
        self,
        libraries_file: str,
        cache_dir: str | Path,
        properties: Mapping[str, str] | None = None,
        dry_run: bool = False,
    ):
        self.libraries_repo: LibraryRepository = LibraryRepository(libraries_file)
        self.cache_dir: Path = Path(cache_dir)
        self.properties: dict[str, str] = dict(properties or {})
        self.dry_run: bool = dry_run
        self.logger: logging.Logger = setup_logger("LibraryLoader")

    def build_resolver(self) -> Resolver:
        if self.dry_run:
            return DryRunResolver()
        return MavenLibraryResolver(self.cache_dir)

    def classloader(self) -> None:
        libraries = self.libraries_repo.find_all()
        if not libraries:
            self.logger.warning(f"No libraries declared in {self.libraries_repo.file_path}")
        service = LibraryBootstrapService(
            libraries,
            self.build_resolver(),
            MirrorSelector.from_environment(self.properties),
        )
        service.run()
