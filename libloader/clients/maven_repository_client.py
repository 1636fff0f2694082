import logging
import os
from pathlib import Path

import requests

from libloader.errors import ArtifactResolutionError
from libloader.models import ArtifactCoordinate, RemoteRepository

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class MavenRepositoryClient:
    def __init__(self, repository: RemoteRepository, timeout: int = 30):
        if repository.layout != "default":
            raise ArtifactResolutionError(f"Unsupported layout '{repository.layout}' for repository {repository.id}")
        self.repository: RemoteRepository = repository
        self.timeout: int = timeout

    def artifact_url(self, coordinate: ArtifactCoordinate) -> str:
        return f"{self.repository.url.rstrip('/')}/{coordinate.path()}"

    def download(self, coordinate: ArtifactCoordinate, destination: Path) -> Path:
        url = self.artifact_url(coordinate)
        destination.parent.mkdir(parents=True, exist_ok=True)
        partial = destination.with_name(destination.name + ".part")
        logger.info(f"Downloading {coordinate} from {self.repository.id} ({url})")
        try:
            with requests.get(url=url, stream=True, timeout=self.timeout) as response:
                if response.status_code != 200:
                    raise ArtifactResolutionError(
                        f"Failed to download {coordinate} from {url} (status code {response.status_code})"
                    )
                with open(partial, "wb") as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        f.write(chunk)
            os.replace(partial, destination)
            return destination
        except ArtifactResolutionError:
            raise
        except Exception as e:
            raise ArtifactResolutionError(f"Error downloading {coordinate} from {url}: {e}") from e
        finally:
            if partial.exists():
                partial.unlink()
