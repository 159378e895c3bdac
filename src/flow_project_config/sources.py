"""Contract source readers for flow-project-config library."""

import logging
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import requests

from .exceptions import SourceFetchError

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = ("http", "https")


def is_remote_location(location: str) -> bool:
    return urlparse(location).scheme in REMOTE_SCHEMES


class FileSourceReader:
    """Reads contract sources from paths relative to a base directory."""

    def __init__(self, base_dir: Union[Path, str]):
        self.base_dir = Path(base_dir)

    def __call__(self, location: str) -> bytes:
        path = Path(location)
        if not path.is_absolute():
            path = self.base_dir / path
        logger.debug("Reading contract source %s", path)
        return path.read_bytes()


class HttpSourceReader:
    """Fetches contract sources from http(s) URLs."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: int = 30):
        self.session = session or requests.Session()
        self.timeout = timeout

    def __call__(self, location: str) -> bytes:
        """
        Fetch the source at a URL.

        Args:
            location: http(s) URL

        Returns:
            Response body

        Raises:
            SourceFetchError: If the request fails or returns a non-200 status
        """
        logger.debug("Fetching contract source %s", location)
        try:
            response = self.session.get(location, timeout=self.timeout)
        except requests.RequestException as e:
            raise SourceFetchError(f"Network error fetching {location}: {e}") from e

        if response.status_code != 200:
            raise SourceFetchError(
                f"Fetching {location} failed with status {response.status_code}"
            )

        return response.content


class SourceReader:
    """Reads remote locations over HTTP and everything else from disk."""

    def __init__(self, base_dir: Union[Path, str], session: Optional[requests.Session] = None):
        self.files = FileSourceReader(base_dir)
        self.http = HttpSourceReader(session)

    def __call__(self, location: str) -> bytes:
        if is_remote_location(location):
            return self.http(location)
        return self.files(location)


def default_source_reader(base_dir: Union[Path, str, None] = None) -> SourceReader:
    """
    Create the source reader used for a project.

    Args:
        base_dir: Directory relative paths are resolved against
                  (defaults to the current working directory)
    """
    if base_dir is None:
        base_dir = Path.cwd()
    return SourceReader(base_dir)
