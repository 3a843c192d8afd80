"""
Release archive downloader.

Streams a URL to a file in the temp root. The archive is written under a
random name with no extension, the way CI tool caches name their
downloads; callers that care about the extension rename it themselves.

Downloads are attempted once and are not checksum-verified.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional, Union

import requests
from requests.exceptions import RequestException

from fflint_action.core.directory import get_temp_dir
from fflint_action.core.exceptions import DownloadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def download_tool(
    url: str,
    destination: Optional[Union[str, Path]] = None,
    timeout: int = 30,
) -> Path:
    """
    Download a file from URL.

    Args:
        url: URL to download from
        destination: Local path to save the file (random temp path if None)
        timeout: Request timeout in seconds

    Returns:
        Path to the downloaded file

    Raises:
        DownloadError: If the request fails or the server returns an error
        ValueError: If URL is empty

    Example:
        >>> path = download_tool("https://example.com/fflint_Linux_x86_64.tar.gz")
        >>> path.name  # random, extension-less
        '3b0e2c1e-...'
    """
    if not url:
        raise ValueError("URL cannot be empty")

    if destination is None:
        destination = get_temp_dir() / str(uuid.uuid4())
    destination = Path(destination)

    if destination.exists():
        raise DownloadError(f"Destination file path {destination} already exists")

    destination.parent.mkdir(parents=True, exist_ok=True)

    logger.debug(f"Downloading {url}")
    logger.debug(f"Destination {destination}")

    try:
        response = requests.get(url, stream=True, timeout=timeout, allow_redirects=True)
        response.raise_for_status()

        with open(destination, "wb") as f:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
    except RequestException as e:
        destination.unlink(missing_ok=True)
        raise DownloadError(f"Failed to download {url}: {e}") from e
    except OSError:
        destination.unlink(missing_ok=True)
        raise

    return destination
