"""Fetch the raw bytes of an API definition from a URL or a local file.

:func:`locate` is the only entry point the pipeline needs: it decides whether
the path is remote (``http://`` / ``https://``) or local, fetches the bytes,
and tags them with the format implied by the extension.

The remote fetch deliberately does not check the HTTP status. Whatever body
the server sends back is handed to the reader, which will usually reject an
error page as malformed input. Only the later submission to the linting
service validates status codes.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from speclint.exceptions import IOError_, TransportError
from speclint.models import RawDocument
from speclint.output import debug, warning
from speclint.reader.readers import detect_format


def is_remote(path: str) -> bool:
    """Return ``True`` if *path* is an ``http://`` or ``https://`` URL."""
    return path.startswith(("http://", "https://"))


def locate(path: str) -> RawDocument:
    """Fetch the API definition at *path*.

    Args:
        path: A URL (http/https) or a local file path.

    Returns:
        The raw document, tagged with its format.

    Raises:
        TransportError: If a remote definition cannot be fetched.
        IOError_: If a local definition cannot be read.
    """
    if is_remote(path):
        content = fetch_remote(path)
    else:
        content = fetch_local(path)
    return RawDocument(content=content, source=path, format=detect_format(path))


def fetch_remote(url: str) -> bytes:
    """GET *url* and return the response body, whatever its status.

    Raises:
        TransportError: On DNS, connection, or protocol failures.
    """
    debug(f"Fetching API definition from {url}")
    try:
        response = httpx.get(url, follow_redirects=True)
    except httpx.RequestError as exc:
        raise TransportError(f"Failed to fetch {url}: {exc}") from exc

    debug(f"GET {url} -> HTTP {response.status_code}")
    if not response.is_success:
        warning(f"{url} answered HTTP {response.status_code}; linting the response body as is")
    return response.content


def fetch_local(path: str) -> bytes:
    """Read the file at *path* (resolved to an absolute path).

    Raises:
        IOError_: With the operating system's message when the file cannot
            be read.
    """
    absolute = Path(path).expanduser().resolve()
    debug(f"Reading API definition from {absolute}")
    try:
        return absolute.read_bytes()
    except OSError as exc:
        raise IOError_(str(exc)) from exc
