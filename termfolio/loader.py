"""
Document loading for the build (files on disk) and for live rendering
(static files fetched over HTTP).

The base document is required: anything wrong with it raises
ConfigurationError. The overlay is optional: a missing overlay is silently
absent, a broken one is logged as a warning and then treated as absent.
"""

from __future__ import annotations
import json, logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import httpx

from termfolio.resolver import ConfigurationError

logger = logging.getLogger(__name__)

_FETCH_TIMEOUT = 10.0


def _parse(text: str, source: str) -> Dict[str, Any]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"{source} must hold a JSON object, got {type(data).__name__}")
    return data


def load_document(path: str | Path | None, required: bool = True) -> Optional[Dict[str, Any]]:
    if path is None:
        if required:
            raise ConfigurationError("No base document path given")
        return None
    path = Path(path)
    if not path.is_file():
        if required:
            raise ConfigurationError(f"Base document not found: {path}")
        logger.debug("No overlay at %s, using base document only", path)
        return None
    try:
        return _parse(path.read_text(encoding="utf-8"), str(path))
    except (OSError, ValueError, UnicodeDecodeError) as e:
        if required:
            raise ConfigurationError(f"Could not read {path}: {e}") from e
        logger.warning("Ignoring unreadable or malformed overlay %s: %s", path, e)
        return None


def load_documents(base_path: str | Path,
                   overlay_path: str | Path | None = None) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
    """Blocking read of the base document and the optional overlay."""
    base = load_document(base_path, required=True)
    overlay = load_document(overlay_path, required=False)
    return base, overlay


async def _fetch(client: httpx.AsyncClient, url: str) -> Dict[str, Any]:
    response = await client.get(url)
    response.raise_for_status()
    return _parse(response.text, url)


async def fetch_documents(base_url: str,
                          overlay_url: str | None = None,
                          client: httpx.AsyncClient | None = None) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
    """Fetch the base document, then the optional overlay.

    Pass ``client`` to reuse a connection pool (or a mock transport in tests);
    otherwise a short-lived client is opened for the two requests.
    """
    if client is None:
        async with httpx.AsyncClient(timeout=_FETCH_TIMEOUT) as own_client:
            return await fetch_documents(base_url, overlay_url, own_client)

    try:
        base = await _fetch(client, base_url)
    except httpx.HTTPStatusError as e:
        raise ConfigurationError(f"Failed to load base document: {e.response.status_code}") from e
    except (httpx.HTTPError, ValueError) as e:
        raise ConfigurationError(f"Failed to load base document from {base_url}: {e}") from e

    overlay = None
    if overlay_url:
        try:
            overlay = await _fetch(client, overlay_url)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("No usable overlay at %s (%s), using base document only", overlay_url, e)
    return base, overlay
