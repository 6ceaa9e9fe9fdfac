from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import httpx

from catalog_browser.config.loader import is_url
from catalog_browser.core.catalog import CatalogStore
from catalog_browser.core.exceptions import (
    CatalogLoadError,
    LoadFormatError,
    LoadTransportError,
)
from catalog_browser.core.record import DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

DEFAULT_RECORDS_FIELD = "html_elements"


@dataclass
class LoadResult:
    """
    Outcome of the one-off catalog load.
    On failure the catalog is empty and error holds the reason.
    """
    catalog: CatalogStore = field(default_factory=CatalogStore.empty)
    error: Optional[CatalogLoadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _decode(payload: bytes, source: str) -> Any:
    try:
        return json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LoadFormatError(f"Document at {source} is not valid JSON: {e}") from e


async def _fetch_url(url: str, client: Optional[httpx.AsyncClient]) -> bytes:
    headers = {"Cache-Control": "no-store"}

    async def _get(c: httpx.AsyncClient) -> bytes:
        try:
            response = await c.get(url, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise LoadTransportError(f"Could not fetch {url}: {e}") from e
        if not response.is_success:
            raise LoadTransportError(
                f"Could not fetch {url}: HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response.content

    if client is not None:
        return await _get(client)
    async with httpx.AsyncClient() as owned:
        return await _get(owned)


async def _read_file(path: Path) -> bytes:
    try:
        return await asyncio.to_thread(path.read_bytes)
    except (OSError, ValueError) as e:
        # ValueError: path with an embedded NUL byte
        raise LoadTransportError(f"Could not read {path}: {e}") from e


async def fetch_document(source: str, *, client: Optional[httpx.AsyncClient] = None) -> Any:
    """
    Retrieve and decode the catalog document.

    :param source: http(s) URL or local file path
    :param client: optional httpx client (tests pass one with a mock transport)
    :return: the decoded JSON value
    :raises LoadTransportError: source unreachable / non-success response
    :raises LoadFormatError: payload is not JSON
    """
    if is_url(source):
        payload = await _fetch_url(source, client)
    else:
        payload = await _read_file(Path(source))
    return _decode(payload, source)


def parse_catalog_document(
        document: Any,
        *,
        records_field: str = DEFAULT_RECORDS_FIELD,
        default_category: str = DEFAULT_CATEGORY,
) -> CatalogStore:
    """
    Validate the document shape and build the CatalogStore from its records array.

    :raises LoadFormatError: if the document is not an object or the field is not an array
    """
    if not isinstance(document, Mapping):
        raise LoadFormatError(f"Invalid document format: expected an object with '{records_field}[]'")

    entries = document.get(records_field)
    if not isinstance(entries, list):
        raise LoadFormatError(f"Invalid document format: expected '{records_field}[]'")

    return CatalogStore.from_raw(entries, default_category=default_category)


async def load_catalog(
        source: str,
        *,
        records_field: str = DEFAULT_RECORDS_FIELD,
        default_category: str = DEFAULT_CATEGORY,
        client: Optional[httpx.AsyncClient] = None,
) -> LoadResult:
    """
    Load the catalog once. Load failures are logged and reported in the result,
    never raised; there is no retry and no partial catalog.
    """
    logger.info("catalog_load_start", extra={"source": source})
    try:
        document = await fetch_document(source, client=client)
        catalog = parse_catalog_document(
            document,
            records_field=records_field,
            default_category=default_category,
        )
    except CatalogLoadError as e:
        logger.exception(
            "Catalog load failed",
            extra={"source": source, "error_kind": type(e).__name__},
        )
        return LoadResult(error=e)

    logger.info(
        "catalog_load_done",
        extra={"source": source, "n_records": len(catalog)},
    )
    return LoadResult(catalog=catalog)
