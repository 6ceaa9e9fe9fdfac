from __future__ import annotations

import asyncio
import json
from pathlib import Path

import httpx
import pytest

from catalog_browser.core.exceptions import LoadFormatError, LoadTransportError
from catalog_browser.services.catalog_loader import (
    fetch_document,
    load_catalog,
    parse_catalog_document,
)

URL = "https://example.test/html-elements.json"


def _write_doc(tmp_path: Path, doc) -> Path:
    path = tmp_path / "html-elements.json"
    path.write_text(json.dumps(doc, ensure_ascii=False), encoding="utf-8")
    return path


def _mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _load_with(handler, **kwargs):
    async def run():
        async with _mock_client(handler) as client:
            return await load_catalog(URL, client=client, **kwargs)

    return asyncio.run(run())


def test_load_from_file(tmp_path):
    path = _write_doc(
        tmp_path,
        {"html_elements": [{"tag": "span"}, {"tag": "div", "status": "standard"}, {"status": "x"}]},
    )

    result = asyncio.run(load_catalog(str(path)))

    assert result.ok
    assert [r.tag for r in result.catalog] == ["div", "span"]
    assert result.catalog.get("span").category == "інше"


def test_missing_file_is_transport_error(tmp_path):
    result = asyncio.run(load_catalog(str(tmp_path / "nope.json")))

    assert not result.ok
    assert isinstance(result.error, LoadTransportError)
    assert len(result.catalog) == 0


def test_document_without_records_field_is_format_error(tmp_path):
    path = _write_doc(tmp_path, {})

    result = asyncio.run(load_catalog(str(path)))

    assert isinstance(result.error, LoadFormatError)
    assert len(result.catalog) == 0


def test_invalid_json_is_format_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LoadFormatError):
        asyncio.run(fetch_document(str(path)))


@pytest.mark.parametrize("doc", [[], "text", {"html_elements": {"tag": "div"}}, {"html_elements": None}])
def test_parse_rejects_wrong_shape(doc):
    with pytest.raises(LoadFormatError):
        parse_catalog_document(doc)


def test_parse_custom_records_field():
    catalog = parse_catalog_document({"items": [{"tag": "a"}]}, records_field="items")
    assert [r.tag for r in catalog] == ["a"]


def test_load_over_http():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["cache"] = request.headers.get("cache-control")
        return httpx.Response(200, json={"html_elements": [{"tag": "div", "category": "layout"}]})

    result = _load_with(handler)

    assert result.ok
    assert [r.tag for r in result.catalog] == ["div"]
    assert seen["cache"] == "no-store"


def test_http_error_status_is_transport_error():
    result = _load_with(lambda request: httpx.Response(404))

    assert isinstance(result.error, LoadTransportError)
    assert result.error.status_code == 404
    assert len(result.catalog) == 0


def test_network_failure_is_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = _load_with(handler)

    assert isinstance(result.error, LoadTransportError)
    assert result.error.status_code is None


def test_http_document_without_field_is_format_error():
    result = _load_with(lambda request: httpx.Response(200, json={}))

    assert isinstance(result.error, LoadFormatError)
    assert len(result.catalog) == 0


@pytest.mark.parametrize(
    "url",
    ["http://[::1/x.json", "https://exa\x00mple.test/x.json"],
)
def test_malformed_url_is_transport_error(url):
    async def run():
        async with _mock_client(lambda request: httpx.Response(200, json={})) as client:
            return await load_catalog(url, client=client)

    result = asyncio.run(run())

    assert not result.ok
    assert isinstance(result.error, LoadTransportError)
    assert len(result.catalog) == 0


def test_path_with_nul_byte_is_transport_error(tmp_path):
    result = asyncio.run(load_catalog(str(tmp_path / "\x00.json")))

    assert not result.ok
    assert isinstance(result.error, LoadTransportError)
    assert len(result.catalog) == 0
