"""Shared fixtures: a Downloader wired to an in-process mock HTTP server."""

import logging
from typing import Callable, Dict, List, Tuple

import httpx
import pytest

from pdf_harvester.config import DownloadConfig
from pdf_harvester.downloader import Downloader

PDF_BYTES = b"%PDF-1.4\n1 0 obj <<>> endobj\ntrailer <<>>\n%%EOF\n"

Route = Tuple[int, Dict[str, str], bytes]


class FakeServer:
    """Maps full URLs to canned responses and records every request."""

    def __init__(self):
        self.routes: Dict[str, Route] = {}
        self.requests: List[str] = []

    def add(self, url: str, status: int = 200, content_type: str = "application/pdf",
            body: bytes = PDF_BYTES):
        self.routes[str(httpx.URL(url))] = (status, {"Content-Type": content_type}, body)

    def add_page(self, url: str, html: str):
        self.add(url, content_type="text/html; charset=utf-8", body=html.encode("utf-8"))

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url not in self.routes:
            return httpx.Response(404, headers={"Content-Type": "text/html"}, content=b"not found")
        status, headers, body = self.routes[url]
        return httpx.Response(status, headers=headers, content=body)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("pdf_harvester.tests")


@pytest.fixture
def make_downloader(server, logger) -> Callable[..., Downloader]:
    created = []

    def factory(config: DownloadConfig = None, handler=None) -> Downloader:
        client = httpx.Client(transport=httpx.MockTransport(handler or server.handler))
        dl = Downloader(config, client=client, logger=logger)
        created.append(dl)
        return dl

    yield factory
    for dl in created:
        dl.close()
