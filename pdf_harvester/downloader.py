"""HTTP fetch of index pages and validated, idempotent PDF downloads."""

import logging
import os
from typing import Optional

import httpx

from .config import DownloadConfig
from .logger import LOGGER_NAME
from .models import FAILED, SKIPPED, SUCCEEDED, DownloadOutcome
from .sanitizer import url_to_filename
from .storage import file_exists, write_atomic


class Downloader:
    def __init__(self, config: Optional[DownloadConfig] = None,
                 client: Optional[httpx.Client] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config or DownloadConfig()
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self._client = client

    @property
    def client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.config.timeout, connect=self.config.connect_timeout),
                follow_redirects=True,
                headers={"User-Agent": self.config.user_agent},
            )
        return self._client

    def close(self):
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def fetch_text(self, url: str) -> str:
        """Fetch an index page. Returns "" (logged) on any error."""
        self.logger.info(f"Scraping {url}")
        try:
            resp = self.client.get(url)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.error(f"Failed to fetch {url}: {e}")
            return ""
        return resp.text

    def is_accepted_content_type(self, content_type: str) -> bool:
        ct = content_type.lower()
        return any(marker.lower() in ct for marker in self.config.accepted_content_types)

    def download_pdf(self, url: str, output_dir: str) -> DownloadOutcome:
        filename = url_to_filename(url).lower()
        if not filename:
            self.logger.warning(f"Empty filename for {url}; not downloading")
            return DownloadOutcome(url, FAILED, error="empty filename")

        file_path = os.path.join(output_dir, filename)

        if file_exists(file_path):
            self.logger.info(f"File already exists, skipping: {url} -> {file_path}")
            return DownloadOutcome(url, SKIPPED, path=file_path)

        def failed(message: str) -> DownloadOutcome:
            self.logger.error(message)
            return DownloadOutcome(url, FAILED, path=file_path, error=message)

        try:
            with self.client.stream("GET", url) as resp:
                if resp.status_code != httpx.codes.OK:
                    return failed(f"Download failed for {url}: {resp.status_code} {resp.reason_phrase}")

                # HTML error pages and login redirects come back as 200 too
                ct = resp.headers.get("content-type", "")
                if not self.is_accepted_content_type(ct):
                    expected = " or ".join(self.config.accepted_content_types)
                    return failed(f"Invalid content type for {url}: {ct!r} (expected {expected})")

                try:
                    body = resp.read()
                except httpx.HTTPError as e:
                    return failed(f"Failed to read PDF data from {url}: {e}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return failed(f"Failed to download {url}: {e}")

        if not body:
            return failed(f"Downloaded 0 bytes for {url}; not creating file")

        try:
            written = write_atomic(file_path, body)
        except OSError as e:
            return failed(f"Failed to write PDF to file for {url}: {e}")

        self.logger.info(f"Successfully downloaded {written:,} bytes: {url} -> {file_path}")
        return DownloadOutcome(url, SUCCEEDED, path=file_path, bytes_written=written)
