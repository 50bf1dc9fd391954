"""YAML config loader."""

from dataclasses import dataclass, field
from typing import List

import yaml

DEFAULT_INDEX_URLS = [
    "https://www.benjaminmoore.com/en-us/data-sheets/safety-data-sheets",
    "https://www.benjaminmoore.com/en-us/data-sheets/safety-data-sheets-es",
]


@dataclass
class DownloadConfig:
    timeout: float = 900.0  # 15 minutes for large files on slow servers
    connect_timeout: float = 30.0
    user_agent: str = "PDFHarvester/1.0"
    accepted_content_types: List[str] = field(
        default_factory=lambda: ["octet-stream", "application/pdf"]
    )


@dataclass
class AppConfig:
    output_dir: str = "PDFs"
    log_dir: str = "logs"
    snapshot_path: str = ""
    resolve_relative_links: bool = False
    index_urls: List[str] = field(default_factory=lambda: list(DEFAULT_INDEX_URLS))
    download: DownloadConfig = field(default_factory=DownloadConfig)


def _pick(cls, raw: dict) -> dict:
    return {k: v for k, v in raw.items() if k in cls.__dataclass_fields__}


def load_config(config_path: str = "config.yaml") -> AppConfig:
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    download = DownloadConfig(**_pick(DownloadConfig, raw.get("download") or {}))

    top = _pick(AppConfig, raw)
    top.pop("download", None)
    if "index_urls" in top:
        top["index_urls"] = [str(u) for u in top["index_urls"] or []]

    return AppConfig(download=download, **top)
