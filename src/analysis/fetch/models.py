"""Data models for the fetch submodule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchedPage:
    """Raw result of retrieving a single URL."""

    url: str
    html: str
    status_code: int = 200
    final_url: str = ""
    screenshot: str | None = None  # base64-encoded PNG
