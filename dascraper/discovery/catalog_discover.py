"""Discover CSV resource links on the open-data catalog page."""

from __future__ import annotations

from bs4 import BeautifulSoup

from dascraper.common.http import HttpClient


def find_links(html: str, selector: str) -> list[str]:
    """Return the ``href`` of every element matching ``selector``.

    Links keep page order; repeats and anchors without an ``href`` are dropped.
    """
    soup = BeautifulSoup(html, "html.parser")
    hrefs = (element.get("href") for element in soup.select(selector))
    return list(dict.fromkeys(href for href in hrefs if href))


def discover_csv_urls(client: HttpClient, catalog_url: str, selector: str) -> list[str]:
    html = client.get_text(catalog_url)
    return find_links(html, selector)
