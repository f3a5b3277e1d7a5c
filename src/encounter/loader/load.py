"""
Page loading for entity parsers.

The parser itself never touches the network: these helpers fetch a page with an
`httpx.AsyncClient` and hand the parsed document (or raw text) to the parser.
HTTP errors propagate from `raise_for_status()`; nothing is cached or retried here.
"""
import asyncio
import logging
from typing import Any, Callable, Optional

from bs4 import BeautifulSoup
from httpx import AsyncClient

from src.encounter.config import ConnectionConfig
from src.encounter.parser.pairs import T, parse_delimited_pairs


async def fetch_page(
        client: AsyncClient,
        config: ConnectionConfig,
        path: str,
        params: Optional[dict[str, Any]] = None,
) -> str:
    """Fetch a page relative to the configured domain and return its text."""
    url = config.base_url + path.lstrip("/")
    logging.info("Calling %s params=%s", url, params)
    response = await client.get(url, params=params)
    response.raise_for_status()
    if config.sleep_sec > 0:
        await asyncio.sleep(config.sleep_sec)
    return response.text


async def load_page(
        client: AsyncClient,
        config: ConnectionConfig,
        path: str,
        params: Optional[dict[str, Any]] = None,
) -> BeautifulSoup:
    html = await fetch_page(client, config, path, params)
    return BeautifulSoup(html, config.html_parser)


async def load_delimited_pairs(
        client: AsyncClient,
        config: ConnectionConfig,
        path: str,
        params: Optional[dict[str, Any]],
        post_process: Callable[[list[str]], Optional[T]],
) -> list[T]:
    """Fetch a plain-text `id;name` listing and parse it line by line."""
    raw_text = await fetch_page(client, config, path, params)
    return parse_delimited_pairs(raw_text, post_process)
