"""Fetch snippet content from a URL."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from snippets_app.errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "snippets-app/0.1"


async def download_text(
    url: str,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: Optional[float] = None,
) -> str:
    """GET ``url`` and return the decoded response body.

    Any non-2xx status, transport error, timeout or decoding failure raises
    FetchError. There are no retries.
    """
    headers = {"User-Agent": user_agent}
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    try:
        async with aiohttp.ClientSession(timeout=client_timeout) as session:
            async with session.get(url, headers=headers) as resp:
                resp.raise_for_status()
                text = await resp.text()
    except aiohttp.ClientResponseError as e:
        raise FetchError(f"Download of {url} failed: HTTP {e.status} {e.message}") from e
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        # ValueError covers malformed URLs and undecodable bodies
        raise FetchError(f"Download of {url} failed: {e}") from e

    logger.info("Downloaded %d characters from %s", len(text), url)
    return text


def fetch_text(
    url: str,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: Optional[float] = None,
) -> str:
    """Blocking wrapper around download_text()."""
    logger.info("Downloading snippet from %s", url)
    return asyncio.run(download_text(url, user_agent=user_agent, timeout=timeout))
