"""
Signing links.

Resolves a party's delivery URL against the API base URL and hands it
to the host's link-opening capability.
"""

import asyncio
import inspect
import logging
import webbrowser
from typing import Any, Callable, Mapping, Optional

import httpx

from docsign.exceptions import SigningLinkError

logger = logging.getLogger(__name__)

LinkOpener = Callable[[str], Any]


def resolve_signing_url(base_url: str, api_delivery_url: Optional[str]) -> str:
    """
    Resolve a (usually relative) delivery URL against the base URL.

    Raises:
        SigningLinkError: URL missing, unparseable, or not absolute after
            resolution
    """
    if not api_delivery_url or not isinstance(api_delivery_url, str):
        raise SigningLinkError("Party has no api_delivery_url", api_delivery_url=api_delivery_url)

    try:
        url = httpx.URL(base_url or '').join(api_delivery_url)
    except httpx.InvalidURL as e:
        raise SigningLinkError(f"Invalid signing link: {e}", api_delivery_url=api_delivery_url) from e

    if not url.is_absolute_url:
        raise SigningLinkError(
            f"Cannot resolve '{api_delivery_url}' against base URL '{base_url}'",
            api_delivery_url=api_delivery_url,
        )

    resolved = str(url)
    logger.debug(f"Resolved signing link {api_delivery_url} -> {resolved}")
    return resolved


def get_delivery_url(party: Any) -> Optional[str]:
    """Read api_delivery_url from a SigningParty, a mapping or any object."""
    if isinstance(party, Mapping):
        return party.get('api_delivery_url')
    return getattr(party, 'api_delivery_url', None)


async def open_in_browser(url: str):
    """Default opener: the system web browser."""
    await asyncio.to_thread(webbrowser.open, url)


async def open_link(url: str, opener: LinkOpener):
    """Call the opener, awaiting it when it is a coroutine function."""
    result = opener(url)
    if inspect.isawaitable(result):
        await result
