"""
CocktailDB client: one GET against search.php, decoded into Drink records.
No retries and no caching; a failed attempt is reported immediately.
"""
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from core.config import ServerConfig
from core.errors import UpstreamDecodeError, UpstreamTransportError
from core.models import Drink

logger = logging.getLogger(__name__)


def build_search_url(name: str, config: ServerConfig) -> str:
    """search.php URL with the name percent-encoded as the `s` parameter."""
    return f"{config.search_url}?s={quote(name, safe='')}"


def _fetch(url: str, client: httpx.Client) -> httpx.Response:
    try:
        response = client.get(url)
    except httpx.TimeoutException as e:
        logger.warning("CocktailDB timeout: %s", e)
        raise UpstreamTransportError("CocktailDB request timed out") from e
    except httpx.RequestError as e:
        logger.warning("CocktailDB request error: %s", e)
        raise UpstreamTransportError(str(e) or f"CocktailDB request failed ({type(e).__name__})") from e

    if not response.is_success:
        logger.warning("CocktailDB returned HTTP %s for %s", response.status_code, url)
        raise UpstreamTransportError(
            f"CocktailDB API error: {response.status_code} {response.reason_phrase}".rstrip()
        )
    return response


def _decode(response: httpx.Response) -> Optional[list[Drink]]:
    try:
        payload: Any = response.json()
    except ValueError as e:
        raise UpstreamDecodeError(f"CocktailDB returned invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise UpstreamDecodeError("CocktailDB returned an unexpected payload (expected a JSON object)")

    drinks = payload.get("drinks")
    if drinks is None:
        return None
    if not isinstance(drinks, list):
        raise UpstreamDecodeError("CocktailDB returned an unexpected 'drinks' field (expected a list)")

    decoded = []
    for index, record in enumerate(drinks):
        if not isinstance(record, dict):
            raise UpstreamDecodeError(f"CocktailDB returned a malformed drink at position {index}")
        decoded.append(Drink.from_api(record))
    return decoded


def search_cocktails(
    name: str,
    config: ServerConfig,
    client: Optional[httpx.Client] = None,
) -> Optional[list[Drink]]:
    """
    Search CocktailDB by drink name.
    Returns the matching drinks in upstream order, or None when nothing matched.
    Raises UpstreamTransportError / UpstreamDecodeError.
    """
    url = build_search_url(name, config)
    if client is not None:
        response = _fetch(url, client)
    else:
        with httpx.Client(timeout=config.timeout_sec) as owned:
            response = _fetch(url, owned)
    return _decode(response)
