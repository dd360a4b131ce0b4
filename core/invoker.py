# =============================================================================
# core/invoker.py  -  Tool Invoker (the request-handling contract)
# =============================================================================
#
# invoke() is the single entry point for a tool call.  Each call ends in
# exactly one of five terminal states, each producing a complete envelope:
#
#   Unknown-tool        -> error    "Unknown tool: <name>"
#   Validation-failed   -> error    "Error searching for cocktail: <why>"
#   Upstream-failed     -> error    "Error searching for cocktail: <why>"
#   Empty-result        -> success  'No cocktails found matching "<name>". ...'
#   Formatted-success   -> success  'Found N cocktail(s) matching "<name>": ...'
#
# Nothing raised while validating, fetching, decoding or formatting escapes
# this module.  Invocations share no mutable state, so concurrent calls need
# no locking.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

from core.catalog import GET_COCKTAIL, get_tool
from core.cocktaildb import search_cocktails
from core.config import ServerConfig
from core.errors import ArgumentValidationError, CocktailServerError, UnknownToolError
from core.formatting import format_no_results, format_search_results
from core.models import ArgumentError, ResponseEnvelope, parse_arguments

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error searching for cocktail"


def _error_message(exc: BaseException) -> str:
    return str(exc) or "Unknown error"


def _get_cocktail(
    raw_arguments: Any,
    config: ServerConfig,
    client: Optional[httpx.Client],
) -> ResponseEnvelope:
    args = parse_arguments(raw_arguments)
    if isinstance(args, ArgumentError):
        raise ArgumentValidationError(args.message)

    drinks = search_cocktails(args.name, config, client=client)
    if not drinks:
        logger.info("No drinks matched %r", args.name)
        return ResponseEnvelope.success(format_no_results(args.name))

    logger.info("Found %d drink(s) for %r", len(drinks), args.name)
    return ResponseEnvelope.success(format_search_results(args.name, drinks))


def invoke(
    tool_name: str,
    raw_arguments: Any,
    config: Optional[ServerConfig] = None,
    client: Optional[httpx.Client] = None,
) -> ResponseEnvelope:
    """Run one tool call and return its envelope.  Never raises.

    Args:
        tool_name: Name the caller asked for.
        raw_arguments: Untyped arguments as received from the caller.
        config: Server configuration; defaults apply when omitted.
        client: Optional httpx.Client to send the CocktailDB request with.
    """
    if get_tool(tool_name) is None:
        logger.warning("Rejected call to unknown tool %r", tool_name)
        return ResponseEnvelope.failure(str(UnknownToolError(tool_name)))

    config = config or ServerConfig()
    try:
        return _get_cocktail(raw_arguments, config, client)
    except CocktailServerError as e:
        logger.warning("Error in %s tool: %s", GET_COCKTAIL.name, e)
        return ResponseEnvelope.failure(f"{ERROR_PREFIX}: {_error_message(e)}")
    except Exception as e:
        # Anything else is a bug, keep the traceback.
        logger.exception("Error in %s tool", GET_COCKTAIL.name)
        return ResponseEnvelope.failure(f"{ERROR_PREFIX}: {_error_message(e)}")
