# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the catalog's single tool, get_cocktail, over MCP.  The tool is a
#   thin wrapper: every call is routed through core.invoker.invoke(), and the
#   envelope it returns is handed back to the client unchanged:
#     - success envelope -> the text is the tool result
#     - error envelope   -> raised as ToolError, which FastMCP sends back as
#                           an isError=true result carrying the same text
#
# HOW IT WORKS (the flow):
#   1. The agent lists tools and sees get_cocktail with its input schema
#   2. It calls get_cocktail(name="Margarita") over stdio
#   3. The handler runs invoke() on a worker thread (the HTTP call blocks)
#   4. The formatted recipes (or the error text) go back to the agent
#
# RUNNING THIS SERVER:
#     python -m tools.mcp_server        (or the cocktail-mcp-server script)
#   Startup failure is logged and exits with status 1.  A failing tool call
#   never takes the process down.
# =============================================================================

import json
import logging
import sys
from functools import partial
from typing import Annotated, Optional

import anyio.to_thread
import httpx
from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core.catalog import GET_COCKTAIL
from core.config import DEFAULT_LOG_LEVEL, ServerConfig
from core.invoker import invoke

SERVER_NAME = "cocktail-api-server"
SERVER_VERSION = "1.0.0"

_NAME_DESCRIPTION = GET_COCKTAIL.input_schema["properties"]["name"]["description"]

# =============================================================================
# Logging Setup
# =============================================================================
# Everything goes to STDERR: stdout carries the MCP JSON-RPC stream, and a
# stray log line there would corrupt it.
#
#   CYAN   incoming tool calls
#   GREEN  responses
#   YELLOW status
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger(__name__)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the envelope as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, ensure_ascii=False, separators=(',', ':'))}{_RESET}")
    return result


# =============================================================================
# Server factory
# =============================================================================
# The config is built once by main() and closed over by the handler.  Tests
# pass an httpx.Client backed by a mock transport instead of the network.
# =============================================================================
def create_server(
    config: Optional[ServerConfig] = None,
    client: Optional[httpx.Client] = None,
) -> FastMCP:
    """Build the FastMCP server with get_cocktail registered."""
    config = config or ServerConfig()
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    @mcp.tool(name=GET_COCKTAIL.name, description=GET_COCKTAIL.description)
    async def get_cocktail(
        name: Annotated[str, Field(description=_NAME_DESCRIPTION)],
    ) -> str:
        _log_request(GET_COCKTAIL.name, name=name)

        envelope = await anyio.to_thread.run_sync(
            partial(invoke, GET_COCKTAIL.name, {"name": name}, config=config, client=client)
        )
        _log_response(GET_COCKTAIL.name, envelope.to_dict())

        if envelope.is_error:
            raise ToolError(envelope.text)
        return envelope.text

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    load_dotenv()
    configure_logging()
    try:
        config = ServerConfig.from_env()
        logging.getLogger().setLevel(config.log_level)
        server = create_server(config)
        _log_status(f"Searching {config.search_url} (timeout {config.timeout_sec}s)")
        logger.info("Cocktail API server running on stdio")
        server.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
