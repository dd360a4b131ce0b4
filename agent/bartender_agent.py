# =============================================================================
# agent/bartender_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the demo bartender agent: a Google ADK Agent whose reasoning runs
#   on an OpenRouter model through LiteLlm, and whose only tool source is our
#   FastMCP server, launched as a subprocess over stdio.
#
#   ┌──────────────────────────┐   stdio (MCP)   ┌──────────────────────┐
#   │  ADK Agent (LiteLlm)     │ ──────────────▶ │ tools/mcp_server.py  │
#   │  prompt: agent/prompt.py │                 │   • get_cocktail     │
#   └──────────────────────────┘                 └──────────────────────┘
#                                                          │
#                                                          ▼
#                                                  core/ → CocktailDB
#
# CONFIGURATION:
#   BARTENDER_MODEL      LiteLlm model string (default openrouter/openai/gpt-4o)
#   OPENROUTER_API_KEY   read by LiteLlm itself
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_bartender_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_server_params() -> StdioServerParameters:
    """How ADK starts the MCP server subprocess.

    Runs the server as a module from the project root with the current
    interpreter, so `core` is importable and the same virtualenv is used.
    """
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
    )


def create_agent(model: str | None = None) -> Agent:
    """Create the bartender agent, connected to the cocktail MCP server.

    Args:
        model: LiteLlm model string.  Falls back to BARTENDER_MODEL, then
               DEFAULT_MODEL.
    """
    mcp_tools = MCPToolset(connection_params=create_server_params())

    return Agent(
        name="cocktail_bartender",
        model=LiteLlm(model=model or os.environ.get("BARTENDER_MODEL", DEFAULT_MODEL)),
        instruction=get_bartender_prompt(),
        tools=[mcp_tools],
    )
