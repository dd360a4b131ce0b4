# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the demo Google ADK bartender agent.
#
# ARCHITECTURAL ROLE:
#   The agent is a CONSUMER of the cocktail MCP server.  It starts
#   tools/mcp_server.py as a subprocess, discovers get_cocktail, and lets the
#   LLM decide when to call it.  Nothing here is needed to run the server.
# =============================================================================
