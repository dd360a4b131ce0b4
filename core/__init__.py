# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL request-handling logic for the cocktail server:
# the tool catalog, argument validation, the CocktailDB client, recipe
# formatting and the invoker that maps every outcome onto a response envelope.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The tools/ layer wraps it; the agent/ layer consumes it over MCP.
# =============================================================================
