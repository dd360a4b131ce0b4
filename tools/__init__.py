# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/:
#     1. Registers the catalog's tool with a FastMCP decorator
#     2. Routes each call through core.invoker.invoke()
#     3. Converts the resulting envelope into an MCP tool result
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate, fetch or format (that's core/)
#   - They do NOT know about Google ADK (that's agent/)
# =============================================================================
