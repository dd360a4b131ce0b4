# =============================================================================
# core/errors.py  -  Failure taxonomy for a single tool invocation
# =============================================================================
#
# Every failure a tool call can hit is one of these.  None of them escape the
# invoker: core/invoker.py turns each into an error envelope.  An empty search
# result is NOT an error and has no class here.
# =============================================================================


class CocktailServerError(Exception):
    """Base class for invocation failures."""


class UnknownToolError(CocktailServerError):
    """The requested tool name is not in the catalog."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ArgumentValidationError(CocktailServerError):
    """Tool arguments do not match the input schema."""


class UpstreamTransportError(CocktailServerError):
    """CocktailDB could not be reached or answered with a non-2xx status."""


class UpstreamDecodeError(CocktailServerError):
    """CocktailDB answered, but not with the JSON shape we expect."""
