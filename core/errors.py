# =============================================================================
# core/errors.py  -  Error taxonomy for the tool layer
# =============================================================================
#
# Two families:
#   - ConfigurationError: raised while wiring things up at start-up.  Fatal.
#   - ToolError and its subclasses: raised while serving a single call.  The
#     dispatcher turns these into a failed ToolCallResult; they never escape
#     dispatch().
#
# Every ToolError carries a short machine-readable `kind` that ends up in the
# result document the caller receives.
# =============================================================================


class ConfigurationError(Exception):
    """Start-up wiring is invalid (duplicate tool, bad shape, bad setting)."""


class ToolError(Exception):
    """Base class for per-call failures reported back to the caller."""

    kind = "tool_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownTool(ToolError):
    kind = "unknown_tool"

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArguments(ToolError):
    kind = "invalid_arguments"

    def __init__(self, name: str, detail: str):
        super().__init__(f"Invalid arguments for {name}: {detail}")
        self.name = name
        self.detail = detail


class NotFound(ToolError):
    """The lookup store has no record for the (normalized) key."""

    kind = "not_found"

    def __init__(self, entity: str, key: str):
        super().__init__(f"{entity} '{key}' not found")
        self.entity = entity
        self.key = key


class HandlerError(ToolError):
    kind = "handler_error"
