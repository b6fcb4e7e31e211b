# =============================================================================
# core/dispatcher.py  -  Tool registry and call dispatch
# =============================================================================
#
# HOW A CALL FLOWS:
#   dispatch("get_stock_balance", {"product_name": "монитор 24 дюйма"})
#     1. look up the ToolDefinition by name      -> unknown_tool
#     2. decode raw arguments via input_shape    -> invalid_arguments
#     3. run the handler                         -> not_found / handler_error
#     4. encode the output via output_shape      -> handler_error
#     5. wrap it in a ToolCallResult
#
#   Per-call errors always come back as a failed ToolCallResult.  dispatch()
#   never raises, so one bad call cannot take down the agent loop or disturb
#   other calls running at the same time.
#
# STATE:
#   Definitions are registered at start-up and never removed.  After that the
#   registry is only read, so concurrent dispatch() calls need no locking.
# =============================================================================

import logging
import time
from collections.abc import Iterable
from typing import Any

from core.errors import ConfigurationError, HandlerError, InvalidArguments, ToolError, UnknownTool
from core.models import ToolCallRequest, ToolCallResult
from core.shapes import ShapeError
from core.tool_definition import ToolDefinition, ToolDescription

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Ordered set of ToolDefinitions, dispatched by name."""

    def __init__(self, definitions: Iterable[ToolDefinition] = ()):
        self._tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ToolDefinition) -> None:
        """Add a definition.

        Raises:
            ConfigurationError: if the name is already taken.  The existing
                registration is left untouched.
        """
        if not isinstance(definition, ToolDefinition):
            raise ConfigurationError(f"Not a ToolDefinition: {definition!r}")
        if definition.name in self._tools:
            raise ConfigurationError(f"Tool already registered: {definition.name}")
        self._tools[definition.name] = definition
        logger.debug("Registered tool: %s", definition.name)

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def list_definitions(self) -> tuple[ToolDescription, ...]:
        """Everything the agent runtime may call, in registration order."""
        return tuple(d.describe() for d in self._tools.values())

    def dispatch(self, name: str, arguments: Any) -> ToolCallResult:
        """Run one tool call and return its result; never raises ToolError."""
        t0 = time.monotonic()
        try:
            value = self._invoke(name, arguments)
        except ToolError as e:
            logger.warning("Tool %s failed: %s (%s)", name, e.message, e.kind)
            return ToolCallResult.error(name, e.kind, e.message)
        logger.debug("Tool %s: %.4fs -> ok", name, time.monotonic() - t0)
        return ToolCallResult.success(name, value)

    def dispatch_request(self, request: ToolCallRequest) -> ToolCallResult:
        return self.dispatch(request.name, request.arguments)

    def _invoke(self, name: str, arguments: Any) -> dict[str, Any]:
        definition = self._tools.get(name)
        if definition is None:
            raise UnknownTool(name)

        try:
            request = definition.input_shape.decode(arguments)
        except ShapeError as e:
            raise InvalidArguments(name, str(e)) from e

        try:
            output = definition.handler(request)
        except ToolError:
            raise
        except Exception as e:
            logger.error("Tool %s raised an unexpected error", name, exc_info=True)
            raise HandlerError(f"Tool {name} failed: {e}") from e

        try:
            return definition.output_shape.encode(output)
        except ShapeError as e:
            raise HandlerError(f"Tool {name} returned an invalid result: {e}") from e
