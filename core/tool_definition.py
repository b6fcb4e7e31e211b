# =============================================================================
# core/tool_definition.py  -  One callable operation
# =============================================================================
#
# A ToolDefinition binds together:
#   - name         the stable identifier the agent calls ("get_stock_balance")
#   - description  what the LLM reads to decide WHEN to call it
#   - input_shape  / output_shape  (core/shapes.py)
#   - handler      input record -> output record, or raises ToolError
#
# Everything is checked once, at construction.  A definition that exists is
# known to be callable; a broken one stops start-up with ConfigurationError.
# =============================================================================

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from core.errors import ConfigurationError
from core.shapes import Shape

ToolHandler = Callable[[Any], Any]


@dataclass(frozen=True)
class ToolDescription:
    """What the agent runtime sees about a tool during discovery."""

    name: str
    description: str
    input_shape: Shape
    output_shape: Shape

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.input_shape.to_schema(),
            "returns": self.output_shape.to_schema(),
        }


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_shape: Shape
    output_shape: Shape
    handler: ToolHandler

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError("Tool name must be a non-empty string")
        if not isinstance(self.description, str) or not self.description.strip():
            raise ConfigurationError(f"Tool {self.name}: description must be non-empty")
        for label, shape in (("input", self.input_shape), ("output", self.output_shape)):
            if not isinstance(shape, Shape):
                raise ConfigurationError(f"Tool {self.name}: {label} shape must be a Shape")
        _check_bindable(self.name, self.handler)

    def describe(self) -> ToolDescription:
        return ToolDescription(
            name=self.name,
            description=self.description,
            input_shape=self.input_shape,
            output_shape=self.output_shape,
        )


def _check_bindable(name: str, handler: Any) -> None:
    """The handler must accept exactly one positional argument: the input record."""
    if not callable(handler):
        raise ConfigurationError(f"Tool {name}: handler is not callable")
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Tool {name}: cannot inspect handler: {e}") from e
    try:
        signature.bind(object())
    except TypeError as e:
        raise ConfigurationError(
            f"Tool {name}: handler cannot be called with one input record: {e}"
        ) from e
