# =============================================================================
# core/shapes.py  -  Explicit input/output shape declarations
# =============================================================================
#
# A Shape is a named record of typed fields, declared by hand next to the
# dataclass it describes:
#
#     Shape(StockBalanceRequest, (ShapeField("product_name", "string", "..."),))
#
# It does three jobs:
#   1. decode()    raw argument document  -> record instance (validates)
#   2. encode()    record instance         -> plain dict      (validates)
#   3. to_schema() JSON-schema style object for tool discovery
#
# Field types are the three primitives the agent runtime understands:
# "string", "integer" and "number".  Booleans are never accepted as numbers.
# =============================================================================

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from core.errors import ConfigurationError

FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
}


class ShapeError(ValueError):
    """A document does not fit a shape."""


@dataclass(frozen=True)
class ShapeField:
    name: str
    type: str
    description: str = ""

    def check(self, value: Any) -> Any:
        """Return `value` coerced to the field's Python type, or raise ShapeError."""
        if isinstance(value, bool) or not isinstance(value, FIELD_TYPES[self.type]):
            raise ShapeError(
                f"field '{self.name}' must be {self.type}, got {type(value).__name__}"
            )
        if self.type == "number":
            try:
                return float(value)
            except OverflowError:
                raise ShapeError(f"field '{self.name}' is out of range for a number") from None
        return value


@dataclass(frozen=True)
class Shape:
    """A fixed set of typed fields bound to a dataclass record type."""

    record: type
    fields: tuple[ShapeField, ...]

    def __post_init__(self):
        if not dataclasses.is_dataclass(self.record):
            raise ConfigurationError(f"{self.record!r} is not a dataclass")
        declared = [f.name for f in self.fields]
        actual = [f.name for f in dataclasses.fields(self.record)]
        if len(set(declared)) != len(declared):
            raise ConfigurationError(f"{self.name}: duplicate field in {declared}")
        if sorted(declared) != sorted(actual):
            raise ConfigurationError(
                f"{self.name}: declared fields {declared} do not match record fields {actual}"
            )
        for f in self.fields:
            if f.type not in FIELD_TYPES:
                raise ConfigurationError(f"{self.name}.{f.name}: unknown field type '{f.type}'")

    @property
    def name(self) -> str:
        return self.record.__name__

    def decode(self, document: Any) -> Any:
        """Build a record from a raw argument document.

        The document must be a mapping with exactly the declared fields.
        """
        if not isinstance(document, Mapping):
            raise ShapeError(f"expected an object, got {type(document).__name__}")
        unexpected = sorted(map(str, set(document) - {f.name for f in self.fields}))
        if unexpected:
            raise ShapeError(f"unexpected field(s): {', '.join(unexpected)}")
        values = {}
        for f in self.fields:
            if f.name not in document:
                raise ShapeError(f"missing field '{f.name}'")
            values[f.name] = f.check(document[f.name])
        return self.record(**values)

    def encode(self, record: Any) -> dict[str, Any]:
        """Turn a record back into a plain dict, checking every field."""
        if not isinstance(record, self.record):
            raise ShapeError(f"expected {self.name}, got {type(record).__name__}")
        return {f.name: f.check(getattr(record, f.name)) for f in self.fields}

    def to_schema(self) -> dict[str, Any]:
        properties = {}
        for f in self.fields:
            prop = {"type": f.type}
            if f.description:
                prop["description"] = f.description
            properties[f.name] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": [f.name for f in self.fields],
            "additionalProperties": False,
        }
