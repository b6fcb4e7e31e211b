# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# between the agent and the 1C lookup store.  They carry no behavior.
#
# Two groups:
#   - Request/response records for each tool.  Field names are the exact keys
#     the agent sends and receives (product_name, stock_balance, ...).
#   - The per-call envelope: ToolCallRequest in, ToolCallResult out.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


# -----------------------------------------------------------------------------
# get_stock_balance
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class StockBalanceRequest:
    """Arguments for a stock balance query."""

    product_name: str                  # "Стул офисный стандарт", any case


@dataclass(frozen=True)
class StockBalanceResult:
    """Units of a product currently on the warehouse balance."""

    stock_balance: int


# -----------------------------------------------------------------------------
# get_counterparty_debt
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CounterpartyDebtRequest:
    """Arguments for a counterparty debt query."""

    counterparty_name: str             # "ООО Ромашка", any case


@dataclass(frozen=True)
class CounterpartyDebtResult:
    """Amount currently owed by the counterparty (0.0 when settled)."""

    debt: float


# -----------------------------------------------------------------------------
# ToolCallRequest / ToolCallResult  -  one per invocation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolCallRequest:
    """A call as it arrives from the agent runtime: a name plus raw arguments."""

    name: str
    arguments: Any = field(default_factory=dict)


@dataclass(frozen=True)
class ToolFailure:
    kind: str                          # "unknown_tool", "not_found", ...
    message: str


@dataclass(frozen=True)
class ToolCallResult:
    """Outcome of one dispatch: exactly one of `value` / `failure` is set."""

    tool: str
    value: Optional[dict[str, Any]] = None
    failure: Optional[ToolFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, tool: str, value: dict[str, Any]) -> "ToolCallResult":
        return cls(tool=tool, value=dict(value))

    @classmethod
    def error(cls, tool: str, kind: str, message: str) -> "ToolCallResult":
        return cls(tool=tool, failure=ToolFailure(kind=kind, message=message))

    def to_dict(self) -> dict[str, Any]:
        """Render the document returned to the agent.

        On success this is the output record itself (e.g. {"stock_balance": 88});
        on failure it is {"error": {"kind": ..., "message": ...}}.
        """
        if self.failure is not None:
            return {"error": {"kind": self.failure.kind, "message": self.failure.message}}
        return dict(self.value or {})
