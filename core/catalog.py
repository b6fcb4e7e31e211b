# =============================================================================
# core/catalog.py  -  The assistant's tools, bound to a LookupStore
# =============================================================================
#
# TOOLS:
#   get_stock_balance      {product_name: string}      -> {stock_balance: integer}
#   get_counterparty_debt  {counterparty_name: string} -> {debt: number}
#
# Each tool is a small handler class holding the store it reads from.  The
# store is passed in (build_registry(store)), never imported as a global, so
# tests can hand in their own fixture data.
#
# STORE MISSES (MissPolicy):
#   REPORT   the NotFound error goes back to the agent as a "not_found"
#            failure.  The agent can tell "stock is 0" from "no such product".
#   DEFAULT  the miss is logged and a zero result is returned instead.
# =============================================================================

import logging
from enum import Enum

from core.dispatcher import ToolRegistry
from core.errors import NotFound
from core.lookup_store import LookupStore
from core.models import (
    CounterpartyDebtRequest,
    CounterpartyDebtResult,
    StockBalanceRequest,
    StockBalanceResult,
)
from core.shapes import Shape, ShapeField
from core.tool_definition import ToolDefinition

logger = logging.getLogger(__name__)

GET_STOCK_BALANCE = "get_stock_balance"
GET_COUNTERPARTY_DEBT = "get_counterparty_debt"


class MissPolicy(str, Enum):
    REPORT = "report"
    DEFAULT = "default"


STOCK_BALANCE_INPUT = Shape(
    StockBalanceRequest,
    (ShapeField("product_name", "string", "Название товара, например «Монитор 24 дюйма»."),),
)
STOCK_BALANCE_OUTPUT = Shape(
    StockBalanceResult,
    (ShapeField("stock_balance", "integer", "Остаток товара на складе, шт."),),
)
COUNTERPARTY_DEBT_INPUT = Shape(
    CounterpartyDebtRequest,
    (ShapeField("counterparty_name", "string", "Название контрагента, например «ООО Ромашка»."),),
)
COUNTERPARTY_DEBT_OUTPUT = Shape(
    CounterpartyDebtResult,
    (ShapeField("debt", "number", "Текущая задолженность контрагента."),),
)


class StockBalanceHandler:
    def __init__(self, store: LookupStore, miss_policy: MissPolicy = MissPolicy.REPORT):
        self.store = store
        self.miss_policy = miss_policy

    def __call__(self, request: StockBalanceRequest) -> StockBalanceResult:
        try:
            balance = self.store.get_stock_balance(request.product_name)
        except NotFound as e:
            if self.miss_policy is MissPolicy.REPORT:
                raise
            logger.warning("Error in tool %s: %s", GET_STOCK_BALANCE, e)
            return StockBalanceResult(stock_balance=0)
        return StockBalanceResult(stock_balance=balance)


class CounterpartyDebtHandler:
    def __init__(self, store: LookupStore, miss_policy: MissPolicy = MissPolicy.REPORT):
        self.store = store
        self.miss_policy = miss_policy

    def __call__(self, request: CounterpartyDebtRequest) -> CounterpartyDebtResult:
        try:
            debt = self.store.get_counterparty_debt(request.counterparty_name)
        except NotFound as e:
            if self.miss_policy is MissPolicy.REPORT:
                raise
            logger.warning("Error in tool %s: %s", GET_COUNTERPARTY_DEBT, e)
            return CounterpartyDebtResult(debt=0.0)
        return CounterpartyDebtResult(debt=debt)


def build_tool_definitions(
    store: LookupStore,
    miss_policy: MissPolicy = MissPolicy.REPORT,
) -> list[ToolDefinition]:
    """Create the assistant's ToolDefinitions bound to `store`."""
    return [
        ToolDefinition(
            name=GET_STOCK_BALANCE,
            description="Получить остаток товара на складе по его названию.",
            input_shape=STOCK_BALANCE_INPUT,
            output_shape=STOCK_BALANCE_OUTPUT,
            handler=StockBalanceHandler(store, miss_policy),
        ),
        ToolDefinition(
            name=GET_COUNTERPARTY_DEBT,
            description="Получить текущую задолженность клиента (контрагента) по его названию.",
            input_shape=COUNTERPARTY_DEBT_INPUT,
            output_shape=COUNTERPARTY_DEBT_OUTPUT,
            handler=CounterpartyDebtHandler(store, miss_policy),
        ),
    ]


def build_registry(
    store: LookupStore,
    miss_policy: MissPolicy = MissPolicy.REPORT,
) -> ToolRegistry:
    """Registry with every assistant tool registered, ready for dispatch."""
    return ToolRegistry(build_tool_definitions(store, miss_policy))
