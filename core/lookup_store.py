# =============================================================================
# core/lookup_store.py  -  In-memory 1C lookup store
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds two independent keyed collections of business facts:
#     - products        -> stock balance (int)
#     - counterparties  -> debt amount   (float, owed by the counterparty)
#   and answers point lookups by normalized key.
#
# KEYS:
#   Every key goes through normalize_key() both when the store is built and
#   when it is queried, so "Стул Офисный  Стандарт" and "стул офисный стандарт"
#   resolve to the same record.
#
# MUTABILITY:
#   None.  The collections are exposed through read-only mapping views and no
#   insert/update/delete exists, so one store can be shared by every tool and
#   every concurrent call without locking.
#
# MOCK DATA:
#   default_store() returns the fixed dataset used by the assistant.  Swapping
#   in a real 1C source means building a LookupStore from other mappings via
#   LookupStore.from_mappings(); nothing in the tool layer changes.
# =============================================================================

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from core.errors import ConfigurationError, NotFound


def normalize_key(key: str) -> str:
    """Trim, collapse whitespace runs and case-fold an entity name."""
    return " ".join(key.split()).casefold()


def _stock_value(entity: str, name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{entity} '{name}': stock must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigurationError(f"{entity} '{name}': stock must be an integer, got {value!r}")
        return int(value)
    return value


def _debt_value(entity: str, name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{entity} '{name}': debt must be a number, got {value!r}")
    try:
        return float(value)
    except OverflowError:
        raise ConfigurationError(f"{entity} '{name}': debt {value!r} is out of range") from None


def _normalized(entity: str, source: Mapping[str, object], check) -> Mapping[str, object]:
    records: dict[str, object] = {}
    for raw_key, value in source.items():
        if not isinstance(raw_key, str):
            raise ConfigurationError(f"{entity} name must be a string, got {raw_key!r}")
        key = normalize_key(raw_key)
        if not key:
            raise ConfigurationError(f"Empty {entity} name in dataset")
        if key in records:
            raise ConfigurationError(
                f"Duplicate {entity} '{raw_key}' (normalizes to '{key}')"
            )
        records[key] = check(entity, raw_key, value)
    return MappingProxyType(records)


@dataclass(frozen=True)
class LookupStore:
    """Immutable product and counterparty collections keyed by normalized name."""

    products: Mapping[str, int]
    counterparties: Mapping[str, float]

    @classmethod
    def from_mappings(
        cls,
        products: Mapping[str, int],
        counterparties: Mapping[str, float],
    ) -> "LookupStore":
        """Build a store, normalizing every key.

        Raises:
            ConfigurationError: if a name is empty, two names collapse to
                the same normalized key, a stock value is not a whole number
                or a debt is not a number.
        """
        return cls(
            products=_normalized("product", products, _stock_value),
            counterparties=_normalized("counterparty", counterparties, _debt_value),
        )

    def get_stock_balance(self, product_name: str) -> int:
        """Return the stock balance for a product.

        Raises:
            NotFound: if no product matches the normalized name.
        """
        try:
            return self.products[normalize_key(product_name)]
        except KeyError:
            raise NotFound("product", product_name) from None

    def get_counterparty_debt(self, counterparty_name: str) -> float:
        """Return the debt owed by a counterparty.

        Raises:
            NotFound: if no counterparty matches the normalized name.
        """
        try:
            return self.counterparties[normalize_key(counterparty_name)]
        except KeyError:
            raise NotFound("counterparty", counterparty_name) from None

    def list_products(self) -> list[str]:
        return list(self.products)

    def list_counterparties(self) -> list[str]:
        return list(self.counterparties)


# -----------------------------------------------------------------------------
# Mock 1C database
# -----------------------------------------------------------------------------
# A settled counterparty ("ооо лютик", debt 0) sits next to real debtors so the
# agent sees the difference between "owes nothing" and "unknown".
# -----------------------------------------------------------------------------
_MOCK_PRODUCTS: dict[str, int] = {
    "стол офисный модель а": 152,
    "стул офисный стандарт": 312,
    "монитор 24 дюйма": 88,
    "клавиатура беспроводная": 210,
}

_MOCK_DEBTS: dict[str, float] = {
    "ооо ромашка": 125430.50,
    "ооо лютик": 0,
    "ип васильев": 30000.00,
}


def default_store() -> LookupStore:
    """Build the store from the fixed mock dataset."""
    return LookupStore.from_mappings(_MOCK_PRODUCTS, _MOCK_DEBTS)
