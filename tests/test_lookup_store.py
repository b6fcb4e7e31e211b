"""Tests for the in-memory lookup store and key normalization."""
import pytest

from core.errors import ConfigurationError, NotFound
from core.lookup_store import LookupStore, normalize_key


class TestNormalizeKey:
    def test_case_folds(self):
        assert normalize_key("Стул Офисный Стандарт") == "стул офисный стандарт"

    def test_collapses_whitespace(self):
        assert normalize_key("  монитор\t24   дюйма \n") == "монитор 24 дюйма"

    def test_idempotent(self):
        once = normalize_key("  ООО   Ромашка ")
        assert normalize_key(once) == once


class TestDefaultStore:
    def test_case_insensitive_stock(self, store):
        assert store.get_stock_balance("Стул Офисный Стандарт") == store.get_stock_balance(
            "стул офисный стандарт"
        ) == 312

    def test_constructed_values(self, store):
        assert store.get_stock_balance("монитор 24 дюйма") == 88
        assert store.get_stock_balance("стол офисный модель а") == 152
        assert store.get_stock_balance("клавиатура беспроводная") == 210
        assert store.get_counterparty_debt("ооо ромашка") == 125430.50
        assert store.get_counterparty_debt("ип васильев") == 30000.00

    def test_zero_debt_is_a_hit(self, store):
        debt = store.get_counterparty_debt("ООО Лютик")
        assert debt == 0
        assert isinstance(debt, float)

    def test_missing_product(self, store):
        with pytest.raises(NotFound) as exc:
            store.get_stock_balance("кресло руководителя")
        assert exc.value.entity == "product"
        assert exc.value.key == "кресло руководителя"
        assert exc.value.kind == "not_found"

    def test_missing_counterparty(self, store):
        with pytest.raises(NotFound) as exc:
            store.get_counterparty_debt("ооо василёк")
        assert exc.value.entity == "counterparty"

    def test_collections_are_independent(self, store):
        # A counterparty name is not a product, and vice versa.
        with pytest.raises(NotFound):
            store.get_stock_balance("ооо ромашка")
        with pytest.raises(NotFound):
            store.get_counterparty_debt("монитор 24 дюйма")

    def test_listing(self, store):
        assert store.list_products() == [
            "стол офисный модель а",
            "стул офисный стандарт",
            "монитор 24 дюйма",
            "клавиатура беспроводная",
        ]
        assert store.list_counterparties() == ["ооо ромашка", "ооо лютик", "ип васильев"]

    def test_read_only(self, store):
        with pytest.raises(TypeError):
            store.products["новый товар"] = 1


class TestFromMappings:
    def test_keys_normalized_on_build(self, small_store):
        assert small_store.list_products() == ["тестовый товар", "пустой товар"]
        assert small_store.get_stock_balance("ТЕСТОВЫЙ товар") == 5

    def test_source_mapping_changes_do_not_leak(self):
        products = {"товар": 1}
        store = LookupStore.from_mappings(products, {})
        products["товар"] = 99
        assert store.get_stock_balance("товар") == 1

    def test_duplicate_after_normalization(self):
        with pytest.raises(ConfigurationError):
            LookupStore.from_mappings({"Товар": 1, "товар ": 2}, {})

    def test_empty_key(self):
        with pytest.raises(ConfigurationError):
            LookupStore.from_mappings({}, {"   ": 1.0})

    def test_negative_stock_passes_through(self):
        store = LookupStore.from_mappings({"товар": -3}, {})
        assert store.get_stock_balance("товар") == -3

    def test_whole_float_stock_stored_as_int(self):
        store = LookupStore.from_mappings({"товар": 4.0}, {})
        balance = store.get_stock_balance("товар")
        assert balance == 4
        assert isinstance(balance, int)

    @pytest.mark.parametrize("value", [3.7, "12", None, True, float("nan")])
    def test_rejects_non_integral_stock(self, value):
        with pytest.raises(ConfigurationError, match="stock must be an integer"):
            LookupStore.from_mappings({"товар": value}, {})

    @pytest.mark.parametrize("value", ["100.5", None, False])
    def test_rejects_non_numeric_debt(self, value):
        with pytest.raises(ConfigurationError, match="debt must be a number"):
            LookupStore.from_mappings({}, {"ооо тест": value})

    def test_rejects_debt_out_of_float_range(self):
        with pytest.raises(ConfigurationError, match="out of range"):
            LookupStore.from_mappings({}, {"ооо тест": 10**400})

    def test_rejects_non_string_name(self):
        with pytest.raises(ConfigurationError):
            LookupStore.from_mappings({42: 1}, {})
