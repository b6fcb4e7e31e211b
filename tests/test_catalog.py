"""End-to-end tests for the assistant's tools dispatched through the registry."""
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from core.catalog import GET_COUNTERPARTY_DEBT, GET_STOCK_BALANCE, build_registry


def test_published_tools(registry):
    described = [d.to_dict() for d in registry.list_definitions()]
    assert [d["name"] for d in described] == [GET_STOCK_BALANCE, GET_COUNTERPARTY_DEBT]
    stock, debt = described
    assert "остаток" in stock["description"]
    assert "задолженность" in debt["description"]
    assert stock["parameters"]["required"] == ["product_name"]
    assert stock["returns"]["properties"] == {
        "stock_balance": {"type": "integer", "description": "Остаток товара на складе, шт."}
    }
    assert debt["parameters"]["required"] == ["counterparty_name"]
    assert debt["returns"]["properties"]["debt"]["type"] == "number"


def test_stock_balance(registry):
    result = registry.dispatch(GET_STOCK_BALANCE, {"product_name": "клавиатура беспроводная"})
    assert result.ok
    assert result.value == {"stock_balance": 210}


def test_stock_balance_any_case(registry):
    result = registry.dispatch(GET_STOCK_BALANCE, {"product_name": "Стул Офисный Стандарт"})
    assert result.value == {"stock_balance": 312}


def test_counterparty_debt(registry):
    result = registry.dispatch(GET_COUNTERPARTY_DEBT, {"counterparty_name": "ип васильев"})
    assert result.ok
    assert result.value == {"debt": 30000.00}


def test_settled_counterparty(registry):
    result = registry.dispatch(GET_COUNTERPARTY_DEBT, {"counterparty_name": "ООО Лютик"})
    assert result.value == {"debt": 0.0}


def test_unknown_tool(registry):
    before = registry.names()
    result = registry.dispatch("unknown_tool", {})
    assert result.failure.kind == "unknown_tool"
    assert registry.names() == before


def test_wrong_field(registry):
    result = registry.dispatch(GET_STOCK_BALANCE, {"wrong_field": 1})
    assert result.failure.kind == "invalid_arguments"


class TestReportPolicy:
    def test_unknown_product(self, registry):
        result = registry.dispatch(GET_STOCK_BALANCE, {"product_name": "кресло"})
        assert result.failure.kind == "not_found"
        assert "кресло" in result.failure.message

    def test_unknown_counterparty(self, registry):
        result = registry.dispatch(GET_COUNTERPARTY_DEBT, {"counterparty_name": "ооо астра"})
        assert result.failure.kind == "not_found"


class TestDefaultPolicy:
    def test_unknown_product_returns_zero(self, lenient_registry, caplog):
        with caplog.at_level("WARNING", logger="core.catalog"):
            result = lenient_registry.dispatch(GET_STOCK_BALANCE, {"product_name": "кресло"})
        assert result.value == {"stock_balance": 0}
        assert "get_stock_balance" in caplog.text

    def test_unknown_counterparty_returns_zero(self, lenient_registry):
        result = lenient_registry.dispatch(GET_COUNTERPARTY_DEBT, {"counterparty_name": "ооо астра"})
        assert result.value == {"debt": 0.0}

    def test_hits_unchanged(self, lenient_registry):
        result = lenient_registry.dispatch(GET_STOCK_BALANCE, {"product_name": "монитор 24 дюйма"})
        assert result.value == {"stock_balance": 88}


def test_injected_store(small_store):
    registry = build_registry(small_store)
    assert registry.dispatch(GET_STOCK_BALANCE, {"product_name": "тестовый товар"}).value == {
        "stock_balance": 5
    }
    assert registry.dispatch(GET_STOCK_BALANCE, {"product_name": "монитор 24 дюйма"}).failure.kind == (
        "not_found"
    )


def test_concurrent_dispatch_matches_sequential(registry):
    calls = [
        (GET_STOCK_BALANCE, {"product_name": "монитор 24 дюйма"}),
        (GET_STOCK_BALANCE, {"product_name": "Стол офисный модель А"}),
        (GET_STOCK_BALANCE, {"product_name": "нет такого"}),
        (GET_COUNTERPARTY_DEBT, {"counterparty_name": "ооо ромашка"}),
        (GET_COUNTERPARTY_DEBT, {"counterparty_name": "ООО ЛЮТИК"}),
        (GET_COUNTERPARTY_DEBT, {"counterparty_name": "нет такого"}),
        ("unknown_tool", {}),
        (GET_STOCK_BALANCE, {"wrong_field": 1}),
    ] * 25
    random.Random(7).shuffle(calls)

    sequential = [registry.dispatch(name, args) for name, args in calls]
    with ThreadPoolExecutor(max_workers=8) as pool:
        concurrent = list(pool.map(lambda call: registry.dispatch(*call), calls))

    assert concurrent == sequential


@pytest.mark.parametrize(
    "name, arguments, expected",
    [
        (GET_STOCK_BALANCE, {"product_name": "стол офисный модель а"}, {"stock_balance": 152}),
        (GET_STOCK_BALANCE, {"product_name": "  МОНИТОР 24  дюйма "}, {"stock_balance": 88}),
        (GET_COUNTERPARTY_DEBT, {"counterparty_name": "ООО Ромашка"}, {"debt": 125430.50}),
    ],
)
def test_result_documents(registry, name, arguments, expected):
    assert registry.dispatch(name, arguments).to_dict() == expected
