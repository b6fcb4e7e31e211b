# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Publishes every tool from core/catalog.py over MCP.  Each MCP tool is a
#   thin wrapper: it forwards its arguments to ToolRegistry.dispatch() and
#   returns the result document.  Names, descriptions and argument checking
#   all come from the registry, so the agent sees exactly what core/ declares.
#
# HOW IT WORKS (the flow):
#   1. The Google ADK agent decides it needs information (e.g., a debt)
#   2. It calls a tool by name via MCP (e.g., "get_counterparty_debt")
#   3. FastMCP routes the call to the decorated function below
#   4. The function dispatches through the core registry
#   5. The agent receives {"debt": 30000.0} or {"error": {...}}
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server
#     b) Spawned by the ADK agent over stdio (agent/onec_agent.py)
# =============================================================================

import json
import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP

from core.catalog import GET_COUNTERPARTY_DEBT, GET_STOCK_BALANCE, build_registry
from core.config import Settings, load_settings
from core.errors import ConfigurationError
from core.lookup_store import LookupStore, default_store

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP protocol, so all logging goes to STDERR
# (configured in main()).
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for successful responses
#     - YELLOW for failures
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Failures
_RESET = "\033[0m"     # Reset to default terminal color


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON, then return it."""
    color = _YELLOW if "error" in result else _GREEN
    payload = json.dumps(result, ensure_ascii=False, separators=(",", ":"))
    logging.info(f"{color}  ← {tool_name} response: {payload}{_RESET}")
    return result


# =============================================================================
# Server factory
# =============================================================================
# Each MCP tool forwards to the registry.  Descriptions come from the
# registered ToolDefinitions so the two can never drift apart.
# =============================================================================
def create_server(settings: Settings, store: LookupStore | None = None) -> FastMCP:
    """Build the FastMCP server for the registry bound to `store`.

    Raises:
        ConfigurationError: if the registry and the published tools differ.
    """
    if store is None:
        store = default_store()
    registry = build_registry(store, settings.miss_policy)
    published = (GET_STOCK_BALANCE, GET_COUNTERPARTY_DEBT)
    if set(registry.names()) != set(published):
        raise ConfigurationError(
            f"Registered tools {sorted(registry.names())} do not match "
            f"MCP tools {sorted(published)}"
        )

    mcp = FastMCP(settings.app_name)

    def call(tool_name: str, **arguments) -> dict:
        _log_request(tool_name, **arguments)
        result = registry.dispatch(tool_name, arguments)
        return _log_response(tool_name, result.to_dict())

    # -------------------------------------------------------------------------
    # TOOL 1: get_stock_balance
    # -------------------------------------------------------------------------
    @mcp.tool(name=GET_STOCK_BALANCE, description=registry.get(GET_STOCK_BALANCE).description)
    def get_stock_balance(product_name: str) -> dict:
        """Return {"stock_balance": int} for a product name (case-insensitive)."""
        return call(GET_STOCK_BALANCE, product_name=product_name)

    # -------------------------------------------------------------------------
    # TOOL 2: get_counterparty_debt
    # -------------------------------------------------------------------------
    @mcp.tool(
        name=GET_COUNTERPARTY_DEBT,
        description=registry.get(GET_COUNTERPARTY_DEBT).description,
    )
    def get_counterparty_debt(counterparty_name: str) -> dict:
        """Return {"debt": float} for a counterparty name (case-insensitive)."""
        return call(GET_COUNTERPARTY_DEBT, counterparty_name=counterparty_name)

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> int:
    load_dotenv()
    try:
        settings = load_settings()
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s [MCP] %(message)s",
            datefmt="%H:%M:%S",
            stream=sys.stderr,
        )
        mcp = create_server(settings)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    mcp.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
