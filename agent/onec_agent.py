# =============================================================================
# agent/onec_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that answers questions about the 1C data.
#   The agent has no business logic of its own.  It has:
#     - an instruction (agent/prompt.py)
#     - a model (Gemini directly, or any other provider through LiteLlm)
#     - one tool source: the FastMCP server in tools/mcp_server.py
#
# MCP CONNECTION:
#   ADK starts the MCP server as a subprocess and talks to it over stdio.
#   The subprocess runs with the current interpreter and environment, so it
#   sees the same settings (miss policy, log level) as this process.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_assistant_prompt
from core.catalog import build_registry
from core.config import Settings
from core.lookup_store import default_store

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_mcp_toolset() -> MCPToolset:
    """MCPToolset that spawns `python -m tools.mcp_server` from the project root."""
    return MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=["-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
            env=dict(os.environ),
        ),
    )


def create_model(settings: Settings):
    """Gemini model names are passed to ADK as-is; anything else goes via LiteLlm."""
    if settings.uses_gemini:
        return settings.model
    return LiteLlm(model=settings.model)


def create_agent(settings: Settings) -> Agent:
    """Create and configure the 1C assistant agent.

    Raises:
        ConfigurationError: if the selected model has no credentials.
    """
    settings.require_credentials()

    # Same store and definitions the MCP server publishes; used here only to
    # describe the tools and known names in the instruction.
    store = default_store()
    tools = build_registry(store, settings.miss_policy).list_definitions()

    return Agent(
        name=settings.app_name,
        model=create_model(settings),
        instruction=get_assistant_prompt(
            tools,
            products=store.list_products(),
            counterparties=store.list_counterparties(),
        ),
        tools=[create_mcp_toolset()],
    )
