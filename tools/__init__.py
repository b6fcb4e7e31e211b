# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the agent framework and core/.
#   It publishes each registered ToolDefinition as an MCP tool and returns
#   ToolCallResult documents.
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT look anything up themselves (that's core/lookup_store.py)
#   - They do NOT validate arguments (core/shapes.py does, via dispatch)
#   - They do NOT know about Google ADK
# =============================================================================
