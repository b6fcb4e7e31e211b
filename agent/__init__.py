# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer receives the user's question ("Сколько мониторов на
#   складе?"), decides which tool to call, calls it over MCP and phrases the
#   answer.  It does not read the lookup store (core/) and does not implement
#   tools (tools/).
# =============================================================================
