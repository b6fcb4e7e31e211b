# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the 1C assistant: the lookup
# store, the typed tool definitions and the dispatcher that runs them.
#
# Nothing in this package imports Google ADK, FastMCP, or any orchestration
# framework.  Every module here is pure Python and works in a bare REPL with
# no network access.
# =============================================================================
