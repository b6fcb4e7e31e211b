# =============================================================================
# core/config.py  -  Runtime settings
# =============================================================================
#
# All settings come from environment variables.  The entry points (main.py,
# tools/mcp_server.py) call load_dotenv() first, so a local .env file works
# too.  This module itself only reads a mapping; it never touches the disk.
#
#   ASSISTANT_MODEL        model name (default gemini-2.0-flash-001).  Names
#                          that don't start with "gemini" go through LiteLlm,
#                          e.g. "openrouter/openai/gpt-4o".
#   GOOGLE_API_KEY         required when a Gemini model is selected
#   ASSISTANT_MISS_POLICY  "report" (default) or "default"
#   ASSISTANT_LOG_LEVEL    DEBUG / INFO / WARNING / ERROR (default INFO)
#   ASSISTANT_APP_NAME     ADK app name and MCP server name
# =============================================================================

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from core.catalog import MissPolicy
from core.errors import ConfigurationError

DEFAULT_MODEL = "gemini-2.0-flash-001"
DEFAULT_APP_NAME = "onec_assistant"


@dataclass(frozen=True)
class Settings:
    model: str = DEFAULT_MODEL
    google_api_key: Optional[str] = None
    miss_policy: MissPolicy = MissPolicy.REPORT
    log_level: str = "INFO"
    app_name: str = DEFAULT_APP_NAME

    @property
    def uses_gemini(self) -> bool:
        return self.model.startswith("gemini")

    def require_credentials(self) -> None:
        """Fail fast when the selected model cannot authenticate."""
        if self.uses_gemini and not self.google_api_key:
            raise ConfigurationError(
                "GOOGLE_API_KEY is not set. Please set your API key "
                f"to use the {self.model} model."
            )


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from `env` (defaults to os.environ)."""
    if env is None:
        env = os.environ

    raw_policy = env.get("ASSISTANT_MISS_POLICY", MissPolicy.REPORT.value).strip().lower()
    try:
        miss_policy = MissPolicy(raw_policy)
    except ValueError:
        choices = ", ".join(p.value for p in MissPolicy)
        raise ConfigurationError(
            f"ASSISTANT_MISS_POLICY must be one of: {choices} (got '{raw_policy}')"
        ) from None

    log_level = env.get("ASSISTANT_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"ASSISTANT_LOG_LEVEL is not a logging level: '{log_level}'")

    model = env.get("ASSISTANT_MODEL", "").strip() or DEFAULT_MODEL
    app_name = env.get("ASSISTANT_APP_NAME", "").strip() or DEFAULT_APP_NAME

    return Settings(
        model=model,
        google_api_key=env.get("GOOGLE_API_KEY") or None,
        miss_policy=miss_policy,
        log_level=log_level,
        app_name=app_name,
    )
