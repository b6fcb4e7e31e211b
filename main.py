# =============================================================================
# main.py  -  Entry Point for the 1C Assistant Agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads settings from the environment / .env (core/config.py)
#   2. Creates the Google ADK agent (agent/onec_agent.py)
#   3. Sets up an interactive session
#   4. Sends each question to the agent and streams the answer
#
# GOOGLE ADK CONCEPTS USED:
#   - Runner: Manages the agent's execution lifecycle
#   - SessionService: Tracks conversation state across turns
#   - Content/Part: ADK's message format
# =============================================================================

import asyncio
import logging
import sys

from dotenv import load_dotenv

# Must run before the agent is created: Gemini and LiteLlm read their API
# keys from the environment.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.onec_agent import create_agent
from core.config import Settings, load_settings
from core.errors import ConfigurationError

USER_ID = "console_user"


async def run_agent(settings: Settings):
    """Run the 1C assistant interactively until the user quits."""
    print("=" * 70)
    print("  1C ASSISTANT")
    print(f"  Google ADK + FastMCP, model: {settings.model}")
    print("=" * 70)

    agent = create_agent(settings)
    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=settings.app_name,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=settings.app_name,
        user_id=USER_ID,
    )

    print("Ask about stock balances or counterparty debts. Type 'quit' to exit.")
    print("-" * 70)

    while True:
        try:
            user_input = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q", "выход"):
            print("Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  -> calling tool: {part.function_call.name}")

        if final_response:
            print(f"\nAssistant: {final_response}")
        else:
            print("\nNo response generated. The agent may have encountered an error.")


def main() -> int:
    try:
        settings = load_settings()
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        asyncio.run(run_agent(settings))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
