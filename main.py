# =============================================================================
# main.py  -  Entry Point for the demo bartender agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Creates the ADK agent (agent/bartender_agent.py), which launches the
#      cocktail MCP server as a subprocess
#   2. Opens an in-memory session
#   3. Reads questions from the terminal and streams the agent's answers,
#      printing each get_cocktail call as it happens
#
# Type 'quit' to exit.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads OPENROUTER_API_KEY from the environment when the agent is
# created, so .env must be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.bartender_agent import create_agent

APP_NAME = "cocktail_bartender"
USER_ID = "demo_user"


async def ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question and return the agent's final text reply."""
    message = types.Content(role="user", parts=[types.Part(text=question)])
    final_response = ""

    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=message,
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if getattr(part, "text", None):
                final_response = part.text
            if getattr(part, "function_call", None):
                args = part.function_call.args or {}
                print(f"  🔧 Calling tool: {part.function_call.name}({args})")

    return final_response


async def run_agent():
    print("=" * 70)
    print("  COCKTAIL BARTENDER AGENT")
    print("  Powered by Google ADK + FastMCP + TheCocktailDB")
    print("=" * 70)
    print("\n🔧 Initializing agent...")

    session_service = InMemorySessionService()
    runner = Runner(
        agent=create_agent(),
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("🍸 Ask for a cocktail recipe! (Type 'quit' to exit)")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Cheers!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Cheers!")
            break
        if not user_input:
            continue

        print("\n🤖 Mixing...\n")
        reply = await ask(runner, session.id, user_input)

        print("-" * 70)
        if reply:
            print(f"\n🤖 Bartender:\n\n{reply}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")


if __name__ == "__main__":
    asyncio.run(run_agent())
