"""
Interactive terminal entrypoint for the outfit generator.

Architectural role:
- Provides a terminal-only interface over the core orchestrator.
- Keeps one `ViewState` session for the life of the process.

Request lifecycle (per user turn):
1. Read a single line from stdin.
2. Handle local control commands (`exit`/`quit`).
3. Submit the description through `OutfitOrchestrator.submit`.
4. Render the success blocks or the error line.

Input validation behavior:
- Empty input is ignored and does not call core.

Error handling strategy:
- Workflow failures are rendered as `Error: <message>`; the loop continues.
- Handles EOF and keyboard interrupts without traceback output.
"""

from dotenv import load_dotenv

load_dotenv()

import asyncio
import logging
import os
import sys

from outfit_studio.core.engine import OutfitOrchestrator, create_orchestrator
from outfit_studio.core.state import ViewState

TITLE = "AI Outfit Generator"
INPUT_LABEL = "Describe the outfit you want"
PLACEHOLDER = "E.g., A professional outfit for a job interview in the tech industry"
LOADING_TEXT = "Generating..."


# =========================================================
# UTF-8 SAFE STDOUT
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except Exception:
        pass


def render_state(state: ViewState) -> str:
    """Render the error banner or the outfit blocks for the current state."""
    if state.error is not None:
        return f"Error: {state.error}"

    outfit = state.generated_outfit
    if outfit is None:
        return ""

    return (
        f"Image: {outfit.image_url}\n\n"
        "Outfit Description:\n"
        f"{outfit.description or ''}\n\n"
        "Image Generation Prompt:\n"
        f"{outfit.image_prompt or ''}"
    )


def run_session(orchestrator: OutfitOrchestrator, read=input, write=print) -> None:
    """Run the input loop until exit, EOF, or interrupt."""
    write(f"{TITLE}. (Type 'exit' to quit)\n")
    write(PLACEHOLDER)
    write("-" * 60)

    while True:

        try:
            text = read(f"{INPUT_LABEL}: ").strip()

        except EOFError:
            write("\nSession ended.")
            break

        except KeyboardInterrupt:
            write("\nInterrupted.")
            break

        if not text:
            continue

        if text.lower() in ("exit", "quit"):
            write("Shutting down.")
            break

        orchestrator.set_input(text)
        write(LOADING_TEXT)
        asyncio.run(orchestrator.submit())

        write("\n" + render_state(orchestrator.state))
        write("\n" + "-" * 60 + "\n")


def main():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_session(create_orchestrator())


if __name__ == "__main__":
    main()
