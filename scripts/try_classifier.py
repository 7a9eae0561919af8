#!/usr/bin/env python3
"""
Try the classifier against a live language model.

Sends a handful of example questions through the same path as the chat
endpoint and shows which module each one lands on, and whether the model
answered or the keyword fallback did.

Usage:
    # Set your API key in .env file or export it
    export GEMINI_API_KEY="your-key-here"

    python scripts/try_classifier.py
    python scripts/try_classifier.py "Why is the sky blue?"
"""

import asyncio
import sys
from pathlib import Path

# Load .env file before anything else
from dotenv import load_dotenv
load_dotenv()
from rich.console import Console
from rich.table import Table

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from motionlab.config import Settings
from motionlab.engine import PhysicsTutor
from motionlab.logging_config import configure_logging

console = Console()

EXAMPLE_PROMPTS = [
    "Show me projectile motion with velocity 15 m/s and angle 60°",
    "Show me a spring with mass 2kg and spring constant 10 N/m",
    "Show me a pendulum with length 2m",
    "Show me a longitudinal wave with frequency 2Hz",
    "What is Newton's second law?",
]


async def main(prompts: list[str]):
    settings = Settings.from_env()
    configure_logging(settings.log_level, settings.log_json)

    if settings.api_key is None and not settings.offline:
        console.print(f"[yellow]No API key for {settings.provider.value}, keyword fallback only[/yellow]")

    tutor = PhysicsTutor(settings=settings)

    table = Table(title="Classifications")
    table.add_column("Prompt", style="cyan", max_width=40)
    table.add_column("Module")
    table.add_column("Inputs")
    table.add_column("Source")

    for prompt in prompts:
        result = await tutor.ask(prompt)
        payload = result.to_payload()
        inputs = ", ".join(f"{k}={v}" for k, v in payload["inputs"].items())
        table.add_row(prompt, payload["module"] or "-", inputs or "-", result.source)

    console.print(table)


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:] or EXAMPLE_PROMPTS))
