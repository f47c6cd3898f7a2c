#!/usr/bin/env python3
"""
Form Engine Example - fill and submit a form without the web UI.

Loads examples/contact_schema.json, submits it empty (rejected), fills
the required fields and submits again (accepted).

Usage:
    python examples/submit_example.py
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from schema_form import FormEngine, read_schema_file


SCHEMA_PATH = Path(__file__).parent / "contact_schema.json"


async def main():
    logging.basicConfig(level=logging.INFO)

    engine = FormEngine(submit_delay=0.2)
    result = engine.load_schema(read_schema_file(SCHEMA_PATH))
    if not result.is_valid:
        print(f"Schema error: {result.error_message}")
        return

    for control in engine.controls():
        print(f"  [{control.kind.value}] {control.display_label}")

    outcome = await engine.submit()
    print(f"\nEmpty submit: {outcome.status.value} {outcome.errors}")

    engine.set_value("name", "Ada Lovelace")
    print(f"email -> {engine.set_value('email', 'not-an-email')!r}")
    engine.set_value("email", "ada@example.com")

    outcome = await engine.submit()
    print(f"Filled submit: {outcome.status.value}, submitted={engine.state.is_submitted}")


if __name__ == "__main__":
    asyncio.run(main())
