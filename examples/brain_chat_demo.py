"""Minimal demonstration of the conversation agent against the live Brain API."""

import asyncio

from brain_chat.api.service import ask, get_default_refresher, get_display_counters


async def main() -> None:
    await get_default_refresher().refresh_once()
    print("Counters:", get_display_counters())
    for question in ["priority", "what did I ship last week", "thread: 42"]:
        reply = await ask(question)
        print("User:", question)
        print("Brain:", reply["content"] if reply else None)


if __name__ == "__main__":
    asyncio.run(main())
