"""Example: drive the roster service without any UI.

A presentation layer would call the same methods from its button handlers and
re-render from ``on_change``.
"""

import asyncio

from attendance_tracker.main import create_app


async def main():
    container = await create_app("development")
    roster = container.roster_service

    roster.mark_present("Ravi")
    roster.add_worker("Gopal", "600")

    for row in roster.report().rows:
        print(row)

    await roster.close()


if __name__ == "__main__":
    asyncio.run(main())
