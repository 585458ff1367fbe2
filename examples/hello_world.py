"""
clockzones — Hello World

Pick a few timezones from the bundled catalog, save them, and watch
their clocks tick for a few seconds.
"""

import asyncio

from clockzones import Ticker, TimezoneManager, load_catalog
from clockzones.stores import SQLiteStore
from clockzones.views import build_face


def show(projected) -> None:
    face = build_face(projected, radius=100, roman=True)
    hour, minute, second = face.hands
    print(
        f"  {projected.digital}  "
        f"hour={hour.angle:6.2f}  minute={minute.angle:6.2f}  second={second.angle:6.2f}  "
        f"face={face.palette.background}"
    )


async def main():
    # ──────────────────────────────────────
    #  1. Create the manager
    # ──────────────────────────────────────
    manager = TimezoneManager(SQLiteStore(":memory:"), catalog=load_catalog())
    await manager.open()

    # ──────────────────────────────────────
    #  2. Search the catalog and save a few
    # ──────────────────────────────────────
    for query in ("pacific standard", "kolkata", "kathmandu", "tokyo"):
        for entry in manager.search_catalog(query):
            await manager.add_from_catalog(entry)

    await manager.create(
        value="Lord Howe",
        abbreviation="LHST",
        offset_hours=10.5,
        description="(UTC+10:30) Lord Howe Island",
        utc="Australia/Lord_Howe",
    )

    # ──────────────────────────────────────
    #  3. The main list
    # ──────────────────────────────────────
    print("\n=== Saved timezones ===")
    for row in await manager.rows():
        print(f"  {row.digital}  {row.name:<28} {row.utc_label}")

    # Note the quarter-hour offset of Kathmandu is labelled :00.

    # ──────────────────────────────────────
    #  4. A live clock
    # ──────────────────────────────────────
    (tokyo,) = await manager.list_timezones("tokyo")
    print(f"\n=== {tokyo.value} ===")
    ticker = Ticker(manager.projector, tokyo.offset_hours, show, interval=1.0)
    await ticker.run(ticks=3)

    # ──────────────────────────────────────
    #  5. Delete one
    # ──────────────────────────────────────
    await manager.remove(tokyo)
    print(f"\nRemaining: {[r.value for r in await manager.list_timezones()]}")

    await manager.close()


if __name__ == "__main__":
    asyncio.run(main())
