"""
Data Seeder for WorkTime.
Fills the store with a few weeks of realistic entries for demo purposes.
"""

import asyncio
import sys
import random
from datetime import datetime, timedelta, date
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.domain.models import TimeEntry
from app.infra.db import init_db
from app.infra.repository import WorkStateRepository

PROJECTS = ["", "Website", "Customer Support", "Internal", "Migration"]
NOTES = ["", "", "Team meeting", "Bugfixing", "Code review", "Planning"]


def build_entries(days: int = 21, today: date = None):
    """Weekday entries for the past `days` days, most of them with a lunch break"""
    today = today or date.today()
    entries = []
    for offset in range(days, 0, -1):
        day = today - timedelta(days=offset)
        if day.weekday() > 4:
            continue
        start = datetime.combine(day, datetime.min.time()) + timedelta(
            hours=random.choice([7, 8, 8, 9]), minutes=random.choice([0, 15, 30, 45])
        )
        end = start + timedelta(hours=random.choice([6, 8, 8, 9]), minutes=random.randint(0, 59))
        entries.append(TimeEntry(
            date=day,
            start_time=start,
            end_time=end,
            break_duration=random.choice([0, 30, 30, 45, 60]),
            project=random.choice(PROJECTS),
            notes=random.choice(NOTES),
        ))
    return entries


async def seed():
    print("Starting data seeding...")
    await init_db()

    repo = WorkStateRepository()
    existing = await repo.load_entries()
    entries = build_entries()
    await repo.save_entries(existing + entries)

    print(f"Added {len(entries)} entries ({len(existing)} already present).")


if __name__ == "__main__":
    asyncio.run(seed())
