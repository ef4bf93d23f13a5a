#!/usr/bin/env python
"""Seed lookup data: categories, project types, stages and a staff account.

Usage:
    python scripts/seed_reference_data.py

Rows are matched by name (email for staff) and skipped when already present.
"""

import asyncio
import sys

from dotenv import load_dotenv
from sqlalchemy import select

load_dotenv()


CATEGORIES = ["Research", "Community Outreach", "Software"]
PROJECT_TYPES = ["Thesis", "Internship", "Capstone"]

# Stage name -> requirement descriptions, in stage order
STAGES = [
    ("Proposal", ["Submit abstract", "Advisor sign-off"]),
    ("Development", ["Mid-term progress report"]),
    ("Defense", ["Final document", "Presentation slides"]),
]

DEFAULT_STAFF = {"name": "Coordinator", "email": "coordinator@example.com"}


async def seed() -> None:
    """Seed reference rows into the configured database."""
    import os

    from app.schemas.projects import Category, ProjectType
    from app.schemas.seasons import Requirement, Stage
    from app.schemas.staff import Staff
    from app.utils.db_async import build_engine, build_session_factory, init_db

    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        print("ERROR: DATABASE_URL not configured")
        sys.exit(1)

    engine = build_engine(database_url)
    await init_db(engine)
    session_factory = build_session_factory(engine)

    added = 0
    skipped = 0
    async with session_factory() as session:
        for model, names in ((Category, CATEGORIES), (ProjectType, PROJECT_TYPES)):
            for name in names:
                existing = await session.scalar(
                    select(model).where(model.name == name)  # type: ignore[attr-defined]
                )
                if existing:
                    print(f"  SKIP: {model.__tablename__} {name!r}")
                    skipped += 1
                    continue
                session.add(model(name=name))
                print(f"  ADD: {model.__tablename__} {name!r}")
                added += 1

        for position, (stage_name, requirements) in enumerate(STAGES, start=1):
            existing_stage = await session.scalar(
                select(Stage).where(Stage.name == stage_name)  # type: ignore[arg-type]
            )
            if existing_stage:
                print(f"  SKIP: stage {stage_name!r}")
                skipped += 1
                continue
            stage = Stage(name=stage_name, position=position)
            stage.requirements = [Requirement(description=text) for text in requirements]
            session.add(stage)
            print(f"  ADD: stage {stage_name!r} ({len(requirements)} requirement(s))")
            added += 1

        existing_staff = await session.scalar(
            select(Staff).where(Staff.email == DEFAULT_STAFF["email"])  # type: ignore[arg-type]
        )
        if existing_staff:
            print(f"  SKIP: staff {DEFAULT_STAFF['email']}")
            skipped += 1
        else:
            session.add(Staff(**DEFAULT_STAFF))
            print(f"  ADD: staff {DEFAULT_STAFF['email']}")
            added += 1

        await session.commit()
        print(f"\nSeeding complete: {added} added, {skipped} skipped")

    await engine.dispose()


if __name__ == "__main__":
    print("Seeding reference data...")
    asyncio.run(seed())
