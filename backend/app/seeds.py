"""
Aviary Backend — Seed Data
============================

What:  The initial bird records and the code that loads them into the store.
Why:   Birds are only ever created by seeding; the HTTP surface is read-only.
How:   seed_birds() inserts records in order when the table is empty, so
       running it on every startup is safe.
When:  FastAPI lifespan (SEED_ON_STARTUP) or `python -m app.seeds [FILE]`.

Seed file format (SEED_FILE):
    [
        {"name": "Grackle", "species": "Quiscalus Quiscula"},
        ...
    ]
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import SeedDataError
from app.models.bird import Bird
from app.schemas.bird import BirdSeed
from app.services.bird_service import bird_service

logger = logging.getLogger(__name__)

DEFAULT_BIRDS: List[Dict[str, Any]] = [
    {"name": "Black-Capped Chickadee", "species": "Poecile Atricapillus"},
    {"name": "Grackle", "species": "Quiscalus Quiscula"},
    {"name": "Common Starling", "species": "Sturnus Vulgaris"},
    {"name": "Mourning Dove", "species": "Zenaida Macroura"},
]


def parse_seed_records(raw: Any, source: str = "<memory>") -> List[BirdSeed]:
    """
    Validate decoded seed data.

    How:   Each entry goes through BirdSeed, which forbids keys other than
           name and species. Both keys may be missing. The first bad entry
           stops parsing and its index is kept in the error context.

    Args:
        raw: Decoded JSON (or DEFAULT_BIRDS-style dicts)
        source: Where raw came from, for error messages

    Returns:
        BirdSeed records in input order

    Raises:
        SeedDataError: raw is not a list, or an entry is not a name/species object
    """
    if not isinstance(raw, list):
        raise SeedDataError(
            message=f"Seed data must be a JSON array, got {type(raw).__name__}",
            source=source,
        )

    records = []
    for index, entry in enumerate(raw):
        try:
            records.append(BirdSeed.model_validate(entry))
        except ValidationError as e:
            raise SeedDataError(
                message=f"Seed entry {index} is invalid: {e.errors()[0]['msg']}",
                source=source,
                context={"index": index},
            ) from e
    return records


def load_seed_file(path: str) -> List[BirdSeed]:
    """
    Read and validate a JSON seed file.

    Args:
        path: Path to a UTF-8 file holding a JSON array

    Returns:
        BirdSeed records in file order

    Raises:
        SeedDataError: File missing, not JSON, or rejected by parse_seed_records
    """
    seed_path = Path(path)
    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SeedDataError(message=f"Seed file not found: {path}", source=path) from e
    except json.JSONDecodeError as e:
        raise SeedDataError(
            message=f"Seed file is not valid JSON: {e.msg} (line {e.lineno})",
            source=path,
        ) from e
    return parse_seed_records(raw, source=path)


async def seed_birds(
    db: AsyncSession,
    records: Optional[Sequence[Any]] = None,
) -> int:
    """
    Insert seed birds into an empty store.

    Args:
        db: Async database session; the caller commits
        records: BirdSeed objects or name/species dicts; DEFAULT_BIRDS when None

    Returns:
        Number of birds inserted (0 when the store already has rows)

    Raises:
        SeedDataError: records fail validation
        DatabaseError: The store could not be counted
    """
    seeds = parse_seed_records(list(DEFAULT_BIRDS if records is None else records))

    existing = await bird_service.count_birds(db)
    if existing:
        logger.info("Bird store already holds %d birds; skipping seed", existing)
        return 0

    # One add per record, in order, so ids follow the seed order
    for seed in seeds:
        db.add(Bird(name=seed.name, species=seed.species))
        await db.flush()

    logger.info("Seeded %d birds", len(seeds))
    return len(seeds)


async def run_seed(seed_file: Optional[str] = None) -> int:
    """
    Seed the configured database in its own session and commit.

    Used by the lifespan hook and the command line, which have no request
    session to borrow.

    Args:
        seed_file: JSON seed file; the built-in DEFAULT_BIRDS when None

    Returns:
        Number of birds inserted
    """
    from app.database import async_session_factory

    records = load_seed_file(seed_file) if seed_file else None
    async with async_session_factory() as session:
        inserted = await seed_birds(session, records)
        await session.commit()
    return inserted


def main(argv: Optional[List[str]] = None) -> None:
    """
    Command-line entry point: python -m app.seeds [SEED_FILE] [--create-tables].

    How:   Runs run_seed() in a fresh event loop and disposes the engine
           before the loop closes. SEED_FILE defaults to the SEED_FILE setting.

    Args:
        argv: Arguments without the program name; sys.argv[1:] when None
    """
    from app.config import settings
    from app.database import create_tables, dispose_engine

    parser = argparse.ArgumentParser(description="Seed the Aviary bird store.")
    parser.add_argument(
        "seed_file",
        nargs="?",
        default=settings.seed_file,
        help="JSON array of {name, species} objects (default: built-in birds)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    async def _run() -> int:
        try:
            if args.create_tables:
                await create_tables()
            return await run_seed(args.seed_file)
        finally:
            await dispose_engine()

    inserted = asyncio.run(_run())
    logger.info("Done: %d birds inserted", inserted)


if __name__ == "__main__":
    main()
