"""Seed value types, sections and defaults from a YAML file."""
import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

import yaml
from sqlalchemy.ext.asyncio import AsyncSession

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from template_config.config import get_settings
from template_config.dependencies import InfrastructureContainer
from template_config.repositories.default_repository import DefaultRepository
from template_config.repositories.section_repository import SectionRepository
from template_config.repositories.value_type_repository import ValueTypeRepository
from template_config.schema import apply_schema

DEFAULT_SEED_FILE = Path(__file__).parent.parent / "seeds" / "defaults.yaml"


async def seed_config(session: AsyncSession, data: dict[str, Any]) -> None:
    """Insert anything from *data* that is not in the database yet."""
    types = ValueTypeRepository(session)
    sections = SectionRepository(session)
    defaults = DefaultRepository(session)

    type_ids: dict[str, int] = {}
    for name in data.get("value_types", []):
        type_ids[name] = (await types.add(name)).id

    inserted = 0
    skipped = 0

    for section_data in data.get("sections", []):
        section = await sections.add(section_data["name"])
        for default in section_data.get("defaults", []):
            key = default["key"]
            if await defaults.find(section.id, key) is not None:
                print(f"  Skipping {section.name}.{key} (already exists)")
                skipped += 1
                continue

            type_name = default.get("type", "string")
            if type_name not in type_ids:
                type_ids[type_name] = (await types.add(type_name)).id

            await defaults.create(
                section_id=section.id,
                cfg_key=key,
                cfg_value=str(default["value"]),
                value_type_id=type_ids[type_name],
            )
            print(f"  Inserted {section.name}.{key}")
            inserted += 1

    await session.commit()
    print(f"\nSummary: {inserted} inserted, {skipped} skipped")


async def main(seed_file: Path) -> None:
    """Main entry point."""
    if not seed_file.exists():
        print(f"Seed file not found: {seed_file}")
        return

    with open(seed_file) as f:
        data = yaml.safe_load(f) or {}

    print(f"Seeding configuration from {seed_file}...")

    infra = InfrastructureContainer.from_settings(get_settings())
    try:
        await infra.verify()
        await apply_schema(infra.engine)
        async with infra.session_factory() as session:
            await seed_config(session, data)
    finally:
        await infra.close()
    print("Done!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("seed_file", nargs="?", type=Path, default=DEFAULT_SEED_FILE)
    args = parser.parse_args()
    asyncio.run(main(args.seed_file))
