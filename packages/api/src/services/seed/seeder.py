# This project was developed with assistance from AI tools.
"""Demo data seeding service.

Seeds the database with the clinic's sample owners, pet types, pets and
visits so the owner search has data to explore immediately after
deployment.

Simulated for demonstration purposes -- not real customer data.
"""

import json
import logging
from datetime import UTC, datetime

from db import DemoDataManifest, Owner, Pet, PetType, Visit
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .fixtures import OWNERS, PET_TYPES, PETS, compute_config_hash

logger = logging.getLogger(__name__)


async def _check_manifest(session: AsyncSession) -> DemoDataManifest | None:
    """Check if demo data has been seeded."""
    result = await session.execute(
        select(DemoDataManifest)
        .order_by(DemoDataManifest.id.desc())
        .limit(1)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def _clear_demo_data(session: AsyncSession) -> None:
    """Delete demo owners (pets and visits cascade) and the seeded pet types."""
    owner_keys = [(o["first_name"], o["last_name"], o["telephone"]) for o in OWNERS]

    owner_ids = []
    for first_name, last_name, telephone in owner_keys:
        result = await session.execute(
            select(Owner.id).where(
                Owner.first_name == first_name,
                Owner.last_name == last_name,
                Owner.telephone == telephone,
            )
        )
        owner_ids.extend(result.scalars().all())

    if owner_ids:
        pet_ids = list(
            (await session.execute(select(Pet.id).where(Pet.owner_id.in_(owner_ids))))
            .scalars()
            .all()
        )
        # Delete child records first (no FK cascade assumed)
        if pet_ids:
            await session.execute(delete(Visit).where(Visit.pet_id.in_(pet_ids)))
            await session.execute(delete(Pet).where(Pet.id.in_(pet_ids)))
        await session.execute(delete(Owner).where(Owner.id.in_(owner_ids)))

    # Pet types still referenced by non-demo pets are kept
    in_use = select(Pet.type_id)
    await session.execute(
        delete(PetType).where(PetType.name.in_(PET_TYPES), PetType.id.notin_(in_use))
    )

    await session.execute(delete(DemoDataManifest))

    logger.info("Cleared existing demo data")


async def _seed_pet_types(session: AsyncSession) -> dict[str, int]:
    """Create missing pet types and return name -> id for FK resolution."""
    existing = await session.execute(select(PetType).where(PetType.name.in_(PET_TYPES)))
    type_map = {t.name: t.id for t in existing.scalars().all()}

    created = []
    for name in PET_TYPES:
        if name not in type_map:
            pet_type = PetType(name=name)
            session.add(pet_type)
            created.append(pet_type)

    await session.flush()  # Get type IDs
    type_map.update({t.name: t.id for t in created})
    return type_map


async def seed_demo_data(session: AsyncSession, force: bool = False) -> dict:
    """Seed demo data. Returns summary dict.

    Args:
        session: Main DB session.
        force: If True, clear and re-seed even if already seeded.

    Returns:
        Summary dict with counts of seeded records, or
        ``status="already_seeded"`` when a manifest exists and force is False.
    """
    manifest = await _check_manifest(session)
    if manifest and not force:
        return {
            "status": "already_seeded",
            "seeded_at": manifest.seeded_at.isoformat(),
            "config_hash": manifest.config_hash,
        }

    if manifest and force:
        await _clear_demo_data(session)

    # 1. Pet types
    type_map = await _seed_pet_types(session)

    # 2. Owners
    owner_map: dict[str, Owner] = {}
    for o_data in OWNERS:
        owner = Owner(**{k: v for k, v in o_data.items() if k != "ref"})
        session.add(owner)
        owner_map[o_data["ref"]] = owner

    await session.flush()  # Get owner IDs

    # 3. Pets and their visits
    visits = 0
    for p_data in PETS:
        pet = Pet(
            name=p_data["name"],
            birth_date=p_data["birth_date"],
            type_id=type_map[p_data["type"]],
            owner_id=owner_map[p_data["owner_ref"]].id,
        )
        session.add(pet)
        await session.flush()  # Get pet.id

        for v_data in p_data.get("visits", []):
            session.add(Visit(pet_id=pet.id, **v_data))
            visits += 1

    # 4. Write manifest
    config_hash = compute_config_hash()
    summary = {
        "owners": len(OWNERS),
        "pet_types": len(type_map),
        "pets": len(PETS),
        "visits": visits,
    }
    session.add(DemoDataManifest(config_hash=config_hash, summary=json.dumps(summary)))

    await session.commit()

    logger.info("Demo data seeded: %s", summary)

    return {
        "status": "seeded",
        "seeded_at": datetime.now(UTC).isoformat(),
        "config_hash": config_hash,
        **summary,
    }


async def get_seed_status(session: AsyncSession) -> dict:
    """Check if demo data has been seeded."""
    manifest = await _check_manifest(session)
    if manifest is None:
        return {"seeded": False}
    return {
        "seeded": True,
        "seeded_at": manifest.seeded_at.isoformat(),
        "config_hash": manifest.config_hash,
        "summary": json.loads(manifest.summary) if manifest.summary else None,
    }
