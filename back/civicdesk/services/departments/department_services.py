# Standard library imports
from uuid import UUID

# Third-party imports
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicdesk.core.monitoring.logging import get_logger
from civicdesk.models.complaints.department import Department
from civicdesk.models.complaints.enums import ComplaintCategory

logger = get_logger(__name__)

DEFAULT_DEPARTMENTS: dict[ComplaintCategory, str] = {
    ComplaintCategory.INFRASTRUCTURE: "Public Works Department",
    ComplaintCategory.UTILITIES: "Water & Power Utilities",
    ComplaintCategory.SANITATION: "Sanitation Department",
    ComplaintCategory.TRAFFIC: "Traffic Management",
    ComplaintCategory.PUBLIC_SAFETY: "Public Safety Office",
    ComplaintCategory.ENVIRONMENT: "Environmental Services",
    ComplaintCategory.HEALTH: "Public Health Department",
    ComplaintCategory.OTHER: "Citizen Services Desk",
}


async def list_departments(db: AsyncSession) -> list[Department]:
    result = await db.execute(select(Department).order_by(Department.name))
    return list(result.scalars().all())


async def get_department(db: AsyncSession, department_id: UUID) -> Department | None:
    result = await db.execute(select(Department).where(Department.id == department_id))
    return result.scalar_one_or_none()


async def seed_default_departments(db: AsyncSession) -> int:
    """
    Create one department per category when the catalog is empty.

    Returns:
        The number of departments created (0 if the catalog already had entries).
    """
    result = await db.execute(select(func.count(Department.id)))
    if result.scalar():
        logger.info("Department catalog already populated.")
        return 0

    db.add_all(Department(name=name, category=category) for category, name in DEFAULT_DEPARTMENTS.items())
    await db.commit()
    logger.info(f"Seeded {len(DEFAULT_DEPARTMENTS)} default departments.")
    return len(DEFAULT_DEPARTMENTS)
