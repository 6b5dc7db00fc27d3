# Standard library imports
from collections.abc import Iterable

# Third-party imports
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicdesk.models.complaints.department import Department
from civicdesk.models.complaints.enums import ComplaintCategory


def pick_department(catalog: Iterable[Department], category: ComplaintCategory | str) -> Department | None:
    """First department in the catalog registered for ``category``, or None."""
    wanted = ComplaintCategory(category)
    for department in catalog:
        if ComplaintCategory(department.category) == wanted:
            return department
    return None


async def resolve_department(db: AsyncSession, category: ComplaintCategory | str) -> Department | None:
    """
    Route a complaint category to a department.

    Takes a snapshot of the departments registered for the category and
    returns the first one (oldest first). No department is not an error;
    the complaint simply stays unassigned.
    """
    result = await db.execute(
        select(Department)
        .where(Department.category == ComplaintCategory(category))
        .order_by(Department.created_at, Department.name)
    )
    return pick_department(result.scalars().all(), category)
