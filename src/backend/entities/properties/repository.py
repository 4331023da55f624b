"""Property inserts."""

import logging

from entities.shared.protocols import SqlExecutor
from models import NewProperty, RowResult

logger = logging.getLogger(__name__)

PROPERTY_COLUMNS: tuple[str, ...] = (
    "title",
    "description",
    "number_of_bedrooms",
    "number_of_bathrooms",
    "parking_spaces",
    "cost_per_night",
    "thumbnail_photo_url",
    "cover_photo_url",
    "street",
    "country",
    "city",
    "province",
    "post_code",
    "owner_id",
)

_INSERT_PROPERTY = (
    f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)})\n"
    f"VALUES ({', '.join(f'${i}' for i in range(1, len(PROPERTY_COLUMNS) + 1))})\n"
    "RETURNING *"
)


async def add_property(executor: SqlExecutor, prop: NewProperty) -> RowResult:
    """
    Add a property.

    Values are bound by column name, so the order of keys in the
    incoming payload does not matter.

    Args:
        executor: Database handle.
        prop: All of the property details.

    Returns:
        ``RowResult`` with the inserted property row, or ``error``.
    """
    values = prop.model_dump()
    params = [values[column] for column in PROPERTY_COLUMNS]

    result = await executor.execute(_INSERT_PROPERTY, params)
    if not result.success:
        logger.error("Adding property '%s' failed: %s", prop.title, result.error)
    else:
        logger.info("Added property '%s' for owner %s", prop.title, prop.owner_id)
    return RowResult.from_query(result)
