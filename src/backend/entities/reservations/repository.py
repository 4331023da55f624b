"""Reservation queries."""

import logging

from entities.property_search.builder import DEFAULT_LIMIT
from entities.shared.protocols import SqlExecutor
from models import RowsResult

logger = logging.getLogger(__name__)

# Reviews are inner-joined, so properties without reviews drop out of the listing.
# reservations.id and properties.id share the name "id"; properties.* comes last,
# so each row's "id" is the property id and the reservation id is not returned.
_SELECT_GUEST_RESERVATIONS = """
SELECT DISTINCT reservations.*, properties.*, avg(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON properties.id = reservations.property_id
JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = $1
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date
LIMIT $2
"""


async def get_all_reservations(
    executor: SqlExecutor,
    guest_id: int,
    limit: int = DEFAULT_LIMIT,
) -> RowsResult:
    """
    Get all reservations for a single user, earliest start date first.

    Each row merges the reservation with its property and the property's
    average rating.

    Args:
        executor: Database handle.
        guest_id: The id of the user.
        limit: Maximum number of reservations to return.

    Returns:
        ``RowsResult`` with the reservation rows.
    """
    result = await executor.execute(_SELECT_GUEST_RESERVATIONS, [guest_id, limit])
    if not result.success:
        logger.error("Reservation lookup for guest %s failed: %s", guest_id, result.error)
    return RowsResult.from_query(result)
