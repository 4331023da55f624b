"""
Property search execution.

Builds the filtered search query and runs it against the injected executor.
"""

import logging

from entities.property_search.builder import DEFAULT_LIMIT, build_property_search_query
from entities.shared.protocols import SqlExecutor
from models import PropertySearchCriteria, RowsResult

logger = logging.getLogger(__name__)


async def get_all_properties(
    executor: SqlExecutor,
    criteria: PropertySearchCriteria | None = None,
    limit: int = DEFAULT_LIMIT,
) -> RowsResult:
    """
    Get properties matching the search criteria, cheapest first.

    Args:
        executor: Database handle.
        criteria: Optional filters; ``None`` applies no filter.
        limit: Maximum number of properties to return.

    Returns:
        ``RowsResult`` with one row per property, each carrying ``average_rating``.
    """
    search = build_property_search_query(criteria, limit)
    logger.debug("Property search query: %s params=%s", search.query_text, search.params)

    result = await executor.execute(search.query_text, search.params)
    if not result.success:
        logger.error("Property search failed: %s", result.error)
    return RowsResult.from_query(result)
