"""
Property repository for listing and creating rental properties.
Listing supports optional filters on city, owner, nightly price range and average rating.
"""

from lightbnb.repositories.base import BaseRepository, check_limit, with_float_rating
from lightbnb.schemas.property import PROPERTY_FIELDS, PropertyCreate, PropertySearchOptions
from lightbnb.utils.query_builder import BuiltQuery, FilteredQueryBuilder
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Union
import logging

logger = logging.getLogger(__name__)

SearchOptions = Union[PropertySearchOptions, Mapping[str, Any], None]

PROPERTIES_SELECT = """
SELECT properties.*, AVG(property_reviews.rating) AS average_rating
FROM properties
LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
"""

INSERT_PROPERTY = (
    f"INSERT INTO properties ({', '.join(PROPERTY_FIELDS)}) "
    f"VALUES ({', '.join(f':p{i}' for i in range(1, len(PROPERTY_FIELDS) + 1))}) "
    "RETURNING *;"
)


def to_cents(value: Any) -> int:
    """Convert a major-unit amount to integer cents."""
    return int((Decimal(str(value)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _truthy(value: Any) -> bool:
    return bool(value)


def _given(value: Any) -> bool:
    return value is not None


class _Filter(NamedTuple):
    option: str
    clause: str
    applies: Callable[[Any], bool]
    bind: Callable[[Any], Any]
    having: bool = False


# Order matters: it fixes which placeholder number each value gets.
# A rating of 0 still filters; zero or blank values of the other options are skipped.
PROPERTY_FILTERS = (
    _Filter("city", "LOWER(properties.city) LIKE {}", _truthy, lambda v: f"%{v.lower()}%"),
    _Filter("owner_id", "properties.owner_id = {}", _truthy, lambda v: v),
    _Filter("minimum_price_per_night", "properties.cost_per_night >= {}", _truthy, to_cents),
    _Filter("maximum_price_per_night", "properties.cost_per_night <= {}", _truthy, to_cents),
    _Filter("minimum_rating", "AVG(property_reviews.rating) >= {}", _given, lambda v: Decimal(str(v)), having=True),
)


def build_property_search(options: SearchOptions = None, limit: int = 10) -> BuiltQuery:
    """
    Build the filtered property listing query.

    Args:
        options: Search options; unknown keys are ignored
        limit: Maximum number of rows to return

    Returns:
        Statement text and its ordered parameters

    Raises:
        pydantic.ValidationError: If an option has an invalid value
        ValueError: If limit is not a positive integer
    """
    if not isinstance(options, PropertySearchOptions):
        options = PropertySearchOptions.model_validate(options or {})
    check_limit(limit)

    builder = FilteredQueryBuilder(
        select_from=PROPERTIES_SELECT,
        group_by="properties.id",
        order_by="properties.cost_per_night",
    )

    for flt in PROPERTY_FILTERS:
        value = getattr(options, flt.option)
        if not flt.applies(value):
            continue
        if flt.having:
            builder.having(flt.clause, flt.bind(value))
        else:
            builder.where(flt.clause, flt.bind(value))

    return builder.build(limit)


class PropertyRepository(BaseRepository):
    """Repository for the properties table."""

    async def get_all_properties(self, options: SearchOptions = None, limit: int = 10) -> List[Dict[str, Any]]:
        """
        List properties matching the given options, cheapest first.

        Args:
            options: Any of city, owner_id, minimum_price_per_night,
                     maximum_price_per_night (major units) and minimum_rating
            limit: Maximum number of properties to return

        Returns:
            Property rows, each with average_rating (float, or None without reviews)

        Raises:
            QueryFailed: If the query fails
        """
        query = build_property_search(options, limit)
        logger.debug(f"Property search with {len(query.params) - 1} filters, limit {limit}")

        rows = await self.fetch_all("get_all_properties", query.sql, query.params)
        return [with_float_rating(row) for row in rows]

    async def add_property(self, property_data: Union[PropertyCreate, Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """
        Add a property.

        Args:
            property_data: The 14 property fields; cost_per_night is in cents

        Returns:
            The inserted row including its generated id

        Raises:
            pydantic.ValidationError: If a field is missing or invalid
            QueryFailed: If the insert fails
        """
        if not isinstance(property_data, PropertyCreate):
            property_data = PropertyCreate.model_validate(property_data)

        created = await self.fetch_one("add_property", INSERT_PROPERTY, property_data.ordered_values())
        if created:
            logger.info(f"Created property: {created.get('title')} (ID: {created.get('id')})")
        return created
