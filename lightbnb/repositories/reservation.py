"""
Reservation repository for listing a guest's bookings.
"""

from lightbnb.repositories.base import BaseRepository, as_id, check_limit, with_float_rating
from typing import Any, Dict, List

RESERVATIONS_QUERY = """
SELECT
  reservations.*,
  properties.*,
  AVG(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = :p1
GROUP BY reservations.id, properties.id
ORDER BY reservations.start_date
LIMIT :p2;
"""


class ReservationRepository(BaseRepository):
    """Repository for the reservations table."""

    async def get_all_reservations(self, guest_id: int, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Get a guest's reservations, earliest first.

        Each row merges the reservation and property columns (the property's
        id wins on the shared `id` key) and adds the property's average_rating.

        Raises:
            ValueError: If guest_id is not an integer id or limit is not a positive integer
            QueryFailed: If the query fails
        """
        params = [as_id(guest_id, "guest_id"), check_limit(limit)]
        rows = await self.fetch_all("get_all_reservations", RESERVATIONS_QUERY, params)
        return [with_float_rating(row) for row in rows]
