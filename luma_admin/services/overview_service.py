"""
Overview service.

Platform-wide counts and revenue for the admin dashboard.
"""

import asyncio
import logging
import math
from typing import Any, Dict, Iterable, Mapping, Union

from google.cloud.firestore import AsyncClient

from luma_admin.database import collections

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _to_number(value: Any) -> Number:
    """Coerce an order total to a number; anything non-numeric is 0."""
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return 0
    else:
        return 0

    if isinstance(number, float) and not math.isfinite(number):
        return 0
    return number


def compute_revenue(orders: Iterable[Mapping[str, Any]]) -> Number:
    """
    Sum order totals, subtracting returns.

    A return contributes -abs(total) regardless of the sign it was stored
    with.

    Args:
        orders: Order documents with "total" and optional "isReturn"

    Returns:
        Signed revenue total
    """
    revenue: Number = 0
    for order in orders:
        total = _to_number(order.get("total"))
        revenue += -abs(total) if order.get("isReturn") else total

    # Whole amounts go out as 60, not 60.0
    if isinstance(revenue, float) and revenue.is_integer() and abs(revenue) < 2 ** 53:
        return int(revenue)
    return revenue


class OverviewService:
    """
    Aggregates events, vendors and orders.

    Full collection scans with no pagination; fine while the platform is
    small.
    """

    def __init__(self, db: AsyncClient):
        """
        Initialize OverviewService.

        Args:
            db: Async Firestore client
        """
        self._db = db

    async def _count(self, query) -> int:
        results = await query.count(alias="total").get()
        return int(results[0][0].value) if results and results[0] else 0

    async def _fetch_orders(self) -> list:
        snapshots = await self._db.collection_group(collections.SUBCOLLECTION_ORDERS).get()
        return [snapshot.to_dict() or {} for snapshot in snapshots]

    async def get_overview(self) -> Dict[str, Any]:
        """
        Get dashboard totals.

        Returns:
            Dict with totalEvents, totalVendors, totalOrders, totalRevenue
        """
        total_events, total_vendors, orders = await asyncio.gather(
            self._count(self._db.collection(collections.COLLECTION_EVENTS)),
            self._count(self._db.collection_group(collections.SUBCOLLECTION_VENDORS)),
            self._fetch_orders(),
        )

        return {
            "totalEvents": total_events,
            "totalVendors": total_vendors,
            "totalOrders": len(orders),
            "totalRevenue": compute_revenue(orders),
        }
