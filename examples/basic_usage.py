"""Basic Pickup Mtaani client usage.

Reads PICKUP_MTAANI_API_KEY (and the other PICKUP_MTAANI_* settings) from the
environment or a .env file. Run with ``python examples/basic_usage.py``.
"""

from __future__ import annotations

import logging
import sys

from pickup_mtaani import (
    AuthenticationError,
    NotFoundError,
    PickupMtaaniClient,
    PickupMtaaniError,
    ValidationError,
)
from pickup_mtaani.schemas import PaginationParams, UpdateBusinessRequest

logger = logging.getLogger(__name__)


def run(client: PickupMtaaniClient) -> None:
    business = client.business.get()
    logger.info(f"Business {business.id}: {business.name} (wallet {business.wallet_balance})")

    zones = client.locations.get_zones()
    logger.info(f"Found {len(zones)} zones: {[zone.name for zone in zones]}")

    if zones:
        areas = client.locations.get_areas()
        logger.info(f"Found {len(areas)} areas, first five: {[area.name for area in areas[:5]]}")

    categories = client.business.get_categories(PaginationParams(page_number=0, page_size=10))
    logger.info(f"{categories.total_count} categories: {[category.name for category in categories.data]}")

    agents = client.agents.list()
    for agent in agents[:5]:
        logger.info(f"Agent {agent.id}: {agent.business_name} (location {agent.location_id})")

    client.business.update(UpdateBusinessRequest(name=business.name, phone_number=business.phone_number))
    logger.info("Business updated")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        with PickupMtaaniClient() as client:
            run(client)
    except AuthenticationError:
        logger.error("Authentication failed, check PICKUP_MTAANI_API_KEY")
        return 1
    except ValidationError as e:
        logger.error(f"Validation failed: {e} {e.validation_errors or ''}")
        return 1
    except NotFoundError as e:
        logger.error(f"Resource not found: {e}")
        return 1
    except PickupMtaaniError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
