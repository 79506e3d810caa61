"""Entry point and scheduler for the outlet listing sync."""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv(Path.cwd() / ".env")

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from outlet_scraper.catalog import sort_products
from outlet_scraper.config import get_outlet_url, get_sync_interval_minutes
from outlet_scraper.models import SortOption
from outlet_scraper.store import ProductStore

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

TOP_DEALS = 5


def run_sync(store: ProductStore) -> None:
    """Refresh the product list and log the best deals."""
    result = store.sync()
    if not result.is_live:
        logger.warning("Showing sample data: %s", result.message)

    for product in sort_products(store.products, SortOption.DISCOUNT)[:TOP_DEALS]:
        logger.info(
            "-%d%%  %.2f zł (was %.2f%s)  %s",
            product.savings_percentage,
            product.discounted_price,
            product.original_price,
            ", estimated" if product.original_price_estimated else "",
            product.name[:70],
        )


def main() -> None:
    """Run one sync immediately, then re-sync on a fixed interval."""
    store = ProductStore()
    interval_minutes = get_sync_interval_minutes()

    logger.info("Outlet sync started for %s", get_outlet_url())
    logger.info("Scheduler: every %d min", interval_minutes)

    run_sync(store)

    scheduler = BlockingScheduler()
    scheduler.add_job(
        run_sync,
        args=[store],
        trigger=IntervalTrigger(minutes=interval_minutes),
        id="outlet_sync",
        max_instances=1,          # Prevent overlapping runs
        misfire_grace_time=300,
    )
    scheduler.start()


if __name__ == "__main__":
    main()
