import sys
import logging
import random
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent))

from wss_engine.core.events import EventBus
from wss_game.config import SurvivalConfig
from wss_game.items import EffectContext, ItemDatabase, ItemEvent
from wss_game.world import Cell


def main():
    config = SurvivalConfig(start_gold=3, log_level="INFO")
    config.configure_logging()
    logger = logging.getLogger("DataVerification")

    bus = EventBus()
    bus.subscribe_all(ItemEvent, lambda e: logger.info(e["message"]))

    try:
        db = ItemDatabase(Path(config.data_path))

        logger.info("Loading item records...")
        db.load()

        for item_id in ("spring", "canteen", "berries", "merchant"):
            assert item_id in db, f"Missing item record: {item_id}"

        # Walk the player over one cell holding every item
        supplies = config.new_supplies()
        cell = Cell("forest", [db.get(item_id) for item_id in db.ids()])
        context = EffectContext(rng=random.Random(), events=bus)

        removed = cell.collect_items(supplies, context)
        assert len(removed) == 2, "canteen and berries should be consumed"
        assert len(cell.items) == 2, "spring and merchant should stay"

        food, water, gold = supplies.snapshot()
        logger.info(f"Supplies after collection: food={food} water={water} gold={gold}")
        logger.info("VERIFICATION SUCCESSFUL: All item records loaded and applied.")

    except Exception as e:
        logger.error(f"VERIFICATION FAILED: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
