import asyncio
import logging
from pathlib import Path
from .config import load_settings
from .db import ensure_schema, make_engine

logger = logging.getLogger(__name__)

async def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()
    if settings.database_url.startswith("sqlite"):
        Path("./data").mkdir(parents=True, exist_ok=True)

    engine = make_engine(settings)
    try:
        await ensure_schema(engine)
    finally:
        await engine.dispose()
    logger.info("init_db_done database_url=%s", settings.database_url)

if __name__ == "__main__":
    asyncio.run(main())
