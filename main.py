import os
import logging
import argparse

from tenacity import retry, stop_after_attempt, wait_fixed

from core.config_loader import load_config, AppConfig
from core.feed.demo_jobs import DEMO_JOBS
from core.store import JOBS

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2))
def init_database(config: AppConfig):
    """Create tables, retrying while the database container starts up."""
    from database.database import make_engine, init_db

    logger.info("Initializing database...")
    try:
        init_db(make_engine(config.database.url))
        logger.info("Tables created or verified.")
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise


def seed_demo_jobs(config: AppConfig) -> int:
    """Insert the demo deck as live jobs. Jobs already present are skipped."""
    from core.app_context import AppContext

    store = AppContext.build_sql_store(config.database.url)
    created = 0
    for job in DEMO_JOBS:
        if store.get(JOBS, job.id) is not None:
            continue
        doc = job.to_document()
        doc['id'] = job.id
        store.create(JOBS, doc)
        created += 1

    logger.info(f"Seeded {created} demo jobs ({len(DEMO_JOBS) - created} already present)")
    return created


def serve(config: AppConfig, config_path: str):
    import uvicorn
    from web.backend.config import apply_web_overrides

    config = apply_web_overrides(config)

    # The app process reads its own config through web.backend.config
    os.environ['JOBSWIPE_CONFIG'] = os.path.abspath(config_path)

    logger.info(f"Starting JobSwipe Web Server on {config.web.host}:{config.web.port}")
    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


def main():
    parser = argparse.ArgumentParser(description="JobSwipe Main Driver")
    parser.add_argument('--mode', type=str, choices=['serve', 'init-db', 'seed-demo'], default='serve',
                        help='serve the API (default), create the tables, or load the demo jobs')
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the YAML configuration file')
    args = parser.parse_args()

    config = load_config(args.config)
    logger.info(f"Main driver starting in {args.mode.upper()} mode...")

    if args.mode == 'init-db':
        init_database(config)
    elif args.mode == 'seed-demo':
        init_database(config)
        seed_demo_jobs(config)
    else:
        serve(config, args.config)


if __name__ == "__main__":
    main()
