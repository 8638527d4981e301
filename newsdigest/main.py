"""
Worker process entry point.

Loads environment, configures logging, ensures the schema exists and runs
the pipeline until SIGINT or SIGTERM.

Dependencies: python-dotenv, newsdigest.workers
System role: `newsdigest-worker` console script

Usage:
    newsdigest-worker
    # or
    python -m newsdigest.main
"""

import asyncio
import contextlib
import signal

from dotenv import load_dotenv

from newsdigest.boundary.db.connection import get_async_engine
from newsdigest.boundary.db.create_tables import create_all_tables
from newsdigest.configs import Settings, get_settings
from newsdigest.observability import configure_logging, get_logger
from newsdigest.workers.orchestrator import PipelineOrchestrator

logger = get_logger(__name__)


async def run_pipeline(settings: Settings) -> None:
    """
    Create tables and run the orchestrator until a stop signal arrives.

    Args:
        settings: Application settings
    """
    await create_all_tables()

    orchestrator = PipelineOrchestrator(settings)
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # Signal handlers are unavailable on Windows event loops
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, orchestrator.stop)

    try:
        await orchestrator.run()
    finally:
        await get_async_engine().dispose()


def main() -> None:
    """Console script entry point."""
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info(f"{__name__}:main - Starting worker ({settings.environment})")
    asyncio.run(run_pipeline(settings))
    logger.info(f"{__name__}:main - Worker exited")


if __name__ == "__main__":
    main()
