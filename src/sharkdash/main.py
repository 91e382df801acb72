"""
Main entry point for Shark Dash.

Loads settings from the environment / ``.env`` and launches the pygame
simulator window.
"""

import asyncio
import logging
import sys


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_simulator() -> None:
    """Run the desktop version."""
    from sharkdash.simulator.window import SimulatorWindow

    window = SimulatorWindow()
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv
    from pydantic import ValidationError

    from sharkdash.config.settings import get_settings

    # Load environment variables
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"Invalid settings: {e}")
        sys.exit(2)

    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("Shark Dash starting...")

    try:
        asyncio.run(run_simulator())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Shark Dash stopped")


if __name__ == "__main__":
    main()
