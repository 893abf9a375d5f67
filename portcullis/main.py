"""Bot entry point.

Wiring only: logging, settings, run. No business logic here.
"""

from portcullis.bot.client import PortcullisBot
from portcullis.core.config import get_settings
from portcullis.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Configure logging and run the bot until interrupted."""
    setup_logging()
    settings = get_settings()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    bot = PortcullisBot(settings)
    # log_handler=None keeps the logging configured by setup_logging()
    bot.run(settings.discord_token.get_secret_value(), log_handler=None)


if __name__ == "__main__":
    main()
