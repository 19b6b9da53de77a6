import logging
import sys
from typing import Annotated
from dishka import Provider, provide, Scope, FromComponent
from core.environment.config import Settings

LOGGER_NAME = "explorer_api_tests"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure console logging once and return the suite logger.

    Parameters
    ----------
    level : str
        Root logging level name

    Returns
    -------
    logging.Logger
        Suite logger
    """
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level.upper(),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.StreamHandler(sys.stdout)
            ]
        )

    return logging.getLogger(LOGGER_NAME)


class LoggerProvider(Provider):
    """
    Provider for logging configuration and logger instances.

    Configures logging to output to console (stdout) at the configured level.
    """
    component = "logger"

    @provide(scope=Scope.APP)
    def get_logger(
        self,
        settings: Annotated[Settings, FromComponent("environment")]
    ) -> logging.Logger:
        """
        Provide configured logger instance.

        Parameters
        ----------
        settings : Settings
            Suite settings

        Returns
        -------
        logging.Logger
            Configured logger that writes to console
        """
        return configure_logging(settings.log_level)
