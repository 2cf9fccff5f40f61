import logging
import sys


class Log:
    """Process-wide logger for the originality service."""

    _logger: logging.Logger = logging.getLogger("originality")

    # Third-party loggers that are chatty at INFO (per request / per page).
    QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "pdfminer", "primp")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Attach a stdout handler at ``log_level`` and quiet noisy libraries."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            cls._logger.addHandler(handler)
        for name in cls.QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at ERROR with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
