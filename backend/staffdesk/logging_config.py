"""Console logging setup for the backend process."""
import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Repeated calls (tests build many apps) leave existing handlers alone.
    """

    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
