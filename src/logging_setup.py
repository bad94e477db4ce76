import logging


def setup_logging(level: int = logging.INFO, filename: str = "app.log") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        filename=filename,
    )
