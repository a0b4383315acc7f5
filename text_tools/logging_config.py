import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Route all text-tools logging to a single stderr handler."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
