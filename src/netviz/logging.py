import logging
import os
import sys
import json

LOG_LEVEL_ENV = "NETVIZ_LOG_LEVEL"


def get_logger(name: str = __name__, level: str | None = None) -> logging.Logger:
    """Return a logger writing one JSON object per line to stdout.

    The level comes from ``level``, then ``NETVIZ_LOG_LEVEL``, then INFO.
    Handlers are attached once per logger name.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stdout)
    fmt = json.dumps(
        {
            "ts": "%(asctime)s",
            "lvl": "%(levelname)s",
            "mod": "%(name)s",
            "fn": "%(funcName)s",
            "msg": "%(message)s",
        }
    )
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel((level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper())
    return logger
