import logging
from typing import Optional

from vidmerge.core.config.settings import settings

_CONFIGURED = False

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once with a consistent, readable format.
    Falls back to LOG_LEVEL (env) and then INFO.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    log_level_name = (level or settings.LOG_LEVEL or "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _CONFIGURED = True
