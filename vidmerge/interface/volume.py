import logging
from typing import Union

from vidmerge.core.config.settings import settings

logger = logging.getLogger(__name__)

def parse_volume(text: Union[str, float, None]) -> float:
    """
    Operator input -> gain. Anything that doesn't parse becomes the default.
    Parsed values are passed through unclamped.
    """
    if text is None:
        return settings.DEFAULT_VOLUME
    try:
        return float(str(text).strip())
    except ValueError:
        logger.warning(f"Unparseable volume {text!r}, using {settings.DEFAULT_VOLUME}")
        return settings.DEFAULT_VOLUME
