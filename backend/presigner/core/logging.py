import logging
import sys

from presigner.core.config import Settings

_configured = False


def configure_logging(settings: Settings) -> None:
    global _configured
    if _configured:
        return
    level = settings.log_level.upper()
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Lambda installs its own root handler, which makes basicConfig a no-op
    logging.getLogger().setLevel(level)
    _configured = True
