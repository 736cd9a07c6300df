from __future__ import annotations

import logging

from .config import get_settings_module, load_settings
from .container import Container, build_container
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_container() -> Container:
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app_config = {
        "project_name": getattr(settings, "PROJECT_NAME"),
        "regular_hours_limit": getattr(settings, "REGULAR_HOURS_LIMIT"),
    }
    logger.debug("settings=%s regular_hours_limit=%s", get_settings_module(), app_config["regular_hours_limit"])

    return build_container(app_config=app_config)
