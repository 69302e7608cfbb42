from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_CHECKOUT_TIME_FORMAT
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    firestore_config = dict(getattr(settings, "FIRESTORE_CONFIG", {}))
    if app.config["DEBUG"]:
        logger.info(
            "settings=%s project=%s collection=%s",
            settings_module,
            firestore_config.get("project_id") or "<from credentials>",
            firestore_config.get("collection"),
        )

    if container is None:
        container = build_container(
            firestore_config=firestore_config,
            timezone=getattr(settings, "TIMEZONE", None),
            checkout_time_format=getattr(settings, "CHECKOUT_TIME_FORMAT", DEFAULT_CHECKOUT_TIME_FORMAT),
        )

    register_students(app, container)

    return app
