from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container, build_store
from .storage.repository import CollectionStore
from .students.controller import register as register_students
from .sync.controller import register as register_sync
from .system.controller import register as register_system

DEFAULT_MAX_CONTENT_LENGTH = 50 * 1024 * 1024


def create_app(*, store: Optional[CollectionStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "JSON_MAX_BYTES", DEFAULT_MAX_CONTENT_LENGTH))
    app.json.sort_keys = False

    log_level = getattr(settings, "LOG_LEVEL", "INFO")
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    app.logger.setLevel(log_level)

    backend = getattr(settings, "STORAGE_BACKEND", "file")
    data_dir = getattr(settings, "DATA_DIR")
    if store is None:
        store = build_store(backend=backend, data_dir=data_dir)

    if app.config["DEBUG"]:
        app.logger.info(
            "[institute-sync] settings=%s storage=%s data_dir=%s",
            settings_module,
            type(store).__name__,
            data_dir,
        )

    container = build_container(
        store=store,
        api_token=getattr(settings, "API_TOKEN"),
        admin_password=getattr(settings, "ADMIN_PASSWORD"),
    )

    register_system(app, container)
    register_sync(app, container)
    register_students(app, container)
    register_attendance(app, container)

    return app
