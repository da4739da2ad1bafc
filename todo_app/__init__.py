"""
A to-do list HTTP API backed by a single in-process task store.
"""

import logging

from flask import Flask
from flask_cors import CORS

from .config import Config
from .services.task_store import TaskStore, reject_blank_names

logger = logging.getLogger(__name__)


def create_app(store=None, config=None):
    """App factory. Each app owns exactly one task store."""
    config = config or Config.from_env()
    if store is None:
        store = TaskStore(validator=reject_blank_names if config.reject_empty_names else None)

    app = Flask(__name__)
    app.config["TODO"] = config
    app.extensions["task_store"] = store

    CORS(app, origins=config.cors_origins)

    from .routes.tasks import tasks_bp
    app.register_blueprint(tasks_bp)

    logger.info("Task API ready (reject_empty_names=%s)", config.reject_empty_names)
    return app
