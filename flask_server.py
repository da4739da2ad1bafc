"""
Runs the to-do list API:

    GET /tasks, POST /add, DELETE /remove, POST /done, POST /undone,
    DELETE /clear, DELETE /cleardone, GET /index
"""

import logging

from todo_app import create_app
from todo_app.config import Config

logger = logging.getLogger(__name__)


def main():
    config = Config.from_env()
    logging.basicConfig(level=config.log_level)

    app = create_app(config=config)
    store = app.extensions["task_store"]
    logger.info("Serving tasks on %s:%s", config.host, config.port)
    try:
        # One thread per request; the store does its own locking.
        app.run(host=config.host, port=config.port, threaded=True, use_reloader=False)
    finally:
        store.close()


if __name__ == '__main__':
    main()
