# todo_app/cloud.py

import json
import logging

from .config import default_config_dir

logger = logging.getLogger(__name__)

CLOUD_FILE = "cloud.json"


def cloud_config_path(config_dir=None):
    return (config_dir or default_config_dir()) / CLOUD_FILE


def get_cloud_config(config_dir=None):
    """Return ``(host, port)`` of the linked server, or None when unlinked."""
    path = cloud_config_path(config_dir)
    if not path.exists():
        return None
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object in {path}")
    return data["host"], str(data["port"])


def save_cloud_config(host, port, config_dir=None):
    path = cloud_config_path(config_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump({"host": host, "port": str(port)}, f)
    logger.info("Linked server %s:%s (%s)", host, port, path)


def remove_cloud_config(config_dir=None):
    """Forget the linked server. Raises FileNotFoundError when not linked."""
    path = cloud_config_path(config_dir)
    path.unlink()
    logger.info("Unlinked server (%s)", path)
