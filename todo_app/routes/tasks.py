# todo_app/routes/tasks.py

import logging

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import InternalServerError

from ..services.errors import InvalidInput, TaskStoreError

logger = logging.getLogger(__name__)

tasks_bp = Blueprint("tasks", __name__)


def get_store():
    return current_app.extensions["task_store"]


BODY_TYPES = {str: "string", int: "integer"}


def _json_body(expected):
    # Clients such as curl --json do not always send the header Flask wants.
    body = request.get_json(force=True, silent=True)
    if isinstance(body, bool) or not isinstance(body, expected):
        raise InvalidInput(f"request body must be a JSON {BODY_TYPES[expected]}")
    return body


@tasks_bp.route("/tasks", methods=["GET"])
def get_tasks():
    tasks = get_store().list()
    return jsonify([task.to_dict() for task in tasks])


@tasks_bp.route("/add", methods=["POST"])
def add_task():
    name = _json_body(str)
    task, _ = get_store().add(name)
    return jsonify(task.to_dict()), 201


@tasks_bp.route("/remove", methods=["DELETE"])
def remove_task():
    index = _json_body(int)
    task = get_store().remove(index)
    return jsonify(task.to_dict())


@tasks_bp.route("/done", methods=["POST"])
def done_task():
    index = _json_body(int)
    return jsonify(get_store().mark_done(index).to_dict())


@tasks_bp.route("/undone", methods=["POST"])
def undone_task():
    index = _json_body(int)
    return jsonify(get_store().mark_undone(index).to_dict())


@tasks_bp.route("/clear", methods=["DELETE"])
def clear_tasks():
    get_store().clear()
    return "", 200


@tasks_bp.route("/cleardone", methods=["DELETE"])
def clear_done_tasks():
    get_store().clear_done()
    return "", 200


@tasks_bp.route("/index", methods=["GET"])
def get_index():
    name = _json_body(str)
    return jsonify(get_store().index_of(name))


@tasks_bp.app_errorhandler(TaskStoreError)
def handle_store_error(e):
    logger.info("%s %s rejected: %s", request.method, request.path, e)
    return jsonify(e.to_dict()), e.status_code


@tasks_bp.app_errorhandler(InternalServerError)
def handle_internal_error(e):
    original = getattr(e, "original_exception", None) or e
    logger.error(f"Error while handling {request.method} {request.path}: {original}", exc_info=original)
    return jsonify({"error": f"InternalError: {original}"}), 500
