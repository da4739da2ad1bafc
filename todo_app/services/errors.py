# todo_app/services/errors.py


class TaskStoreError(Exception):
    """Base class for failures reported by the task store."""

    status_code = 500

    @property
    def kind(self):
        return type(self).__name__

    def to_dict(self):
        return {"error": f"{self.kind}: {self}"}


class InvalidInput(TaskStoreError):
    """Malformed or rejected request payload."""

    status_code = 400


class IndexOutOfRange(TaskStoreError):
    """The index does not name a task that currently exists."""

    status_code = 404


class NotFound(TaskStoreError):
    """No task has the requested name."""

    status_code = 404
