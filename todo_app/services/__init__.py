from .errors import TaskStoreError, InvalidInput, IndexOutOfRange, NotFound
from .task_store import TaskStore, reject_blank_names

__all__ = [
    "TaskStore",
    "TaskStoreError",
    "InvalidInput",
    "IndexOutOfRange",
    "NotFound",
    "reject_blank_names",
]
