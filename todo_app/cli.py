"""
Command line front-end for the to-do list.

Runs against the linked server when one is configured (``todo connect``),
otherwise against a task store living inside this process only.
"""

import argparse
import logging
import shlex
import sys
from contextlib import contextmanager
from pathlib import Path

from .client import HTTPError, RequestError, TodoClient
from .cloud import get_cloud_config, remove_cloud_config, save_cloud_config
from .config import DEFAULT_PORT
from .services.errors import InvalidInput, NotFound
from .services.task_store import TaskStore

logger = logging.getLogger(__name__)


class CommandError(Exception):
    pass


class LocalBackend:
    def __init__(self, store=None):
        self.store = store or TaskStore()

    def list(self):
        return self.store.list()

    def exists(self, name):
        try:
            self.store.index_of(name)
        except NotFound:
            return False
        return True

    def add(self, name):
        task, _ = self.store.add(name)
        return task

    def remove(self, name):
        return self.store.remove(self.store.index_of(name))

    def done(self, name):
        return self.store.mark_done(self.store.index_of(name))

    def undone(self, name):
        return self.store.mark_undone(self.store.index_of(name))

    def clear(self):
        self.store.clear()

    def clear_done(self):
        self.store.clear_done()


class RemoteBackend:
    def __init__(self, client):
        self.client = client

    def list(self):
        return self.client.get()

    def exists(self, name):
        try:
            self.client.get_index(name)
        except HTTPError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    def add(self, name):
        return self.client.add(name)

    def remove(self, name):
        return self.client.remove(name)

    def done(self, name):
        return self.client.done(name)

    def undone(self, name):
        return self.client.undone(name)

    def clear(self):
        self.client.clear()

    def clear_done(self):
        self.client.clear_done()


@contextmanager
def reporting(name=""):
    """Turn store and API failures into the messages users see."""
    suffix = f" for task {name}" if name else ""
    try:
        yield
    except NotFound as e:
        raise CommandError(f"Task {name} not found!") from e
    except InvalidInput as e:
        raise CommandError(f"Invalid task name {name!r}: {e}") from e
    except HTTPError as e:
        if e.status_code == 404 and name:
            raise CommandError(f"Task {name} not found!") from e
        raise CommandError(f"HTTP error code {e.status_code}{suffix}!") from e
    except RequestError as e:
        raise CommandError(f"Failed to connect to the server{suffix}!") from e


def _require_tasks(args):
    if not args.tasks:
        raise CommandError("No tasks specified!")


def cmd_add(args, backend):
    _require_tasks(args)
    for name in args.tasks:
        with reporting(name):
            if backend.exists(name):
                raise CommandError(f"Task {name} already exists!")
            backend.add(name)


def cmd_remove(args, backend):
    _require_tasks(args)
    for name in args.tasks:
        with reporting(name):
            backend.remove(name)


def cmd_done(args, backend):
    _require_tasks(args)
    for name in args.tasks:
        with reporting(name):
            backend.done(name)


def cmd_undone(args, backend):
    _require_tasks(args)
    for name in args.tasks:
        with reporting(name):
            backend.undone(name)


def cmd_clear(args, backend):
    with reporting():
        if args.done:
            backend.clear_done()
        else:
            backend.clear()


def cmd_clear_done(args, backend):
    print("clear-done is deprecated. Use clear -d instead.")
    args.done = True
    cmd_clear(args, backend)


def cmd_list(_, backend):
    with reporting():
        tasks = backend.list()
    print("\nCurrent tasks:")
    for task in tasks:
        mark = "x" if task.done else " "
        print(f"[{mark}] {task.name}")


def cmd_connect(args, _):
    port = args.port or str(DEFAULT_PORT)
    try:
        save_cloud_config(args.host, port, args.config_dir)
    except OSError as e:
        raise CommandError("Unable to save server configuration.") from e
    print("Successfully linked server.")


def cmd_disconnect(args, _):
    try:
        remove_cloud_config(args.config_dir)
    except FileNotFoundError as e:
        raise CommandError("You're already unlinked!") from e
    except OSError as e:
        raise CommandError(f"Unable to save configuration: {e}.") from e
    print("Successfully unlinked server.")


def cmd_shell(args, backend):
    parser = build_parser()
    local = backend if isinstance(backend, LocalBackend) else LocalBackend()
    print("Interactive mode. Type 'exit' or 'quit' to end.")
    while True:
        try:
            line = input("todo> ").strip()
        except EOFError:
            print()
            break
        if line.lower() in ("exit", "quit"):
            break
        if not line:
            continue
        try:
            sub_args = parser.parse_args(shlex.split(line))
        except (SystemExit, ValueError):
            continue
        if sub_args.func is cmd_shell:
            print("Already in interactive mode.")
            continue
        if sub_args.config_dir is None:
            sub_args.config_dir = args.config_dir
        code = run_command(sub_args, backend)
        if code == 0 and sub_args.func in (cmd_connect, cmd_disconnect):
            backend = _relink(sub_args.config_dir, local)


def _relink(config_dir, local):
    # The session's local store survives a connect/disconnect round trip.
    backend = make_backend(config_dir)
    return local if isinstance(backend, LocalBackend) else backend


# Commands after which the task list is not printed again.
QUIET_COMMANDS = {cmd_list, cmd_connect, cmd_disconnect, cmd_shell}


def build_parser():
    p = argparse.ArgumentParser(prog="todo", description="Manage a to-do list locally or on a linked server.")
    p.add_argument("-v", "--verbose", action="store_true", help="log store operations")
    p.add_argument("--config-dir", type=_path, default=None, help="where the server link is kept")
    sub = p.add_subparsers(dest="cmd", required=True)

    for name, func, help_text in (
        ("add", cmd_add, "add tasks"),
        ("remove", cmd_remove, "remove tasks"),
        ("done", cmd_done, "mark tasks as done"),
        ("undone", cmd_undone, "mark tasks as not done"),
    ):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("tasks", nargs="*")
        sp.set_defaults(func=func)

    clear = sub.add_parser("clear", help="remove all tasks")
    clear.add_argument("-d", "--done", action="store_true", help="only remove tasks that are done")
    clear.set_defaults(func=cmd_clear)

    clear_done = sub.add_parser("clear-done", help="deprecated, use clear -d")
    clear_done.set_defaults(func=cmd_clear_done)

    sub.add_parser("list", help="show tasks").set_defaults(func=cmd_list)

    connect = sub.add_parser("connect", help="link a task server")
    connect.add_argument("host")
    connect.add_argument("port", nargs="?")
    connect.set_defaults(func=cmd_connect)

    sub.add_parser("disconnect", help="unlink the task server").set_defaults(func=cmd_disconnect)
    sub.add_parser("shell", help="run several commands against one session").set_defaults(func=cmd_shell)
    return p


def _path(raw):
    return Path(raw).expanduser()


def make_backend(config_dir=None):
    try:
        linked = get_cloud_config(config_dir)
    except (OSError, ValueError, KeyError) as e:
        print(f"Warning: Failed to read cloud config: {e}. Proceeding with local mode.", file=sys.stderr)
        linked = None
    if linked is None:
        return LocalBackend()
    host, port = linked
    return RemoteBackend(TodoClient(host, port))


def run_command(args, backend) -> int:
    try:
        args.func(args, backend)
        if args.func not in QUIET_COMMANDS:
            cmd_list(args, backend)
    except CommandError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    backend = make_backend(args.config_dir)
    return run_command(args, backend)


if __name__ == "__main__":
    sys.exit(main())
