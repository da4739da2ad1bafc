"""
Client for the to-do HTTP API.

Name based helpers (remove/done/undone) look the index up first and then act
on it. Those are two separate requests; another client may change the list in
between, in which case the second request hits whatever task now sits at
that index.
"""

import requests

from .config import DEFAULT_PORT
from .models.task import Task

DEFAULT_TIMEOUT = 10


class ApiError(Exception):
    pass


class HTTPError(ApiError):
    def __init__(self, status_code, detail=""):
        super().__init__(f"HTTP {status_code}{': ' + detail if detail else ''}")
        self.status_code = status_code
        self.detail = detail


class RequestError(ApiError):
    """The server could not be reached or sent back something unreadable."""


class TodoClient:
    def __init__(self, hostname: str, port=None, timeout=DEFAULT_TIMEOUT):
        if "://" not in hostname:
            hostname = f"http://{hostname}"
        self.hostname = hostname.rstrip("/")
        self.port = str(port) if port else str(DEFAULT_PORT)
        self.timeout = timeout

    @property
    def base_url(self):
        return f"{self.hostname}:{self.port}"

    def _request(self, method, path, payload=None):
        kwargs = {"timeout": self.timeout}
        if payload is not None:
            kwargs["json"] = payload
        try:
            response = requests.request(method, f"{self.base_url}{path}", **kwargs)
        except requests.RequestException as e:
            raise RequestError(str(e)) from e

        if not 200 <= response.status_code < 300:
            try:
                detail = response.json().get("error", "")
            except (ValueError, AttributeError):
                detail = ""
            raise HTTPError(response.status_code, detail)
        return response

    def _json(self, response):
        try:
            return response.json()
        except ValueError as e:
            raise RequestError(f"invalid JSON from server: {e}") from e

    def get(self):
        data = self._json(self._request("GET", "/tasks"))
        return [Task.from_dict(item) for item in data]

    def add(self, task_name: str) -> Task:
        return Task.from_dict(self._json(self._request("POST", "/add", task_name)))

    def get_index(self, task_name: str) -> int:
        return int(self._json(self._request("GET", "/index", task_name)))

    def remove(self, task_name: str) -> Task:
        index = self.get_index(task_name)
        return Task.from_dict(self._json(self._request("DELETE", "/remove", index)))

    def done(self, task_name: str) -> Task:
        index = self.get_index(task_name)
        return Task.from_dict(self._json(self._request("POST", "/done", index)))

    def undone(self, task_name: str) -> Task:
        index = self.get_index(task_name)
        return Task.from_dict(self._json(self._request("POST", "/undone", index)))

    def clear(self):
        self._request("DELETE", "/clear")

    def clear_done(self):
        self._request("DELETE", "/cleardone")
