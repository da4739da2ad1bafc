import unittest
from unittest.mock import MagicMock, patch

import requests

from todo_app.client import HTTPError, RequestError, TodoClient
from todo_app.models import Task


def fake_response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


class TodoClientTestCase(unittest.TestCase):
    def setUp(self):
        self.client = TodoClient("127.0.0.1")

    def test_defaults(self):
        self.assertEqual(self.client.base_url, "http://127.0.0.1:6982")
        self.assertEqual(TodoClient("https://todo.example", 8080).base_url, "https://todo.example:8080")

    @patch("todo_app.client.requests.request")
    def test_get(self, mock_request):
        mock_request.return_value = fake_response(payload=[{"name": "a", "done": True}])
        self.assertEqual(self.client.get(), [Task("a", True)])
        mock_request.assert_called_once_with("GET", "http://127.0.0.1:6982/tasks", timeout=10)

    @patch("todo_app.client.requests.request")
    def test_add_sends_name_as_json_string(self, mock_request):
        mock_request.return_value = fake_response(201, {"name": "New Task", "done": False})
        task = self.client.add("New Task")
        self.assertEqual(task, Task("New Task"))
        mock_request.assert_called_once_with("POST", "http://127.0.0.1:6982/add", timeout=10, json="New Task")

    @patch("todo_app.client.requests.request")
    def test_done_looks_up_index_first(self, mock_request):
        mock_request.side_effect = [
            fake_response(payload=0),
            fake_response(payload={"name": "test", "done": True}),
        ]
        task = self.client.done("test")
        self.assertTrue(task.done)
        first, second = mock_request.call_args_list
        self.assertEqual(first.args, ("GET", "http://127.0.0.1:6982/index"))
        self.assertEqual(first.kwargs["json"], "test")
        self.assertEqual(second.args, ("POST", "http://127.0.0.1:6982/done"))
        self.assertEqual(second.kwargs["json"], 0)

    @patch("todo_app.client.requests.request")
    def test_remove_missing_task(self, mock_request):
        mock_request.return_value = fake_response(404, {"error": "NotFound: no task named 'x'"})
        with self.assertRaises(HTTPError) as ctx:
            self.client.remove("x")
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(mock_request.call_count, 1)

    @patch("todo_app.client.requests.request")
    def test_clear_and_clear_done(self, mock_request):
        mock_request.return_value = fake_response(200)
        self.client.clear()
        self.client.clear_done()
        paths = [c.args[1] for c in mock_request.call_args_list]
        self.assertEqual(paths, ["http://127.0.0.1:6982/clear", "http://127.0.0.1:6982/cleardone"])

    @patch("todo_app.client.requests.request")
    def test_connection_failure(self, mock_request):
        mock_request.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(RequestError):
            self.client.get()


if __name__ == "__main__":
    unittest.main()
