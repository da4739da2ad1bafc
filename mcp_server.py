"""
MCP Server Wrapping the To-Do API (`mcp_server.py`)

Indices are positions in the list at the moment they were read. Another
client may shift them before the next call.
"""

from urllib.parse import urlsplit

from mcp.server.fastmcp import FastMCP

from todo_app.client import TodoClient
from todo_app.config import Config

# Initialize MCP server
mcp = FastMCP("To-Do API MCP Server")


def get_client() -> TodoClient:
    url = urlsplit(Config.from_env().api_url)
    return TodoClient(f"{url.scheme or 'http'}://{url.hostname}", url.port)


@mcp.resource("todo://list")
def list_tasks() -> list:
    """Fetch all tasks from the to-do API."""
    return [task.to_dict() for task in get_client().get()]


@mcp.tool()
def add_task(name: str) -> dict:
    """Add a new task via the to-do API."""
    return get_client().add(name).to_dict()


@mcp.tool()
def find_task(name: str) -> int:
    """Return the current index of the first task with this exact name."""
    return get_client().get_index(name)


@mcp.tool()
def remove_task(name: str) -> dict:
    """Remove the first task with this name."""
    return get_client().remove(name).to_dict()


@mcp.tool()
def mark_done(name: str) -> dict:
    """Mark the first task with this name as done."""
    return get_client().done(name).to_dict()


@mcp.tool()
def mark_undone(name: str) -> dict:
    """Mark the first task with this name as not done."""
    return get_client().undone(name).to_dict()


@mcp.tool()
def clear_tasks() -> str:
    """Remove every task."""
    get_client().clear()
    return "All tasks removed."


@mcp.tool()
def clear_done_tasks() -> str:
    """Remove every task that is done."""
    get_client().clear_done()
    return "Done tasks removed."


if __name__ == "__main__":
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
