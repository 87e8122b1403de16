"""
Notes MCP Server - save, list and read markdown development notes.
Notes are flat files in a single directory (~/dev-notes by default).
"""

import sys
from typing import Optional

from mcp.server import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from dev_notes.config_loader import config
from dev_notes.logger import logger, setup_logging
from dev_notes.store import NoteStore
from dev_notes.tools import NoteTools, ToolResult


def _unwrap(result: ToolResult) -> str:
    # The SDK turns a raised ToolError into a result with isError set
    if result.is_error:
        raise ToolError(result.text)
    return result.text


def create_server(tools: Optional[NoteTools] = None) -> FastMCP:
    if tools is None:
        tools = NoteTools(NoteStore.from_config(config))

    server = FastMCP(config.get("server.name", "dev-notes-server"))

    @server.tool()
    def save_note(title: str = "", content: str = "") -> str:
        """
        Save a development note.

        Args:
            title: The title of the note (will be slugified to create filename)
            content: The markdown content of the note

        Returns:
            Confirmation with the saved filename
        """
        return _unwrap(tools.dispatch("save_note", {"title": title, "content": content}))

    @server.tool()
    def list_notes() -> str:
        """
        List all saved notes with their metadata, newest first.
        """
        return _unwrap(tools.dispatch("list_notes", {}))

    @server.tool()
    def read_note(title: str = "") -> str:
        """
        Read the content of a specific note.

        Args:
            title: The title of the note to read
        """
        return _unwrap(tools.dispatch("read_note", {"title": title}))

    return server


server = create_server()


def main():
    try:
        setup_logging()
        logger.info("Dev Notes MCP Server started and listening for requests...")
        server.run()
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
