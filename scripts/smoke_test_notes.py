import asyncio
import os
import sys
import tempfile

from mcp.client.session import ClientSession
from mcp.client.stdio import StdioServerParameters, stdio_client

# Each entry: (tool, args, expect_error)
SCENARIO = [
    (
        "save_note",
        {
            "title": "Test Note",
            "content": "# My Test Note\n\nThis is a test note created by the test script.",
        },
        False,
    ),
    (
        "save_note",
        {"title": "API Design Ideas", "content": "## REST vs GraphQL\n\nBoth have trade-offs..."},
        False,
    ),
    ("list_notes", {}, False),
    ("read_note", {"title": "Test Note"}, False),
    ("read_note", {"title": "Does Not Exist"}, True),
    ("invalid_tool", {}, True),
]


async def run_smoke_test(notes_dir: str) -> int:
    print("--- Dev Notes MCP Server smoke test ---")
    print(f"Notes directory: {notes_dir}")

    env = os.environ.copy()
    env["DEV_NOTES_DIR"] = notes_dir
    params = StdioServerParameters(
        command=sys.executable, args=["-m", "mcp_server.notes_server"], env=env
    )

    failures = 0
    async with stdio_client(params) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            tools = await session.list_tools()
            print(f"Tools: {', '.join(t.name for t in tools.tools)}")

            for tool, args, expect_error in SCENARIO:
                result = await session.call_tool(tool, args)
                text = "\n".join(getattr(c, "text", "") for c in result.content)
                ok = bool(result.isError) == expect_error
                failures += 0 if ok else 1
                print(f"\n{'✅' if ok else '❌'} {tool} {args if args else ''}")
                print(text)

    print(f"\n--- {len(SCENARIO) - failures}/{len(SCENARIO)} steps behaved as expected ---")
    return 1 if failures else 0


def main() -> int:
    with tempfile.TemporaryDirectory(prefix="dev-notes-") as notes_dir:
        return asyncio.run(run_smoke_test(notes_dir))


if __name__ == "__main__":
    sys.exit(main())
