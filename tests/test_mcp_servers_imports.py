import ast
from pathlib import Path

SERVER_DIR = Path(__file__).parent.parent / "src" / "mcp_server"


def test_servers_use_mcp_package():
    py_files = list(SERVER_DIR.glob("*_server.py"))
    assert py_files, "No server files found"
    for p in py_files:
        tree = ast.parse(p.read_text(encoding="utf-8"))
        imports = [n for n in tree.body if isinstance(n, (ast.Import, ast.ImportFrom))]
        found = any(
            isinstance(imp, ast.ImportFrom) and imp.module and imp.module.startswith("mcp.server")
            for imp in imports
        )
        assert found, f"{p} does not import from 'mcp.server'"


def test_servers_expose_main_entry_point():
    for p in SERVER_DIR.glob("*_server.py"):
        tree = ast.parse(p.read_text(encoding="utf-8"))
        functions = {n.name for n in tree.body if isinstance(n, ast.FunctionDef)}
        assert "main" in functions, f"{p} has no main()"
