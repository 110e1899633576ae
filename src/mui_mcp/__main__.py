"""MUI MCP Server entry point."""

import sys


def _cli() -> None:
    """CLI dispatcher: server (default), list, or search subcommand."""
    if len(sys.argv) >= 2 and sys.argv[1] == "list":
        from mui_mcp.query import format_component_list

        print(format_component_list())
    elif len(sys.argv) >= 2 and sys.argv[1] == "search":
        if len(sys.argv) < 3:
            print("Usage: mui-mcp search <query>", file=sys.stderr)
            sys.exit(2)
        from mui_mcp.query import format_search, search

        print(format_search(search(" ".join(sys.argv[2:]))))
    else:
        from mui_mcp.server import main

        main()


if __name__ == "__main__":
    _cli()
