"""Command line access to the WordPress tools."""

import asyncio
import json
import logging
import sys

import click
from rich.console import Console
from rich.table import Table

import wpmcp.tools  # noqa: F401  (registers the tool catalog)
from wpmcp.context import set_tool_context
from wpmcp.models import ToolResponse
from wpmcp.registry import REGISTRY
from wpmcp.tools.context import ToolContext, create_context


async def run_tool(name: str, arguments: dict, context: ToolContext) -> ToolResponse:
    with set_tool_context(context):
        return await REGISTRY.invoke(name, arguments)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP requests")
def cli(verbose: bool):
    """Call WordPress REST API tools or serve them over MCP."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname).1s %(asctime)s %(filename)s:%(lineno)d - %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@cli.command("tools")
@click.argument("name", required=False)
def list_tools(name: str | None):
    """List registered tools, or print one tool's JSON schema."""
    if name:
        func_desc = REGISTRY.get_description(name)
        if func_desc is None:
            raise click.ClickException(f"Unknown tool: {name}")
        click.echo(json.dumps(func_desc.function_schema, indent=2))
        return

    table = Table(title=f"{len(REGISTRY.functions)} tools")
    table.add_column("Tool", style="cyan")
    table.add_column("Tags", style="dim")
    table.add_column("Description")
    for func_desc in REGISTRY.functions:
        table.add_row(
            func_desc.name,
            ", ".join(func_desc.tags),
            func_desc.description.split("\n")[0],
        )
    Console().print(table)


@cli.command("call")
@click.argument("name")
@click.option("--json", "json_input", default="{}", help="JSON object with the tool arguments")
def call_tool(name: str, json_input: str):
    """Invoke one tool and print its result text."""
    try:
        arguments = json.loads(json_input)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON: {e}") from e
    if not isinstance(arguments, dict):
        raise click.ClickException("Tool arguments must be a JSON object")

    response = asyncio.run(run_tool(name, arguments, create_context()))
    click.echo(response.text)
    if response.is_error:
        sys.exit(1)


@cli.command("serve")
def serve():
    """Serve all tools over MCP on stdio."""
    from wpmcp.adapters.fastmcp_main import build_server

    build_server().run()


def main():
    cli()


if __name__ == "__main__":
    main()
