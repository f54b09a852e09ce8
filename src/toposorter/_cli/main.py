import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from toposorter._errors import TopoSortError
from toposorter._indexed import sort_bfs, sort_dfs
from toposorter._io import GraphDocument, export_order_to_toml, load_graph_document
from toposorter._keyed import sort_keyed, validate_graph
from toposorter._vertex import IndexedNode, KeyedNode

from .config import ConfigError, Strategy, get_config
from .render import render_report

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Toposorter CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _sort_indexed(graph: dict[str, KeyedNode[str]], strategy: Strategy) -> list[str]:
    """Run an index-addressed sorter over a keyed graph and map back to keys."""
    index = {key: i for i, key in enumerate(graph)}
    nodes = [
        IndexedNode(key, [index[succ] for succ in vertex.successors])
        for key, vertex in graph.items()
    ]
    sorter = sort_bfs if strategy is Strategy.BFS else sort_dfs
    sorter(nodes)
    return [node.value for node in nodes]


def _load_document(path: Path) -> GraphDocument:
    try:
        return load_graph_document(path)
    except TopoSortError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def sort(
    graph_path: Annotated[
        Path,
        typer.Argument(help="Path to the graph TOML file"),
    ],
    *,
    strategy: Annotated[
        Strategy | None,
        typer.Option("-s", "--strategy", help="Sorter to run (default from [tool.toposorter], else keyed)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to output TOML file"),
    ] = None,
) -> None:
    """Print the vertices of a graph in topological order."""
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    strategy = strategy or config.strategy
    output = output or config.output

    document = _load_document(graph_path)
    graph = document.to_graph()
    logger.debug(f"Sorting {len(graph)} vertices with the {strategy} strategy")

    try:
        if strategy is Strategy.KEYED:
            order = sort_keyed(graph)
        else:
            order = _sort_indexed(graph, strategy)
    except TopoSortError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    for key in order:
        out_console.print(key, markup=False, highlight=False)

    if output is not None:
        export_order_to_toml(order, output)
        err_console.print(f"[cyan]Exported order to:[/cyan] {output}")


@app.command()
def check(
    graph_path: Annotated[
        Path,
        typer.Argument(help="Path to the graph TOML file"),
    ],
) -> None:
    """Report every cycle and extra root in a graph."""
    document = _load_document(graph_path)
    report = validate_graph(document.to_graph())
    render_report(report, err_console)
    if not report.success:
        raise typer.Exit(code=1)


def main() -> None:
    app()
