"""cli commands analysing graphs described in YAML"""

from pathlib import Path
from typing import Optional

import click

from weightdag.model import BuildResult, GraphDescription, GraphDescriptionError
from weightdag.weights import Scale

from .options import common_options, dag_options
from .output import print_graph
from .utils.logging import logger


def load_graph(ctx: click.Context, graph: str) -> BuildResult:
    try:
        description = GraphDescription.from_yaml(Path(graph))
    except GraphDescriptionError as e:
        raise click.ClickException(str(e)) from e

    result = description.build(dag_options(ctx))
    for origin, destination in result.rejected:
        click.echo(
            f"Skipped edge {origin} -> {destination}: it would create a cycle",
            err=True,
        )
    result.dag.order_vertices()
    return result


@click.command(name="describe")
@common_options
@click.argument("graph", type=click.Path(exists=True, dir_okay=False))
@click.option("--table", "as_table", is_flag=True, help="Render dumps as tables.")
@click.pass_context
def describe(ctx, graph: str, as_table: bool):
    """Print the vertices of GRAPH in topological order, and its edges."""
    result = load_graph(ctx, graph)
    logger.debug(f"Loaded {len(result.dag)} vertices from {graph}")
    print_graph(result.dag, as_table)


@click.command(name="longest-path")
@common_options
@click.argument("graph", type=click.Path(exists=True, dir_okay=False))
@click.option("--from", "start", required=True, help="Name of the start vertex.")
@click.option("--to", "goal", required=True, help="Name of the goal vertex.")
@click.option(
    "--vertex-factor",
    type=float,
    default=None,
    help="Multiply vertex weights by this factor.",
)
@click.option(
    "--edge-factor",
    type=float,
    default=None,
    help="Multiply edge weights by this factor.",
)
@click.option("--route", is_flag=True, help="Also print the vertices on the path.")
@click.pass_context
def longest_path(
    ctx,
    graph: str,
    start: str,
    goal: str,
    vertex_factor: Optional[float],
    edge_factor: Optional[float],
    route: bool,
):
    """Print the weight of the heaviest path between two vertices of GRAPH."""
    result = load_graph(ctx, graph)

    for name in (start, goal):
        if name not in result.vertices:
            raise click.BadParameter(f"Unknown vertex '{name}'")

    vertex_fn = Scale(vertex_factor) if vertex_factor is not None else None
    edge_fn = Scale(edge_factor) if edge_factor is not None else None

    path = result.dag.find_longest_route(
        result.vertices[start], result.vertices[goal], vertex_fn, edge_fn
    )
    if path is None:
        click.echo("No path exists")
        return

    click.echo(f"Longest path: {path.weight}")
    if route:
        names = {vertex.id: name for name, vertex in result.vertices.items()}
        click.echo("Route: " + " -> ".join(names[i] for i in path.ids))
