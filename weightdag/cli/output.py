"""Rendering of graph dumps for the terminal."""

import click
from rich.console import Console
from rich.table import Table

from weightdag.dag import DAG


def vertices_table(dag: DAG) -> Table:
    table = Table(title="Vertices")
    table.add_column("Identifier", justify="right")
    table.add_column("Weight", justify="right")
    for vertex in dag.vertices:
        table.add_row(str(vertex.id), str(vertex.weight))
    return table


def edges_table(dag: DAG) -> Table:
    table = Table(title="Edges")
    table.add_column("Origin", justify="right")
    table.add_column("Destination", justify="right")
    table.add_column("Weight", justify="right")
    for edge in dag.edges:
        table.add_row(str(edge.origin.id), str(edge.destination.id), str(edge.weight))
    return table


def print_graph(dag: DAG, as_table: bool = False) -> None:
    """Print the vertex and edge dumps of a graph, as plain lines or tables."""
    if as_table:
        console = Console()
        console.print(vertices_table(dag))
        console.print(edges_table(dag))
        return

    click.echo("Vertices:\n")
    for line in dag.dump_vertices():
        click.echo(line)
    click.echo()
    click.echo("Edges:\n")
    for line in dag.dump_edges():
        click.echo(line)
    click.echo()
