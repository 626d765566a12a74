"""cli command running the reference example graph"""

import click

from weightdag.dag import DAG
from weightdag.weights import IntegerWeight, double_weight, triple_weight

from .options import common_options, dag_options
from .output import print_graph
from .utils.logging import logger


def build_demo_graph(dag: DAG):
    """Populate dag with the example graph and return its vertices by name."""
    names = ["a", "b", "c", "d", "e"]
    weights = [7, 9, 11, 9, 4]
    v = {name: dag.add_vertex(IntegerWeight(w)) for name, w in zip(names, weights)}

    for origin, destination, weight in [
        ("a", "b", 13),
        ("a", "c", 2),
        ("a", "d", 17),
        ("c", "b", 19),
        ("d", "b", 11),
        ("c", "e", 7),
    ]:
        dag.add_edge(v[origin], v[destination], IntegerWeight(weight))
    return v


@click.command(name="demo")
@common_options
@click.option("--table", "as_table", is_flag=True, help="Render dumps as tables.")
@click.pass_context
def demo(ctx, as_table: bool):
    """Build the example graph and print its longest path from a to b.

    Vertex weights count double, edge weights triple.
    """
    dag: DAG = DAG(options=dag_options(ctx))
    v = build_demo_graph(dag)

    if not dag.is_sorted():
        dag.order_vertices()

    print_graph(dag, as_table)

    result = dag.find_longest_path(v["a"], v["b"], double_weight, triple_weight)
    if result is not None:
        click.echo(f"Longest path: {result}")
    else:
        click.echo("No path exists")
    logger.debug("Demo finished")
