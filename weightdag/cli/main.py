"""weightdag CLI"""

import click

from weightdag import __version__
from weightdag.cli.demo import demo
from weightdag.cli.describe import describe, longest_path

from .options import debug_option


@click.group()
@click.version_option(__version__, prog_name="weightdag")
@debug_option
@click.pass_context
def cli(ctx):
    """
    Build weighted DAGs and search them for longest paths.
    """
    ctx.ensure_object(dict)


cli.add_command(demo)
cli.add_command(describe)
cli.add_command(longest_path)

if __name__ == "__main__":
    cli(obj={})
