import click

from .commands.build import build_command
from .commands.endpoints import list_endpoints_command


@click.group()
def app() -> None:
    pass


app.add_command(build_command, name="build")
app.add_command(list_endpoints_command, name="endpoints")
__all__ = ["app"]
