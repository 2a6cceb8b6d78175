import typer

from stubwright.common import bus
from stubwright.needle import L, needle
from .rendering import CliRenderer

from .commands.generate import generate_command

app = typer.Typer(
    name="stubwright",
    help=needle.get(L.cli.app.description),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=needle.get(L.cli.option.verbose.help)
    ),
):
    # The CLI is the composition root. It decides *which* renderer to use.
    bus.set_renderer(CliRenderer(verbose=verbose))


app.command(name="generate", help=needle.get(L.cli.command.generate.help))(
    generate_command
)


if __name__ == "__main__":
    app()
