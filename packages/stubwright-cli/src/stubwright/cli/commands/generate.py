from typing import List, Optional

import typer

from stubwright.common import bus
from stubwright.needle import L, needle
from stubwright.spec import (
    BatchSizeMismatchError,
    ConfigurationError,
    DescriptorError,
)
from stubwright.cli.factories import make_app


def generate_command(
    variants: Optional[int] = typer.Option(
        None,
        "--variants",
        "-n",
        min=0,
        help=needle.get(L.cli.option.variants.help),
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help=needle.get(L.cli.option.output.help)
    ),
    descriptor: Optional[List[str]] = typer.Option(
        None, "--descriptor", "-d", help=needle.get(L.cli.option.descriptor.help)
    ),
):
    app_instance = make_app()
    try:
        app_instance.run_from_config(
            variants_per_method=variants,
            output_path=output,
            descriptors=descriptor,
        )
    except BatchSizeMismatchError as e:
        bus.error(L.error.batch.mismatch, error=e)
        raise typer.Exit(code=1)
    except DescriptorError as e:
        bus.error(L.error.descriptor, error=e)
        raise typer.Exit(code=1)
    except ConfigurationError as e:
        bus.error(L.error.config, error=e)
        raise typer.Exit(code=1)
    except OSError as e:
        bus.error(L.error.filesystem, error=e)
        raise typer.Exit(code=1)
