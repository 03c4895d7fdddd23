"""Dump command -- print a document's complete API model as JSON.

The JSON mirrors :class:`~swagmodel.models.ApiModel` field for field (using
``schema`` for parameter and response types) and is what external code
generators are expected to consume.
"""

from __future__ import annotations

import typer

from swagmodel.commands.inspect import load_model
from swagmodel.output import print_json


def dump_command(
    ctx: typer.Context,
    source: str = typer.Argument(
        ..., help="Document file path, http(s) URL, or '-' for stdin."
    ),
) -> None:
    """Build the model for SOURCE and print it as JSON.

    Example::

        swagmodel dump petstore.yaml
        swagmodel -o model.json dump https://petstore.swagger.io/v2/swagger.json
    """
    model = load_model(ctx, source)
    print_json(model.model_dump(mode="json", by_alias=True))
