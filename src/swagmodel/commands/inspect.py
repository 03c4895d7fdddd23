"""Inspect commands -- examine a document's API model.

Provides the ``swagmodel inspect`` sub-command group with read-only
commands for viewing the model built from a Swagger/OpenAPI document: paths
(operations), definitions, security schemes, servers, and general API info.
Every sub-command takes the document source (file path, URL, or ``-``),
builds the model, and presents the data in table or structured output format.
"""

from __future__ import annotations

from typing import Optional

import typer

from swagmodel.display import render_type
from swagmodel.exceptions import SwagmodelError
from swagmodel.models import ApiModel
from swagmodel.output import debug, error, format_response, info, print_table


inspect_app = typer.Typer(no_args_is_help=True)

_SOURCE_HELP = "Document file path, http(s) URL, or '-' for stdin."


def load_model(ctx: Optional[typer.Context], source: str) -> ApiModel:
    """Load *source* and build its :class:`~swagmodel.models.ApiModel`.

    The filename recorded on the model is derived from *source*; for stdin
    the configured ``parser.default_filename`` is used.

    Raises:
        typer.Exit: With the error's exit code when the document cannot be
            loaded or modeled.
    """
    from swagmodel.parser import load_spec, parse_document, source_filename
    from swagmodel.parser.extractor import DEFAULT_FILENAME

    default_filename = DEFAULT_FILENAME
    if ctx is not None and isinstance(ctx.obj, dict) and "config" in ctx.obj:
        default_filename = ctx.obj["config"].parser.default_filename

    debug(f"Loading document from {source}")
    try:
        raw = load_spec(source)
        return parse_document(raw, source_filename(source) or default_filename)
    except SwagmodelError as exc:
        error(f"Could not model {source}: {exc}")
        raise typer.Exit(code=exc.exit_code) from None


@inspect_app.command("paths")
def inspect_paths(
    ctx: typer.Context,
    source: str = typer.Argument(..., help=_SOURCE_HELP),
) -> None:
    """List all operations.

    Displays a table of every operation with its HTTP method, path, summary,
    parameter count, and declared response codes.

    Example::

        swagmodel inspect paths petstore.yaml
    """
    model = load_model(ctx, source)

    headers = ["Method", "Path", "Summary", "Params", "Responses"]
    rows: list[list[str]] = []
    for op in model.operations:
        rows.append([
            op.method.upper(),
            op.path,
            op.summary or "-",
            str(len(op.parameters)),
            ", ".join(op.responses) or "-",
        ])

    print_table(
        headers, rows, title=f"{model.info.title or model.filename} -- Paths ({len(rows)})"
    )


@inspect_app.command("definitions")
def inspect_definitions(
    ctx: typer.Context,
    source: str = typer.Argument(..., help=_SOURCE_HELP),
) -> None:
    """List all named definitions and their property types.

    One row per property, with the type rendered as a type name
    (``Long``, ``List<Pet>``, ``String?``).

    Example::

        swagmodel inspect definitions petstore.yaml
    """
    model = load_model(ctx, source)

    if not model.definitions:
        info("No definitions in this document.")
        return

    headers = ["Definition", "Property", "Type", "Required"]
    rows: list[list[str]] = []
    for name, definition in model.definitions.items():
        if not definition.props:
            rows.append([name, "-", "-", ""])
        for prop in definition.props_list:
            rows.append([
                name,
                prop.name,
                render_type(prop.effective_type),
                "Yes" if prop.required else "",
            ])

    print_table(
        headers, rows, title=f"Definitions ({len(model.definitions)})"
    )


@inspect_app.command("auth")
def inspect_auth(
    ctx: typer.Context,
    source: str = typer.Argument(..., help=_SOURCE_HELP),
) -> None:
    """Show security schemes declared by the document.

    Example::

        swagmodel inspect auth petstore.yaml
    """
    model = load_model(ctx, source)

    if not model.security_definitions:
        info("No security schemes defined.")
        return

    headers = ["Name", "Type", "Field", "Location", "Description"]
    rows: list[list[str]] = []
    for key, scheme in model.security_definitions.items():
        rows.append([
            key,
            scheme.type or "-",
            scheme.name or "-",
            scheme.location or "-",
            (scheme.description or "-")[:60],
        ])

    print_table(headers, rows, title="Security Schemes")


@inspect_app.command("servers")
def inspect_servers(
    ctx: typer.Context,
    source: str = typer.Argument(..., help=_SOURCE_HELP),
) -> None:
    """Show servers with their URL templates and resolved URLs.

    Example::

        swagmodel inspect servers petstore.yaml
    """
    model = load_model(ctx, source)

    if not model.servers:
        info("No servers declared.")
        return

    headers = ["URL", "Template", "Description", "Variables"]
    rows: list[list[str]] = []
    for server in model.servers:
        rows.append([
            server.url,
            server.template,
            server.description or "-",
            ", ".join(f"{v.name}={v.default}" for v in server.variables.values()) or "-",
        ])

    print_table(headers, rows, title="Servers")


@inspect_app.command("info")
def inspect_info(
    ctx: typer.Context,
    source: str = typer.Argument(..., help=_SOURCE_HELP),
) -> None:
    """Show API info (title, version, description, counts).

    Example::

        swagmodel inspect info petstore.yaml
    """
    model = load_model(ctx, source)

    data: dict = {
        "title": model.info.title,
        "version": model.info.version,
        "document_version": model.version,
        "description": model.info.description or "-",
        "servers": [s.url for s in model.servers],
        "paths": len(model.paths),
        "operations": len(model.operations),
        "definitions": len(model.definitions),
        "security_schemes": list(model.security_definitions),
    }

    if model.info.contact.email:
        data["contact"] = model.info.contact.email
    if model.info.license.name:
        data["license"] = model.info.license.name

    format_response(data)
