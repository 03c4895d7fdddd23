"""swagmodel -- Model Swagger 2.0 and OpenAPI 3.0 documents for code generation.

This package turns an already-decoded Swagger 2.0 or OpenAPI 3.0.0/3.0.1
document into a frozen, strongly-typed :class:`~swagmodel.models.ApiModel`:
servers, security schemes, paths and operations, parameters, responses, and
named type definitions. Code generators consume the model instead of the raw
document.

Typical usage::

    from swagmodel.parser import load_spec, parse_document

    model = parse_document(load_spec("petstore.yaml"), "petstore.yaml")
    model.paths["/pets"].methods["get"].responses["200"].int_code   # 200

Or from the command line::

    swagmodel inspect definitions petstore.yaml
    swagmodel dump petstore.yaml > model.json

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the entire package.
    parser: Loading, navigation, type resolution, and model assembly.
    display: Type-model display names.
    config: XDG-aware configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
