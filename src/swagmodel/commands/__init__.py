"""Built-in CLI sub-commands for swagmodel.

This package groups the Typer sub-command modules that form the CLI's
top-level command tree:

* :mod:`~swagmodel.commands.inspect` -- examine info, servers, paths,
  definitions, and security schemes of a document's model.
* :mod:`~swagmodel.commands.dump` -- print the whole model as JSON.

Each module either exports a :class:`typer.Typer` sub-application (for
multi-command groups like ``inspect``) or a plain callback function
registered directly on the root app (for single commands like ``dump``).
"""
