"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~swagmodel.exceptions.SwagmodelError` subclass.
Build scripts wrapping ``swagmodel`` can inspect the exit code to tell a
document that could not be read apart from one that could not be modeled.

Example::

    $ swagmodel dump petstore.yaml
    $ echo $?
    8   # EXIT_MODEL_ERROR -- the document was read but could not be modeled
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_SPEC_LOAD_ERROR = 7
"""The document could not be read or decoded as JSON/YAML."""

EXIT_MODEL_ERROR = 8
"""The document was decoded but could not be turned into an API model."""
