"""Maps domain errors onto GraphQL error extensions.

Every error in a response gets ``extensions.code``; a ``DomainError``
also carries its per-field ``details`` under ``extensions.errors``.
"""

import logging
from typing import Any, Dict, Iterator

from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from domain.shared.errors import DomainError

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
GRAPHQL_VALIDATION_FAILED = "GRAPHQL_VALIDATION_FAILED"


def error_extensions(error: GraphQLError) -> Dict[str, Any]:
    """Build the ``extensions`` payload for one GraphQL error."""
    original = error.original_error

    if isinstance(original, DomainError):
        return {"code": original.kind.value, "errors": dict(original.details)}

    if original is None:
        # Parse/validation errors raised by graphql-core itself
        return {"code": GRAPHQL_VALIDATION_FAILED}

    logger.error(
        "Unhandled resolver error",
        extra={"path": error.path, "error": str(original)},
        exc_info=original,
    )
    return {"code": INTERNAL_SERVER_ERROR}


class DomainErrorExtension(SchemaExtension):
    """Rewrite response errors with the typed code of their cause."""

    def on_operation(self) -> Iterator[None]:
        yield
        context = self.execution_context
        seen = set()
        # Parse/validation failures may never reach ``result``.
        for errors in (
            getattr(context.result, "errors", None),
            getattr(context, "pre_execution_errors", None),
        ):
            for error in errors or []:
                if id(error) in seen:
                    continue
                seen.add(id(error))
                error.extensions = {**(error.extensions or {}), **error_extensions(error)}
