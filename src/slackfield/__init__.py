"""slackfield — validated, immutable message-attachment fields.

Public entry points are re-exported here; see :mod:`slackfield.domain.field`.
"""

from __future__ import annotations

from slackfield.domain.errors import (
    FieldError,
    FieldSchemaError,
    MarkdownContentError,
    MissingFieldError,
)
from slackfield.domain.field import DEFAULT_IS_SHORT, Field, FieldBuilder

__all__ = [
    "DEFAULT_IS_SHORT",
    "Field",
    "FieldBuilder",
    "FieldError",
    "FieldSchemaError",
    "MarkdownContentError",
    "MissingFieldError",
]
