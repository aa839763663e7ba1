"""Field construction and parsing errors.

All errors derive from :class:`FieldError`, itself a ``ValueError``, so
callers can catch the whole family or a single kind. None of them are
recoverable locally: a Field either exists and satisfies its invariants,
or construction fails.
"""

from __future__ import annotations

from typing import Any


class FieldError(ValueError):
    """Base class for every error raised while building or parsing a Field."""


class MissingFieldError(FieldError):
    """A required builder attribute was never set before ``build()``."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        msg = f"Cannot build Field, required attribute {field_name!r} is not set"
        super().__init__(msg)


class MarkdownContentError(FieldError):
    """Title or text contains markdown formatting syntax."""

    def __init__(self, field_name: str, content: str, decorations: list[str]) -> None:
        self.field_name = field_name
        self.content = content
        self.decorations = decorations
        msg = (
            f"The field {field_name!r} cannot contain markdown formatting syntax "
            f"({', '.join(decorations)}). Found: {content!r}"
        )
        super().__init__(msg)


class FieldSchemaError(FieldError):
    """Wire input is missing a required key or carries a wrong JSON type.

    Attributes:
        source: Which entry point rejected the input (``"wire"``, ``"json"``,
            ``"builder"``).
        errors: Pydantic error dicts describing each problem.
    """

    def __init__(self, source: str, errors: list[dict[str, Any]]) -> None:
        self.source = source
        self.errors = errors
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ())) or '<root>'}: {err.get('msg', '')}"
            for err in errors
        )
        msg = f"Invalid Field {source} input: {details}"
        super().__init__(msg)
