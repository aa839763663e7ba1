"""Field — one labeled cell in a message attachment's table layout.

A Field holds a bold ``title`` above a plain ``value`` text, plus an
``is_short`` hint telling the renderer it may place the field
side-by-side with its neighbours. Values under roughly forty characters
are conventionally short.

Wire mapping (attribute -> JSON key):

- ``title``    -> ``title`` (required)
- ``value``    -> ``text``  (required)
- ``is_short`` -> ``short`` (optional on read, always written)

INVARIANT: title and value never contain markdown. The check lives in the
model validator, so the builder and deserialization both enforce it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, NoReturn, Self

import pydantic
from pydantic import BaseModel, ValidationError, model_validator

from slackfield.domain.errors import FieldError, FieldSchemaError, MissingFieldError
from slackfield.domain.markdown import check_does_not_contain_markdown

logger = logging.getLogger(__name__)

TITLE_KEY = "title"
VALUE_KEY = "text"
SHORT_KEY = "short"

# Builder default and wire default for an absent "short" key.
DEFAULT_IS_SHORT = True


def _raise_field_error(exc: ValidationError, source: str) -> NoReturn:
    """Re-raise a pydantic ``ValidationError`` as a :class:`FieldError`.

    Errors our own validators raised come back out unchanged; anything else
    is a schema problem with the input.
    """
    errors = exc.errors(include_url=False)
    for err in errors:
        cause = err.get("ctx", {}).get("error")
        if isinstance(cause, FieldError):
            raise cause from exc
    logger.debug("Rejected Field %s input with %d error(s)", source, exc.error_count())
    raise FieldSchemaError(source, errors) from exc


class Field(BaseModel):
    """Immutable attachment field.

    Build one with :meth:`builder` or :meth:`of`, or parse one with
    :meth:`from_wire` / :meth:`from_json`. Types are strict: ``"true"``
    is not a boolean and ``1`` is not a string. Unknown wire keys are
    ignored.
    """

    model_config = {"frozen": True, "strict": True}

    title: str
    value: str = pydantic.Field(alias=VALUE_KEY)
    is_short: bool = pydantic.Field(default=DEFAULT_IS_SHORT, alias=SHORT_KEY)

    @model_validator(mode="after")
    def check_markdown(self) -> Self:
        check_does_not_contain_markdown(TITLE_KEY, self.title)
        check_does_not_contain_markdown(VALUE_KEY, self.value)
        return self

    @classmethod
    def builder(cls) -> FieldBuilder:
        """Return a fresh builder with ``is_short`` defaulted to True."""
        return FieldBuilder()

    @classmethod
    def of(cls, title: str, value: str) -> Field:
        """Build a short Field from just a title and a value."""
        return cls.builder().title(title).value(value).build()

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Field:
        """Copy this Field, rebuilding it through the builder when *update* is given.

        Update keys are attribute names (``title``, ``value``, ``is_short``).

        Raises:
            TypeError: If *update* names an unknown attribute.
            FieldError: If the updated values fail validation.
        """
        if not update:
            return super().model_copy(deep=deep)
        unknown = set(update) - set(type(self).model_fields)
        if unknown:
            msg = f"Unknown Field attributes: {sorted(unknown)}"
            raise TypeError(msg)
        merged = {**self.model_dump(), **update}
        return (
            FieldBuilder()
            .title(merged["title"])
            .value(merged["value"])
            .is_short(merged["is_short"])
            .build()
        )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the wire dict; ``short`` is always present."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Serialize to compact JSON with keys ``title``, ``text``, ``short``."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_wire(cls, data: Any) -> Field:
        """Parse a decoded wire object.

        *data* is normally a mapping; anything else (a list, a string) is
        handed to the model as-is and rejected as a schema error.

        Raises:
            FieldSchemaError: If ``title`` or ``text`` is missing or not a
                string, or ``short`` is present but not a boolean.
            MarkdownContentError: If either string contains markdown.
        """
        payload = dict(data) if isinstance(data, Mapping) else data
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            _raise_field_error(exc, "wire")

    @classmethod
    def from_json(cls, raw: str | bytes) -> Field:
        """Parse a JSON document; errors as for :meth:`from_wire`."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            _raise_field_error(exc, "json")


class FieldBuilder:
    """Mutable accumulator for a :class:`Field`.

    Setters store values without checking them; ``build()`` validates
    everything at once and returns the frozen Field. A builder has a
    single owner and must not be shared between threads.
    """

    def __init__(self) -> None:
        self._title: str | None = None
        self._value: str | None = None
        self._is_short: bool = DEFAULT_IS_SHORT

    def title(self, title: str) -> Self:
        self._title = title
        return self

    def value(self, value: str) -> Self:
        self._value = value
        return self

    def is_short(self, is_short: bool) -> Self:
        self._is_short = is_short
        return self

    def build(self) -> Field:
        """Validate the accumulated state and return the Field.

        Raises:
            MissingFieldError: If ``title`` or ``value`` was never set.
            MarkdownContentError: If either string contains markdown.
            FieldSchemaError: If a setter was given the wrong type.
        """
        if self._title is None:
            raise MissingFieldError("title")
        if self._value is None:
            raise MissingFieldError("value")
        payload = {TITLE_KEY: self._title, VALUE_KEY: self._value, SHORT_KEY: self._is_short}
        try:
            return Field.model_validate(payload)
        except ValidationError as exc:
            _raise_field_error(exc, "builder")
