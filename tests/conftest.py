"""Shared pytest fixtures for slackfield tests."""

from __future__ import annotations

import pytest

from slackfield.domain.field import Field


@pytest.fixture
def status_field() -> Field:
    """The canonical short field used across serialization tests."""
    return Field.of("Status", "All systems operational")


@pytest.fixture
def long_field() -> Field:
    """A field flagged as too wide to sit beside its neighbours."""
    return (
        Field.builder()
        .title("Release notes")
        .value("Rolled out the new billing pipeline to every region overnight")
        .is_short(False)
        .build()
    )
