"""Unit tests for identifier validation."""

from __future__ import annotations

import pytest

from relstore.domain.value_objects import (
    are_unique_identifiers,
    are_valid_identifiers,
    is_valid_identifier,
    is_valid_identifier_prefix,
)


@pytest.mark.unit
class TestIsValidIdentifier:
    """Tests for the identifier grammar."""

    @pytest.mark.parametrize("candidate", ["Tee", "T", "Tee_Sorte", "ID", "a1_b2", "Tee_"])
    def test_valid(self, candidate: str) -> None:
        assert is_valid_identifier(candidate)

    @pytest.mark.parametrize(
        "candidate",
        ["", "1Tee", "_Tee", "Tee Sorte", "Tee-Sorte", "Kräutertee", "Tee\n", None, 42],
    )
    def test_invalid(self, candidate: object) -> None:
        assert not is_valid_identifier(candidate)


@pytest.mark.unit
class TestIsValidIdentifierPrefix:
    """Tests for identifier prefixes."""

    def test_empty_prefix_is_valid(self) -> None:
        assert is_valid_identifier_prefix("")

    def test_identifier_is_valid_prefix(self) -> None:
        assert is_valid_identifier_prefix("Tee_")

    def test_invalid_prefix(self) -> None:
        assert not is_valid_identifier_prefix("9")
        assert not is_valid_identifier_prefix(None)


@pytest.mark.unit
class TestIdentifierCollections:
    """Tests for validating groups of identifiers."""

    def test_all_valid(self) -> None:
        assert are_valid_identifiers(["ID", "Name"])
        assert are_valid_identifiers([])

    def test_one_invalid(self) -> None:
        assert not are_valid_identifiers(["ID", "2Name"])

    def test_unique(self) -> None:
        assert are_unique_identifiers(["ID", "Name", "id"])
        assert are_unique_identifiers([])

    def test_duplicate(self) -> None:
        assert not are_unique_identifiers(["ID", "Name", "ID"])
