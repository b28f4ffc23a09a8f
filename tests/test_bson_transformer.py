"""Unit tests for the Mongo ULID transformer."""

from __future__ import annotations

import logging

import pytest
from bson import Binary
from bson.binary import BINARY_SUBTYPE

from cqrs_ddd_ulid.adapters.bson import UlidBsonTransformer
from cqrs_ddd_ulid.domain.ulid import Ulid
from cqrs_ddd_ulid.primitives.exceptions import InvalidLengthError, InvalidUlidError
from cqrs_ddd_ulid.validation.ulid import UlidValidator

SAMPLE = "01JKX8XGHVDZ46MWYMZT94YER4"


@pytest.fixture()
def transformer() -> UlidBsonTransformer:
    return UlidBsonTransformer(UlidValidator())


# --- to_database_value ---


def test_to_database_value_with_ulid(transformer: UlidBsonTransformer) -> None:
    result = transformer.to_database_value(Ulid(SAMPLE))

    assert isinstance(result, Binary)
    assert result.subtype == BINARY_SUBTYPE
    assert bytes(result) == Ulid(SAMPLE).to_binary()


def test_to_database_value_with_string(transformer: UlidBsonTransformer) -> None:
    result = transformer.to_database_value(SAMPLE)

    assert isinstance(result, Binary)
    assert result.subtype == BINARY_SUBTYPE
    assert len(result) == 16


def test_to_database_value_with_null(transformer: UlidBsonTransformer) -> None:
    assert transformer.to_database_value(None) is None


def test_to_database_value_passes_binary_through(
    transformer: UlidBsonTransformer,
) -> None:
    binary = Binary(Ulid(SAMPLE).to_binary(), BINARY_SUBTYPE)
    assert transformer.to_database_value(binary) is binary


def test_to_database_value_rejects_invalid_string(
    transformer: UlidBsonTransformer,
) -> None:
    with pytest.raises(InvalidUlidError):
        transformer.to_database_value("invalid-ulid")


def test_to_database_value_rejects_other_types(
    transformer: UlidBsonTransformer,
) -> None:
    with pytest.raises(TypeError):
        transformer.to_database_value(42)


# --- to_python_value ---


def test_to_python_value_with_binary(transformer: UlidBsonTransformer) -> None:
    binary = Binary(Ulid(SAMPLE).to_binary(), BINARY_SUBTYPE)
    assert transformer.to_python_value(binary) == Ulid(SAMPLE)


def test_to_python_value_with_raw_bytes(transformer: UlidBsonTransformer) -> None:
    assert transformer.to_python_value(Ulid(SAMPLE).to_binary()) == Ulid(SAMPLE)


def test_to_python_value_with_string(transformer: UlidBsonTransformer) -> None:
    assert transformer.to_python_value(SAMPLE) == Ulid(SAMPLE)


def test_to_python_value_with_ulid(transformer: UlidBsonTransformer) -> None:
    ulid = Ulid(SAMPLE)
    assert transformer.to_python_value(ulid) is ulid


def test_to_python_value_with_null(transformer: UlidBsonTransformer) -> None:
    assert transformer.to_python_value(None) is None


def test_to_python_value_rejects_corrupt_binary(
    transformer: UlidBsonTransformer, caplog: pytest.LogCaptureFixture
) -> None:
    corrupt = Binary(b"some binary data!", BINARY_SUBTYPE)

    with caplog.at_level(logging.ERROR, logger="cqrs_ddd.ulid.persistence"):
        with pytest.raises(InvalidLengthError, match="got 17 bytes"):
            transformer.to_python_value(corrupt)

    assert any("Stored ULID is corrupt" in rec.message for rec in caplog.records)


def test_round_trip(transformer: UlidBsonTransformer) -> None:
    ulid = Ulid.generate()
    assert transformer.to_python_value(transformer.to_database_value(ulid)) == ulid


# --- transform_from_string ---


def test_transform_from_string(transformer: UlidBsonTransformer) -> None:
    assert transformer.transform_from_string(SAMPLE) == Ulid(SAMPLE)


def test_transform_from_string_rejects_invalid(
    transformer: UlidBsonTransformer,
) -> None:
    with pytest.raises(InvalidUlidError, match="Invalid ULID format"):
        transformer.transform_from_string("01JKX8XGHVDZ46MWYMZT94YERO")


def test_default_validator_is_per_instance() -> None:
    assert UlidBsonTransformer().validator is not UlidBsonTransformer().validator
