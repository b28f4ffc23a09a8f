from pytest_archon import archrule


def test_primitives_isolation() -> None:
    """
    Primitives are the lowest layer.
    They must not import from codec, domain, validation, adapters or filtering.
    """
    (
        archrule("primitives_isolation")
        .match("cqrs_ddd_ulid.primitives*")
        .should_not_import("cqrs_ddd_ulid.codec*")
        .should_not_import("cqrs_ddd_ulid.domain*")
        .should_not_import("cqrs_ddd_ulid.validation*")
        .should_not_import("cqrs_ddd_ulid.adapters*")
        .should_not_import("cqrs_ddd_ulid.filtering*")
        .check("cqrs_ddd_ulid")
    )


def test_codec_independence() -> None:
    """
    The codec is a pure conversion layer shared by every adapter.
    It must not know about the value object or any storage.
    """
    (
        archrule("codec_independence")
        .match("cqrs_ddd_ulid.codec*")
        .should_not_import("cqrs_ddd_ulid.domain*")
        .should_not_import("cqrs_ddd_ulid.validation*")
        .should_not_import("cqrs_ddd_ulid.adapters*")
        .should_not_import("cqrs_ddd_ulid.filtering*")
        .should_not_import("sqlalchemy*")
        .should_not_import("bson*")
        .check("cqrs_ddd_ulid")
    )


def test_domain_isolation() -> None:
    """
    Domain layer should be self-contained.
    It must not import from validation, adapters or filtering.
    """
    (
        archrule("domain_isolation")
        .match("cqrs_ddd_ulid.domain*")
        .should_not_import("cqrs_ddd_ulid.validation*")
        .should_not_import("cqrs_ddd_ulid.adapters*")
        .should_not_import("cqrs_ddd_ulid.filtering*")
        .should_not_import("sqlalchemy*")
        .should_not_import("bson*")
        .check("cqrs_ddd_ulid")
    )


def test_adapters_layering() -> None:
    """
    Persistence adapters can use the domain and validation but not request filters.
    """
    (
        archrule("adapters_layering")
        .match("cqrs_ddd_ulid.adapters*")
        .should_not_import("cqrs_ddd_ulid.filtering*")
        .check("cqrs_ddd_ulid")
    )
