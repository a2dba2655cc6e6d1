import pytest

from rankcore.errors import (
    IndexAlreadyExists,
    MeiliError,
    MissingDocumentId,
    SchemaDiffer,
    SchemaMissing,
    UnsupportedOperation,
    UnsupportedOperationError,
    WordIndexMissing,
)


@pytest.mark.parametrize(
    "error_class, message",
    [
        (IndexAlreadyExists, "index already exists"),
        (SchemaDiffer, "schemas differ"),
        (SchemaMissing, "this index does not have a schema"),
        (WordIndexMissing, "this index does not have a word index"),
        (MissingDocumentId, "document id is missing"),
    ],
)
def test_default_messages(error_class, message):
    error = error_class()
    assert isinstance(error, MeiliError)
    assert str(error) == message


def test_explicit_message_overrides_default():
    assert str(SchemaMissing("custom text")) == "custom text"


@pytest.mark.parametrize(
    "operation, text",
    [
        (
            UnsupportedOperation.SCHEMA_ALREADY_EXISTS,
            "Cannot update index which already have a schema",
        ),
        (
            UnsupportedOperation.CANNOT_UPDATE_SCHEMA_IDENTIFIER,
            "Cannot update the identifier of a schema",
        ),
        (
            UnsupportedOperation.CANNOT_REORDER_SCHEMA_ATTRIBUTE,
            "Cannot reorder the attributes of a schema",
        ),
        (
            UnsupportedOperation.CAN_ONLY_INTRODUCE_NEW_SCHEMA_ATTRIBUTES_AT_END,
            "Can only introduce new attributes at end of a schema",
        ),
        (
            UnsupportedOperation.CANNOT_REMOVE_SCHEMA_ATTRIBUTE,
            "Cannot remove attributes from a schema",
        ),
    ],
)
def test_unsupported_operation_messages(operation, text):
    error = UnsupportedOperationError(operation)
    assert str(operation) == text
    assert str(error) == "unsupported operation; " + text
    assert error.operation is operation


def test_unsupported_operation_error_is_catchable_as_base():
    error = UnsupportedOperationError(UnsupportedOperation.SCHEMA_ALREADY_EXISTS)
    assert isinstance(error, MeiliError)
    assert error.operation is UnsupportedOperation.SCHEMA_ALREADY_EXISTS
    assert str(error) == (
        "unsupported operation; Cannot update index which already have a schema"
    )