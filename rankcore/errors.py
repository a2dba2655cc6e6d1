"""Errors raised by the index and its update machinery."""

from __future__ import annotations

from enum import Enum


class MeiliError(Exception):
    """Base class for the errors raised by this package."""

    default_message = "index error"

    def __str__(self) -> str:
        if self.args:
            return str(self.args[0])
        return self.default_message


class IndexAlreadyExists(MeiliError):
    """An index with the requested name is already open."""

    default_message = "index already exists"


class SchemaDiffer(MeiliError):
    """The stored schema does not match the given one."""

    default_message = "schemas differ"


class SchemaMissing(MeiliError):
    """The index has no schema yet."""

    default_message = "this index does not have a schema"


class WordIndexMissing(MeiliError):
    """The index has no word index yet."""

    default_message = "this index does not have a word index"


class MissingDocumentId(MeiliError):
    """A document lacks its identifier attribute."""

    default_message = "document id is missing"


class UnsupportedOperation(Enum):
    """Schema changes that an index refuses to perform."""

    SCHEMA_ALREADY_EXISTS = "Cannot update index which already have a schema"
    CANNOT_UPDATE_SCHEMA_IDENTIFIER = "Cannot update the identifier of a schema"
    CANNOT_REORDER_SCHEMA_ATTRIBUTE = "Cannot reorder the attributes of a schema"
    CAN_ONLY_INTRODUCE_NEW_SCHEMA_ATTRIBUTES_AT_END = (
        "Can only introduce new attributes at end of a schema"
    )
    CANNOT_REMOVE_SCHEMA_ATTRIBUTE = "Cannot remove attributes from a schema"

    def __str__(self) -> str:
        return self.value


class UnsupportedOperationError(MeiliError):
    """Raised when an unsupported schema operation is attempted."""

    def __init__(self, operation: UnsupportedOperation) -> None:
        super().__init__(f"unsupported operation; {str(operation)}")
        self.operation = operation