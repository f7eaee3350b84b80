from __future__ import annotations

import pytest

from httpx_object_mapper.core.errors import (
    DecodingFailedError,
    MappingError,
    ObjectMapperError,
    ResponseValidationError,
    SerializerKind,
    decoding_failed_message,
)


@pytest.mark.parametrize(
    ("kind", "message"),
    [
        (SerializerKind.OBJECT, "failed to serialize response into object"),
        (SerializerKind.ARRAY, "failed to serialize response into array"),
        (SerializerKind.IMMUTABLE_OBJECT, "failed to serialize response into immutable object"),
        (SerializerKind.IMMUTABLE_ARRAY, "failed to serialize response into immutable array"),
    ],
    ids=["object", "array", "immutable-object", "immutable-array"],
)
def test_decoding_failed_message_is_fixed_per_kind(kind: SerializerKind, message: str):
    err = DecodingFailedError(kind)
    assert str(err) == message
    assert decoding_failed_message(kind) == message
    assert err.kind is kind


def test_decoding_failed_messages_are_distinct():
    messages = {decoding_failed_message(kind) for kind in SerializerKind}
    assert len(messages) == len(SerializerKind)


def test_package_errors_share_base_class():
    assert issubclass(DecodingFailedError, ObjectMapperError)
    assert issubclass(MappingError, ObjectMapperError)
    assert issubclass(ResponseValidationError, ObjectMapperError)


def test_mapping_error_key_defaults_to_none():
    assert MappingError("bad").key is None
    assert MappingError("bad", key="day").key == "day"
