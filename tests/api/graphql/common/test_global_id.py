import base64
import uuid

import pytest

from relay_resolver.api.graphql.common.global_id import from_global_id, to_global_id
from relay_resolver.core.errors import MalformedIdentifier, UnknownType

STORE_UUID = str(uuid.UUID("6f1c9c3e-4d0b-4a57-9c1f-3f4f0c3d2a11"))


def _b64(text):
    return base64.b64encode(text.encode()).decode()


@pytest.mark.parametrize("type_name,local_id", [
    ("Product", "42"),
    ("Store", STORE_UUID),
    ("Customer", "with:colon"),
    ("Product", "ünïcode"),
])
def test_round_trip(type_name, local_id):
    """Decoding reproduces exactly the encoded pair"""
    assert from_global_id(to_global_id(type_name, local_id)) == (type_name, local_id)


def test_encoding_is_deterministic():
    """The same pair always produces the same token"""
    assert to_global_id("Store", STORE_UUID) == to_global_id("Store", STORE_UUID)
    assert to_global_id("Product", 42) == to_global_id("Product", "42")


def test_token_does_not_expose_raw_pair():
    token = to_global_id("Product", "42")
    assert "Product" not in token
    assert token == _b64("Product:42")


@pytest.mark.parametrize("type_name", ["", "Bad:Type"])
def test_invalid_type_names_cannot_be_encoded(type_name):
    with pytest.raises(ValueError):
        to_global_id(type_name, "1")


@pytest.mark.parametrize("token", [
    "",
    None,
    "not base64!!",
    "Ünicode",
    _b64("no-separator"),
    _b64(":42"),
    _b64("Product:"),
    base64.b64encode(b"\xff\xfe:1").decode(),
])
def test_malformed_tokens(token):
    """Anything that is not a two-part id is rejected"""
    with pytest.raises(MalformedIdentifier):
        from_global_id(token)


def test_unknown_type_with_registry(registry):
    """Type names must be registered when a registry is supplied"""
    with pytest.raises(UnknownType) as exc_info:
        from_global_id(to_global_id("Invoice", "1"), registry)
    assert exc_info.value.type_name == "Invoice"


def test_known_type_with_registry(registry):
    assert from_global_id(to_global_id("Store", "1"), registry) == ("Store", "1")
