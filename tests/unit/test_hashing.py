# tests/unit/test_hashing.py

import pytest

from hashring.nodes.node import Node
from hashring.utils.hashing import (
    HASH_FUNCTIONS,
    crc32_hash,
    murmur3_hash,
    resolve_hash_function,
    virtual_key,
)


def test_crc32_known_vector():
    """Check value standar CRC-32/IEEE."""
    assert crc32_hash("123456789") == 0xCBF43926
    assert crc32_hash(b"123456789") == 0xCBF43926


def test_murmur3_is_unsigned_32_bit():
    assert murmur3_hash("foo") == 4138058784
    assert murmur3_hash(b"foo") == murmur3_hash("foo")


@pytest.mark.parametrize("hash_function", list(HASH_FUNCTIONS.values()))
def test_hash_range_and_determinism(hash_function):
    for i in range(200):
        value = hash_function(f"key-{i}")
        assert 0 <= value <= 0xFFFFFFFF
        assert value == hash_function(f"key-{i}")


def test_resolve_hash_function_by_name_or_callable():
    assert resolve_hash_function("crc32") is crc32_hash
    assert resolve_hash_function("MURMUR3") is murmur3_hash

    def custom(key):
        return 7

    assert resolve_hash_function(custom) is custom


def test_resolve_unknown_hash_function():
    with pytest.raises(ValueError, match="sha1"):
        resolve_hash_function("sha1")


def test_virtual_key_format():
    node = Node(7, "172.18.1.3", 8080, "host_3", 2)
    assert virtual_key(5, node) == "172.18.1.3*2-5-7"


def test_virtual_key_ignores_descriptive_fields():
    """Port dan host_name tidak ikut menentukan posisi di ring."""
    a = Node(7, "172.18.1.3", 8080, "host_3", 2)
    b = Node(7, "172.18.1.3", 9090, "renamed", 2)
    assert [virtual_key(i, a) for i in range(10)] == [virtual_key(i, b) for i in range(10)]
