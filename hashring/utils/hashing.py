# hashring/utils/hashing.py

import zlib

import mmh3


def _to_bytes(key):
    if isinstance(key, bytes):
        return key
    return key.encode("utf-8")


def crc32_hash(key):
    """CRC32 (IEEE) 32-bit tanpa tanda, sama dengan routing deployment lama."""
    return zlib.crc32(_to_bytes(key)) & 0xFFFFFFFF


def murmur3_hash(key):
    """MurmurHash3 32-bit tanpa tanda, avalanche lebih baik daripada CRC32."""
    return mmh3.hash(_to_bytes(key), signed=False)


HASH_FUNCTIONS = {
    "crc32": crc32_hash,
    "murmur3": murmur3_hash,
}


def resolve_hash_function(hash_function):
    """
    Mengembalikan fungsi hash dari nama ("crc32", "murmur3") atau callable.
    Callable harus memetakan string ke integer 32-bit tanpa tanda.
    """
    if callable(hash_function):
        return hash_function
    try:
        return HASH_FUNCTIONS[str(hash_function).lower()]
    except KeyError:
        raise ValueError(
            f"Unknown hash function '{hash_function}', expected one of {sorted(HASH_FUNCTIONS)}"
        ) from None


def virtual_key(replica_index, node):
    """
    Kunci virtual node ke-i milik sebuah node: "address*weight-i-id".
    Harus deterministik, karena remove menghitung ulang kunci ini
    alih-alih menyimpannya.
    """
    return f"{node.address}*{node.weight}-{replica_index}-{node.id}"
