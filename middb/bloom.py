"""Bloom filter used to skip table files that cannot hold a key."""

from __future__ import annotations

import struct

_MASK64 = (1 << 64) - 1
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_META = struct.Struct("<IQ")
_MAX_BYTES = 1024 * 1024


def fnv_hash(data: bytes) -> int:
    """64-bit FNV-1a hash of ``data``, prefixed by its length as a little-endian u64."""
    state = _FNV_OFFSET
    for byte in len(data).to_bytes(8, "little") + bytes(data):
        state ^= byte
        state = (state * _FNV_PRIME) & _MASK64
    return state


class BloomFilter:
    """A fixed-size probabilistic set of byte keys."""

    def __init__(self, num_keys: int, bits_per_key: int) -> None:
        num_bits = max(num_keys * bits_per_key, 64)
        num_hash_funcs = min(max(int(bits_per_key * 0.69), 1), 30)
        num_bytes = (num_bits + 7) // 8
        if num_bytes > _MAX_BYTES:
            raise ValueError("Bloom filter too large")
        self._bits = bytearray(num_bytes)
        self.num_hash_funcs = num_hash_funcs
        self.num_bits = num_bits

    @classmethod
    def _raw(cls, bits: bytes, num_hash_funcs: int, num_bits: int) -> BloomFilter:
        obj = cls.__new__(cls)
        obj._bits = bytearray(bits)
        obj.num_hash_funcs = num_hash_funcs
        obj.num_bits = num_bits
        return obj

    @classmethod
    def from_bytes(cls, data: bytes, num_hash_funcs: int) -> BloomFilter:
        """Rebuild a filter from its raw bit array."""
        return cls._raw(data, num_hash_funcs, len(data) * 8)

    @classmethod
    def from_bytes_with_meta(cls, data: bytes) -> BloomFilter | None:
        """Rebuild a filter serialised by :meth:`to_bytes`; None if too short."""
        if len(data) < _META.size:
            return None
        num_hash_funcs, num_bits = _META.unpack_from(data)
        return cls._raw(data[_META.size:], num_hash_funcs, num_bits)

    def _positions(self, key: bytes):
        h = fnv_hash(key)
        delta = ((h >> 17) | (h << 15)) & _MASK64
        for i in range(self.num_hash_funcs):
            yield ((h + i * delta) & _MASK64) % self.num_bits

    def insert(self, key: bytes) -> None:
        for pos in self._positions(key):
            self._bits[pos // 8] |= 1 << (pos % 8)

    def may_contain(self, key: bytes) -> bool:
        """False if ``key`` was certainly never inserted."""
        return all(
            self._bits[pos // 8] & (1 << (pos % 8)) for pos in self._positions(key)
        )

    def __contains__(self, key: bytes) -> bool:
        return self.may_contain(key)

    def as_bytes(self) -> bytes:
        """The raw bit array."""
        return bytes(self._bits)

    def to_bytes(self) -> bytes:
        """Serialise with a header of hash count (u32) and bit count (u64)."""
        return _META.pack(self.num_hash_funcs, self.num_bits) + bytes(self._bits)


class BloomFilterBuilder:
    """Collects keys and sizes a filter to fit them."""

    def __init__(self, bits_per_key: int) -> None:
        self.bits_per_key = bits_per_key
        self._keys: list[bytes] = []

    def add_key(self, key: bytes) -> None:
        self._keys.append(bytes(key))

    def build(self) -> BloomFilter:
        bloom = BloomFilter(len(self._keys), self.bits_per_key)
        for key in self._keys:
            bloom.insert(key)
        return bloom