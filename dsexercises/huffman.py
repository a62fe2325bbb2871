"""Huffman coding of lowercase letters with a compact binary container."""

from __future__ import annotations

import heapq
import string
import struct
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass

LETTERS = string.ascii_lowercase

# Bit count followed by the count of each letter a..z.
_HEADER = struct.Struct("<I26I")


@dataclass
class HuffmanCode:
    """A prefix-free code mapping each symbol to a string of '0' and '1'."""

    codes: dict[str, str]

    def encode(self, text: str) -> str:
        """Return the bit string for ``text``; symbols without a code are skipped."""
        return "".join(self.codes[char] for char in text if char in self.codes)

    def decode(self, bits: str) -> str:
        """Return the symbols spelled by ``bits``."""
        lookup = {code: symbol for symbol, code in self.codes.items()}
        symbols = []
        current = ""
        for bit in bits:
            if bit not in "01":
                raise ValueError(f"invalid bit {bit!r}")
            current += bit
            if current in lookup:
                symbols.append(lookup[current])
                current = ""
        if current:
            raise ValueError("bit string ends inside a code")
        return "".join(symbols)


def letter_frequencies(text: str) -> dict[str, int]:
    """Count each lowercase letter of ``text``, in alphabetical order."""
    counts = Counter(char for char in text if char in LETTERS)
    return {letter: counts[letter] for letter in LETTERS if counts[letter]}


def build_code(frequencies: Mapping[str, float]) -> HuffmanCode:
    """Build a Huffman code from symbol weights.

    Leaves are taken in sorted symbol order; each merge joins the two lightest
    nodes, the earlier one on ties, with the first chosen as the '0' branch.
    A lone symbol gets the code "0".
    """
    if any(weight < 0 for weight in frequencies.values()):
        raise ValueError("weights must not be negative")
    leaves = [(symbol, weight) for symbol, weight in sorted(frequencies.items()) if weight > 0]
    if not leaves:
        raise ValueError("no symbol has a positive weight")
    if len(leaves) == 1:
        return HuffmanCode({leaves[0][0]: "0"})
    heap = [(weight, index) for index, (_, weight) in enumerate(leaves)]
    heapq.heapify(heap)
    children: dict[int, tuple[int, int]] = {}
    next_index = len(leaves)
    while len(heap) > 1:
        first_weight, first = heapq.heappop(heap)
        second_weight, second = heapq.heappop(heap)
        children[next_index] = (first, second)
        heapq.heappush(heap, (first_weight + second_weight, next_index))
        next_index += 1
    codes: dict[str, str] = {}
    pending = [(heap[0][1], "")]
    while pending:
        node, prefix = pending.pop()
        if node in children:
            left, right = children[node]
            pending.append((left, prefix + "0"))
            pending.append((right, prefix + "1"))
        else:
            codes[leaves[node][0]] = prefix
    return HuffmanCode(dict(sorted(codes.items())))


def pack_bits(bits: str) -> bytes:
    """Pack a '0'/'1' string into bytes, most significant bit first, zero padded."""
    if set(bits) - {"0", "1"}:
        raise ValueError("bit string may only hold '0' and '1'")
    padded = bits.ljust(-(-len(bits) // 8) * 8, "0")
    return bytes(int(padded[start : start + 8], 2) for start in range(0, len(padded), 8))


def unpack_bits(data: bytes, bit_count: int) -> str:
    """Return the first ``bit_count`` bits of ``data`` as a '0'/'1' string."""
    if not 0 <= bit_count <= 8 * len(data):
        raise ValueError(f"cannot read {bit_count} bits from {len(data)} bytes")
    return "".join(f"{byte:08b}" for byte in data)[:bit_count]


def compress(text: str) -> bytes:
    """Encode the lowercase letters of ``text``; other characters are dropped."""
    frequencies = letter_frequencies(text)
    if not frequencies:
        return _HEADER.pack(0, *([0] * len(LETTERS)))
    bits = build_code(frequencies).encode(text)
    counts = [frequencies.get(letter, 0) for letter in LETTERS]
    return _HEADER.pack(len(bits), *counts) + pack_bits(bits)


def decompress(data: bytes) -> str:
    """Recover the letters stored by :func:`compress`."""
    if len(data) < _HEADER.size:
        raise ValueError("data is shorter than the header")
    bit_count, *counts = _HEADER.unpack_from(data)
    frequencies = {letter: count for letter, count in zip(LETTERS, counts) if count}
    if not frequencies:
        if bit_count:
            raise ValueError("bits present without any letter counts")
        return ""
    bits = unpack_bits(data[_HEADER.size :], bit_count)
    return build_code(frequencies).decode(bits)