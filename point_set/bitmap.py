import array
import logging
from typing import Iterator, Tuple


logger = logging.getLogger(__name__)

WORD_BITS = 64


class BitmapIndex:
    """Growable bitmap packed into 64-bit words."""

    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.length = capacity
        self.bitmap = array.array("Q")  # 64-bit integers
        self.bitmap.extend([0] * self._words_for(capacity))

    @staticmethod
    def _words_for(bits: int) -> int:
        return (bits + WORD_BITS - 1) // WORD_BITS

    @property
    def word_count(self) -> int:
        return len(self.bitmap)

    def __len__(self) -> int:
        return self.length

    def _grow(self, length: int):
        missing = self._words_for(length) - self.word_count
        if missing > 0:
            self.bitmap.extend([0] * missing)
            logger.debug(f"Grew bitmap to {self.word_count} words for {length} bits")
        self.length = length

    def set(self, index: int, value: bool = True):
        if index < 0:
            raise IndexError(f"Bit index must be non-negative, got {index}")
        if index >= self.length:
            self._grow(index + 1)

        word_idx = index // WORD_BITS
        bit_idx = index % WORD_BITS
        if value:
            self.bitmap[word_idx] |= (1 << bit_idx)
        else:
            self.bitmap[word_idx] &= ~(1 << bit_idx)

    def is_set(self, index: int) -> bool:
        if not 0 <= index < self.length:
            raise IndexError(f"Bit index {index} out of range for bitmap of length {self.length}")
        return bool(self.bitmap[index // WORD_BITS] & (1 << (index % WORD_BITS)))

    def get(self, index: int) -> bool:
        if 0 <= index < self.length:
            return self.is_set(index)
        return False

    def or_op(self, other: "BitmapIndex") -> "BitmapIndex":
        longer, shorter = (self, other) if self.word_count >= other.word_count else (other, self)
        result = BitmapIndex()
        result.bitmap = array.array("Q", longer.bitmap)
        result.length = max(self.length, other.length)
        for i in range(shorter.word_count):
            result.bitmap[i] |= shorter.bitmap[i]
        return result

    def __or__(self, other: "BitmapIndex") -> "BitmapIndex":
        if not isinstance(other, BitmapIndex):
            return NotImplemented
        return self.or_op(other)

    def count(self) -> int:
        return sum(word.bit_count() for word in self.bitmap)

    def __iter__(self) -> Iterator[Tuple[int, bool]]:
        for index in range(self.length):
            yield index, self.is_set(index)

    def iter_set_bits(self) -> Iterator[int]:
        """Yield the positions of on-bits in ascending order."""
        for word_idx in range(self.word_count):
            word = self.bitmap[word_idx]
            base = word_idx * WORD_BITS
            while word:
                lowest = word & -word
                word ^= lowest
                yield base + lowest.bit_length() - 1

    def same_bits(self, other: "BitmapIndex") -> bool:
        """Compare on-bits only, treating missing trailing words as zero."""
        shorter, longer = (self, other) if self.word_count <= other.word_count else (other, self)
        for i in range(shorter.word_count):
            if shorter.bitmap[i] != longer.bitmap[i]:
                return False
        return not any(longer.bitmap[i] for i in range(shorter.word_count, longer.word_count))

    def copy(self) -> "BitmapIndex":
        result = BitmapIndex()
        result.bitmap = array.array("Q", self.bitmap)
        result.length = self.length
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitmapIndex):
            return NotImplemented
        return self.length == other.length and self.bitmap == other.bitmap

    def __repr__(self) -> str:
        return f"BitmapIndex(length={self.length}, bits_on={self.count()})"
