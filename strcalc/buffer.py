from __future__ import annotations

from strcalc.error.evaluator_error import BufferReleasedError
from strcalc.util import UNSIGNED_WIDTH

UNSIGNED_MASK = (1 << UNSIGNED_WIDTH) - 1


class Buffer:
    """An owned sequence of bytes with an explicit length.

    A Buffer is consumed by the operations that take it as an operand:
    `concat` and `repeat` release their operands once their value has been
    read, and `as_unsigned_integer` only reads. Values that must survive
    being read, such as the buffer stored in a `LiteralNode`, are read
    through `duplicate`.

    >>> with Buffer.from_bytes(b"12") as a:
    ...     Buffer.concat(a.duplicate(), Buffer.from_bytes(b"34")).data
    b'1234'
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Buffer:
        return cls(data)

    @property
    def data(self) -> bytes:
        if self._data is None:
            raise BufferReleasedError("Attempt to read a released buffer.")
        return self._data

    @property
    def released(self) -> bool:
        return self._data is None

    def duplicate(self) -> Buffer:
        return Buffer(self.data)

    @staticmethod
    def concat(a: Buffer, b: Buffer) -> Buffer:
        with a, b:
            return Buffer(a.data + b.data)

    def repeat(self, n: int) -> Buffer:
        with self:
            # An empty buffer stays empty, however large `n` is
            if not self.data:
                return Buffer()
            return Buffer(self.data * n)

    def as_unsigned_integer(self) -> int:
        """Interpret the bytes as a base-10 number, most significant digit first.

        Non-digit bytes are not rejected, they simply contribute
        `byte - ord("0")` like any digit would. The accumulator wraps around
        like an unsigned integer of `UNSIGNED_WIDTH` bits.
        """
        num = 0
        for byte in self.data:
            num = (num * 10 + (byte - ord("0"))) & UNSIGNED_MASK
        return num

    def release(self) -> None:
        if self._data is None:
            raise BufferReleasedError("Attempt to release a buffer twice.")
        self._data = None

    def __enter__(self) -> Buffer:
        return self

    def __exit__(self, *exc_info) -> None:
        # Operations on the buffer inside the block may already have consumed it
        if self._data is not None:
            self.release()

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Buffer):
            return False
        return self._data == __o._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        if self._data is None:
            return "Buffer(<released>)"
        return f"Buffer({self._data!r})"

    def __str__(self) -> str:
        return self.data.decode("ascii", errors="replace")
