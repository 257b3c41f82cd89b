"""DHCPv6 options: the option interface, generic options and option lists."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from dhcpwire.dhcpv6.types import OptionCode

OptionParser = Callable[[OptionCode, bytes], "Option"]

_MAX_OPTION_LENGTH = 0xFFFF


class ParseError(ValueError):
    """Raised when bytes are not a valid encoding of a DHCPv6 structure."""


class _Reader:
    """Big-endian reader over a byte string that raises ParseError on short reads."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def has(self, count: int) -> bool:
        return self.remaining >= count

    def read(self, count: int) -> bytes:
        if not self.has(count):
            raise ParseError(
                f"buffer too short: need {count} bytes, have {self.remaining}"
            )
        chunk = self._data[self._pos : self._pos + count]
        self._pos += count
        return chunk

    def u8(self) -> int:
        return self.read(1)[0]

    def u16(self) -> int:
        return struct.unpack(">H", self.read(2))[0]

    def u32(self) -> int:
        return struct.unpack(">I", self.read(4))[0]

    def rest(self) -> bytes:
        return self.read(self.remaining)

    def finish(self) -> None:
        if self.remaining:
            raise ParseError(f"buffer has {self.remaining} unread bytes")


def _format_bytes(data: bytes) -> str:
    return "[" + " ".join(str(b) for b in data) + "]"


class Option(ABC):
    """A DHCPv6 option: a code and a serialized value."""

    code: OptionCode

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Serialize the option value, without code and length."""


class OptionGeneric(Option):
    """An option whose value is kept as raw bytes."""

    def __init__(self, code: int, data: bytes = b"") -> None:
        self.code = OptionCode(code)
        self.data = bytes(data)

    def to_bytes(self) -> bytes:
        return self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionGeneric):
            return NotImplemented
        return self.code == other.code and self.data == other.data

    def __repr__(self) -> str:
        return f"OptionGeneric(code={int(self.code)}, data={self.data!r})"

    def __str__(self) -> str:
        return f"{self.code} -> {_format_bytes(self.data)}"


_PARSERS: dict[OptionCode, Callable[[bytes], Option]] = {}


def register_option(code: int):
    """Class decorator that makes parse_option use cls.parse for this code."""
    option_code = OptionCode(code)

    def decorator(obj):
        _PARSERS[option_code] = getattr(obj, "parse", obj)
        return obj

    return decorator


def parse_option(code: int, data: bytes) -> Option:
    """Parse one option value according to its code.

    Codes without a registered parser yield an OptionGeneric.
    """
    option_code = OptionCode(code)
    parser = _PARSERS.get(option_code)
    if parser is None:
        return OptionGeneric(option_code, data)
    return parser(bytes(data))


class Options(list):
    """An ordered collection of options."""

    def __init__(self, options: Iterable[Option] = ()) -> None:
        super().__init__(options)

    def get(self, code: int) -> list[Option]:
        """All options with the given code."""
        return [opt for opt in self if opt.code == code]

    def get_one(self, code: int) -> Optional[Option]:
        """The first option with the given code, or None."""
        return next((opt for opt in self if opt.code == code), None)

    def add(self, option: Option) -> None:
        """Append one option."""
        self.append(option)

    def delete(self, code: int) -> None:
        """Remove every option with the given code."""
        self[:] = [opt for opt in self if opt.code != code]

    def update(self, option: Option) -> None:
        """Replace the first option with the same code, or append it."""
        for idx, opt in enumerate(self):
            if opt.code == option.code:
                self[idx] = option
                return
        self.append(option)

    def to_bytes(self) -> bytes:
        """Serialize all options as code, length and value."""
        out = bytearray()
        for opt in self:
            value = opt.to_bytes()
            if len(value) > _MAX_OPTION_LENGTH:
                raise ValueError(f"option {opt.code} value is {len(value)} bytes long")
            out += struct.pack(">HH", int(opt.code), len(value))
            out += value
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes, parser: Optional[OptionParser] = None):
        """Parse a sequence of encoded options (RFC 3315)."""
        parse = parser if parser is not None else parse_option
        result = cls()
        if not data:
            return result
        reader = _Reader(data)
        while reader.has(4):
            code = OptionCode(reader.u16())
            length = reader.u16()
            result.append(parse(code, reader.read(length)))
        reader.finish()
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"

    def __str__(self) -> str:
        return "[" + " ".join(str(opt) for opt in self) + "]"