"""Identity association options (IA_NA, IA_TA, IA Prefix) and the Status Code option."""

from __future__ import annotations

import ipaddress
import struct
from dataclasses import dataclass, field
from datetime import timedelta
from typing import ClassVar, Optional

from dhcpwire.dhcpv6.options import (
    Option,
    Options,
    ParseError,
    _format_bytes,
    _Reader,
    register_option,
)
from dhcpwire.dhcpv6.types import OptionCode
from dhcpwire.iana import StatusCode

_IA_ID_LENGTH = 4
_US_PER_SECOND = 1_000_000


def encode_duration(duration: timedelta) -> bytes:
    """Encode a duration as 32-bit seconds, rounded half away from zero (RFC 3315)."""
    micros = duration // timedelta(microseconds=1)
    seconds, rem = divmod(abs(micros), _US_PER_SECOND)
    if rem * 2 >= _US_PER_SECOND:
        seconds += 1
    if micros < 0:
        seconds = -seconds
    return struct.pack(">I", seconds & 0xFFFFFFFF)


def decode_duration(data: bytes) -> timedelta:
    """Decode a duration from 32-bit seconds."""
    if len(data) != 4:
        raise ParseError(f"duration must be 4 bytes, got {len(data)}")
    return timedelta(seconds=struct.unpack(">I", data)[0])


def _trim_fraction(value: int, unit: int, digits: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def _format_duration(duration: timedelta) -> str:
    """Render a duration like 1h0m0s, 50s or 10ms."""
    micros = duration // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < 1000:
        return f"{sign}{micros}µs"
    if micros < _US_PER_SECOND:
        return f"{sign}{_trim_fraction(micros, 1000, 3)}ms"
    secs = micros // _US_PER_SECOND
    hours, rem = divmod(secs, 3600)
    minutes = rem // 60
    sec_text = _trim_fraction(micros - (hours * 3600 + minutes * 60) * _US_PER_SECOND, _US_PER_SECOND, 6)
    if hours:
        return f"{sign}{hours}h{minutes}m{sec_text}s"
    if minutes:
        return f"{sign}{minutes}m{sec_text}s"
    return f"{sign}{sec_text}s"


def _check_ia_id(ia_id: bytes) -> bytes:
    data = bytes(ia_id)
    if len(data) != _IA_ID_LENGTH:
        raise ValueError(f"IAID must be {_IA_ID_LENGTH} bytes, got {len(data)}")
    return data


@register_option(OptionCode.STATUS_CODE)
@dataclass
class OptStatusCode(Option):
    """The Status Code option (RFC 3315 section 22.13)."""

    code: ClassVar[OptionCode] = OptionCode.STATUS_CODE

    status_code: StatusCode = StatusCode.SUCCESS
    status_message: str = ""

    def to_bytes(self) -> bytes:
        return struct.pack(">H", int(self.status_code)) + self.status_message.encode(
            "utf-8", "surrogateescape"
        )

    @classmethod
    def parse(cls, data: bytes) -> "OptStatusCode":
        reader = _Reader(data)
        status = StatusCode(reader.u16())
        message = reader.rest().decode("utf-8", "surrogateescape")
        reader.finish()
        return cls(status, message)

    def __str__(self) -> str:
        return (
            f"StatusCode: Code: {self.status_code} ({int(self.status_code)}); "
            f"Message: {self.status_message}"
        )


def _status_of(options: Options) -> Optional[OptStatusCode]:
    opt = options.get_one(OptionCode.STATUS_CODE)
    return opt if isinstance(opt, OptStatusCode) else None


class IdentityOptions(Options):
    """Options carried inside IA_NA and IA_TA (RFC 3315 Appendix B)."""

    def addresses(self) -> list[Option]:
        """The IA Address options assigned to the identity."""
        return self.get(OptionCode.IA_ADDR)

    def one_address(self) -> Optional[Option]:
        """The first IA Address option, or None."""
        return next(iter(self.addresses()), None)

    def status(self) -> Optional[OptStatusCode]:
        """The Status Code option, or None."""
        return _status_of(self)

    def __str__(self) -> str:
        return "{" + super().__str__() + "}"


class PrefixOptions(Options):
    """Options carried inside an IA Prefix option (RFC 3633, RFC 8415 section 21.22)."""

    def status(self) -> Optional[OptStatusCode]:
        """The Status Code option, or None."""
        return _status_of(self)

    def __str__(self) -> str:
        return "{" + super().__str__() + "}"


@register_option(OptionCode.IANA)
@dataclass
class OptIANA(Option):
    """Identity association for non-temporary addresses."""

    code: ClassVar[OptionCode] = OptionCode.IANA

    ia_id: bytes = b"\x00" * _IA_ID_LENGTH
    t1: timedelta = timedelta(0)
    t2: timedelta = timedelta(0)
    options: IdentityOptions = field(default_factory=IdentityOptions)

    def __post_init__(self) -> None:
        self.ia_id = _check_ia_id(self.ia_id)
        if not isinstance(self.options, IdentityOptions):
            self.options = IdentityOptions(self.options)

    def to_bytes(self) -> bytes:
        return (
            self.ia_id
            + encode_duration(self.t1)
            + encode_duration(self.t2)
            + self.options.to_bytes()
        )

    @classmethod
    def parse(cls, data: bytes) -> "OptIANA":
        reader = _Reader(data)
        ia_id = reader.read(_IA_ID_LENGTH)
        t1 = decode_duration(reader.read(4))
        t2 = decode_duration(reader.read(4))
        options = IdentityOptions.from_bytes(reader.rest())
        reader.finish()
        return cls(ia_id, t1, t2, options)

    def __str__(self) -> str:
        return (
            f"IANA: {{IAID={_format_bytes(self.ia_id)}, t1={_format_duration(self.t1)}, "
            f"t2={_format_duration(self.t2)}, options={self.options}}}"
        )


@register_option(OptionCode.IATA)
@dataclass
class OptIATA(Option):
    """Identity association for temporary addresses."""

    code: ClassVar[OptionCode] = OptionCode.IATA

    ia_id: bytes = b"\x00" * _IA_ID_LENGTH
    options: IdentityOptions = field(default_factory=IdentityOptions)

    def __post_init__(self) -> None:
        self.ia_id = _check_ia_id(self.ia_id)
        if not isinstance(self.options, IdentityOptions):
            self.options = IdentityOptions(self.options)

    def to_bytes(self) -> bytes:
        return self.ia_id + self.options.to_bytes()

    @classmethod
    def parse(cls, data: bytes) -> "OptIATA":
        reader = _Reader(data)
        ia_id = reader.read(_IA_ID_LENGTH)
        options = IdentityOptions.from_bytes(reader.rest())
        reader.finish()
        return cls(ia_id, options)

    def __str__(self) -> str:
        return f"IATA: {{IAID={_format_bytes(self.ia_id)}, options={self.options}}}"


@register_option(OptionCode.IA_PREFIX)
@dataclass
class OptIAPrefix(Option):
    """The IA Prefix option (RFC 3633 section 10).

    The prefix keeps the address bits exactly as carried on the wire,
    together with the prefix length.
    """

    code: ClassVar[OptionCode] = OptionCode.IA_PREFIX

    preferred_lifetime: timedelta = timedelta(0)
    valid_lifetime: timedelta = timedelta(0)
    prefix: Optional[ipaddress.IPv6Interface] = None
    options: PrefixOptions = field(default_factory=PrefixOptions)

    def __post_init__(self) -> None:
        if not isinstance(self.options, PrefixOptions):
            self.options = PrefixOptions(self.options)

    def to_bytes(self) -> bytes:
        out = encode_duration(self.preferred_lifetime) + encode_duration(self.valid_lifetime)
        if self.prefix is not None:
            out += bytes([self.prefix.network.prefixlen]) + self.prefix.ip.packed
        else:
            out += bytes(17)
        return out + self.options.to_bytes()

    @classmethod
    def parse(cls, data: bytes) -> "OptIAPrefix":
        reader = _Reader(data)
        preferred = decode_duration(reader.read(4))
        valid = decode_duration(reader.read(4))
        length = reader.u8()
        address = ipaddress.IPv6Address(reader.read(16))
        if length == 0:
            prefix = None
        elif length > 128:
            raise ParseError(f"invalid prefix length {length}")
        else:
            prefix = ipaddress.IPv6Interface((address, length))
        options = PrefixOptions.from_bytes(reader.rest())
        reader.finish()
        return cls(preferred, valid, prefix, options)

    def __str__(self) -> str:
        prefix = str(self.prefix) if self.prefix is not None else "<nil>"
        return (
            f"IAPrefix: {{PreferredLifetime={_format_duration(self.preferred_lifetime)}, "
            f"ValidLifetime={_format_duration(self.valid_lifetime)}, Prefix={prefix}, "
            f"Options={self.options}}}"
        )