"""User Class, Vendor Class and Vendor-specific Information options."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar

from dhcpwire.dhcpv6.options import (
    Option,
    OptionGeneric,
    Options,
    ParseError,
    _Reader,
    register_option,
)
from dhcpwire.dhcpv6.types import OptionCode


def _encode_chunks(chunks: list[bytes]) -> bytes:
    out = bytearray()
    for chunk in chunks:
        if len(chunk) > 0xFFFF:
            raise ValueError(f"class data is {len(chunk)} bytes long")
        out += struct.pack(">H", len(chunk))
        out += chunk
    return bytes(out)


def _read_chunks(reader: _Reader) -> list[bytes]:
    chunks = []
    while reader.has(2):
        length = reader.u16()
        chunks.append(reader.read(length))
    return chunks


def _as_text(chunk: bytes) -> str:
    return chunk.decode("utf-8", "surrogateescape")


@register_option(OptionCode.USER_CLASS)
@dataclass
class OptUserClass(Option):
    """The User Class option (RFC 3315 section 22.15)."""

    code: ClassVar[OptionCode] = OptionCode.USER_CLASS

    user_classes: list[bytes] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return _encode_chunks(self.user_classes)

    @classmethod
    def parse(cls, data: bytes) -> "OptUserClass":
        if not data:
            raise ParseError("user class option must not be empty")
        reader = _Reader(data)
        classes = _read_chunks(reader)
        reader.finish()
        return cls(classes)

    def __str__(self) -> str:
        joined = ", ".join(_as_text(uc) for uc in self.user_classes)
        return f"OptUserClass{{userclass=[{joined}]}}"


@register_option(OptionCode.VENDOR_CLASS)
@dataclass
class OptVendorClass(Option):
    """The Vendor Class option (RFC 3315 section 22.16)."""

    code: ClassVar[OptionCode] = OptionCode.VENDOR_CLASS

    enterprise_number: int = 0
    data: list[bytes] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return struct.pack(">I", self.enterprise_number) + _encode_chunks(self.data)

    @classmethod
    def parse(cls, data: bytes) -> "OptVendorClass":
        reader = _Reader(data)
        enterprise_number = reader.u32()
        chunks = _read_chunks(reader)
        if not chunks:
            raise ParseError("at least one vendor class data is required")
        reader.finish()
        return cls(enterprise_number, chunks)

    def __str__(self) -> str:
        joined = ", ".join(_as_text(d) for d in self.data)
        return f"OptVendorClass{{enterprisenum={self.enterprise_number}, data=[{joined}]}}"


def _parse_vendor_option(code: OptionCode, data: bytes) -> Option:
    # Sub-option codes are vendor specific and may overlap standard codes.
    return OptionGeneric(code, data)


@register_option(OptionCode.VENDOR_OPTS)
@dataclass
class OptVendorOpts(Option):
    """The Vendor-specific Information option (RFC 3315 section 22.17)."""

    code: ClassVar[OptionCode] = OptionCode.VENDOR_OPTS

    enterprise_number: int = 0
    vendor_opts: Options = field(default_factory=Options)

    def __post_init__(self) -> None:
        if not isinstance(self.vendor_opts, Options):
            self.vendor_opts = Options(self.vendor_opts)

    def to_bytes(self) -> bytes:
        return struct.pack(">I", self.enterprise_number) + self.vendor_opts.to_bytes()

    @classmethod
    def parse(cls, data: bytes) -> "OptVendorOpts":
        reader = _Reader(data)
        enterprise_number = reader.u32()
        vendor_opts = Options.from_bytes(reader.rest(), _parse_vendor_option)
        reader.finish()
        return cls(enterprise_number, vendor_opts)

    def __str__(self) -> str:
        return (
            f"OptVendorOpts{{enterprisenum={self.enterprise_number}, "
            f"vendorOpts={self.vendor_opts}}}"
        )