"""Domain name labels as encoded by RFC 1035 section 4.1.4, with compression."""

from __future__ import annotations

from typing import Iterable, Optional

_POINTER_MASK = 0xC0
_MAX_PART_LENGTH = 63


class LabelError(ValueError):
    """Raised when a label sequence cannot be decoded or encoded."""


def _decode(buf: bytes) -> list[str]:
    labels: list[str] = []
    parts: list[str] = []
    pos = 0
    return_pos = 0
    following_pointer = False

    while pos < len(buf):
        length = buf[pos]
        pos += 1
        if length == 0:
            labels.append(".".join(parts))
            parts = []
            if following_pointer:
                pos = return_pos
                following_pointer = False
        elif length & _POINTER_MASK == _POINTER_MASK:
            if following_pointer:
                raise LabelError("cannot handle nested pointers")
            following_pointer = True
            if pos + 1 > len(buf):
                raise LabelError("pointer buffer too short")
            offset = ((length & ~_POINTER_MASK & 0xFF) << 8) + buf[pos]
            return_pos = pos + 1
            pos = offset
        else:
            if pos + length > len(buf):
                raise LabelError("buffer too short")
            parts.append(buf[pos : pos + length].decode("utf-8", "surrogateescape"))
            pos += length
    return labels


def _encode_label(label: str) -> bytes:
    if not label:
        return b"\x00"
    encoded = bytearray()
    for part in label.split("."):
        raw = part.encode("utf-8", "surrogateescape")
        if len(raw) > _MAX_PART_LENGTH:
            raise LabelError(f"label part {part!r} is longer than {_MAX_PART_LENGTH} bytes")
        encoded.append(len(raw))
        encoded += raw
    encoded.append(0)
    return bytes(encoded)


def _encode(labels: Iterable[str]) -> bytes:
    return b"".join(_encode_label(label) for label in labels)


class Labels:
    """An ordered list of domain names.

    When parsed from bytes, the original (possibly compressed) encoding is
    kept and returned by to_bytes() as long as the labels are unchanged.
    """

    def __init__(self, labels: Optional[Iterable[str]] = None) -> None:
        self.labels: list[str] = list(labels) if labels is not None else []
        self._original: Optional[bytes] = None
        self._original_labels: tuple[str, ...] = ()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Labels":
        """Decode labels from an RFC 1035 byte sequence."""
        data = bytes(data)
        decoded = _decode(data)
        result = cls(decoded)
        result._original = data
        result._original_labels = tuple(decoded)
        return result

    def to_bytes(self) -> bytes:
        """Return the original encoding if unchanged, else a fresh uncompressed one."""
        if self._original is not None and tuple(self.labels) == self._original_labels:
            return self._original
        return _encode(self.labels)

    def length(self) -> int:
        """Length in bytes of the serialized labels."""
        return len(self.to_bytes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Labels):
            return NotImplemented
        return self.labels == other.labels

    def __repr__(self) -> str:
        return f"Labels({self.labels!r})"

    def __str__(self) -> str:
        return "[" + " ".join(self.labels) + "]"