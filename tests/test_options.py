import pytest

from dhcpwire.dhcpv6.options import (
    Option,
    OptionGeneric,
    Options,
    ParseError,
    parse_option,
    register_option,
)
from dhcpwire.dhcpv6.types import OptionCode

ELAPSED = OptionGeneric(OptionCode.ELAPSED_TIME, b"\x00\x01")
ELAPSED_WIRE = bytes([0, 8, 0, 2, 0x00, 0x01])


def test_generic_to_bytes_returns_data():
    assert ELAPSED.to_bytes() == b"\x00\x01"
    assert ELAPSED.code == OptionCode.ELAPSED_TIME


def test_generic_str():
    assert str(ELAPSED) == "Elapsed Time -> [0 1]"


def test_options_to_bytes():
    assert Options([ELAPSED]).to_bytes() == ELAPSED_WIRE


def test_options_round_trip():
    opts = Options(
        [ELAPSED, OptionGeneric(OptionCode.PREFERENCE, b"\x07"), OptionGeneric(4000, b"abc")]
    )
    parsed = Options.from_bytes(opts.to_bytes(), lambda code, data: OptionGeneric(code, data))
    assert parsed == opts
    assert parsed.to_bytes() == opts.to_bytes()


def test_from_bytes_empty():
    parsed = Options.from_bytes(b"")
    assert len(parsed) == 0


def test_from_bytes_unknown_code_is_generic():
    parsed = Options.from_bytes(ELAPSED_WIRE)
    assert parsed == Options([ELAPSED])


def test_from_bytes_truncated_value():
    with pytest.raises(ParseError):
        Options.from_bytes(ELAPSED_WIRE[:-1])


def test_from_bytes_trailing_bytes():
    with pytest.raises(ParseError):
        Options.from_bytes(ELAPSED_WIRE + b"\x00\x08")


def test_from_bytes_custom_parser_sees_code_and_data():
    seen = []
    marker = OptionGeneric(OptionCode.PREFERENCE, b"\x09")

    def parser(code, data):
        seen.append((code, data))
        return marker

    parsed = Options.from_bytes(ELAPSED_WIRE, parser)
    assert seen == [(OptionCode.ELAPSED_TIME, b"\x00\x01")]
    assert len(parsed) == 1
    assert parsed[0] is marker


def test_parser_error_propagates():
    def parser(code, data):
        raise ParseError("bad")

    with pytest.raises(ParseError):
        Options.from_bytes(ELAPSED_WIRE, parser)


def test_get_and_get_one():
    a = OptionGeneric(OptionCode.PREFERENCE, b"\x01")
    b = OptionGeneric(OptionCode.PREFERENCE, b"\x02")
    opts = Options([ELAPSED, a, b])
    assert opts.get(OptionCode.PREFERENCE) == [a, b]
    assert opts.get_one(OptionCode.PREFERENCE) is a
    assert opts.get_one(OptionCode.DNS_RECURSIVE_NAME_SERVER) is None
    assert opts.get(OptionCode.DNS_RECURSIVE_NAME_SERVER) == []


def test_add_appends():
    opts = Options()
    opts.add(ELAPSED)
    assert len(opts) == 1
    assert opts[0].code == OptionCode.ELAPSED_TIME


def test_delete_removes_all_matching():
    a = OptionGeneric(OptionCode.PREFERENCE, b"\x01")
    opts = Options([a, ELAPSED, a])
    opts.delete(OptionCode.PREFERENCE)
    assert opts == Options([ELAPSED])


def test_update_replaces_first():
    a = OptionGeneric(OptionCode.PREFERENCE, b"\x01")
    b = OptionGeneric(OptionCode.PREFERENCE, b"\x02")
    c = OptionGeneric(OptionCode.PREFERENCE, b"\x03")
    opts = Options([a, ELAPSED, b])
    opts.update(c)
    assert opts == Options([c, ELAPSED, b])


def test_update_appends_when_missing():
    a = OptionGeneric(OptionCode.PREFERENCE, b"\x01")
    opts = Options([ELAPSED])
    opts.update(a)
    assert opts == Options([ELAPSED, a])


def test_register_option_used_by_parse_option():
    @register_option(250)
    class _Custom(Option):
        code = OptionCode(250)

        def __init__(self, data):
            self.data = data

        def to_bytes(self):
            return self.data

        @classmethod
        def parse(cls, data):
            return cls(data)

    opt = parse_option(250, b"xyz")
    assert isinstance(opt, _Custom)
    assert opt.to_bytes() == b"xyz"
    parsed = Options.from_bytes(Options([opt]).to_bytes())
    assert isinstance(parsed[0], _Custom)


def test_too_long_value_rejected():
    with pytest.raises(ValueError):
        Options([OptionGeneric(OptionCode.PREFERENCE, bytes(0x10000))]).to_bytes()