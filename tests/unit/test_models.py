"""Unit tests for value types."""
from __future__ import annotations

import pytest

from sui_graph.errors import InvalidArgument
from sui_graph.models import Base64, ObjectFilter, ObjectKey, ObjectKind, SuiAddress


class TestSuiAddress:
    def test_short_form_is_left_padded(self) -> None:
        addr = SuiAddress.from_str("0x2")
        assert str(addr) == "0x" + "0" * 63 + "2"
        assert len(addr.value) == 32

    def test_bare_hex_accepted(self) -> None:
        assert SuiAddress.from_str("ab") == SuiAddress.from_str("0xab")

    def test_case_insensitive(self) -> None:
        assert SuiAddress.from_str("0xAA") == SuiAddress.from_str("0xaa")

    def test_hashable(self) -> None:
        assert len({SuiAddress.from_str("0x1"), SuiAddress.from_str("0x01")}) == 1

    @pytest.mark.parametrize("text", ["", "0x", "0xzz", "0x" + "1" * 65])
    def test_invalid_raises(self, text: str) -> None:
        with pytest.raises(InvalidArgument):
            SuiAddress.from_str(text)

    def test_wrong_length_bytes_raise(self) -> None:
        with pytest.raises(InvalidArgument):
            SuiAddress(b"\x01\x02")

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            SuiAddress.from_str("not-hex")

    def test_frozen(self) -> None:
        addr = SuiAddress.from_str("0x1")
        with pytest.raises(AttributeError):
            addr.value = b"\x00" * 32  # type: ignore[misc]


class TestBase64:
    def test_renders_standard_base64(self) -> None:
        assert str(Base64(b"\xfb\xff")) == "+/8="

    def test_parses_text(self) -> None:
        assert Base64.from_str("AQID").value == b"\x01\x02\x03"

    def test_invalid_text_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            Base64.from_str("not base64!")


class TestObjectKind:
    def test_tags(self) -> None:
        tags = [k.value for k in ObjectKind]
        assert tags == ["OWNED", "CHILD", "SHARED", "IMMUTABLE"]


class TestObjectFilter:
    def test_default_is_empty(self) -> None:
        assert ObjectFilter().is_empty()

    def test_any_predicate_makes_non_empty(self) -> None:
        assert not ObjectFilter(ty="0x2::coin::Coin").is_empty()
        assert not ObjectFilter(object_ids=()).is_empty()

    def test_keys_are_hashable_values(self) -> None:
        key = ObjectKey(object_id=SuiAddress.from_str("0x1"), version=3)
        assert key == ObjectKey(object_id=SuiAddress.from_str("0x01"), version=3)
        assert ObjectFilter(object_keys=(key,)).object_keys == (key,)
