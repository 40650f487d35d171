"""Tests for argument coercion."""

import pytest

from dashd_rpc.coercion import coerce, convert_args
from dashd_rpc.exceptions import ParseError
from dashd_rpc.types import TypeTag


class TestStr:
    """Test ``str`` coercion."""

    def test_number_is_stringified(self):
        assert coerce(TypeTag.STR, 42) == "42"

    def test_integral_float_drops_fraction(self):
        assert coerce(TypeTag.STR, 5.0) == "5"
        assert coerce(TypeTag.STR, 0.5) == "0.5"

    def test_bool_uses_json_spelling(self):
        assert coerce(TypeTag.STR, True) == "true"
        assert coerce(TypeTag.STR, False) == "false"

    def test_string_unchanged(self):
        assert coerce(TypeTag.STR, "XjR7") == "XjR7"

    def test_structured_value_becomes_json(self):
        assert coerce(TypeTag.STR, {"a": 1}) == '{"a":1}'


class TestInt:
    """Test ``int`` coercion."""

    def test_numbers_pass_through(self):
        assert coerce(TypeTag.INT, 7) == 7
        assert coerce(TypeTag.INT, 7.5) == 7.5

    def test_numeric_string_is_parsed(self):
        result = coerce(TypeTag.INT, "12")
        assert result == 12
        assert isinstance(result, int)

    def test_fractional_string_is_not_rounded(self):
        assert coerce(TypeTag.INT, "1.5") == 1.5

    def test_garbage_raises(self):
        with pytest.raises(ParseError) as excinfo:
            coerce(TypeTag.INT, "twelve")
        assert excinfo.value.tag == "int"

    def test_infinity_raises(self):
        with pytest.raises(ParseError):
            coerce(TypeTag.INT, "inf")


class TestIntStr:
    """Test ``int_str`` coercion."""

    def test_number_stays_number(self):
        assert coerce(TypeTag.INT_STR, 1000) == 1000
        assert coerce(TypeTag.INT_STR, 2.5) == 2.5

    def test_string_stays_string(self):
        block_hash = "000000000000001a2b"
        assert coerce(TypeTag.INT_STR, block_hash) == block_hash
        assert coerce(TypeTag.INT_STR, "1000") == "1000"

    def test_never_raises_for_other_values(self):
        assert coerce(TypeTag.INT_STR, True) == "true"
        assert coerce(TypeTag.INT_STR, ["a"]) == '["a"]'


class TestFloat:
    """Test ``float`` coercion."""

    def test_number_passes_through(self):
        assert coerce(TypeTag.FLOAT, 0.1) == 0.1
        assert coerce(TypeTag.FLOAT, 3) == 3

    def test_string_is_parsed(self):
        assert coerce(TypeTag.FLOAT, "0.001") == 0.001

    def test_garbage_raises(self):
        with pytest.raises(ParseError):
            coerce(TypeTag.FLOAT, "")


class TestBool:
    """Test ``bool`` coercion."""

    def test_bool_passes_through(self):
        assert coerce(TypeTag.BOOL, True) is True
        assert coerce(TypeTag.BOOL, False) is False

    def test_numbers_are_positive_check(self):
        assert coerce(TypeTag.BOOL, 1) is True
        assert coerce(TypeTag.BOOL, 0) is False
        assert coerce(TypeTag.BOOL, -1) is False

    def test_strings_compare_case_insensitively(self):
        assert coerce(TypeTag.BOOL, "TRUE") is True
        assert coerce(TypeTag.BOOL, "True") is True
        assert coerce(TypeTag.BOOL, "yes") is False
        assert coerce(TypeTag.BOOL, "1") is False


class TestObj:
    """Test ``obj`` coercion."""

    def test_valid_json_string_is_parsed(self):
        assert coerce(TypeTag.OBJ, '{"addresses": ["XjR7"]}') == {"addresses": ["XjR7"]}

    def test_malformed_json_raises(self):
        with pytest.raises(ParseError) as excinfo:
            coerce(TypeTag.OBJ, "{addresses: ")
        assert excinfo.value.value == "{addresses: "

    def test_non_string_passes_through(self):
        value = {"addresses": ["XjR7"]}
        assert coerce(TypeTag.OBJ, value) is value
        assert coerce(TypeTag.OBJ, 5) == 5


@pytest.mark.parametrize(
    ("tag", "value"),
    [
        (TypeTag.STR, "abc"),
        (TypeTag.INT, 12),
        (TypeTag.INT, 1.5),
        (TypeTag.INT_STR, 12),
        (TypeTag.INT_STR, "abc"),
        (TypeTag.FLOAT, 0.5),
        (TypeTag.BOOL, True),
        (TypeTag.OBJ, {"k": [1, 2]}),
        (TypeTag.OBJ, [1, 2]),
    ],
)
def test_canonical_values_are_unchanged(tag: TypeTag, value) -> None:
    assert coerce(tag, value) == value
    assert coerce(tag, coerce(tag, value)) == coerce(tag, value)


@pytest.mark.parametrize("tag", list(TypeTag))
def test_none_passes_through(tag: TypeTag) -> None:
    assert coerce(tag, None) is None


def test_unknown_tag_falls_back_to_str() -> None:
    assert coerce("uint256", 5) == "5"
    assert TypeTag.parse("uint256") is TypeTag.STR


def test_convert_args_leaves_extras_untouched() -> None:
    result = convert_args([TypeTag.INT, TypeTag.BOOL], ["3", "true", 9, "x"])
    assert result == [3, True, 9, "x"]


def test_convert_args_with_fewer_args_than_tags() -> None:
    assert convert_args([TypeTag.STR, TypeTag.INT, TypeTag.BOOL], [5]) == ["5"]


def test_convert_args_does_not_mutate_input() -> None:
    args = ["1"]
    convert_args([TypeTag.INT], args)
    assert args == ["1"]
