import pytest

from antfarm.spec import Spec, apply_length, parse_format, spec_length


def test_spec_length_of_conversion():
    assert spec_length("%5d rest") == len("%5d")
    assert spec_length("%-08.3lld!") == len("%-08.3lld")


def test_spec_length_of_plain_text():
    assert spec_length("abc") == -1
    assert spec_length("") == -1


def test_spec_length_clipped_at_end():
    assert spec_length("%5") == len("%5")
    assert spec_length("%") == len("%")


def test_parse_format_splits_literals_and_specs():
    texts = [spec.text for spec in parse_format("abc%d and %s")]
    assert texts == ["abc", "%d", " and ", "%s"]


@pytest.mark.parametrize(
    "fmt", ["L%i-%s ", "room %s -> ", "%%%5.2f|%-10x", "plain", "%", "100%"]
)
def test_parse_format_round_trip(fmt):
    assert "".join(spec.text for spec in parse_format(fmt)) == fmt


def test_parse_format_empty():
    assert parse_format("") == []


def test_parsed_specs_have_defaults():
    spec = parse_format("%5d")[0]
    assert (spec.width, spec.precision) == (-1, -1)


def test_conversion_is_last_char():
    assert Spec("%5.2f").conversion() == "f"
    assert Spec("%llX").conversion() == "X"


@pytest.mark.parametrize(
    "text,modifier",
    [
        ("%d", ""),
        ("%ld", "l"),
        ("%lld", "ll"),
        ("%hd", "h"),
        ("%hhx", "hh"),
        ("%Lf", "L"),
        ("%lllx", "l"),
        ("%llllx", "ll"),
        ("%LLf", "L"),
    ],
)
def test_length_modifier(text, modifier):
    assert Spec(text).length_modifier() == modifier


@pytest.mark.parametrize(
    "text,expected",
    [("%05d", True), ("%+0d", True), ("%00d", True), ("%10d", False), ("%5.0d", False)],
)
def test_has_zero_flag(text, expected):
    assert Spec(text).has_flag("0") is expected


def test_has_other_flags():
    spec = Spec("%-+5d")
    assert spec.has_flag("-") is True
    assert spec.has_flag("+") is True
    assert spec.has_flag("#") is False


def test_apply_length_signed_char():
    assert apply_length(128, "hh", "d") == -128
    assert apply_length(-1, "hh", "u") == 2**8 - 1


def test_apply_length_short():
    assert apply_length(2**15, "h", "i") == -(2**15)
    assert apply_length(-1, "h", "x") == 2**16 - 1


def test_apply_length_default_int():
    assert apply_length(2**32, "", "d") == 0
    assert apply_length(-1, "", "u") == 2**32 - 1
    assert apply_length(-5, "", "d") == -5


def test_apply_length_long():
    assert apply_length(-1, "l", "x") == 2**64 - 1
    assert apply_length(2**63, "ll", "d") == -(2**63)


def test_apply_length_leaves_long_double_alone():
    assert apply_length(2.5, "L", "f") == 2.5


def test_apply_length_rejects_unknown_modifier():
    with pytest.raises(ValueError):
        apply_length(1, "z", "d")