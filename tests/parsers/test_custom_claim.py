from pytest import mark, raises

from pasetomint.exceptions import MalformedPairError, MissingKeyError, MissingValueError
from pasetomint.parsers import parse_custom_claim


@mark.parametrize(
    ("raw", "pair"),
    [
        ("role=admin", ("role", "admin")),
        ("  team = infra  ", ("team", "infra")),
        ("query=a=b=c", ("query", "a=b=c")),
        ("note=hello world", ("note", "hello world")),
    ],
)
def test_valid_pairs(raw: str, pair: tuple[str, str]) -> None:
    """The first '=' separates the trimmed key from the trimmed value."""
    assert parse_custom_claim(raw) == pair


def test_missing_value() -> None:
    with raises(MissingValueError) as error:
        parse_custom_claim("role=")

    assert error.value.key == "role"
    assert str(error.value) == "Missing value for key 'role': expected format KEY=value"


def test_blank_value_is_missing() -> None:
    with raises(MissingValueError):
        parse_custom_claim("role=   ")


@mark.parametrize("raw", ["=admin", "  =admin", "="])
def test_missing_key(raw: str) -> None:
    with raises(MissingKeyError):
        parse_custom_claim(raw)


@mark.parametrize("raw", ["role", "", "role:admin"])
def test_malformed_pair(raw: str) -> None:
    with raises(MalformedPairError) as error:
        parse_custom_claim(raw)

    assert error.value.raw == raw
    assert str(error.value) == f"Invalid format '{raw}': expected format KEY=value"
