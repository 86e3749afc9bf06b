import io
import json

from pytest import CaptureFixture, MonkeyPatch, fixture, raises

from pasetomint.cli import build_parser, join_time_values, main, render
from pasetomint.schema import Outcome

KEY = "wubbalubbadubdubwubbalubbadubdub\n"


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


@fixture(autouse=True)
def clean_environ(monkeypatch: MonkeyPatch) -> None:
    for name in ("PASETOMINT_FORMAT", "PASETOMINT_LOG_LEVEL", "PASETOMINT_KEY_VARIABLE", "PASETOMINT_KEY"):
        monkeypatch.delenv(name, raising=False)


def _invoke(*argv: str, key: str = KEY) -> tuple[int, str, str]:
    stdout, stderr = io.StringIO(), io.StringIO()
    status = main(list(argv), stdin=io.StringIO(key), stdout=stdout, stderr=stderr)
    return status, stdout.getvalue(), stderr.getvalue()


def test_generate_plain() -> None:
    status, out, err = _invoke("generate", "--subject", "user123", "--expiration", "2h")

    assert status == 0
    assert out.startswith("v4.local.")
    assert err == ""


def test_generate_then_validate() -> None:
    _, token, _ = _invoke("generate", "-s", "user123", "-c", "role=admin", "team=infra")

    status, out, _ = _invoke("validate", "--token", token.strip(), "-s", "user123", "-c", "role=admin")

    assert status == 0
    assert json.loads(out) == {"sub": "user123", "role": "admin", "team": "infra"}


def test_repeated_custom_flags_accumulate() -> None:
    args = build_parser().parse_args(["generate", "-c", "role=admin", "-c", "team=infra", "role=root"])

    assert args.custom == ["role=admin", "team=infra", "role=root"]


def test_validate_mismatch_fails() -> None:
    _, token, _ = _invoke("generate", "-s", "alice")

    status, out, err = _invoke("validate", "-t", token.strip(), "-s", "bob")

    assert status == 1
    assert out == ""
    assert err == "Error: The claim 'sub' failed validation\n"


def test_expired_token_is_rejected() -> None:
    _, token, _ = _invoke("generate", "--expiration=-1s")

    status, _, err = _invoke("validate", "-t", token.strip())

    assert status == 1
    assert "expired" in err


def test_bad_custom_pair_fails_before_encryption() -> None:
    status, out, err = _invoke("generate", "-c", "role=")

    assert status == 1
    assert out == ""
    assert err == "Error: Missing value for key 'role': expected format KEY=value\n"


def test_bad_expiration_names_the_field() -> None:
    status, _, err = _invoke("generate", "--expiration", "soon")

    assert status == 1
    assert err.startswith("Error: Invalid expiration format.")


def test_bad_key() -> None:
    status, _, err = _invoke("generate", key="too-short\n")

    assert status == 1
    assert "32 bytes" in err


def test_json_format() -> None:
    status, out, _ = _invoke("--format", "json", "generate", "-s", "user123")

    document = json.loads(out)
    assert status == 0
    assert document["success"] is True
    assert document["output"].startswith("v4.local.")


def test_json_format_failure() -> None:
    status, out, _ = _invoke("--format", "json", "generate", "-c", "=admin")

    assert status == 1
    assert json.loads(out) == {"success": False, "error": "Missing key: expected format KEY=value"}


def test_format_from_environ(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("PASETOMINT_FORMAT", "json")

    _, out, _ = _invoke("generate")

    assert json.loads(out)["success"] is True


def test_key_from_environ_on_terminal(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("PASETOMINT_KEY", KEY)
    stdout = io.StringIO()

    status = main(["generate", "-s", "alice"], stdin=_Terminal(), stdout=stdout, stderr=io.StringIO())

    assert status == 0
    assert stdout.getvalue().startswith("v4.local.")


def test_validate_requires_token() -> None:
    with raises(SystemExit):
        build_parser().parse_args(["validate"])


def test_pretty_token() -> None:
    stdout = io.StringIO()

    status = render(Outcome.ok("v4.local." + "x" * 200), "pretty", stdout, io.StringIO())

    output = stdout.getvalue()
    assert status == 0
    assert "ENCRYPTED" in output
    assert "v4.local." in output
    assert output.count("x") == 200


def test_pretty_claims() -> None:
    stdout = io.StringIO()

    render(Outcome.ok('{"sub": "alice", "custom_count": 3}'), "pretty", stdout, io.StringIO())

    lines = stdout.getvalue().splitlines()
    assert "CLAIM VALUES" in lines[0]
    assert lines[1].endswith(" alice")
    assert "sub:" in lines[1]
    assert lines[2].endswith(" 3")


def test_pretty_failure() -> None:
    stderr = io.StringIO()

    status = render(Outcome.fail("boom"), "pretty", io.StringIO(), stderr)

    assert status == 1
    assert "✗" in stderr.getvalue()
    assert stderr.getvalue().rstrip().endswith("boom")


def test_key_that_is_not_utf8() -> None:
    stdout, stderr = io.StringIO(), io.StringIO()
    stdin = io.TextIOWrapper(io.BytesIO(b"\xff" * 32), encoding="utf-8")

    status = main(["generate"], stdin=stdin, stdout=stdout, stderr=stderr)

    assert status == 1
    assert stderr.getvalue() == "Error: The key read from stdin is not valid UTF-8\n"


def test_negative_time_as_separate_argument() -> None:
    """--expiration -1s works without the '=' form."""
    status, token, _ = _invoke("generate", "--expiration", "-1s", "--not-before", "-2m")

    assert status == 0
    status, _, err = _invoke("validate", "-t", token.strip())
    assert status == 1
    assert "expired" in err


def test_join_time_values() -> None:
    assert join_time_values(["generate", "--issued-at", "-5m", "-s", "alice", "--expiration"]) == [
        "generate",
        "--issued-at=-5m",
        "-s",
        "alice",
        "--expiration",
    ]


def test_version(capsys: CaptureFixture[str]) -> None:
    with raises(SystemExit) as exit_info:
        build_parser().parse_args(["--version"])

    assert exit_info.value.code == 0
    assert capsys.readouterr().out.startswith("pasetomint ")
