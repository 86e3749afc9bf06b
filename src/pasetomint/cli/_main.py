from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Sequence, TextIO

from dotenv import load_dotenv

from pasetomint.config import ClaimFields
from pasetomint.exceptions import PasetoMintError, SettingsError
from pasetomint.managers import KeyManager
from pasetomint.schema import Outcome
from pasetomint.services import TokenMint, assemble_claims
from pasetomint.settings import OUTPUT_FORMATS, Settings

from ._render import render

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TIME_HELP = "ISO 8601 timestamp or relative time such as '2h', '1d' or '-30m'"

TIME_FLAGS = ("--expiration", "--not-before", "--issued-at")


def _package_version() -> str:
    try:
        return version("pasetomint")
    except PackageNotFoundError:
        return "unknown"


def join_time_values(argv: Sequence[str]) -> list[str]:
    """
    Rewrite ``--expiration -2h`` as ``--expiration=-2h``.

    argparse reads a value starting with ``-`` as an option, so negative
    relative times are attached to their time flag before parsing.
    """
    joined: list[str] = []
    arguments = iter(argv)
    for argument in arguments:
        if argument in TIME_FLAGS:
            value = next(arguments, None)
            if value is not None:
                argument = f"{argument}={value}"
        joined.append(argument)
    return joined


def _add_claim_arguments(parser: argparse.ArgumentParser, verb: str) -> None:
    parser.add_argument("-s", "--subject", help=f"{verb} subject claim")
    parser.add_argument("-i", "--issuer", help=f"{verb} issuer claim")
    parser.add_argument("-a", "--audience", help=f"{verb} audience claim")
    parser.add_argument("--jti", dest="token_id", help=f"{verb} token identifier claim")
    parser.add_argument(
        "--expiration",
        metavar="EXPIRATION",
        help=f"{verb} expiration time ({_TIME_HELP})",
    )
    parser.add_argument(
        "--not-before",
        metavar="NOT_BEFORE",
        help=f"{verb} not-before time ({_TIME_HELP})",
    )
    parser.add_argument(
        "--issued-at",
        metavar="ISSUED_AT",
        help=f"{verb} issued-at time ({_TIME_HELP})",
    )
    parser.add_argument(
        "-c",
        "--custom",
        nargs="*",
        action="extend",
        default=[],
        metavar="KEY=VALUE",
        help=f"{verb} custom claims in the format KEY=VALUE",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pasetomint",
        description=(
            "Generate and validate PASETO v4.local tokens. A 32-byte v4 key "
            "must be provided via stdin for all operations."
        ),
        epilog=(
            "examples:\n"
            "  echo $KEY | pasetomint generate --subject user123 --expiration 2h\n"
            "  echo $KEY | pasetomint generate --expiration -2h\n"
            "  echo $KEY | pasetomint validate --token v4.local.... --subject user123\n"
            "  echo $KEY | pasetomint --format json generate -c role=admin team=infra"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS, help="Set the output format")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Set the log level")

    commands = parser.add_subparsers(dest="command", required=True)
    generate = commands.add_parser("generate", help="Generate a new PASETO token")
    _add_claim_arguments(generate, "Set the")

    validate = commands.add_parser("validate", help="Validate an existing PASETO token")
    validate.add_argument("-t", "--token", required=True, help="The PASETO token to validate")
    _add_claim_arguments(validate, "Expected")
    return parser


def _load_key(stdin: TextIO, settings: Settings) -> KeyManager:
    if stdin.isatty():
        return KeyManager.from_environ(settings.key_variable)
    return KeyManager.from_stream(stdin)


def run(args: argparse.Namespace, settings: Settings, stdin: TextIO) -> Outcome:
    """Execute the parsed command and report the result as an ``Outcome``."""
    try:
        key_manager = _load_key(stdin, settings)
        fields = ClaimFields(
            subject=args.subject,
            issuer=args.issuer,
            audience=args.audience,
            token_id=args.token_id,
            issued_at=args.issued_at,
            not_before=args.not_before,
            expiration=args.expiration,
        )
        claims = assemble_claims(fields, args.custom)
        mint = TokenMint(key_manager=key_manager)

        if args.command == "generate":
            return Outcome.ok(mint.generate_token(claims))
        decoded = mint.validate_token(args.token, expected=claims)
        return Outcome.ok(mint.render_claims(decoded))
    except PasetoMintError as error:
        logger.debug("%s failed: %s", args.command, error)
        return Outcome.fail(str(error))


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    load_dotenv()
    args = build_parser().parse_args(join_time_values(sys.argv[1:] if argv is None else argv))

    try:
        settings = Settings.from_environ()
    except SettingsError as error:
        return render(Outcome.fail(str(error)), args.format or "plain", stdout, stderr)

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    outcome = run(args, settings, stdin or sys.stdin)
    return render(outcome, args.format or settings.output_format, stdout, stderr)
