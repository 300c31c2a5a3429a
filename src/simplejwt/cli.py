"""
Command-line entry point for issuing, verifying and inspecting HS256 tokens.

Subcommands:
    generate  -- sign a token from key=value claims or a JSON object
    validate  -- check structure, algorithm and signature (exit code 0/1)
    decode    -- print header, payload and signature without verification
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from typing import Any

from simplejwt.core.exceptions import JwtError
from simplejwt.core.logging import configure_logging
from simplejwt.services.factory import JwtFactory

__all__ = ["main"]

SECRET_ENV_VAR = "SIMPLEJWT_SECRET"


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------

def _parse_claim(raw: str) -> tuple[str, Any]:
    """Split ``key=value``; the value is read as JSON when it parses, else as a string."""
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"Claim must be key=value, got {raw!r}")
    key, value = raw.split("=", 1)
    try:
        return key, json.loads(value)
    except json.JSONDecodeError:
        return key, value


def _resolve_secret(args: argparse.Namespace) -> str:
    secret = args.secret or os.getenv(SECRET_ENV_VAR, "")
    if not secret:
        print(f"Error: No secret given. Use --secret or set {SECRET_ENV_VAR}.", file=sys.stderr)
        sys.exit(2)
    return secret


def _resolve_token(args: argparse.Namespace) -> str:
    if args.stdin:
        token = sys.stdin.read().strip()
    else:
        token = (args.token or "").strip()
    if not token:
        print("Error: No token received.", file=sys.stderr)
        sys.exit(2)
    return token


def _print_json(label: str, data: dict) -> None:
    print(f"\n{label}:")
    print(json.dumps(data, indent=4, sort_keys=True))


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

def _cmd_generate(args: argparse.Namespace) -> int:
    payload: dict[str, Any] = {}
    if args.json:
        try:
            loaded = json.loads(args.json)
        except json.JSONDecodeError as exc:
            print(f"Error: --json is not valid JSON: {exc}", file=sys.stderr)
            return 2
        if not isinstance(loaded, dict):
            print("Error: --json must be a JSON object.", file=sys.stderr)
            return 2
        payload.update(loaded)
    payload.update(dict(args.claims))
    if args.ttl is not None:
        now = int(time.time())
        payload.setdefault("iat", now)
        payload["exp"] = now + args.ttl

    token = JwtFactory().generate(payload, _resolve_secret(args))
    print(token.raw)
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    token = _resolve_token(args)
    valid = JwtFactory().validate(token, _resolve_secret(args))
    if not args.quiet:
        print("valid" if valid else "invalid")
    return 0 if valid else 1


def _cmd_decode(args: argparse.Namespace) -> int:
    parsed = JwtFactory().parser(_resolve_token(args), "").parse()
    _print_json("Header", parsed.header)
    _print_json("Payload", parsed.payload)
    print(f"\nSignature (base64url encoded):\n{parsed.signature}")
    if parsed.get_expiration():
        print(f"\nExpires in: {parsed.get_expires_in()}s")
    return 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simplejwt",
        description="Issue, verify and inspect HS256 JSON Web Tokens.",
        epilog="Examples:\n"
               "  %(prog)s generate sub=user-42 role=admin --secret Abcdefgh123! --ttl 3600\n"
               "  %(prog)s validate <token> --secret Abcdefgh123!\n"
               "  echo '<token>' | %(prog)s decode --stdin\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", default=False, help="Log debug detail to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Sign a new token")
    generate.add_argument("claims", nargs="*", type=_parse_claim, help="Payload claims as key=value")
    generate.add_argument("--json", default=None, help="Payload claims as a JSON object")
    generate.add_argument("--secret", default=None, help=f"Signing secret (default: ${SECRET_ENV_VAR})")
    generate.add_argument("--ttl", type=int, default=None, help="Set iat/exp so the token expires in TTL seconds")
    generate.set_defaults(handler=_cmd_generate)

    for name, handler, help_text in (
        ("validate", _cmd_validate, "Check structure, algorithm and signature"),
        ("decode", _cmd_decode, "Decode without verification"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("token", nargs="?", default=None, help="Token string")
        sub.add_argument("--stdin", action="store_true", default=False, help="Read token from stdin")
        if name == "validate":
            sub.add_argument("--secret", default=None, help=f"Signing secret (default: ${SECRET_ENV_VAR})")
            sub.add_argument("--quiet", "-q", action="store_true", default=False, help="Only set the exit code")
        sub.set_defaults(handler=handler)

    return parser


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)
    try:
        code = args.handler(args)
    except JwtError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        code = 1
    sys.exit(code)
