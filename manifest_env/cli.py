"""
Resolve Android manifest placeholders from a .env file.

Called from the app module's Gradle script during configuration; the
placeholder map is printed to stdout and warnings go to stderr.

Usage:
    manifest-env                                   # KAKAO_NATIVE_APP_KEY from ../.env
    manifest-env --env-file ../.env --format json  # JSON instead of NAME=VALUE lines
    manifest-env --set appAuthRedirectScheme=com.example --mode replace
    manifest-env --strict                          # Fail on malformed lines
    manifest-env --changed-since "2 hours ago"     # Has .env changed recently?
"""

import argparse
import json
import os
import sys
from datetime import datetime

import dateparser

from .load_env import DEFAULT_ENV_PATH, KAKAO_NATIVE_APP_KEY, load_with_report
from .placeholders import PlaceholderMode, apply_env, warn


def parse_assignment(text: str) -> tuple[str, str]:
    """argparse type for --set NAME=VALUE."""
    if '=' not in text:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
    name, value = text.split('=', 1)
    name = name.strip()
    if not name:
        raise argparse.ArgumentTypeError(f"empty placeholder name in '{text}'")
    return name, value.strip()


def parse_since(expression: str) -> datetime | None:
    return dateparser.parse(expression, settings={
        'PREFER_DATES_FROM': 'past',
        'RETURN_AS_TIMEZONE_AWARE': False,
    })


AGE_UNITS = ((86400, "d"), (3600, "h"), (60, "m"))


def describe_age(mod_time: datetime, now: datetime | None = None) -> str:
    """Describe how long ago the env file was modified, e.g. '3d ago'."""
    elapsed = int(((now or datetime.now()) - mod_time).total_seconds())
    for seconds, unit in AGE_UNITS:
        if elapsed >= seconds:
            return f"{elapsed // seconds}{unit} ago"
    return "just now"


def format_placeholders(placeholders: dict[str, str], fmt: str) -> str:
    if fmt == 'json':
        return json.dumps(placeholders, indent=2, sort_keys=True)
    return '\n'.join(f"{name}={value}" for name, value in sorted(placeholders.items()))


def check_changed(env_path: str, since: datetime) -> int:
    """Print whether env_path was modified after since. 0 = changed, 1 = not."""
    if not os.path.exists(env_path):
        print("missing")
        return 1
    mod_time = datetime.fromtimestamp(os.path.getmtime(env_path))
    if mod_time > since:
        print(f"changed ({describe_age(mod_time)})")
        return 0
    print(f"unchanged ({describe_age(mod_time)})")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='manifest-env',
        description='Resolve Android manifest placeholders from a .env file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  manifest-env                                      # NAME=VALUE lines
  manifest-env --format json                        # JSON object
  manifest-env --key KAKAO_NATIVE_APP_KEY --key MAPS_API_KEY
  manifest-env --set scheme=offpeak --mode replace  # Drop 'scheme' from output
  manifest-env --changed-since yesterday            # Exit 0 if .env changed
        """
    )
    parser.add_argument('--env-file', type=str, default=DEFAULT_ENV_PATH,
                        help=f'Path to the .env file (default: {DEFAULT_ENV_PATH})')
    parser.add_argument('--key', action='append', dest='keys', metavar='KEY',
                        help=f'Key to resolve, repeatable (default: {KAKAO_NATIVE_APP_KEY})')
    parser.add_argument('--set', action='append', dest='existing', default=[],
                        type=parse_assignment, metavar='NAME=VALUE',
                        help='Placeholder already set by other build logic')
    parser.add_argument('--mode', choices=[m.value for m in PlaceholderMode],
                        default=PlaceholderMode.MERGE.value,
                        help='Merge into existing placeholders or replace them (default: merge)')
    parser.add_argument('--format', choices=['properties', 'json'], default='properties',
                        help='Output format (default: properties)')
    parser.add_argument('--strict', action='store_true',
                        help='Warn about malformed lines and a missing file, exit 2 if any')
    parser.add_argument('--changed-since', type=str, metavar='EXPR',
                        help='Only report whether the .env file changed after this time '
                             '(e.g., "2 hours ago", "yesterday")')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.changed_since:
        since = parse_since(args.changed_since)
        if since is None:
            print(f"Error: Could not parse time expression: '{args.changed_since}'", file=sys.stderr)
            print("Examples: '2 hours ago', 'yesterday', '3 days ago', 'Jan 25 2pm'", file=sys.stderr)
            return 1
        return check_changed(args.env_file, since)

    report = load_with_report(args.env_file)
    placeholders = apply_env(
        report.values,
        keys=args.keys or [KAKAO_NATIVE_APP_KEY],
        store=dict(args.existing),
        mode=PlaceholderMode(args.mode),
        env_path=args.env_file,
    )
    print(format_placeholders(placeholders, args.format))

    if args.strict:
        if not report.found:
            warn(f"[WARN] {args.env_file} not found")
        for lineno in report.skipped:
            warn(f"[WARN] {args.env_file}:{lineno}: no '=' or empty key, line ignored")
        if not report.found or report.skipped:
            return 2
    return 0
