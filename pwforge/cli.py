"""CLI for pwforge: generate a password, or analyze one, with a brute-force crack time estimate."""

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import load_config
from .estimator import ATTACK_RATE, analyze_password, format_duration
from .exceptions import PwforgeError
from .generator import MAX_LENGTH, MIN_LENGTH, GenerationConfig, generate
from .log import setup_logging

LOGO = r"""
 ____  __      __  ___  ___   ____   ___  ____
|  _ \ \ \    / / | __|/ _ \ |  _ \ / __|| ___|
| |_) | \ \/\/ /  | _|| (_) ||    /| (_ || _|
|  __/   \_/\_/   |_|  \___/ |_|\_\ \___||____|
|_|
"""

ASSUMPTIONS = (
    f"Estimate assumes exhaustive search at {ATTACK_RATE:,} guesses/second "
    "(bcrypt speed), no dictionary or rainbow-table shortcuts."
)


def print_logo(console: Console) -> None:
    console.print(f"[bold cyan]{escape(LOGO)}[/bold cyan]", highlight=False)


def cmd_generate(args, console: Console) -> None:
    config = GenerationConfig.create(
        length=args.length,
        include_uppercase=args.uppercase_chars,
        include_digits=args.numbers,
        include_special=args.special_chars,
    )
    for i in range(args.copies):
        result = generate(config)
        console.print(
            f"[bold green]Password #{i+1}:[/bold green] {escape(result.password)}",
            soft_wrap=True,
            highlight=False,
        )

    # every copy shares length and pool, so one estimate covers them all
    body = (
        f"Length: {result.length}\n"
        f"Character pool: {result.charset_size}\n"
        f"Keyspace: {result.keyspace:,}\n"
        f"Time to crack: {format_duration(result.crack_seconds)}"
    )
    if result.warning:
        body += f"\n[yellow]{escape(result.warning)}[/yellow]"
    console.print(Panel(body, title="Estimated brute-force time", subtitle="theoretical"))
    console.print(f"[dim]{ASSUMPTIONS}[/dim]")


def cmd_analyze(args, console: Console) -> None:
    result = analyze_password(args.password)
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Length")
    table.add_column("Categories")
    table.add_column("Pool")
    table.add_column("Time to crack")
    table.add_row(
        str(result.length),
        ", ".join(c.name.lower() for c in result.categories) or "-",
        str(result.charset_size),
        format_duration(result.crack_seconds),
    )
    console.print(table)
    console.print(f"[dim]{ASSUMPTIONS}[/dim]")


def build_parser(defaults: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pwforge", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument(
        "-l", "--length", type=int, default=defaults["length"],
        help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH}, others fall back to the default)",
    )
    # --no-* forms switch off a flag the settings file turned on
    gen.add_argument("-u", "--uppercase-chars", action=argparse.BooleanOptionalAction, default=defaults["uppercase"],
                     help="Include uppercase letters (A-Z)")
    gen.add_argument("-s", "--special-chars", action=argparse.BooleanOptionalAction, default=defaults["special"],
                     help="Include special characters (!@#$%%^&*_-+=<>?)")
    gen.add_argument("-n", "--numbers", action=argparse.BooleanOptionalAction, default=defaults["digits"],
                     help="Include digits (0-9)")
    gen.add_argument("--copies", type=int, default=defaults["copies"], help="How many passwords to generate")
    gen.add_argument("--banner", action=argparse.BooleanOptionalAction, default=defaults["banner"], help="Show the logo")
    gen.set_defaults(func=cmd_generate)

    an = sub.add_parser("analyze", help="Estimate the brute-force time of an existing password")
    an.add_argument("password", type=str, help="Password to analyze (wrap in quotes)")
    an.add_argument("--banner", action=argparse.BooleanOptionalAction, default=defaults["banner"], help="Show the logo")
    an.set_defaults(func=cmd_analyze)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    console = Console()
    try:
        defaults = load_config()
    except PwforgeError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        return 1

    args = build_parser(defaults).parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.cmd == "generate" and args.copies < 1:
        console.print("[red]--copies must be at least 1[/red]")
        return 1

    if args.banner:
        print_logo(console)
    try:
        args.func(args, console)
    except PwforgeError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
