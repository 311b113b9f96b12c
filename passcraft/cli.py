"""CLI for passcraft: generate passwords or passphrases, show/reset saved settings."""

import argparse
import sys
from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from loguru import logger

from . import config
from .errors import PasscraftError
from .generator import generate_password
from .passphrase import generate_passphrase
from .strength import describe, passphrase_entropy, password_entropy

# argparse dest -> settings key
PASSWORD_ARGS = {
    "length": "length",
    "lower": "lower",
    "upper": "upper",
    "digits": "digits",
    "symbols": "symbols",
    "exclude_similar": "exclude_similar",
    "no_ambiguous": "no_ambiguous",
    "no_repeat": "no_repeat",
}
PASSPHRASE_ARGS = {
    "words": "word_count",
    "delimiter": "delimiter",
    "capitalize": "capitalize_words",
    "number": "include_number_word",
    "symbol": "include_symbol_word",
    "exclude_similar": "exclude_similar",
    "no_ambiguous": "no_ambiguous",
}


def _settings(args, mapping):
    """Saved settings with every flag given on the command line applied on top."""
    cfg = config.load_config()
    for dest, key in mapping.items():
        value = getattr(args, dest, None)
        if value is not None:
            cfg[key] = value
    return cfg


def _show(kind, results, bits):
    for i, text in enumerate(results):
        print(f"[bold green]{kind} #{i+1}:[/bold green] {escape(text)}")
    info = describe(bits)
    print(f"Estimated entropy: {info['entropy']:.1f} bits ({info['label']})")


def _run_password(cfg, copies):
    opts = config.password_options(cfg)
    bits = password_entropy(opts)
    _show("Password", [generate_password(opts) for _ in range(copies)], bits)


def _run_passphrase(cfg, copies):
    opts = config.passphrase_options(cfg)
    bits = passphrase_entropy(opts)
    _show("Passphrase", [generate_passphrase(opts) for _ in range(copies)], bits)


def cmd_password(args):
    cfg = _settings(args, PASSWORD_ARGS)
    try:
        _run_password(cfg, args.copies)
    except PasscraftError as e:
        print(f"[red]Failed to generate password: {escape(str(e))}[/red]")
        return 1
    if args.save:
        cfg["passphrase_mode"] = False
        config.save_config(cfg)
        print("[green]Saved settings.[/green]")
    return 0


def cmd_passphrase(args):
    cfg = _settings(args, PASSPHRASE_ARGS)
    try:
        _run_passphrase(cfg, args.copies)
    except PasscraftError as e:
        print(f"[red]Failed to generate passphrase: {escape(str(e))}[/red]")
        return 1
    if args.save:
        cfg["passphrase_mode"] = True
        config.save_config(cfg)
        print("[green]Saved settings.[/green]")
    return 0


def cmd_generate(args):
    """Generate with the saved mode and options, like opening the popup."""
    cfg = config.load_config()
    try:
        if cfg.get("passphrase_mode"):
            _run_passphrase(cfg, args.copies)
        else:
            _run_password(cfg, args.copies)
    except PasscraftError as e:
        print(f"[red]Failed to generate: {escape(str(e))}[/red]")
        return 1
    return 0


def cmd_config_show(args):
    cfg = config.load_config()
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(key, escape(repr(value)))
    print(Panel(table, title=escape(config.config_path())))
    return 0


def cmd_config_reset(args):
    config.reset_config()
    print(f"[green]Settings reset to defaults:[/green] {escape(config.config_path())}")
    return 0


def _copies(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _add_shared_flags(p):
    p.add_argument("--exclude-similar", action=argparse.BooleanOptionalAction, default=None,
                   help="Drop look-alike characters (0/O/o, 1/l/I, ...)")
    p.add_argument("--no-ambiguous", dest="no_ambiguous", action="store_true", default=None,
                   help="Drop hard-to-transcribe symbols")
    p.add_argument("--ambiguous", dest="no_ambiguous", action="store_false", default=None,
                   help="Allow hard-to-transcribe symbols")
    p.add_argument("--copies", type=_copies, default=1, help="How many results to generate")


def build_parser():
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    pw = sub.add_parser("password", help="Generate random passwords")
    pw.add_argument("--length", type=int, help="Password length")
    pw.add_argument("--lower", action=argparse.BooleanOptionalAction, default=None, help="Lowercase letters")
    pw.add_argument("--upper", action=argparse.BooleanOptionalAction, default=None, help="Uppercase letters")
    pw.add_argument("--digits", action=argparse.BooleanOptionalAction, default=None, help="Digits")
    pw.add_argument("--symbols", action=argparse.BooleanOptionalAction, default=None, help="Punctuation symbols")
    pw.add_argument("--no-repeat", dest="no_repeat", action="store_true", default=None,
                    help="Forbid identical adjacent characters")
    pw.add_argument("--repeat", dest="no_repeat", action="store_false", default=None,
                    help="Allow identical adjacent characters")
    _add_shared_flags(pw)
    pw.add_argument("--save", action="store_true", help="Remember these options")
    pw.set_defaults(func=cmd_password)

    pp = sub.add_parser("passphrase", help="Generate word passphrases")
    pp.add_argument("--words", type=int, help="Number of words")
    pp.add_argument("--delimiter", type=str, help="Word separator (1-2 characters)")
    pp.add_argument("--capitalize", action=argparse.BooleanOptionalAction, default=None,
                    help="Capitalize each word")
    pp.add_argument("--number", action=argparse.BooleanOptionalAction, default=None,
                    help="Replace one word with a digit")
    pp.add_argument("--symbol", action=argparse.BooleanOptionalAction, default=None,
                    help="Replace one word with a symbol")
    _add_shared_flags(pp)
    pp.add_argument("--save", action="store_true", help="Remember these options")
    pp.set_defaults(func=cmd_passphrase)

    gen = sub.add_parser("generate", help="Generate using the saved mode and options")
    gen.add_argument("--copies", type=_copies, default=1, help="How many results to generate")
    gen.set_defaults(func=cmd_generate)

    c = sub.add_parser("config", help="Saved settings")
    csub = c.add_subparsers(dest="ccmd", required=True)
    c_show = csub.add_parser("show", help="Print the saved settings")
    c_show.set_defaults(func=cmd_config_show)
    c_reset = csub.add_parser("reset", help="Restore the default settings")
    c_reset.set_defaults(func=cmd_config_reset)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")
    logger.enable("passcraft")
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
