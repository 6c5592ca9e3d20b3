"""Command-line interface for utrim."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from utrim.errors import ConfigError
from utrim.lines import Mode, find_regions, split_lines, trim_buffer

CONFIG_NAME = "utrim.toml"
STDIN = "-"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    inputs: list[str]
    output_file: Path | None
    in_place: bool
    mode: Mode
    per_line: bool
    check: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="utrim",
        description="Trim ASCII and Unicode whitespace from UTF-8 text",
    )
    p.add_argument("inputs", nargs="*", metavar="FILE", help="Input files (default: stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument("-i", "--in-place", action="store_true", help="Rewrite input files")
    p.add_argument(
        "-m",
        "--mode",
        default=None,
        metavar="MODE",
        help="Side to trim: left, right or both (default: both)",
    )
    scope = p.add_mutually_exclusive_group()
    scope.add_argument(
        "--lines",
        dest="per_line",
        action="store_true",
        default=None,
        help="Trim every line (default)",
    )
    scope.add_argument(
        "--whole",
        dest="per_line",
        action="store_false",
        default=None,
        help="Trim only the start and end of each input",
    )
    p.add_argument(
        "--check",
        action="store_true",
        help="Report removable whitespace and exit 1 if any is found",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump removed code points to stderr")
    return p


def parse_mode_arg(s: str) -> Mode:
    """Parse a --mode value into a Mode."""
    try:
        return Mode.parse(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}", path) from None


def resolve_options(args: argparse.Namespace, base_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir if base_dir is not None else Path("."))
    source = config_path if config_path is not None else Path(CONFIG_NAME)

    cfg_trim = config.get("trim")
    if cfg_trim is not None and not isinstance(cfg_trim, dict):
        raise ConfigError("'trim' must be a table", source)
    cfg_trim = cfg_trim or {}

    # Mode: config < CLI
    mode = Mode.BOTH
    cfg_mode = cfg_trim.get("mode")
    if cfg_mode is not None:
        if not isinstance(cfg_mode, str):
            raise ConfigError("'trim.mode' must be a string", source)
        try:
            mode = Mode.parse(cfg_mode)
        except ValueError as exc:
            raise ConfigError(str(exc), source) from None
    if args.mode is not None:
        mode = parse_mode_arg(args.mode)

    # Per-line: config < CLI
    per_line = True
    cfg_lines = cfg_trim.get("lines")
    if cfg_lines is not None:
        if not isinstance(cfg_lines, bool):
            raise ConfigError("'trim.lines' must be a boolean", source)
        per_line = cfg_lines
    if args.per_line is not None:
        per_line = args.per_line

    inputs = list(args.inputs) or [STDIN]
    output_file = Path(args.output) if args.output else None

    if output_file is not None and len(inputs) > 1:
        raise argparse.ArgumentTypeError("--output requires a single input")
    if output_file is not None and args.in_place:
        raise argparse.ArgumentTypeError("--output and --in-place are mutually exclusive")
    if args.in_place and STDIN in inputs:
        raise argparse.ArgumentTypeError("--in-place cannot rewrite stdin")

    return CliOptions(
        inputs=inputs,
        output_file=output_file,
        in_place=args.in_place,
        mode=mode,
        per_line=per_line,
        check=args.check,
        debug=args.debug,
    )


def read_input(name: str) -> bytes:
    if name == STDIN:
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


def display_name(name: str) -> str:
    return "<stdin>" if name == STDIN else name


def check_data(data: bytes, name: str, options: CliOptions) -> int:
    """Print every removable region of data to stderr; return how many were found."""
    from utrim.report import locate

    issues = locate(data, find_regions(data, options.mode, options.per_line))
    for issue in issues:
        print(issue.format(data, display_name(name)), file=sys.stderr)
    return len(issues)


def trim_data(data: bytes, name: str, options: CliOptions) -> bytes:
    """Trim data according to options, dumping removed code points if asked."""
    if options.debug:
        from utrim.debug import dump_trim

        if options.per_line:
            for lineno, (content, _) in enumerate(split_lines(data), start=1):
                dump_trim(
                    content,
                    options.mode,
                    file=sys.stderr,
                    label=f"{display_name(name)}:{lineno}",
                )
        else:
            dump_trim(data, options.mode, file=sys.stderr, label=display_name(name))

    return trim_buffer(data, options.mode, options.per_line)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    found = 0
    for name in options.inputs:
        try:
            data = read_input(name)
        except OSError as exc:
            print(f"error: {name}: {exc.strerror or exc}", file=sys.stderr)
            return 2

        if options.check:
            found += check_data(data, name, options)
            continue

        result = trim_data(data, name, options)
        try:
            if options.in_place:
                if result != data:
                    Path(name).write_bytes(result)
            elif options.output_file:
                options.output_file.write_bytes(result)
            else:
                sys.stdout.buffer.write(result)
                sys.stdout.buffer.flush()
        except OSError as exc:
            target = name if options.in_place else str(options.output_file or "<stdout>")
            print(f"error: {target}: {exc.strerror or exc}", file=sys.stderr)
            return 2

    return 1 if found else 0
