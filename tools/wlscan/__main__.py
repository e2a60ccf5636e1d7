"""
CLI entry point for wlscan.

Usage:
    python3 -m tools.wlscan client-header < protocol.xml > client-protocol.h
    python3 -m tools.wlscan server-header < protocol.xml > server-protocol.h
    python3 -m tools.wlscan code < protocol.xml > protocol.c
    python3 -m tools.wlscan code --config scanner.yaml --strict -o gen/protocol.c < protocol.xml
"""

import argparse
import os
import sys

from .config import ConfigError, ScannerConfig, load_config
from .emitter import emit_code, emit_header
from .parser import SchemaError, parse_protocol
from .validate import validate_protocol

MODES = ("client-header", "server-header", "code")


def fail(message: str) -> int:
    print(f"wlscan: {message}", file=sys.stderr)
    return 1


def generate(mode: str, protocol, config: ScannerConfig) -> str:
    if mode == "client-header":
        return emit_header(protocol, False, config)
    if mode == "server-header":
        return emit_header(protocol, True, config)
    return emit_code(protocol, config)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="wlscan",
        description="Generate C protocol headers and code from protocol XML on stdin")
    parser.add_argument("mode", choices=MODES, help="Output to generate")
    parser.add_argument("--config", help="YAML file with naming options")
    parser.add_argument("--strict", action="store_true",
                        help="Reject duplicate names and unknown interface references")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else ScannerConfig()
    except OSError as e:
        return fail(f"{args.config}: {e.strerror or e}")
    except ConfigError as e:
        return fail(f"{args.config}: {e}")

    try:
        protocol = parse_protocol(sys.stdin.buffer)
    except OSError as e:
        return fail(f"read: {e.strerror or e}")
    except SchemaError as e:
        return fail(str(e))

    if args.strict:
        problems = validate_protocol(protocol, config.external_interfaces,
                                     config.prefix)
        if problems:
            for p in problems:
                print(f"wlscan: {p}", file=sys.stderr)
            return 1

    text = generate(args.mode, protocol, config)

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
