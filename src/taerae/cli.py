"""
Taerae CLI

Usage:
    taerae --version
    taerae call getPlatformVersion
    taerae call getPlatformVersion --json
    taerae methods
"""

import argparse
import json
import platform
import sys
from dataclasses import replace
from typing import Any, List, Optional

from loguru import logger

from taerae import __version__
from taerae.channel import NOT_IMPLEMENTED, InMemoryRegistrar
from taerae.config import ChannelConfig, get_config, load_config
from taerae.errors import ConfigError, ExitCode, MethodCallError, TaeraeError
from taerae.log import setup_logging
from taerae.plugin import register_with_registrar


def get_version_string() -> str:
    """Generate a detailed version string."""
    python_version = platform.python_version()
    os_info = f"{platform.system()} {platform.release()}"
    return (
        f"taerae {__version__}\n"
        f"  python: {python_version}\n"
        f"  platform: {os_info}"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for taerae."""
    parser = argparse.ArgumentParser(
        prog="taerae",
        description="Query the host platform version over a method channel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taerae call getPlatformVersion
  taerae call getPlatformVersion --channel my_channel --json
  taerae -c taerae.yml methods
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=get_version_string(),
    )

    parser.add_argument(
        "-c", "--config",
        dest="config",
        default=None,
        help="YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv, -vvv)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    call_parser = subparsers.add_parser(
        "call",
        help="Invoke a method on the plugin channel",
        description="Register the plugin in-process and invoke one method",
    )

    call_parser.add_argument(
        "method",
        help="Method name, e.g. getPlatformVersion",
    )

    call_parser.add_argument(
        "--args",
        dest="method_args",
        default=None,
        help="Method arguments as JSON",
    )

    call_parser.add_argument(
        "--channel",
        default=None,
        help="Channel name (default: from config)",
    )

    call_parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output the result as JSON",
    )

    subparsers.add_parser(
        "methods",
        help="List recognized method names",
    )

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entrypoint for taerae CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.command is None:
        parser.print_help()
        return ExitCode.SUCCESS

    try:
        config = _load_config(parsed.config)
        setup_logging(parsed.verbose, level=None if parsed.verbose else config.log_level)

        if parsed.command == "call":
            return run_call(parsed, config)
        if parsed.command == "methods":
            return list_methods(config)
    except TaeraeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return ExitCode.KEYBOARD_INTERRUPT

    parser.print_help()
    return ExitCode.SUCCESS


def run_call(args: argparse.Namespace, config: ChannelConfig) -> int:
    """Run the call command."""
    if args.channel:
        config = replace(config, channel_name=args.channel)
    arguments = _parse_method_args(args.method_args)

    registrar = InMemoryRegistrar()
    register_with_registrar(registrar, config)
    channel = registrar.channel(config.channel_name)

    logger.debug(f"Invoking '{args.method}' on '{config.channel_name}'")
    try:
        result = channel.invoke_method(args.method, arguments)
    except MethodCallError as e:
        _print_result(args, config, "error", {"code": e.code, "message": e.error_message})
        return e.exit_code

    if result is NOT_IMPLEMENTED:
        _print_result(args, config, "not_implemented", None)
        return ExitCode.NOT_IMPLEMENTED

    _print_result(args, config, "ok", result)
    return ExitCode.SUCCESS


def list_methods(config: ChannelConfig) -> int:
    """Run the methods command."""
    handler = register_with_registrar(InMemoryRegistrar(), config)
    for name in handler.methods():
        print(name)
    return ExitCode.SUCCESS


def _load_config(path: Optional[str]) -> ChannelConfig:
    if path:
        return load_config(path)
    config = get_config()
    error = config.validate()
    if error:
        raise ConfigError(error)
    return config


def _parse_method_args(raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise ConfigError(f"--args is not valid JSON: {e}")


def _print_result(args: argparse.Namespace, config: ChannelConfig, status: str, result: Any) -> None:
    if args.json_output:
        print(json.dumps({
            "channel": config.channel_name,
            "method": args.method,
            "status": status,
            "result": result,
        }))
    elif status == "ok":
        print(result)
    elif status == "not_implemented":
        print(f"{args.method}: not implemented", file=sys.stderr)
    else:
        print(f"{args.method}: error [{result['code']}] {result['message'] or ''}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
