# spigot/main.py
"""Main entry point for spigot."""

import argparse
import logging
import sys
from typing import List, Optional

from . import rand
from .config import AppConfig, load_config, single_runner
from .errors import SpigotError
from .registry import Registry, build_registry
from .runner import build_runners, run_all


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='spigot',
        description='Generate vendor-format log lines for testing ingestion pipelines',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List available generators
  spigot --list

  # Print ten Fortinet firewall lines
  spigot --generator fortinet:firewall --count 10

  # Send Citrix CEF lines to a syslog server via UDP
  spigot -g citrix:cef --mode udp --host 192.168.1.100 --port 514

  # Run every runner defined in a config file
  spigot --config spigot.yaml
        """
    )

    gen_group = parser.add_argument_group('Generation Options')
    gen_group.add_argument(
        '--generator', '-g',
        default=None,
        help='Generator type to run instead of the runners in the config file'
    )
    gen_group.add_argument(
        '--list', '-l',
        action='store_true',
        help='List available generator types and exit'
    )
    gen_group.add_argument(
        '--rate', '-r',
        type=float,
        default=None,
        help='Records per second (default: from config or 10, 0 = no delay)'
    )
    gen_group.add_argument(
        '--count', '-c',
        type=int,
        default=None,
        help='Total records per runner (0 = unlimited)'
    )
    gen_group.add_argument(
        '--duration', '-d',
        type=int,
        default=None,
        help='Duration in seconds (0 = unlimited)'
    )
    gen_group.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed the random source for reproducible output'
    )

    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument(
        '--mode', '-m',
        choices=['console', 'udp', 'tcp', 'file'],
        default=None,
        help='Output mode (default: from config or console)'
    )
    output_group.add_argument(
        '--host', '-H',
        default=None,
        help='Target host (for udp/tcp modes)'
    )
    output_group.add_argument(
        '--port', '-P',
        type=int,
        default=None,
        help='Target port (for udp/tcp modes)'
    )
    output_group.add_argument(
        '--file', '-f',
        default=None,
        help='Output file path (for file mode)'
    )
    output_group.add_argument(
        '--no-color',
        action='store_true',
        help='Disable console colors'
    )

    config_group = parser.add_argument_group('Configuration')
    config_group.add_argument(
        '--config',
        default='spigot.yaml',
        help='Path to configuration file (default: spigot.yaml)'
    )
    config_group.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser.parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    """Override every runner with command line arguments."""
    for runner in config.runners:
        if args.mode:
            runner.output.mode = args.mode
        if args.host:
            runner.output.host = args.host
        if args.port:
            runner.output.port = args.port
        if args.file:
            runner.output.file_path = args.file
        if args.no_color:
            runner.output.color = False
        if args.rate is not None:
            runner.rate = args.rate
        if args.count is not None:
            runner.records = args.count
        if args.duration is not None:
            runner.duration = args.duration


def list_generators(registry: Registry) -> None:
    print("Available generators:")
    for name in registry.names():
        print(f"  {name}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    registry = build_registry()
    if args.list:
        list_generators(registry)
        return 0

    if args.seed is not None:
        rand.seed(args.seed)

    try:
        if args.generator:
            config = AppConfig(runners=[single_runner(args.generator)])
        else:
            config = load_config(args.config)
        if not config.runners:
            logging.error(f"No runners configured in {args.config}; use --generator or a config file")
            return 1

        apply_overrides(config, args)
        runners = build_runners(config.runners, registry)
    except SpigotError as e:
        logging.error(f"Failed to start: {e}")
        return 1

    stats = run_all(runners)

    print("\n" + "=" * 60, file=sys.stderr)
    print("SPIGOT STATISTICS", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print("\n\n".join(s.get_summary() for s in stats), file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    return 1 if any(s.failed for s in stats) else 0


if __name__ == '__main__':
    sys.exit(main())
