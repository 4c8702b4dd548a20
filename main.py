"""
Main entry point for the yt-dlp menu front-end.

This module provides the main entry point for the CLI application,
handling interruption and termination signals.
"""

import sys
import signal

import click

from cli.main_cli import main as cli_main


def signal_handler(signum, frame):
    """Handle termination signals."""
    signal_names = {signal.SIGINT: 'SIGINT', signal.SIGTERM: 'SIGTERM'}
    signal_name = signal_names.get(signum, f'Signal {signum}')

    print(f"\nReceived {signal_name}, shutting down...", file=sys.stderr)
    sys.exit(0)


def main(argv=None):
    """Main entry point for the CLI application."""
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        result = cli_main.main(args=argv, standalone_mode=False)
        return result if isinstance(result, int) else 0

    except (KeyboardInterrupt, click.Abort):
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 1

    except click.ClickException as e:
        e.show()
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
