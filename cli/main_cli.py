"""
Interactive menu for the yt-dlp front-end, built on the Click framework.
"""

import click
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

from models.core import DownloadRequest, MenuAction, QualitySelection
from config.logging_config import get_logger
from config.error_handling import (
    ConfigurationError, DownloaderError, MissingDependencyError
)
from core.application import DownloaderApplication
from cli.interfaces import MenuInterface, ArgumentValidator


MENU_WIDTH = 40


class MenuCLI(MenuInterface):
    """Menu loop driving downloads, info lookups and format listings."""

    def __init__(self, app: DownloaderApplication):
        """Initialize the menu around an application instance."""
        self.app = app
        self.logger = get_logger(__name__)

    def display_menu(self) -> None:
        click.echo("\n" + "=" * MENU_WIDTH)
        click.echo(click.style(f"  {self.app.tool_name} Video Downloader", bold=True))
        click.echo("=" * MENU_WIDTH)
        click.echo("1. Download video")
        click.echo("2. Show video info")
        click.echo("3. List available formats")
        click.echo("4. Exit")

    def handle_user_prompts(self, prompt: str, default: str = "") -> str:
        """Handle user prompts and return user input."""
        return click.prompt(prompt, default=default, show_default=bool(default))

    def display_error(self, error_message: str) -> None:
        """Display error message to the user."""
        click.echo(click.style(f"Error: {error_message}", fg='red'), err=True)

    def display_success(self, message: str) -> None:
        """Display success message to the user."""
        click.echo(click.style(message, fg='green'))

    def display_troubleshooting(self, error: Optional[Exception] = None) -> None:
        click.echo("\nTroubleshooting tips:")
        for tip in self.app.error_handler.troubleshooting_tips(error):
            click.echo(f"  - {tip}")

    def check_dependencies(self) -> bool:
        """Print installation guidance and return False if the tool is missing."""
        try:
            self.app.check_prerequisites()
        except MissingDependencyError as e:
            self.display_error(e.message)
            for line in self.app.error_handler.installation_guidance(self.app.tool_name):
                click.echo(line, err=True)
            return False
        return True

    def run(self) -> None:
        """
        Run the menu loop.

        Only the Exit entry (or end of input) leaves the loop; every other
        failure is reported and the menu is shown again.
        """
        self.app.start()
        try:
            while True:
                self.display_menu()
                choice = self.handle_user_prompts("Select an option")
                action = ArgumentValidator.parse_menu_choice(choice)

                if action is None:
                    self.display_error("Invalid choice. Please select 1-4.")
                    continue
                if action is MenuAction.EXIT:
                    click.echo("Goodbye!")
                    break

                self.dispatch(action)
        except click.Abort:
            click.echo("\nExiting.")
        finally:
            self.app.shutdown()

    def dispatch(self, action: MenuAction) -> None:
        handlers = {
            MenuAction.DOWNLOAD: self.handle_download,
            MenuAction.INFO: self.handle_info,
            MenuAction.FORMATS: self.handle_formats,
        }
        try:
            handlers[action]()
        except DownloaderError as e:
            self.app.error_handler.handle_error(e, action.name.lower())
            self.display_error(e.message)

    def prompt_url(self) -> Optional[str]:
        """Ask for a URL; report and return None if it is empty or unsupported."""
        url = self.handle_user_prompts("Enter video URL").strip()

        if ArgumentValidator.is_blank(url):
            self.display_error("URL cannot be empty.")
            return None
        if not ArgumentValidator.validate_url(url):
            self.display_error("Invalid YouTube URL. Please enter a youtube.com or youtu.be link.")
            return None
        return url

    def prompt_quality(self) -> QualitySelection:
        click.echo("\nSelect quality:")
        for key, quality in QualitySelection.menu_choices():
            click.echo(f"{key}. {quality.label}")
        answer = self.handle_user_prompts("Quality (blank for best)")
        return ArgumentValidator.parse_quality(answer)

    def handle_download(self) -> None:
        url = self.prompt_url()
        if url is None:
            return

        output_directory = self.handle_user_prompts(
            "Output directory (blank for current directory)",
            default=self.app.config.default_output_directory
        ).strip()
        quality = self.prompt_quality()

        request = DownloadRequest(url=url, output_directory=output_directory, quality=quality)

        click.echo(f"\nURL: {request.url}")
        click.echo(f"Output directory: {request.output_directory or '(current directory)'}")
        click.echo(f"Quality: {request.quality.label}")
        click.echo("Starting download...\n")

        result = self.app.download(request)

        if result.success:
            self.display_success("Download completed successfully!")
            click.echo(f"Files saved to: {result.output_directory}")
        else:
            self.display_error(f"Download failed: {result.error_message}")
            self.display_troubleshooting(self.app.last_error)

    def handle_info(self) -> None:
        url = self.prompt_url()
        if url is None:
            return

        click.echo("\nFetching video info...\n")
        result = self.app.show_metadata(url)
        if not result.success:
            self.display_error(f"Could not fetch video info: {self._describe_failure(result)}")
            self.display_troubleshooting(self.app.last_error)

    def handle_formats(self) -> None:
        url = self.prompt_url()
        if url is None:
            return

        click.echo("\nAvailable formats:\n")
        result = self.app.list_formats(url)
        if not result.success:
            self.display_error(f"Could not list formats: {self._describe_failure(result)}")
            self.display_troubleshooting(self.app.last_error)

    def _describe_failure(self, result) -> str:
        if result.launch_error:
            return result.launch_error
        return f"{self.app.tool_name} exited with code {result.exit_code}"


@click.command()
@click.option('--config', '-c',
              type=click.Path(exists=True, path_type=Path),
              help='Path to a JSON configuration file')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
              default=None,
              help='Set logging level')
@click.option('--log-file',
              type=click.Path(path_type=Path),
              help='Write a JSON log to this file name under ./logs')
def main(config, log_level, log_file):
    """
    Interactive menu for downloading videos with yt-dlp.

    \b
    The menu offers:
      1. Download video (best, 720p, 480p or mp3 audio)
      2. Show video info (title and duration)
      3. List available formats
      4. Exit
    """
    cli_args = _process_cli_args({'log_level': log_level, 'log_file': log_file})

    try:
        app = DownloaderApplication.from_config_file(
            config, cli_args=cli_args, console_level=_console_level(log_level)
        )
    except ConfigurationError as e:
        click.echo(click.style(f"Error: Configuration error: {e.message}", fg='red'), err=True)
        sys.exit(1)

    menu = MenuCLI(app)
    if not menu.check_dependencies():
        sys.exit(1)

    menu.run()
    return 0


def _console_level(log_level: Optional[str]) -> int:
    """An explicit --log-level also opens the console handler; otherwise only CRITICAL is shown."""
    if log_level is None:
        return logging.CRITICAL
    return getattr(logging, log_level.upper(), logging.CRITICAL)


def _process_cli_args(cli_args: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset options and convert Path objects to strings."""
    processed_args = {}

    for key, value in cli_args.items():
        if value is None:
            continue
        if isinstance(value, Path):
            processed_args[key] = str(value)
        else:
            processed_args[key] = value

    return processed_args


if __name__ == '__main__':
    main()
