"""
Main application controller for the yt-dlp menu front-end.
"""

import logging
from typing import Optional, Dict, Any, Union
from pathlib import Path

from models.core import AppConfig, DownloadRequest, DownloadResult, InvocationResult
from services.interfaces import ProcessRunnerInterface, DownloadManagerInterface
from services.process_runner import create_process_runner
from services.download_manager import DownloadManager
from config import ConfigManager
from config.logging_config import setup_logging, get_logger
from config.error_handling import ErrorHandler, MissingDependencyError


class DownloaderApplication:
    """
    Wires configuration, logging, the process runner and the download manager.

    The presenter talks only to this class; it never builds runners or
    managers itself.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        runner: Optional[ProcessRunnerInterface] = None,
        download_manager: Optional[DownloadManagerInterface] = None,
        configure_logging: bool = True,
        console_level: int = logging.CRITICAL
    ):
        """
        Initialize the application.

        Args:
            config: Startup configuration; defaults are used when omitted
            runner: Process runner; picked for the current platform when omitted
            download_manager: Download manager; built around the runner when omitted
            configure_logging: Whether to install the logging handlers
            console_level: Floor of the stderr log handler
        """
        self.config = config or AppConfig()

        if configure_logging:
            setup_logging(
                log_level=self.config.log_level,
                log_file=self.config.log_file,
                console_level=console_level
            )
        self.logger = get_logger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.runner = runner or create_process_runner(self.config.tool_name)
        self.download_manager = download_manager or DownloadManager(
            self.runner, error_handler=self.error_handler
        )

        self._is_running = False
        self.logger.info("Application initialized (tool=%s)", self.config.tool_name)

    @classmethod
    def from_config_file(
        cls,
        config_path: Optional[Union[str, Path]] = None,
        cli_args: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> "DownloaderApplication":
        """
        Build the application from a JSON configuration file and CLI overrides.

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        config_manager = kwargs.pop('config_manager', None) or ConfigManager()
        path = config_path or config_manager.get_config_path()
        config = config_manager.load_config(path)
        if cli_args:
            config = config_manager.merge_cli_args(config, cli_args)
        return cls(config=config, **kwargs)

    @property
    def tool_name(self) -> str:
        return self.config.tool_name

    def check_prerequisites(self) -> None:
        """
        Verify the external tool is on the search path.

        Raises:
            MissingDependencyError: If the tool cannot be resolved
        """
        if not self.runner.is_available():
            error = MissingDependencyError(
                f"{self.tool_name} is not installed or not on PATH",
                tool_name=self.tool_name
            )
            self.error_handler.handle_error(error, "startup")
            raise error
        self.logger.debug("%s found on PATH", self.tool_name)

    def start(self) -> None:
        self._is_running = True

    def download(self, request: DownloadRequest) -> DownloadResult:
        """Download one video; see DownloadManager.download."""
        self.logger.info("Starting download: %s", request.url)
        return self.download_manager.download(request)

    def show_metadata(self, url: str) -> InvocationResult:
        self.logger.info("Fetching video info: %s", url)
        return self.download_manager.show_metadata(url)

    def list_formats(self, url: str) -> InvocationResult:
        self.logger.info("Listing formats: %s", url)
        return self.download_manager.list_formats(url)

    @property
    def last_error(self) -> Optional[Exception]:
        return getattr(self.download_manager, 'last_error', None)

    def is_running(self) -> bool:
        return self._is_running

    def shutdown(self) -> None:
        """Mark the application as stopped."""
        if self._is_running:
            self.logger.info("Shutting down")
        self._is_running = False
