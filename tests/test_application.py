"""
Unit tests for DownloaderApplication and the entry point.
"""

import json
import logging
import pytest
from unittest.mock import Mock, patch

from core.application import DownloaderApplication
from models.core import AppConfig, DownloadRequest, InvocationResult
from services.interfaces import ProcessRunnerInterface
from services.process_runner import SubprocessRunner
from config.error_handling import ConfigurationError, MissingDependencyError


class TestDownloaderApplication:
    """Test cases for DownloaderApplication class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = Mock(spec=ProcessRunnerInterface)
        self.runner.tool_name = "yt-dlp"
        self.runner.is_available.return_value = True
        self.runner.run.return_value = InvocationResult(success=True, exit_code=0)
        self.app = DownloaderApplication(runner=self.runner, configure_logging=False)

    def test_defaults(self):
        assert self.app.config == AppConfig()
        assert self.app.tool_name == "yt-dlp"
        assert self.app.is_running() is False

    def test_builds_platform_runner(self):
        app = DownloaderApplication(configure_logging=False)

        assert isinstance(app.runner, SubprocessRunner)
        assert app.download_manager.runner is app.runner

    def test_check_prerequisites(self):
        self.app.check_prerequisites()

        self.runner.is_available.assert_called_once()

    def test_check_prerequisites_missing_tool(self):
        self.runner.is_available.return_value = False

        with pytest.raises(MissingDependencyError) as exc_info:
            self.app.check_prerequisites()

        assert "yt-dlp" in exc_info.value.message
        self.runner.run.assert_not_called()

    def test_download_delegates(self, tmp_path):
        request = DownloadRequest(url="https://youtu.be/abc", output_directory=str(tmp_path))

        result = self.app.download(request)

        assert result.success is True
        assert self.app.last_error is None

    def test_last_error_after_failure(self):
        self.runner.run.return_value = InvocationResult(success=False, exit_code=1)

        self.app.list_formats("https://youtu.be/abc")

        assert self.app.last_error is not None
        assert self.app.last_error.exit_code == 1

    def test_start_and_shutdown(self):
        self.app.start()
        assert self.app.is_running() is True

        self.app.shutdown()
        assert self.app.is_running() is False

    def test_logging_configured_from_config(self):
        config = AppConfig(log_level="DEBUG", log_file="menu.log")

        with patch('core.application.setup_logging') as mock_setup:
            DownloaderApplication(config=config, runner=self.runner)

        mock_setup.assert_called_once_with(
            log_level="DEBUG", log_file="menu.log", console_level=logging.CRITICAL
        )


class TestFromConfigFile:
    """Test cases for building the application from a file."""

    def test_reads_file_and_cli_overrides(self, tmp_path):
        config_file = tmp_path / "ytmenu_config.json"
        config_file.write_text(json.dumps({"default_output_directory": "videos", "log_level": "ERROR"}))

        app = DownloaderApplication.from_config_file(
            config_file, cli_args={'log_level': 'INFO'}, configure_logging=False
        )

        assert app.config.default_output_directory == "videos"
        assert app.config.log_level == "INFO"

    def test_missing_file_uses_defaults(self, tmp_path):
        app = DownloaderApplication.from_config_file(
            tmp_path / "absent.json", configure_logging=False
        )

        assert app.config == AppConfig()

    def test_invalid_file(self, tmp_path):
        config_file = tmp_path / "bad.json"
        config_file.write_text('{"tool_name": ""}')

        with pytest.raises(ConfigurationError):
            DownloaderApplication.from_config_file(config_file, configure_logging=False)


class TestEntryPoint:
    """Test cases for main.main."""

    @patch('main.signal.signal')
    @patch('main.cli_main')
    def test_returns_zero(self, mock_cli, mock_signal):
        from main import main
        mock_cli.main.return_value = 0

        assert main([]) == 0
        mock_cli.main.assert_called_once_with(args=[], standalone_mode=False)

    @patch('main.signal.signal')
    @patch('main.cli_main')
    def test_keyboard_interrupt(self, mock_cli, mock_signal, capsys):
        from main import main
        mock_cli.main.side_effect = KeyboardInterrupt()

        assert main([]) == 1
        assert "cancelled" in capsys.readouterr().err
