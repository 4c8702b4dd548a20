"""
Unit tests for error handling framework.
"""

from unittest.mock import Mock

from config.error_handling import (
    ConfigurationError,
    DownloaderError,
    EmptyInputError,
    ErrorHandler,
    ErrorSeverity,
    ErrorType,
    FileSystemError,
    GENERIC_TROUBLESHOOTING_TIPS,
    InvalidURLError,
    MissingDependencyError,
    ProcessExitError,
    ProcessLaunchError,
    ValidationError
)


class TestDownloaderError:
    """Test cases for the exception hierarchy."""

    def test_base_error_defaults(self):
        error = DownloaderError("Test error")

        assert str(error) == "Test error"
        assert error.error_type == ErrorType.PROCESS_ERROR
        assert error.severity == ErrorSeverity.MEDIUM
        assert error.details == {}
        assert error.timestamp > 0

    def test_to_dict(self):
        original = OSError("disk gone")
        error = FileSystemError("Cannot create directory x", original_exception=original)

        data = error.to_dict()

        assert data['message'] == "Cannot create directory x"
        assert data['error_type'] == 'filesystem_error'
        assert data['severity'] == 'medium'
        assert data['original_exception'] == "disk gone"

    def test_missing_dependency(self):
        error = MissingDependencyError("yt-dlp is missing", tool_name="yt-dlp")

        assert error.error_type == ErrorType.DEPENDENCY_ERROR
        assert error.severity == ErrorSeverity.CRITICAL
        assert error.details['tool_name'] == "yt-dlp"

    def test_invalid_url(self):
        error = InvalidURLError("bad url", url="https://vimeo.com/1")

        assert isinstance(error, ValidationError)
        assert error.url == "https://vimeo.com/1"
        assert 'suggested_solution' in error.details

    def test_empty_input(self):
        error = EmptyInputError("URL cannot be empty", field_name="url")

        assert error.error_type == ErrorType.INPUT_ERROR
        assert error.details['field'] == "url"

    def test_process_errors(self):
        launch = ProcessLaunchError("not found", executable="yt-dlp")
        exited = ProcessExitError("exited with code 2", exit_code=2)

        assert launch.error_type == ErrorType.PROCESS_ERROR
        assert launch.executable == "yt-dlp"
        assert exited.exit_code == 2
        assert exited.details['exit_code'] == 2

    def test_configuration_error(self):
        error = ConfigurationError("bad config")

        assert error.severity == ErrorSeverity.HIGH


class TestErrorHandler:
    """Test cases for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.logger = Mock()
        self.handler = ErrorHandler(self.logger)

    def test_handle_error_logs_with_context(self):
        error = ProcessExitError("exited with code 1", exit_code=1)

        self.handler.handle_error(error, "download")

        self.logger.error.assert_called_once()
        _, kwargs = self.logger.error.call_args
        assert kwargs['extra'] == {'error_type': 'ProcessExitError', 'context': 'download'}

    def test_recoverable_errors(self):
        recoverable = [
            ProcessExitError("x", exit_code=1),
            ProcessLaunchError("x"),
            InvalidURLError("x"),
            EmptyInputError("x"),
            FileSystemError("x"),
        ]
        for error in recoverable:
            assert self.handler.handle_error(error, "menu") is True

    def test_fatal_errors(self):
        assert self.handler.handle_error(MissingDependencyError("x"), "startup") is False
        assert self.handler.handle_error(ConfigurationError("x"), "startup") is False

    def test_generic_tips(self):
        tips = self.handler.troubleshooting_tips()

        assert tips == GENERIC_TROUBLESHOOTING_TIPS
        assert any("internet" in tip for tip in tips)
        assert any("pip install -U yt-dlp" in tip for tip in tips)

    def test_tips_do_not_mutate_generic_list(self):
        before = list(GENERIC_TROUBLESHOOTING_TIPS)

        self.handler.troubleshooting_tips(FileSystemError("x"))

        assert GENERIC_TROUBLESHOOTING_TIPS == before

    def test_launch_tip_comes_first(self):
        tips = self.handler.troubleshooting_tips(ProcessLaunchError("x", executable="yt-dlp"))

        assert tips[0].startswith("yt-dlp could not be started")
        assert len(tips) == len(GENERIC_TROUBLESHOOTING_TIPS) + 1

    def test_filesystem_tip_comes_first(self):
        tips = self.handler.troubleshooting_tips(FileSystemError("x"))

        assert "writable" in tips[0]

    def test_installation_guidance(self):
        lines = ErrorHandler.installation_guidance("yt-dlp")

        assert lines[0] == "yt-dlp was not found on your PATH."
        assert any("pip install -U yt-dlp" in line for line in lines)
