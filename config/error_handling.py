"""
Error handling framework for the yt-dlp menu front-end.
"""

import logging
import time
from enum import Enum
from typing import Optional, Any, Dict, List


class ErrorType(Enum):
    """Types of errors that can occur in the application."""
    DEPENDENCY_ERROR = "dependency_error"
    VALIDATION_ERROR = "validation_error"
    INPUT_ERROR = "input_error"
    PROCESS_ERROR = "process_error"
    FILESYSTEM_ERROR = "filesystem_error"
    CONFIGURATION_ERROR = "configuration_error"


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class DownloaderError(Exception):
    """Base exception class for menu front-end errors."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.PROCESS_ERROR,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.severity = severity
        self.details = details or {}
        self.original_exception = original_exception
        self.timestamp = time.time()

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            'message': self.message,
            'error_type': self.error_type.value,
            'severity': self.severity.value,
            'details': self.details,
            'timestamp': self.timestamp,
            'original_exception': str(self.original_exception) if self.original_exception else None
        }


class MissingDependencyError(DownloaderError):
    """The external tool cannot be found on the search path."""

    def __init__(self, message: str, tool_name: Optional[str] = None, **kwargs):
        kwargs.setdefault('severity', ErrorSeverity.CRITICAL)
        super().__init__(message, error_type=ErrorType.DEPENDENCY_ERROR, **kwargs)
        self.tool_name = tool_name
        self.details['tool_name'] = tool_name


class ValidationError(DownloaderError):
    """Error related to input validation."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('severity', ErrorSeverity.LOW)
        super().__init__(message, error_type=ErrorType.VALIDATION_ERROR, **kwargs)


class InvalidURLError(ValidationError):
    """URL does not point at a recognizable video host."""

    def __init__(self, message: str, url: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.url = url
        self.details['url'] = url
        self.details['suggested_solution'] = "Use a youtube.com or youtu.be link"


class EmptyInputError(DownloaderError):
    """A required answer was left blank."""

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        kwargs.setdefault('severity', ErrorSeverity.LOW)
        super().__init__(message, error_type=ErrorType.INPUT_ERROR, **kwargs)
        self.field_name = field_name
        self.details['field'] = field_name


class ProcessError(DownloaderError):
    """Error related to running the external tool."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_type=ErrorType.PROCESS_ERROR, **kwargs)


class ProcessLaunchError(ProcessError):
    """The external tool could not be started."""

    def __init__(self, message: str, executable: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.executable = executable
        self.details['executable'] = executable


class ProcessExitError(ProcessError):
    """The external tool ran but exited with a non-zero status."""

    def __init__(self, message: str, exit_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.exit_code = exit_code
        self.details['exit_code'] = exit_code


class FileSystemError(DownloaderError):
    """Error related to file system operations."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_type=ErrorType.FILESYSTEM_ERROR, **kwargs)


class ConfigurationError(DownloaderError):
    """Error related to configuration issues."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('severity', ErrorSeverity.HIGH)
        super().__init__(message, error_type=ErrorType.CONFIGURATION_ERROR, **kwargs)


GENERIC_TROUBLESHOOTING_TIPS = [
    "Check your internet connection.",
    "Make sure the URL is correct and the video is public and available.",
    "Update yt-dlp to the latest version: pip install -U yt-dlp",
    "Audio extraction and format merging need ffmpeg installed on your PATH.",
]


class ErrorHandler:
    """Centralized error reporting for menu operations."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def handle_error(self, error: Exception, context: str = "") -> bool:
        """
        Log an error and decide whether the menu can carry on.

        Nothing is ever retried; a recoverable error simply sends the user
        back to the menu.

        Args:
            error: The exception that occurred
            context: Additional context about where the error occurred

        Returns:
            True if the error is recoverable, False if the program must stop
        """
        self.logger.error(
            f"Error in {context}: {str(error)}",
            extra={
                'error_type': type(error).__name__,
                'context': context
            }
        )

        return self.is_recoverable(error)

    @staticmethod
    def is_recoverable(error: Exception) -> bool:
        """Everything except a missing tool or a broken configuration is recoverable."""
        return not isinstance(error, (MissingDependencyError, ConfigurationError))

    def troubleshooting_tips(self, error: Optional[Exception] = None) -> List[str]:
        """
        Generic hints shown after a failed invocation.

        Args:
            error: Optional error that caused the failure

        Returns:
            List of tips, most specific first
        """
        tips = []
        if isinstance(error, ProcessLaunchError):
            tool = error.executable or "yt-dlp"
            tips.append(f"{tool} could not be started; check that it is installed and executable.")
        elif isinstance(error, FileSystemError):
            tips.append("Check that the output directory is writable.")
        tips.extend(GENERIC_TROUBLESHOOTING_TIPS)
        return tips

    @staticmethod
    def installation_guidance(tool_name: str = "yt-dlp") -> List[str]:
        """Instructions printed when the external tool is missing."""
        return [
            f"{tool_name} was not found on your PATH.",
            "Install it with one of:",
            "  pip install -U yt-dlp",
            "  brew install yt-dlp        (macOS)",
            "  winget install yt-dlp      (Windows)",
            "See https://github.com/yt-dlp/yt-dlp#installation for other options.",
            "ffmpeg is also recommended for audio extraction.",
        ]
