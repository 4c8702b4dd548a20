"""
Download manager: sequences validation, argument building and invocation.

A download moves through IDLE -> VALIDATING -> BUILDING_ARGS -> INVOKING and
ends in COMPLETED or FAILED. Nothing is retried.
"""

import logging
from typing import Optional

from models.core import (
    DownloadRequest, DownloadResult, DownloadState, InvocationResult
)
from services.interfaces import DownloadManagerInterface, ProcessRunnerInterface
from services.argument_builder import (
    build_request_arguments,
    build_metadata_arguments,
    build_format_list_arguments,
    normalize_directory
)
from config.error_handling import (
    EmptyInputError,
    InvalidURLError,
    FileSystemError,
    ProcessExitError,
    ProcessLaunchError,
    ErrorHandler
)
from config.filesystem_validator import FileSystemValidator

logger = logging.getLogger(__name__)

SUPPORTED_HOSTS = ("youtube.com", "youtu.be")


def is_supported_url(url) -> bool:
    """True if the URL contains a recognizable video host marker."""
    if not url or not isinstance(url, str):
        return False
    return any(host in url for host in SUPPORTED_HOSTS)


def validate_url(url) -> str:
    """
    Reject empty or unsupported URLs.

    Args:
        url: URL typed by the user

    Returns:
        The URL unchanged

    Raises:
        EmptyInputError: If the URL is empty
        InvalidURLError: If the URL has no supported host marker
    """
    if not url:
        raise EmptyInputError("URL cannot be empty", field_name="url")
    if not is_supported_url(url):
        raise InvalidURLError(
            f"Invalid YouTube URL: {url}. Expected a youtube.com or youtu.be link",
            url=url
        )
    return url


class DownloadManager(DownloadManagerInterface):
    """Runs downloads and read-only queries through the external tool."""

    def __init__(
        self,
        runner: ProcessRunnerInterface,
        filesystem_validator: Optional[FileSystemValidator] = None,
        error_handler: Optional[ErrorHandler] = None
    ):
        """
        Initialize the download manager.

        Args:
            runner: Process runner used for every invocation
            filesystem_validator: Prepares the output directory
            error_handler: Logs failures
        """
        self.runner = runner
        self.filesystem_validator = filesystem_validator or FileSystemValidator()
        self.error_handler = error_handler or ErrorHandler(logger)
        self.last_error: Optional[Exception] = None

    def download(self, request: DownloadRequest) -> DownloadResult:
        """
        Download a single video.

        Args:
            request: URL, directory and quality chosen by the user

        Returns:
            DownloadResult in COMPLETED or FAILED state

        Raises:
            EmptyInputError: If the URL is empty
            InvalidURLError: If the URL is not a supported link
        """
        self.last_error = None
        result = DownloadResult(output_directory=normalize_directory(request.output_directory))

        self._enter(result, DownloadState.VALIDATING)
        validate_url(request.url)

        self._enter(result, DownloadState.BUILDING_ARGS)
        result.tokens = build_request_arguments(request)
        try:
            self.filesystem_validator.ensure_directory(result.output_directory)
        except FileSystemError as e:
            self._fail(result, e)
            return result

        self._enter(result, DownloadState.INVOKING)
        outcome = self.runner.run(result.tokens)

        if outcome.success:
            result.mark_success(outcome.exit_code)
            logger.info(f"Download completed: {request.url} -> {result.output_directory}")
        elif not outcome.launched:
            self._fail(result, ProcessLaunchError(
                outcome.launch_error, executable=self.runner.tool_name
            ))
        else:
            self._fail(result, ProcessExitError(
                f"{self.runner.tool_name} exited with code {outcome.exit_code}",
                exit_code=outcome.exit_code
            ), exit_code=outcome.exit_code)

        logger.debug(f"Download states: {[state.value for state in result.states]}")
        return result

    def show_metadata(self, url: str) -> InvocationResult:
        """Print title and duration of a video without downloading it."""
        validate_url(url)
        return self._run_query(build_metadata_arguments(url), "show_metadata")

    def list_formats(self, url: str) -> InvocationResult:
        """Print the formats available for a video."""
        validate_url(url)
        return self._run_query(build_format_list_arguments(url), "list_formats")

    def _run_query(self, tokens, context: str) -> InvocationResult:
        self.last_error = None
        outcome = self.runner.run(tokens)
        if not outcome.launched:
            self.last_error = ProcessLaunchError(outcome.launch_error, executable=self.runner.tool_name)
            self.error_handler.handle_error(self.last_error, context)
        elif not outcome.success:
            self.last_error = ProcessExitError(
                f"{self.runner.tool_name} exited with code {outcome.exit_code}",
                exit_code=outcome.exit_code
            )
            self.error_handler.handle_error(self.last_error, context)
        return outcome

    def _enter(self, result: DownloadResult, state: DownloadState) -> None:
        logger.debug(f"Download state: {result.state.value} -> {state.value}")
        result.transition(state)

    def _fail(self, result: DownloadResult, error: Exception, exit_code: Optional[int] = None) -> None:
        self.last_error = error
        self.error_handler.handle_error(error, "download")
        result.mark_failure(str(error), exit_code=exit_code)
