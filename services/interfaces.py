"""
Interface definitions for the service components.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from models.core import (
    DownloadRequest, DownloadResult, ExternalInvocation, InvocationResult
)


class ProcessRunnerInterface(ABC):
    """Interface for running the external tool."""

    last_invocation: Optional[ExternalInvocation] = None

    @property
    @abstractmethod
    def tool_name(self) -> str:
        """Name of the external executable."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the external tool can be resolved on the search path."""
        pass

    @abstractmethod
    def run(self, tokens: List[str]) -> InvocationResult:
        """Run the tool with the given tokens and wait for it to exit."""
        pass


class DownloadManagerInterface(ABC):
    """Interface for download management operations."""

    @abstractmethod
    def download(self, request: DownloadRequest) -> DownloadResult:
        """Download a single video."""
        pass

    @abstractmethod
    def show_metadata(self, url: str) -> InvocationResult:
        """Print title and duration of a video without downloading it."""
        pass

    @abstractmethod
    def list_formats(self, url: str) -> InvocationResult:
        """Print the formats available for a video."""
        pass
