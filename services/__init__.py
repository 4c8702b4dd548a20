"""
Service layer components for the yt-dlp menu front-end.
"""

from .interfaces import (
    DownloadManagerInterface,
    ProcessRunnerInterface
)

__all__ = [
    'DownloadManagerInterface',
    'ProcessRunnerInterface'
]
