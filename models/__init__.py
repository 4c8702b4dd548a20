"""
Data models for the yt-dlp menu front-end.
"""

from .core import (
    AppConfig,
    DownloadRequest,
    DownloadResult,
    DownloadState,
    ExternalInvocation,
    InvocationResult,
    MenuAction,
    QualitySelection
)

__all__ = [
    'AppConfig',
    'DownloadRequest',
    'DownloadResult',
    'DownloadState',
    'ExternalInvocation',
    'InvocationResult',
    'MenuAction',
    'QualitySelection'
]
