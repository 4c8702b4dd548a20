"""
Configuration management components for the yt-dlp menu front-end.
"""

from .logging_config import setup_logging, get_logger
from .error_handling import ErrorHandler, DownloaderError
from .config_manager import ConfigManager
from .filesystem_validator import FileSystemValidator

__all__ = ['setup_logging', 'get_logger', 'ErrorHandler', 'DownloaderError', 'ConfigManager', 'FileSystemValidator']
