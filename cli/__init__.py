"""
Command-line interface components for the yt-dlp menu front-end.
"""

from .interfaces import MenuInterface, ArgumentValidator
from .main_cli import MenuCLI

__all__ = ['MenuInterface', 'ArgumentValidator', 'MenuCLI']
