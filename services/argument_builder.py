"""
Translation of a download request into yt-dlp command-line tokens.

Everything here is pure: no filesystem access, no process spawning.
"""

import os
from typing import List, Union

from models.core import DownloadRequest, QualitySelection
from config.error_handling import EmptyInputError


OUTPUT_TEMPLATE = "%(title)s.%(ext)s"
CURRENT_DIRECTORY = "./"

# Exactly one format-related flag group per selection
QUALITY_FLAGS = {
    QualitySelection.BEST: ["-f", "best"],
    QualitySelection.P720: ["-f", "best[height<=720]"],
    QualitySelection.P480: ["-f", "best[height<=480]"],
    QualitySelection.AUDIO_ONLY: ["-x", "--audio-format", "mp3"],
}


def normalize_directory(path: str) -> str:
    """
    Return the directory with a guaranteed trailing separator.

    An empty path means the current directory. Normalizing an already
    normalized path returns it unchanged.

    Args:
        path: Directory as typed by the user

    Returns:
        Directory path ending with a separator
    """
    if not path:
        return CURRENT_DIRECTORY

    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)

    if path[-1] in separators:
        return path
    return path + os.sep


def build_output_template(directory: str) -> str:
    """Output path token: normalized directory plus the title/extension placeholder."""
    return normalize_directory(directory) + OUTPUT_TEMPLATE


def quality_flags(quality: Union[QualitySelection, str, None]) -> List[str]:
    """
    Format flags for a quality selection.

    Args:
        quality: A QualitySelection or the raw menu answer

    Returns:
        New list of flag tokens
    """
    if not isinstance(quality, QualitySelection):
        quality = QualitySelection.from_choice(quality)
    return list(QUALITY_FLAGS[quality])


def build_download_arguments(
    url: str,
    output_directory: str = "",
    quality: Union[QualitySelection, str, None] = QualitySelection.BEST
) -> List[str]:
    """
    Build the token list for a download.

    The list starts with the output template flag pair, continues with the
    quality flags and always ends with the URL.

    Args:
        url: Video URL
        output_directory: Target directory (empty for the current directory)
        quality: Quality selection or raw menu answer

    Returns:
        Ordered list of tokens for the external tool

    Raises:
        EmptyInputError: If the URL is empty
    """
    if not url:
        raise EmptyInputError("URL cannot be empty", field_name="url")

    tokens = ["-o", build_output_template(output_directory)]
    tokens.extend(quality_flags(quality))
    tokens.append(url)
    return tokens


def build_request_arguments(request: DownloadRequest) -> List[str]:
    """Build the download token list for a DownloadRequest."""
    return build_download_arguments(request.url, request.output_directory, request.quality)


def build_metadata_arguments(url: str) -> List[str]:
    """Tokens that print the title and duration without downloading."""
    if not url:
        raise EmptyInputError("URL cannot be empty", field_name="url")
    return ["--get-title", "--get-duration", url]


def build_format_list_arguments(url: str) -> List[str]:
    """Tokens that list the available formats."""
    if not url:
        raise EmptyInputError("URL cannot be empty", field_name="url")
    return ["-F", url]
