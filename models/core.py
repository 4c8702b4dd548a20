"""
Core data models for the yt-dlp menu front-end.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum


class QualitySelection(Enum):
    """Quality choices offered by the download menu."""
    BEST = "best"
    P720 = "720p"
    P480 = "480p"
    AUDIO_ONLY = "audio"

    @classmethod
    def from_choice(cls, choice: Optional[str]) -> "QualitySelection":
        """
        Map a menu answer to a quality selection.

        Unrecognized, empty or missing answers fall back to BEST.

        Args:
            choice: Raw text typed at the quality prompt

        Returns:
            Matching QualitySelection
        """
        if not isinstance(choice, str):
            return cls.BEST
        return _QUALITY_CHOICES.get(choice.strip(), cls.BEST)

    @classmethod
    def menu_choices(cls) -> List[Tuple[str, "QualitySelection"]]:
        """Menu keys and their selections, in display order."""
        return list(_QUALITY_CHOICES.items())

    @property
    def label(self) -> str:
        """Human readable label used in menus and summaries."""
        return _QUALITY_LABELS[self]


_QUALITY_CHOICES = {
    "1": QualitySelection.BEST,
    "2": QualitySelection.P720,
    "3": QualitySelection.P480,
    "4": QualitySelection.AUDIO_ONLY,
}

_QUALITY_LABELS = {
    QualitySelection.BEST: "Best available",
    QualitySelection.P720: "720p",
    QualitySelection.P480: "480p",
    QualitySelection.AUDIO_ONLY: "Audio only (mp3)",
}


class DownloadState(Enum):
    """States of a single download."""
    IDLE = "idle"
    VALIDATING = "validating"
    BUILDING_ARGS = "building_args"
    INVOKING = "invoking"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (DownloadState.COMPLETED, DownloadState.FAILED)


class MenuAction(Enum):
    """Entries of the main menu."""
    DOWNLOAD = "1"
    INFO = "2"
    FORMATS = "3"
    EXIT = "4"

    @classmethod
    def from_choice(cls, choice: Optional[str]) -> Optional["MenuAction"]:
        """Return the action for a menu answer, or None if it matches nothing."""
        if not isinstance(choice, str):
            return None
        try:
            return cls(choice.strip())
        except ValueError:
            return None


@dataclass(frozen=True)
class DownloadRequest:
    """What the user asked to download during one menu turn."""
    url: str
    output_directory: str = ""
    quality: QualitySelection = QualitySelection.BEST


@dataclass
class ExternalInvocation:
    """Token list handed to the external tool and the exit code it returned."""
    tokens: List[str]
    exit_code: Optional[int] = None


@dataclass
class InvocationResult:
    """Uniform outcome of running the external tool."""
    success: bool
    exit_code: Optional[int] = None
    launch_error: Optional[str] = None

    @property
    def launched(self) -> bool:
        """True if the child process started at all."""
        return self.launch_error is None


@dataclass
class DownloadResult:
    """Result of a download operation."""
    success: bool = False
    state: DownloadState = DownloadState.IDLE
    exit_code: Optional[int] = None
    output_directory: str = ""
    tokens: List[str] = field(default_factory=list)
    error_message: str = ""
    states: List[DownloadState] = field(default_factory=lambda: [DownloadState.IDLE])

    def transition(self, state: DownloadState) -> None:
        """Move to a new state and record it."""
        self.state = state
        self.states.append(state)

    def mark_success(self, exit_code: int) -> None:
        """Mark the download as successful."""
        self.success = True
        self.exit_code = exit_code
        self.error_message = ""
        self.transition(DownloadState.COMPLETED)

    def mark_failure(self, error_message: str, exit_code: Optional[int] = None) -> None:
        """Mark the download as failed."""
        self.success = False
        self.exit_code = exit_code
        self.error_message = error_message
        self.transition(DownloadState.FAILED)


@dataclass
class AppConfig:
    """Settings read at startup."""
    tool_name: str = "yt-dlp"
    default_output_directory: str = ""
    log_level: str = "WARNING"
    log_file: Optional[str] = None
