"""
Interface definitions for CLI components.
"""

from abc import ABC, abstractmethod
from typing import Optional
from models.core import MenuAction, QualitySelection
from services.download_manager import is_supported_url


class MenuInterface(ABC):
    """Interface for the interactive menu."""

    @abstractmethod
    def display_menu(self) -> None:
        """Show the main menu."""
        pass

    @abstractmethod
    def handle_user_prompts(self, prompt: str, default: str = "") -> str:
        """Handle user prompts and return user input."""
        pass

    @abstractmethod
    def display_error(self, error_message: str) -> None:
        """Display error message to the user."""
        pass

    @abstractmethod
    def display_success(self, message: str) -> None:
        """Display success message to the user."""
        pass

    @abstractmethod
    def run(self) -> None:
        """Run the menu loop until the user exits."""
        pass


class ArgumentValidator:
    """Validates and interprets menu answers."""

    @staticmethod
    def validate_url(url: str) -> bool:
        """Accept any string containing youtube.com or youtu.be."""
        return is_supported_url(url)

    @staticmethod
    def is_blank(value: Optional[str]) -> bool:
        return value is None or not str(value).strip()

    @staticmethod
    def parse_quality(choice: Optional[str]) -> QualitySelection:
        """Menu answer to quality; anything unrecognized means best quality."""
        return QualitySelection.from_choice(choice)

    @staticmethod
    def parse_menu_choice(choice: Optional[str]) -> Optional[MenuAction]:
        return MenuAction.from_choice(choice)
