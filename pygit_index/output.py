"""Output handler implementations: console and null."""

from __future__ import annotations

from colorama import Fore, Style
from tqdm import tqdm

SECTION_WIDTH = 50
INDENT = "  "


class ConsoleOutputHandler:
    """Console output with optional colors."""

    def __init__(self, verbose: bool = False, color: bool = True):
        """Create a console handler. verbose enables debug lines; color=False prints plain text."""
        self.verbose = verbose
        self.color = color

    def _emit(self, message: str, indent: int = 0, color: str = "") -> None:
        if color and self.color:
            message = f"{color}{message}{Style.RESET_ALL}"
        tqdm.write(INDENT * indent + message)

    def info(self, message: str, indent: int = 0) -> None:
        """Print an informational message."""
        self._emit(message, indent)

    def success(self, message: str, indent: int = 0) -> None:
        """Print a green message (repository names in listings)."""
        self._emit(message, indent, Fore.GREEN)

    def warning(self, message: str, indent: int = 0) -> None:
        self._emit(message, indent, Fore.YELLOW)

    def error(self, message: str, indent: int = 0) -> None:
        self._emit(message, indent, Fore.RED)

    def section(self, title: str) -> None:
        """Print a section header with a divider line."""
        tqdm.write("")
        self._emit(title, color=Style.BRIGHT)
        tqdm.write("-" * SECTION_WIDTH)

    def debug(self, message: str) -> None:
        """Print a cyan debug message (only when verbose is enabled)."""
        if self.verbose:
            self._emit(f"[DEBUG] {message}", color=Fore.CYAN)


class NullOutputHandler:
    """Silent output handler for tests and JSON mode."""

    def info(self, message: str, indent: int = 0) -> None:
        pass

    def success(self, message: str, indent: int = 0) -> None:
        pass

    def warning(self, message: str, indent: int = 0) -> None:
        pass

    def error(self, message: str, indent: int = 0) -> None:
        pass

    def section(self, title: str) -> None:
        pass

    def debug(self, message: str) -> None:
        pass
