"""Abstract base class for command-line backed scanners.

This module defines the Scanner interface shared by the scanners that
shell out to an external tool.
"""

from abc import ABC, abstractmethod

from brewrecents.core.errors import PrerequisiteMissingError
from brewrecents.utils.shell import command_exists


class Scanner(ABC):
    """Abstract base class for scanners wrapping an external tool.

    Example:
        >>> scanner = BrewScanner()
        >>> if scanner.is_available():
        ...     print(scanner.installed_packages())
    """

    def __init__(self, timeout: float | None = 60.0) -> None:
        self.timeout = timeout

    @property
    @abstractmethod
    def tool(self) -> str:
        """Return the executable this scanner depends on."""

    def is_available(self) -> bool:
        """Check if the tool is available on the system.

        Returns:
            True if the executable is on the PATH, False otherwise.
        """
        return command_exists(self.tool)

    def require(self) -> None:
        """Ensure the tool is available.

        Raises:
            PrerequisiteMissingError: If the executable is not on the PATH.
        """
        if not self.is_available():
            msg = f"{self.tool} is not installed or not on the PATH"
            raise PrerequisiteMissingError(msg)
