"""Exception hierarchy for the Expo boilerplate generator.

Every failure a run can hit is terminal: nothing is retried and nothing is
rolled back.  The CLI catches :class:`GeneratorError` at the top level, prints
the message, and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for all generator failures."""


class ConfigValidationError(GeneratorError, ValueError):
    """Raised when a raw answer cannot be turned into a valid configuration."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class ExternalToolError(GeneratorError):
    """Raised when ``create-expo-app`` or ``npm install`` does not succeed."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip().splitlines()[-1]}" if stderr.strip() else ""
        super().__init__(
            f"Command failed with exit code {returncode}: {' '.join(command)}{detail}"
        )


class DirectoryAccessError(GeneratorError):
    """Raised when the freshly scaffolded project directory cannot be used."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Could not change to directory: {path}")


class MaterializationError(GeneratorError, OSError):
    """Raised when a planned file cannot be rendered or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


class ManifestError(GeneratorError):
    """Raised when ``app.json`` or ``package.json`` is missing or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest {path}: {reason}")
