"""Custom exceptions for CTK."""
from typing import List, Optional


class CtkError(Exception):
    """Base exception for all CTK errors."""
    pass


class ComposeFileNotFound(CtkError):
    """Exception raised when the project has no docker-compose.yml."""
    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message or f"Docker Compose file not found: {path}"
        super().__init__(self.message)


class CommandError(CtkError):
    """Exception raised when an external command fails or cannot start."""
    def __init__(self, command: List[str], returncode: Optional[int] = None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed: {' '.join(command)}"
        if returncode is not None:
            message += f" (exit code {returncode})"
        if stderr:
            message += f"\n{stderr.strip()}"
        super().__init__(message)


class SettingsError(CtkError):
    """Exception raised when the settings file cannot be loaded."""
    pass
