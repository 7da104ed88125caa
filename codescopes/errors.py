from pathlib import Path
from typing import Optional


class CodescopesError(Exception):
    """Base user-facing application error."""


class MalformedRuleError(CodescopesError):
    def __init__(self, line_number: int, line: str, path: Optional[Path] = None) -> None:
        self.line_number = line_number
        self.line = line
        self.path = path
        location = f"{path}:{line_number}" if path is not None else f"line {line_number}"
        super().__init__(
            f"Malformed rule at {location}: expected '<pattern> <scope>', got {line.strip()!r}"
        )

    def with_path(self, path: Path) -> "MalformedRuleError":
        return MalformedRuleError(self.line_number, self.line, path=path)


class CodescopesFileError(CodescopesError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingCodescopesFileError(CodescopesFileError):
    def __init__(self, path: Path, searched: tuple[Path, ...] = ()) -> None:
        self.searched = searched
        super().__init__(path=path, message="No CODESCOPES file found")


class UnreadableCodescopesFileError(CodescopesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot read CODESCOPES file ({detail})")


class InvalidSettingsError(CodescopesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid settings ({detail})")


class GitCommandError(CodescopesError):
    def __init__(self, command: list[str], detail: str) -> None:
        self.command = command
        self.detail = detail
        super().__init__(f"git command failed ({' '.join(command)}): {detail}")
