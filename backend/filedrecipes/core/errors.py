from typing import Optional


class RecipeRepositoryError(Exception):
    """Base class for everything the recipe repository raises."""


class InvalidPathError(RecipeRepositoryError):
    def __init__(self, path: object, reason: str = "") -> None:
        self.path = path
        message = f"Invalid recipe file path: {path!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class IOFailureError(RecipeRepositoryError):
    def __init__(self, path: str, action: str, reason: str = "") -> None:
        self.path = path
        self.action = action
        message = f"Unable to {action} recipe file {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedFormatError(RecipeRepositoryError):
    """Raised when a recipe file breaks the section structure."""

    def __init__(
        self,
        reason: str,
        *,
        path: Optional[str] = None,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        section: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.path = path
        self.line_number = line_number
        self.line = line
        self.section = section

        where = path or "<recipes>"
        if line_number is not None:
            where += f":{line_number}"
        message = f"{where}: {reason}"
        if line is not None:
            message += f" (line {line!r}"
            if section is not None:
                message += f", section {section}"
            message += ")"
        super().__init__(message)


class IndexOutOfRangeError(RecipeRepositoryError, IndexError):
    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Recipe index {index} out of range [0, {count})")
