"""
LibCirc State: Exceptions
============================
Structured errors for engine misuse.

These are engine-internal errors, NOT business rejections.
Business rejections flow through ActionResult(ok=False, code).
"""

from __future__ import annotations


class LibraryEngineError(Exception):
    """Base error for circulation engine operations."""
    pass


class UnknownTitleError(LibraryEngineError, KeyError):
    """Title id is not part of the catalog."""

    def __init__(self, title_id):
        self.title_id = title_id
        super().__init__(f"Title {title_id!r} is not in the catalog.")

    def __str__(self) -> str:
        return self.args[0]


class UnknownMemberClassError(LibraryEngineError, KeyError):
    """Member class id is not part of the roster."""

    def __init__(self, member_class):
        self.member_class = member_class
        super().__init__(f"Member class {member_class!r} is not in the roster.")

    def __str__(self) -> str:
        return self.args[0]


class CopyUnderflowError(LibraryEngineError):
    """take_copy called on a title with no copies on the shelf."""

    def __init__(self, title_id: int):
        self.title_id = title_id
        super().__init__(
            f"No copies of title {title_id} on the shelf. "
            f"Availability must be checked before taking a copy."
        )


class InvalidAmountError(LibraryEngineError, ValueError):
    """Negative fine, payment or late-day count."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"{name} cannot be negative, got {value!r}.")
