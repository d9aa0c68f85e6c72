"""Custom exceptions for the content context."""

from typing import Optional


class LayoutSizingError(ValueError):
    """
    Exception raised when a content list does not match its layout split.

    Every job and project is drawn into a region of its own, so the number of
    entries must equal the number of split weights. A mismatch is a programmer
    error and is raised at construction time, never truncated.

    Attributes:
        message: Error description
        section: Section whose content is mis-sized (e.g., 'Experience')
        expected: Number of layout regions
        actual: Number of content entries supplied
    """

    def __init__(
        self,
        message: str,
        section: Optional[str] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        self.message = message
        self.section = section
        self.expected = expected
        self.actual = actual

        parts = [message]

        if section is not None:
            parts.append(f"Section: {section}")

        if expected is not None and actual is not None:
            parts.append(f"Expected {expected} entries, got {actual}")

        super().__init__("\n".join(parts))
