import enum


class LabelStyle(enum.StrEnum):
    """How a copy counter is joined onto a label."""

    SPACED = "spaced"
    COMPACT = "compact"

    @property
    def separator(self) -> str:
        return " - " if self is LabelStyle.SPACED else "-"
