"""Domain service minting collision-free copy labels for duplicated pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from domain.exceptions import LabelAllocationError
from domain.value_objects.label_style import LabelStyle

if TYPE_CHECKING:
    from application.ports.stores.translation_store import TranslationStore

logger = structlog.get_logger()

LABEL_COLUMNS = ("title", "route")
FIRST_COPY_NUMBER = 2
COPY_MARKERS = (" - ", "-")


def _strip_one(label: str) -> str | None:
    """Remove a single trailing copy marker, or return None if there is none."""
    end = len(label)
    start = end
    while start > 0 and label[start - 1].isascii() and label[start - 1].isdigit():
        start -= 1
    if start == end:
        return None

    head = label[:start]
    for marker in COPY_MARKERS:
        if head.endswith(marker):
            base = head[: -len(marker)].rstrip()
            return base or None
    return None


def strip_copy_suffix(label: str) -> str:
    """Reduce a label to its base by dropping trailing copy numbers.

    ``"Home - 3"`` becomes ``"Home"``, ``"home-page-5"`` becomes
    ``"home-page"`` and stacked markers such as ``"Home - 2 - 3"`` are all
    removed. A label is never reduced to an empty string, so ``"-5"`` and
    ``"2024"`` come back unchanged.
    """
    current = label
    while (stripped := _strip_one(current)) is not None:
        current = stripped
    return current


class UniqueLabelGenerator:
    """Finds the first free ``<base><separator><n>`` label in a translation column.

    The check and the later insert are not atomic: two concurrent
    duplications of the same page may both pick the same number.
    """

    def __init__(self, translation_store: TranslationStore, max_attempts: int = 1000) -> None:
        if max_attempts < 1:
            msg = "max_attempts must be at least 1"
            raise ValueError(msg)
        self.translation_store = translation_store
        self.max_attempts = max_attempts

    def generate(self, column: str, existing: str, style: LabelStyle) -> str:
        if column not in LABEL_COLUMNS:
            msg = f"Unsupported label column: {column!r}"
            raise ValueError(msg)

        base = strip_copy_suffix(existing)
        for attempt in range(self.max_attempts):
            candidate = f"{base}{style.separator}{FIRST_COPY_NUMBER + attempt}"
            if self.translation_store.find_first_where(column, candidate) is None:
                logger.info("unique_label_allocated", column=column, label=candidate)
                return candidate
            logger.debug("label_collision", column=column, candidate=candidate)

        logger.warning(
            "unique_label_exhausted",
            column=column,
            base=base,
            max_attempts=self.max_attempts,
        )
        msg = f"Could not allocate a unique {column} for {existing!r} after {self.max_attempts} attempts"
        raise LabelAllocationError(msg)

    def generate_unique_title(self, title: str) -> str:
        return self.generate("title", title, LabelStyle.SPACED)

    def generate_unique_route(self, route: str) -> str:
        return self.generate("route", route, LabelStyle.COMPACT)
