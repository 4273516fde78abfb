from .label_style import LabelStyle
from .translation import Translation

__all__ = [
    "LabelStyle",
    "Translation",
]
