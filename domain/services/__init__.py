from .unique_label_generator import UniqueLabelGenerator, strip_copy_suffix

__all__ = ["UniqueLabelGenerator", "strip_copy_suffix"]
