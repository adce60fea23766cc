from .mapping import index_by, sort_and_stringify, sort_properties, values_of
from .unique import is_present, merge_without_duplicates, unique

__all__ = (
    # Deduplication
    "is_present",
    "merge_without_duplicates",
    "unique",
    # Mappings
    "index_by",
    "sort_and_stringify",
    "sort_properties",
    "values_of",
)
