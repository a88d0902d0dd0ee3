import logging

from countedset.base import CountedSetError, format_counts
from countedset.counted_set import CountedMultiset, CountedSet
from countedset.version import version as __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "CountedMultiset", "CountedSet", "CountedSetError", "format_counts",
    "__version__"
]
