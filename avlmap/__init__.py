from . import tree
from . import select
from . import wordcount
from . import workload

from .tree import AVLMap, TreeIntegrityError
from .select import top_k
from .wordcount import word_frequencies

__all__ = [
    "AVLMap",
    "TreeIntegrityError",
    "top_k",
    "word_frequencies",
]
