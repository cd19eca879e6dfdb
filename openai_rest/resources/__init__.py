"""Endpoint wrappers, one per remote resource."""

from .answers import Answers
from .classifications import Classifications
from .completions import Completions
from .engines import Engines
from .files import Files
from .finetunes import Finetunes
from .images import Images
from .search import Search

__all__ = [
    "Answers",
    "Classifications",
    "Completions",
    "Engines",
    "Files",
    "Finetunes",
    "Images",
    "Search",
]
