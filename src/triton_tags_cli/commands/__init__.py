from .check import check
from .tags import tags

__all__ = ["check", "tags"]
