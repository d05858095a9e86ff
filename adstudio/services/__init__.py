"""Business logic services."""

from .copywriting import CopyService
from .creative import CreativeService
from .edit import EditService
from .lifestyle import LifestyleService
from .retry import with_retries

__all__ = ["CopyService", "CreativeService", "EditService", "LifestyleService", "with_retries"]
