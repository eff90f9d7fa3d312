"""Application services for generating projects."""

from .archive_cache import ArchiveCache
from .customizer import ProjectCustomizer, build_questions
from .generator import GenerateRequest, GenerateResult, GenerateService
from .materializer import TemplateMaterializer
from .release_cache import CacheEntry, ReleaseCache

__all__ = [
    "ArchiveCache",
    "CacheEntry",
    "GenerateRequest",
    "GenerateResult",
    "GenerateService",
    "ProjectCustomizer",
    "ReleaseCache",
    "TemplateMaterializer",
    "build_questions",
]
