"""
Validação das tags especiais "triton.*" de instâncias.

    >>> from triton_tags import parse_triton_tag_str
    >>> parse_triton_tag_str("triton.cns.disable", "true")
    (True, None)
"""

from loguru import logger

from .engine import parse_triton_tag_str, validate_triton_tag
from .models import ServiceRecord, TagError, TagType
from .registry import DEFAULT_REGISTRY, TRITON_TAG_PREFIX, TagRegistry, TagSpec, is_triton_tag
from .validators import ServiceListSyntaxError, parse_services

# Biblioteca: quem usa decide se quer os logs (o CLI liga com --verbose).
logger.disable("triton_tags")

__all__ = [
    "DEFAULT_REGISTRY",
    "ServiceListSyntaxError",
    "ServiceRecord",
    "TRITON_TAG_PREFIX",
    "TagError",
    "TagRegistry",
    "TagSpec",
    "TagType",
    "is_triton_tag",
    "parse_services",
    "parse_triton_tag_str",
    "validate_triton_tag",
]
