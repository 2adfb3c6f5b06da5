from .validate_engine import parse_triton_tag_str, validate_triton_tag

__all__ = ["parse_triton_tag_str", "validate_triton_tag"]
