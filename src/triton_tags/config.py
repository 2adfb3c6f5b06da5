from pathlib import Path
from typing import Any, Dict

import yaml

from .models import RegistryConfigError, TagType
from .registry import DEFAULT_REGISTRY, TagRegistry, is_triton_tag


def load_config(path: str | Path) -> Dict[str, Any]:
    content = Path(path).read_text(encoding="utf-8")
    # Suporta YAML e JSON (YAML já é superset)
    return yaml.safe_load(content) or {}


def load_registry(path: str | Path, base: TagRegistry = DEFAULT_REGISTRY) -> TagRegistry:
    """
    Espera algo como:
    {
        "tags": {
            "triton.custom.flag": "boolean",
            "triton.custom.groups": "group_list"
        }
    }
    As chaves do arquivo ganham das do registry base.
    """
    config = load_config(path)
    tags = config.get("tags", {}) or {}
    if not isinstance(tags, dict):
        raise RegistryConfigError(f"'tags' must be a mapping in {path}")

    types: Dict[str, TagType] = {}
    for key, type_name in tags.items():
        if not is_triton_tag(str(key)):
            raise RegistryConfigError(f"{key!r} is not a triton tag (must start with 'triton.')")
        try:
            types[str(key)] = TagType(str(type_name).lower())
        except ValueError:
            valid = ", ".join(t.value for t in TagType)
            raise RegistryConfigError(
                f"Unknown tag type {type_name!r} for {key!r} (expected one of: {valid})"
            ) from None

    return base.extend(types)
