from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple

from .models import TagType
from .validators import validate_group_list, validate_service_list

TRITON_TAG_PREFIX = "triton."

# Validadores compostos: recebem a string e lançam um dos VALIDATION_ERRORS com o motivo.
CompositeValidator = Callable[[str], None]

COMPOSITE_VALIDATORS: Mapping[TagType, CompositeValidator] = MappingProxyType(
    {
        TagType.GROUP_LIST: validate_group_list,
        TagType.SERVICE_LIST: validate_service_list,
    }
)


def is_triton_tag(key: str) -> bool:
    return key.startswith(TRITON_TAG_PREFIX) and len(key) > len(TRITON_TAG_PREFIX)


@dataclass(frozen=True)
class TagSpec:
    type: TagType
    validator: Optional[CompositeValidator] = None

    @classmethod
    def of(cls, tag_type: TagType) -> "TagSpec":
        return cls(tag_type, COMPOSITE_VALIDATORS.get(tag_type))


class TagRegistry:
    """
    Mapeamento imutável chave -> TagSpec das tags especiais conhecidas.

    Nunca é alterado depois de criado; `extend` devolve um registry novo.
    """

    def __init__(self, specs: Mapping[str, TagSpec]) -> None:
        for key in specs:
            if not is_triton_tag(key):
                raise ValueError(f"Not a triton tag: {key!r}")
        self._specs = MappingProxyType(dict(specs))

    @classmethod
    def from_types(cls, types: Mapping[str, TagType]) -> "TagRegistry":
        return cls({key: TagSpec.of(tag_type) for key, tag_type in types.items()})

    def get(self, key: str) -> Optional[TagSpec]:
        return self._specs.get(key)

    def extend(self, types: Mapping[str, TagType]) -> "TagRegistry":
        merged: Dict[str, TagSpec] = dict(self._specs)
        merged.update({key: TagSpec.of(tag_type) for key, tag_type in types.items()})
        return TagRegistry(merged)

    def items(self) -> Iterator[Tuple[str, TagSpec]]:
        return iter(self._specs.items())

    def __contains__(self, key: object) -> bool:
        return key in self._specs

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)


DEFAULT_REGISTRY = TagRegistry.from_types(
    {
        "triton.cmon.groups": TagType.GROUP_LIST,
        "triton.cns.disable": TagType.BOOLEAN,
        "triton.cns.reverse_ptr": TagType.STRING,
        "triton.cns.services": TagType.SERVICE_LIST,
        "triton.network.public": TagType.STRING,
    }
)
