import json
import math
import re
from typing import Any, Optional, Tuple, Type

from loguru import logger

from ..models import (
    InvalidBooleanError,
    InvalidGroupListError,
    InvalidNumberError,
    InvalidServiceListError,
    TagError,
    TagType,
    UnrecognizedTagError,
)
from ..registry import DEFAULT_REGISTRY, TagRegistry, TagSpec
from ..validators import VALIDATION_ERRORS

# Literal decimal com sinal, fração e expoente opcionais (espaços nas pontas ok).
NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII)
INTEGER_RE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)

_COMPOSITE_ERRORS: dict[TagType, Type[TagError]] = {
    TagType.GROUP_LIST: InvalidGroupListError,
    TagType.SERVICE_LIST: InvalidServiceListError,
}


def _json(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, default=str)
    except ValueError:
        # inteiros gigantes passam do limite de conversão para texto
        return f"<{type(value).__name__}>"


def _unrecognized_message(key: str) -> str:
    return f'Unrecognized special triton tag "{key}"'


def _parse_number(raw: str) -> Optional[float | int]:
    if not NUMBER_RE.fullmatch(raw):
        return None
    if INTEGER_RE.fullmatch(raw):
        try:
            return int(raw)
        except ValueError:
            # passou do limite de dígitos do int(); não é um número finito útil
            return None
    number = float(raw)
    return number if math.isfinite(number) else None


def _check_composite(key: str, value: str, spec: TagSpec) -> Optional[TagError]:
    """
    Roda o validador composto da tag; a mensagem do validador vira o motivo.
    """
    if spec.validator is None:
        return None
    try:
        spec.validator(value)
    except VALIDATION_ERRORS as exc:
        message = f'invalid "{key}" tag: {exc}'
        error_cls = _COMPOSITE_ERRORS.get(spec.type, TagError)
        if error_cls is InvalidServiceListError:
            return InvalidServiceListError(key, value, message, parser_error=exc)
        return error_cls(key, value, message)
    return None


def parse_triton_tag_str(
    key: str,
    raw: str,
    *,
    registry: TagRegistry = DEFAULT_REGISTRY,
) -> Tuple[Any, Optional[TagError]]:
    """
    Converte a string de uma tag especial no valor tipado.

    Returns:
        (value, None) em caso de sucesso ou (None, TagError) quando o valor
        não serve para a tag. Nada é lançado por entrada inválida.
    """
    spec = registry.get(key)
    if spec is None:
        logger.debug("Unrecognized special tag {}", key)
        return None, UnrecognizedTagError(key, raw, _unrecognized_message(key))

    error: Optional[TagError] = None
    value: Any = None

    if spec.type is TagType.BOOLEAN:
        if raw == "true":
            value = True
        elif raw == "false":
            value = False
        else:
            error = InvalidBooleanError(
                key, raw, f'Triton tag "{key}" value must be "true" or "false": {_json(raw)}'
            )
    elif spec.type is TagType.NUMBER:
        value = _parse_number(raw)
        if value is None:
            error = InvalidNumberError(key, raw, f'Triton tag "{key}" value must be a number: {_json(raw)}')
    else:
        error = _check_composite(key, raw, spec)
        if error is None:
            value = raw

    if error is not None:
        logger.debug("Rejected {}: {}", key, error)
        return None, error
    return value, None


def validate_triton_tag(
    key: str,
    value: Any,
    *,
    registry: TagRegistry = DEFAULT_REGISTRY,
) -> Optional[str]:
    """
    Valida um valor já tipado (ex.: True e não "true") de uma tag especial.

    Devolve a mensagem de erro, ou None se o valor for válido. As mensagens
    falam do tipo esperado ("must be a boolean"), diferente do parse.
    """
    spec = registry.get(key)
    if spec is None:
        return _unrecognized_message(key)

    if spec.type is TagType.BOOLEAN:
        if not isinstance(value, bool):
            return f'Triton tag "{key}" value must be a boolean: {_json(value)}'
        return None

    if spec.type is TagType.NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return f'Triton tag "{key}" value must be a number: {_json(value)}'
        if isinstance(value, float) and not math.isfinite(value):
            return f'Triton tag "{key}" value must be a number: {_json(value)}'
        return None

    if not isinstance(value, str):
        return f'Triton tag "{key}" value must be a string: {_json(value)}'

    error = _check_composite(key, value, spec)
    return None if error is None else error.message
