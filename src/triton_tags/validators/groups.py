import re
from collections import Counter

MAX_GROUPS = 100
MAX_GROUP_NAME_LENGTH = 100

GROUP_NAME_RE = re.compile(r"[A-Za-z0-9_-]*")

_LENGTH_MESSAGE = (
    f"group name must be no less than 1 character and no greater than "
    f"{MAX_GROUP_NAME_LENGTH} characters"
)


class GroupListError(ValueError):
    pass


def validate_group_list(value: str) -> None:
    """
    Valida a lista de grupos da tag triton.cmon.groups.

    A ordem das checagens importa, a primeira regra violada ganha:
    vazio -> tamanho de cada nome -> charset -> quantidade -> duplicados.
    A string original é o valor validado (nada é reordenado).
    """
    if not value:
        raise GroupListError(_LENGTH_MESSAGE)

    names = value.split(",")

    if any(not 1 <= len(name) <= MAX_GROUP_NAME_LENGTH for name in names):
        raise GroupListError(_LENGTH_MESSAGE)

    if not all(GROUP_NAME_RE.fullmatch(name) for name in names):
        raise GroupListError("groups must be strings comprised of letters, numbers, _, and -")

    if len(names) > MAX_GROUPS:
        raise GroupListError(f"must contain less than or equal to {MAX_GROUPS} group strings")

    counts = Counter(names)
    for name in names:
        if counts[name] > 1:
            raise GroupListError(f"contains duplicate group {name}")
