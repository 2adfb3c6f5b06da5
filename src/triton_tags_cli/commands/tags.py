import json
from typing import Dict, List

import typer
import typer_di
import yaml

from triton_tags import TagRegistry

from .console import BOLD, CYAN, GREEN, GREY, RESET, RULE
from ..params import output_params, registry_params


def _print_tags(tags_list: List[Dict[str, str]], output: str) -> None:
    if output == "json":
        typer.echo(json.dumps(tags_list, indent=2, ensure_ascii=False))
        return

    if output == "yaml":
        typer.echo(yaml.safe_dump(tags_list, sort_keys=False, allow_unicode=True))
        return

    max_key_len = max((len(t["key"]) for t in tags_list), default=0)

    print()
    print(RULE)
    print(f"{CYAN}{BOLD}Registered Special Tags:{RESET}")
    print(RULE)
    print()
    if not tags_list:
        print("  (none registered)")
        print()
        return

    for t in tags_list:
        print(f"  {GREEN}•{RESET} {t['key']:<{max_key_len}} {GREY}(type={t['type']}){RESET}")

    print()
    print(RULE)
    print()


def tags(
    output: str = typer_di.Depends(output_params),
    registry: TagRegistry = typer_di.Depends(registry_params),
) -> None:
    """
    Lista as tags especiais conhecidas e o tipo de cada uma.
    """
    tags_list = [
        {"key": key, "type": spec.type.value}
        for key, spec in sorted(registry.items())
    ]
    _print_tags(tags_list, output)
