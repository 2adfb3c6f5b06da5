import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import typer_di
import yaml

from triton_tags import TagRegistry, is_triton_tag, parse_triton_tag_str
from triton_tags.config import load_config

from .console import BOLD, CYAN, GREEN, RED, RESET, RULE
from ..params import output_params, parse_key_values, registry_params


def _load_tags_file(tags_file: Path) -> Dict[str, str]:
    """
    Lê um mapeamento {key: value} de um arquivo YAML/JSON.
    Escalares não-string (true, 42) voltam ao texto que a tag guardaria.
    """
    try:
        data = load_config(tags_file)
    except (OSError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--file") from exc
    if not isinstance(data, dict):
        raise typer.BadParameter("expected a mapping of tag keys to values", param_hint="--file")
    return {
        str(key): value if isinstance(value, str) else json.dumps(value)
        for key, value in data.items()
    }


def _check_tags(tags: Dict[str, str], registry: TagRegistry) -> List[Dict[str, Any]]:
    results = []
    for key, raw in tags.items():
        if not is_triton_tag(key):
            results.append({"key": key, "valid": False, "error": f'"{key}" is not a triton tag'})
            continue

        value, error = parse_triton_tag_str(key, raw, registry=registry)
        if error is not None:
            results.append({"key": key, "valid": False, "error": error.message})
        else:
            results.append({"key": key, "valid": True, "value": value})
    return results


def _print_results(results: List[Dict[str, Any]], output: str) -> None:
    if output == "json":
        typer.echo(json.dumps(results, indent=2, ensure_ascii=False))
        return

    if output == "yaml":
        typer.echo(yaml.safe_dump(results, sort_keys=False, allow_unicode=True))
        return

    max_key_len = max((len(r["key"]) for r in results), default=0)

    print()
    print(RULE)
    print(f"{CYAN}{BOLD}Special Tags:{RESET}")
    print(RULE)
    for r in results:
        if r["valid"]:
            print(f"  {GREEN}[ok]{RESET} {r['key']:<{max_key_len}} = {json.dumps(r['value'])}")
        else:
            print(f"  {RED}[!!]{RESET} {r['key']:<{max_key_len}}   {r['error']}")
    print(RULE)
    print()


def check(
    tags: Optional[List[str]] = typer.Argument(
        None,
        help="Tags to check, as KEY=VALUE (e.g. triton.cns.disable=true).",
    ),
    tags_file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="YAML/JSON file with a mapping of tags to check.",
    ),
    output: str = typer_di.Depends(output_params),
    registry: TagRegistry = typer_di.Depends(registry_params),
) -> None:
    """
    Valida valores de tags especiais triton.* sem tocar em nenhum recurso.

    Sai com código 1 se alguma tag for inválida.
    """
    pairs: Dict[str, str] = {}
    if tags_file is not None:
        pairs.update(_load_tags_file(tags_file))
    pairs.update(parse_key_values(tags or []))

    if not pairs:
        raise typer.BadParameter("Pass at least one KEY=VALUE or --file.")

    results = _check_tags(pairs, registry)
    _print_results(results, output)

    if not all(r["valid"] for r in results):
        raise typer.Exit(code=1)
