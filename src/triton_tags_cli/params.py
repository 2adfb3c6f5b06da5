from pathlib import Path
from typing import Optional

import typer
import yaml

from triton_tags import DEFAULT_REGISTRY, TagRegistry
from triton_tags.config import load_registry
from triton_tags.models import RegistryConfigError


def output_params(
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: json (default), yaml or text.",
    ),
    out_json: bool = typer.Option(False, "--json", help="Alias for --output json"),
    out_yaml: bool = typer.Option(False, "--yaml", help="Alias for --output yaml"),
    out_text: bool = typer.Option(False, "--text", help="Alias for --output text"),
) -> str:
    output_options = [
        out_json,
        out_yaml,
        out_text,
        output is not None,  # só conta se o usuário forneceu --output
    ]

    if sum(output_options) > 1:
        raise typer.BadParameter(
            "Use only one output option: --json, --yaml, --text or --output."
        )

    if out_json:
        output = "json"
    elif out_yaml:
        output = "yaml"
    elif out_text:
        output = "text"

    if output not in {"json", "yaml", "text"}:
        output = "json"

    return output


def registry_params(
    registry_file: Optional[Path] = typer.Option(
        None,
        "--registry",
        "-r",
        help="YAML file with extra special tags (tags: {key: type}).",
    ),
) -> TagRegistry:
    if registry_file is None:
        return DEFAULT_REGISTRY
    try:
        return load_registry(registry_file)
    except (OSError, yaml.YAMLError, RegistryConfigError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--registry") from exc


def parse_key_values(pairs: list[str]) -> dict[str, str]:
    """
    Converte ["k=v", ...] em dict. O valor pode conter "=" (só o primeiro separa).
    """
    tags: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got {pair!r}")
        tags[key] = value
    return tags
