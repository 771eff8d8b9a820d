import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from component_linker.core.config import DEFAULT_LINK_TEMPLATES, LinkerConfig
from component_linker.rules.models import LinkerRules

DEFAULT_RULES_PATH = "linker_rules.yaml"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """Explicit path, then LINKER_RULES_PATH, then the project root default."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get("LINKER_RULES_PATH")
    if env_path:
        return Path(env_path)
    return _find_project_root() / DEFAULT_RULES_PATH


def load_rules(path: Path | str | None = None) -> LinkerRules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    rules_path = resolve_rules_path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found at: {rules_path}")

    with open(rules_path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return LinkerRules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Rules validation failed:\n{e}") from e


def config_from_rules(rules: LinkerRules) -> LinkerConfig:
    """Build linker config from validated rules."""
    templates = dict(DEFAULT_LINK_TEMPLATES)
    templates.update(rules.link_templates)
    return LinkerConfig(
        package_scope=rules.namespace.package_scope,
        modules_dir=rules.namespace.modules_dir,
        manifest_name=rules.manifest.name,
        manifest_indent=rules.manifest.indent,
        index_name=rules.entry_points.index_name,
        max_workers=rules.concurrency.max_workers,
        link_templates=templates,
    )
