import argparse
import logging
import sys
from pathlib import Path

from component_linker.adapters.fs import LocalFileSystemAdapter
from component_linker.adapters.registry import InMemoryRegistry, load_workspace
from component_linker.components.linker import (
    LinkRequest,
    get_all_components_links,
    link_all_to_node_modules,
    link_components,
)
from component_linker.core.config import DEFAULT_CONFIG, LinkerConfig
from component_linker.core.entities import ChangeSet, ComponentWithDependencies
from component_linker.core.errors import LinkerError
from component_linker.rules.loader import config_from_rules, load_rules, resolve_rules_path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

WORKSPACE_PATH = "workspace.yaml"


def get_config(rules_path: str | None) -> LinkerConfig:
    path = resolve_rules_path(rules_path)
    if not path.exists():
        if rules_path is not None:
            logger.error(f"Rules file {path} not found.")
            sys.exit(1)
        return DEFAULT_CONFIG
    return config_from_rules(load_rules(path))


def get_registry(workspace_path: str) -> InMemoryRegistry:
    if not Path(workspace_path).exists():
        logger.error(f"Workspace file {workspace_path} not found.")
        sys.exit(1)
    return load_workspace(workspace_path)


def print_changes(changes: ChangeSet) -> None:
    for link_file in changes.files:
        print(f"file    {link_file.path}")
    for symlink in changes.symlinks:
        print(f"symlink {symlink.dest} -> {symlink.source}")
    print(f"{len(changes.files)} file(s), {len(changes.symlinks)} symlink(s).")


def build_request(registry: InMemoryRegistry, args: argparse.Namespace) -> LinkRequest:
    components = registry.resolve_components(args.ids)
    missing = sorted(set(args.ids) - {c.id for c in components})
    if missing:
        logger.error(f"Unknown component(s): {', '.join(missing)}")
        sys.exit(1)

    with_dependencies = [
        ComponentWithDependencies(
            component=component,
            dependencies=tuple(
                registry.resolve_components(edge.target_id for edge in component.dependencies)
            ),
        )
        for component in components
    ]
    return LinkRequest(
        components_with_dependencies=with_dependencies,
        written_components=components,
        create_npm_link_files=args.npm_links,
        write_package_json=args.package_json,
    )


def handle_link(args: argparse.Namespace) -> None:
    config = get_config(args.rules)
    registry = get_registry(args.workspace)
    fs = LocalFileSystemAdapter(args.project_root, manifest_name=config.manifest_name)
    request = build_request(registry, args)

    if args.dry_run:
        changes = get_all_components_links(request, registry=registry, manifests=fs, config=config)
        print_changes(changes)
        return

    linked = link_components(request, registry=registry, manifests=fs, fs=fs, config=config)
    print(f"Linked {len(linked)} component(s).")


def handle_link_all(args: argparse.Namespace) -> None:
    config = get_config(args.rules)
    registry = get_registry(args.workspace)
    fs = LocalFileSystemAdapter(args.project_root, manifest_name=config.manifest_name)

    results = link_all_to_node_modules(registry=registry, fs=fs, config=config)
    for result in results:
        for bound in result.bound:
            print(f"{bound.to_path} -> {bound.from_path}")
    print(f"Linked {len(results)} component(s) to {config.modules_dir}.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Component linker CLI")
    parser.add_argument("--workspace", default=WORKSPACE_PATH, help="Workspace YAML file")
    parser.add_argument("--rules", help="Linker rules YAML file")
    parser.add_argument("--project-root", default=".", help="Directory paths are relative to")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # link
    link_parser = subparsers.add_parser("link", help="Link components and their dependents")
    link_parser.add_argument("ids", nargs="+", help="Ids of the written components")
    link_parser.add_argument("--npm-links", action="store_true", help="Create npm-style links")
    link_parser.add_argument(
        "--package-json", action="store_true", help="Manifests carry main; skip entry points"
    )
    link_parser.add_argument("--dry-run", action="store_true", help="Print instead of writing")

    # link-all
    subparsers.add_parser("link-all", help="Re-link every tracked component")

    args = parser.parse_args()

    try:
        if args.command == "link":
            handle_link(args)
        elif args.command == "link-all":
            handle_link_all(args)
    except LinkerError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
