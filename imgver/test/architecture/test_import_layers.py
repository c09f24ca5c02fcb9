from __future__ import annotations

from ._utils import iter_python_files, matches_prefix, package_root, parse_imports

_IO_MODULES = (
    "imgver.cli",
    "imgver.services",
    "imgver.registry",
    "imgver.platform",
    "imgver.output",
    "subprocess",
    "typer",
    "rich",
)


def test_versions_package_is_pure() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root / "versions"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, prefix) for prefix in _IO_MODULES):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "versions -> I/O layer violations:\n" + "\n".join(offenders)


def test_services_do_not_import_cli_modules() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root / "services"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "imgver.cli"):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "services -> cli dependency violations:\n" + "\n".join(offenders)
