from __future__ import annotations

from ._utils import iter_python_files, matches_prefix, package_root, parse_imports


def _violations(base_dir: str, forbidden: list[str]) -> list[str]:
    root = package_root()
    offenders: list[str] = []
    for file_path in iter_python_files(root / base_dir):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            for prefix in forbidden:
                if matches_prefix(item.module, prefix):
                    offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")
    return offenders


def test_core_has_no_presentation_dependencies() -> None:
    offenders = _violations("core", ["maybe.cli", "maybe.output", "rich", "typer"])
    assert not offenders, "core -> presentation dependency violations:\n" + "\n".join(offenders)


def test_output_does_not_import_cli() -> None:
    offenders = _violations("output", ["maybe.cli", "typer"])
    assert not offenders, "output -> cli dependency violations:\n" + "\n".join(offenders)


def test_direct_rich_imports_are_limited_to_console() -> None:
    root = package_root()
    offenders: list[str] = []
    for file_path in iter_python_files(root):
        rel = file_path.relative_to(root)
        if rel.parts[0] == "test" or str(rel) == "output/console.py":
            continue
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rich"):
                offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)
