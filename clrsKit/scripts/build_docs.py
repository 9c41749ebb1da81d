from __future__ import annotations

import argparse
import inspect
import sys
from types import ModuleType
from typing import Any, List, Optional, Sequence

from clrsKit import __version__
from clrsKit.core.registry import AlgorithmInfo, list_algorithms


def _modules(entries: Sequence[AlgorithmInfo]) -> List[ModuleType]:
    seen: List[ModuleType] = []
    for entry in entries:
        module = inspect.getmodule(entry.target)
        if module is not None and module not in seen:
            seen.append(module)
    return seen


def _public_members(module: ModuleType) -> List[Any]:
    members = [
        obj
        for name, obj in inspect.getmembers(module, lambda o: inspect.isfunction(o) or inspect.isclass(o))
        if not name.startswith("_") and getattr(obj, "__module__", None) == module.__name__
    ]
    return sorted(members, key=lambda o: inspect.getsourcelines(o)[1])


def _signature(obj: Any) -> str:
    try:
        return str(inspect.signature(obj))
    except (TypeError, ValueError):
        return "(...)"


def _doc_block(obj: Any) -> List[str]:
    doc = inspect.getdoc(obj)
    return [doc, ""] if doc else ["_Undocumented._", ""]


def render_catalog_table(entries: Sequence[AlgorithmInfo]) -> List[str]:
    lines = [
        "| name | family | complexity | stable | in place | integers only | function |",
        "|---|---|---|---|---|---|---|",
    ]
    for e in entries:
        d = e.as_dict()
        lines.append(
            f"| `{e.name}` | {e.family} | {e.complexity} | {_yes(e.stable)} | {_yes(e.in_place)} "
            f"| {_yes(e.integer_only)} | `{d['function']}` |"
        )
    lines.append("")
    return lines


def _yes(flag: bool) -> str:
    return "yes" if flag else "no"


def render_module(module: ModuleType) -> List[str]:
    short_name = module.__name__.rsplit(".", 1)[-1]
    lines = [f"## {short_name}", ""]
    lines += _doc_block(module)
    for obj in _public_members(module):
        if inspect.isclass(obj):
            lines += [f"### `class {obj.__name__}`", ""]
        else:
            lines += [f"### `def {obj.__name__}{_signature(obj)}`", ""]
        lines += _doc_block(obj)
        if inspect.isclass(obj):
            for name, method in inspect.getmembers(obj, inspect.isfunction):
                if name.startswith("_") or method.__qualname__.split(".")[0] != obj.__name__:
                    continue
                lines += [f"#### `{obj.__name__}.{name}{_signature(method)}`", ""]
                lines += _doc_block(method)
    return lines


def build_markdown() -> str:
    """Render the whole algorithm catalog as Markdown."""
    entries = list_algorithms()
    lines = [
        f"# clrsKit {__version__}: algorithm catalog",
        "",
        "Algorithms from \"Introduction to Algorithms\" (CLRS), written to be read.",
        "",
    ]
    lines += render_catalog_table(entries)
    for module in _modules(entries):
        lines += render_module(module)
    return "\n".join(lines).rstrip() + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate clrsKit Markdown documentation")
    parser.add_argument("--output", "-o", type=str, default=None, help="Write to this file instead of stdout")
    args = parser.parse_args(argv)

    text = build_markdown()
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"[docs] Wrote {args.output}")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
