# src/pitchprompt/core/tree.py
from typing import Dict, List, Sequence
from pathlib import PurePosixPath


def render_file_tree(file_paths: Sequence[str], root_name: str, limit: int = 0) -> str:
    """
    Renders relative POSIX paths as an indented tree under root_name.
    With a positive limit, only the first `limit` paths (sorted) are drawn
    and a trailing line reports how many were left out.
    """
    paths = sorted(file_paths)
    omitted = 0
    if limit > 0 and len(paths) > limit:
        omitted = len(paths) - limit
        paths = paths[:limit]

    tree_dict: Dict = {}
    for path in paths:
        current_level = tree_dict
        for part in PurePosixPath(path).parts:
            current_level = current_level.setdefault(part, {})

    lines: List[str] = [f"{root_name}/"]

    def _render(subtree: Dict, prefix: str):
        entries = sorted(subtree.items())
        for i, (name, children) in enumerate(entries):
            is_last = i == len(entries) - 1
            lines.append(f"{prefix}{'└── ' if is_last else '├── '}{name}")
            if children:
                _render(children, prefix + ("    " if is_last else "│   "))

    _render(tree_dict, "")
    if omitted:
        lines.append(f"... ({omitted} more files)")
    return "\n".join(lines)
