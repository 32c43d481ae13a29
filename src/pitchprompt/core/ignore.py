# src/pitchprompt/core/ignore.py
import logging
from pathlib import Path, PurePath
from typing import Iterable, List, Optional

import pathspec

from pitchprompt.config import IGNORE_FILE_NAME

logger = logging.getLogger(__name__)


def build_spec(patterns: Iterable[str]) -> pathspec.PathSpec:
    """Compiles gitignore-style patterns into a PathSpec."""
    return pathspec.GitIgnoreSpec.from_lines(list(patterns))


def load_ignore_spec(root_dir: Path, extra_patterns: Optional[List[str]] = None) -> Optional[pathspec.PathSpec]:
    """
    Loads rules from the project's .promptignore, if it has one.
    Returns None when there is nothing to ignore so every file counts.
    """
    lines: List[str] = []
    ignore_file = root_dir / IGNORE_FILE_NAME

    if ignore_file.is_file():
        lines = ignore_file.read_text(encoding="utf-8").splitlines()
        # The rules file is bookkeeping, not project content
        lines.append(IGNORE_FILE_NAME)
        logger.info(f"Loaded {len(lines) - 1} ignore rules from {IGNORE_FILE_NAME}")

    if extra_patterns:
        lines.extend(extra_patterns)

    if not lines:
        return None
    return build_spec(lines)


def is_path_ignored(rel_path: PurePath, spec: Optional[pathspec.PathSpec], is_directory: bool = False) -> bool:
    if spec is None:
        return False
    path_str = rel_path.as_posix()
    if is_directory:
        path_str += "/"
    return spec.match_file(path_str)
