# src/pitchprompt/core/scanner.py
import logging
import os
import re
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional, Set

import pathspec

from pitchprompt import config
from pitchprompt.core.ignore import build_spec, is_path_ignored
from pitchprompt.errors import ProjectNotFoundError
from pitchprompt.models import ProjectSnapshot, SubProject

logger = logging.getLogger(__name__)

_DEFINITION_LINE = re.compile(
    r"^\s*(?:pub(?:\([^)]*\))?\s+)?(?:export\s+)?(?:default\s+)?(?:async\s+)?"
    r"(?:fn|def|function|class|struct|trait|impl|interface)\b"
)


def find_readme(directory: Path) -> Optional[Path]:
    try:
        by_lower = {p.name.lower(): p for p in directory.iterdir() if p.is_file()}
    except OSError as e:
        logger.warning(f"Skipping README lookup in {directory} (read error: {e})")
        return None
    for name in config.README_NAMES:
        if name in by_lower:
            return by_lower[name]
    return None


def read_readme(directory: Path) -> Optional[str]:
    """README text of a directory, or None when there is none or it can't be read."""
    readme = find_readme(directory)
    if readme is None:
        return None
    try:
        return readme.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning(f"Skipping {readme} (read error: {e})")
        return None


def readme_summary(readme_text: str) -> Optional[str]:
    """First line of prose in a README: skips headings, badges and HTML."""
    for line in readme_text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(("#", "!", "[!", "<", "---", "===")):
            continue
        return stripped
    return None


class WorkspaceScanner:
    def __init__(
        self,
        root_dir: Path,
        extensions: Optional[Set[str]] = None,
        skill_signals: Iterable[config.SkillSignal] = config.SKILL_SIGNALS,
        ignore_spec: Optional[pathspec.PathSpec] = None,
        skip_patterns: Iterable[str] = config.DEFAULT_IGNORE_PATTERNS,
    ):
        self.root_dir = Path(root_dir)
        self.extensions = set(extensions) if extensions is not None else set(config.DEFAULT_CODE_EXTENSIONS)
        self.skill_signals = tuple(skill_signals)
        self.ignore_spec = ignore_spec
        # Vendored and VCS trees: counted, never sampled
        self.skip_spec = build_spec(skip_patterns)
        self._signal_specs = [
            build_spec(signal.file_patterns) if signal.file_patterns else None
            for signal in self.skill_signals
        ]

    def _is_code_file(self, path: Path) -> bool:
        return path.suffix in self.extensions or path.name in self.extensions

    def _read_sample(self, path: Path) -> Optional[str]:
        """
        Reads the head of a file for content checks.
        Returns None for binary files (null byte in the first 1024 bytes).
        """
        with path.open("rb") as f:
            chunk = f.read(config.MAX_SAMPLE_BYTES)
        if b"\0" in chunk[:config.BINARY_CHECK_BYTES]:
            return None
        return chunk.decode("utf-8", errors="ignore")

    def _walk(self) -> Iterable[Path]:
        """Yields files under root in a stable order, pruning ignored directories."""
        for root, dirs, files in os.walk(self.root_dir):
            root_path = Path(root)
            dirs.sort()
            for d in list(dirs):
                if is_path_ignored((root_path / d).relative_to(self.root_dir), self.ignore_spec, is_directory=True):
                    dirs.remove(d)

            for f in sorted(files):
                file_abs_path = root_path / f
                if not file_abs_path.is_file():
                    continue
                if is_path_ignored(file_abs_path.relative_to(self.root_dir), self.ignore_spec):
                    continue
                yield file_abs_path

    def _scan_subprojects(self) -> List[SubProject]:
        try:
            children = sorted(self.root_dir.iterdir())
        except OSError as e:
            logger.warning(f"Skipping subprojects of {self.root_dir} (read error: {e})")
            return []

        subprojects = []
        for child in children:
            if not child.is_dir() or child.name.startswith("."):
                continue
            rel_path = child.relative_to(self.root_dir)
            if is_path_ignored(rel_path, self.ignore_spec, is_directory=True):
                continue
            if is_path_ignored(rel_path, self.skip_spec, is_directory=True):
                continue
            readme_text = read_readme(child)
            summary = readme_summary(readme_text) if readme_text is not None else None
            subprojects.append(SubProject(name=child.name, summary=summary))
        return subprojects

    def scan(self) -> ProjectSnapshot:
        if not self.root_dir.is_dir():
            raise ProjectNotFoundError(self.root_dir)

        total = 0
        code_files: List[str] = []
        extension_counts: Counter = Counter()
        detected: Set[str] = set()
        code_sample: Optional[str] = None
        code_patterns: List[str] = []
        marker_checks = 0

        for file_abs_path in self._walk():
            rel_path = file_abs_path.relative_to(self.root_dir)
            rel_str = rel_path.as_posix()
            total += 1

            is_code = self._is_code_file(file_abs_path)
            if is_code:
                code_files.append(rel_str)
                extension_counts[file_abs_path.suffix or file_abs_path.name] += 1

            if self.skip_spec.match_file(rel_str):
                continue

            for signal, spec in zip(self.skill_signals, self._signal_specs):
                if signal.tag not in detected and spec is not None and spec.match_file(rel_str):
                    detected.add(signal.tag)

            pending_markers = []
            if marker_checks < config.MAX_SAMPLED_FILES:
                pending_markers = [
                    s for s in self.skill_signals if s.content_markers and s.tag not in detected
                ]
            wants_code_text = is_code and (code_sample is None or len(code_patterns) < config.MAX_CODE_PATTERNS)
            if not (pending_markers or wants_code_text):
                continue

            try:
                text = self._read_sample(file_abs_path)
            except OSError as e:
                logger.warning(f"Skipping {rel_str} (read error: {e})")
                continue
            if text is None:
                continue

            if pending_markers:
                marker_checks += 1
                lowered = text.lower()
                for signal in pending_markers:
                    if any(marker.lower() in lowered for marker in signal.content_markers):
                        detected.add(signal.tag)

            if wants_code_text:
                lines = text.splitlines()
                if code_sample is None and lines:
                    code_sample = f"--- {rel_str} ---\n" + "\n".join(lines[:config.CODE_SAMPLE_LINES])
                for line in lines:
                    if len(code_patterns) >= config.MAX_CODE_PATTERNS:
                        break
                    if _DEFINITION_LINE.match(line):
                        code_patterns.append(f"{rel_str}: {line.strip()[:120]}")

        snapshot = ProjectSnapshot(
            path=self.root_dir,
            total_file_count=total,
            code_file_count=len(code_files),
            description_text=read_readme(self.root_dir),
            detected_skill_tags=frozenset(detected),
            code_files=tuple(code_files),
            extension_counts=tuple(sorted(extension_counts.items())),
            code_sample=code_sample,
            code_patterns=tuple(code_patterns),
            subprojects=tuple(self._scan_subprojects()),
        )
        logger.info(
            f"Scanned {self.root_dir}: {total} files, {len(code_files)} code files, "
            f"skills={sorted(detected)}"
        )
        return snapshot
