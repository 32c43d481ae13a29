# src/pitchprompt/models.py
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Optional, Tuple

from pitchprompt.config import NO_README


@dataclass(frozen=True)
class SubProject:
    """Immediate child directory of a scanned project (a portfolio entry)."""
    name: str
    summary: Optional[str]


@dataclass(frozen=True)
class ProjectSnapshot:
    """Immutable result of scanning a project directory once."""
    path: Path
    total_file_count: int
    code_file_count: int
    description_text: Optional[str]
    detected_skill_tags: FrozenSet[str]
    code_files: Tuple[str, ...] = ()
    extension_counts: Tuple[Tuple[str, int], ...] = ()
    code_sample: Optional[str] = None
    code_patterns: Tuple[str, ...] = ()
    subprojects: Tuple[SubProject, ...] = ()

    @property
    def name(self) -> str:
        return self.path.name or "project"

    @property
    def description(self) -> str:
        if self.description_text is None:
            return NO_README
        return self.description_text


@dataclass(frozen=True)
class PromptTemplate:
    identifier: str
    title: str
    body: str
    required: FrozenSet[str]


@dataclass(frozen=True)
class RenderedPrompt:
    template_id: str
    text: str


@dataclass(frozen=True)
class GenerationResult:
    path: Path
    prompt: RenderedPrompt
