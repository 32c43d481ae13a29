# src/pitchprompt/pipeline.py
"""
The five generate-* operations.

Each one runs scan -> extract -> render -> write once, passing everything
between stages explicitly. Nothing is written unless the scan and the render
both succeed.
"""
import logging
from pathlib import Path
from typing import Optional, Set, Union

import pathspec

from pitchprompt import prompts
from pitchprompt.config import Settings, get_settings
from pitchprompt.core.facts import extract_facts
from pitchprompt.core.ignore import load_ignore_spec
from pitchprompt.core.scanner import WorkspaceScanner
from pitchprompt.core.writer import OutputWriter
from pitchprompt.models import GenerationResult, ProjectSnapshot

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def scan_project(project_path: PathLike, extensions: Optional[Set[str]] = None) -> ProjectSnapshot:
    root_dir = Path(project_path).resolve()
    ignore_spec: Optional[pathspec.PathSpec] = None
    if root_dir.is_dir():
        ignore_spec = load_ignore_spec(root_dir)
    return WorkspaceScanner(root_dir, extensions=extensions, ignore_spec=ignore_spec).scan()


def scan_project_or_default(
    project_path: Optional[PathLike],
    settings: Settings,
    extensions: Optional[Set[str]] = None,
) -> Optional[ProjectSnapshot]:
    """
    Scans project_path, or the configured portfolio dir when none was given.
    A missing default dir is not an error: the prompt is built without a project.
    """
    if project_path is not None:
        return scan_project(project_path, extensions)

    default_dir = Path(settings.portfolio_dir)
    if not default_dir.is_dir():
        logger.warning(f"Portfolio directory '{default_dir}' not found; building prompt without project facts")
        return None
    return scan_project(default_dir, extensions)


def _generate(
    template_id: str,
    settings: Settings,
    writer: Optional[OutputWriter],
    snapshot: Optional[ProjectSnapshot] = None,
    **inputs: Optional[str],
) -> GenerationResult:
    facts = extract_facts(
        snapshot,
        author_name=settings.author_name,
        github_url=settings.github_url,
        max_length=settings.max_fact_length,
        **inputs,
    )
    prompt = prompts.render(template_id, facts)
    if writer is None:
        writer = OutputWriter(Path(settings.output_dir), timestamped=settings.timestamped)
    return GenerationResult(path=writer.write(prompt), prompt=prompt)


def generate_feature_prompt(
    feature_text: str,
    project_path: Optional[PathLike] = None,
    *,
    settings: Optional[Settings] = None,
    writer: Optional[OutputWriter] = None,
    extensions: Optional[Set[str]] = None,
) -> GenerationResult:
    settings = settings or get_settings()
    snapshot = scan_project_or_default(project_path, settings, extensions)
    return _generate(prompts.FEATURE, settings, writer, snapshot, feature_text=feature_text)


def generate_portfolio_prompt(
    project_path: PathLike,
    *,
    settings: Optional[Settings] = None,
    writer: Optional[OutputWriter] = None,
    extensions: Optional[Set[str]] = None,
) -> GenerationResult:
    settings = settings or get_settings()
    snapshot = scan_project(project_path, extensions)
    return _generate(prompts.PORTFOLIO, settings, writer, snapshot)


def generate_proposal_prompt(
    job_text: str,
    portfolio_path: Optional[PathLike] = None,
    *,
    settings: Optional[Settings] = None,
    writer: Optional[OutputWriter] = None,
    extensions: Optional[Set[str]] = None,
) -> GenerationResult:
    settings = settings or get_settings()
    snapshot = scan_project_or_default(portfolio_path, settings, extensions)
    return _generate(prompts.PROPOSAL, settings, writer, snapshot, job_text=job_text)


def generate_docs_prompt(
    project_path: PathLike,
    doc_target: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
    writer: Optional[OutputWriter] = None,
    extensions: Optional[Set[str]] = None,
) -> GenerationResult:
    settings = settings or get_settings()
    snapshot = scan_project(project_path, extensions)
    return _generate(prompts.DOCS, settings, writer, snapshot, doc_target=doc_target)


def generate_market_prompt(
    portfolio_path: Optional[PathLike] = None,
    *,
    settings: Optional[Settings] = None,
    writer: Optional[OutputWriter] = None,
    extensions: Optional[Set[str]] = None,
) -> GenerationResult:
    settings = settings or get_settings()
    snapshot = scan_project_or_default(portfolio_path, settings, extensions)
    return _generate(prompts.MARKET_RESEARCH, settings, writer, snapshot)
