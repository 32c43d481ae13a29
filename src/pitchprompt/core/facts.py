# src/pitchprompt/core/facts.py
"""
Turns a ProjectSnapshot plus free-text inputs into the flat fact mapping
consumed by the prompt renderer.

Every fact name used by any template is always present in the result.
Missing inputs resolve to the fallbacks in pitchprompt.config; an input that
exists but is blank resolves to config.EMPTY_VALUE so the two cases read
differently in the rendered prompt.
"""
from typing import Dict, Optional

from pitchprompt import config
from pitchprompt.core.tree import render_file_tree
from pitchprompt.models import ProjectSnapshot


def truncate(text: str, max_length: int) -> str:
    """Cuts text to at most max_length chars, preferring a word boundary, and marks the cut."""
    if max_length <= 0 or len(text) <= max_length:
        return text
    if max_length < config.MIN_FACT_LENGTH:
        raise ValueError(f"max_length must be at least {config.MIN_FACT_LENGTH}, got {max_length}")

    keep = max_length - len(config.TRUNCATION_MARKER) - 1
    head = text[:keep]
    boundary = max(head.rfind(" "), head.rfind("\n"))
    if boundary > keep // 2:
        head = head[:boundary]
    return head.rstrip() + "\n" + config.TRUNCATION_MARKER


def _text_fact(value: Optional[str], fallback: str) -> str:
    if value is None:
        return fallback
    value = value.strip()
    return value if value else config.EMPTY_VALUE


def _skills(snapshot: ProjectSnapshot) -> str:
    if not snapshot.detected_skill_tags:
        return config.NO_SKILLS
    return ", ".join(sorted(snapshot.detected_skill_tags))


def _language_breakdown(snapshot: ProjectSnapshot) -> str:
    if not snapshot.extension_counts:
        return config.NO_CODE_FILES
    return "\n".join(f"- {ext} files: {count}" for ext, count in snapshot.extension_counts)


def _portfolio_projects(snapshot: ProjectSnapshot) -> str:
    if not snapshot.subprojects:
        return config.NO_SUBPROJECTS
    return "\n".join(
        f"- {sub.name}: {sub.summary or config.NO_SUBPROJECT_SUMMARY}" for sub in snapshot.subprojects
    )


def _project_facts(snapshot: Optional[ProjectSnapshot]) -> Dict[str, str]:
    if snapshot is None:
        return {
            "project_name": config.NO_PROJECT,
            "total_files": "0",
            "code_files": "0",
            "description": config.NO_README,
            "skills": config.NO_SKILLS,
            "language_breakdown": config.NO_CODE_FILES,
            "code_patterns": config.NO_CODE_PATTERNS,
            "file_listing": config.NO_CODE_FILES,
            "code_sample": config.NO_CODE_SAMPLE,
            "portfolio_projects": config.NO_SUBPROJECTS,
        }

    if snapshot.code_files:
        file_listing = render_file_tree(snapshot.code_files, snapshot.name, limit=config.MAX_LISTED_FILES)
    else:
        file_listing = config.NO_CODE_FILES

    return {
        "project_name": snapshot.name,
        "total_files": str(snapshot.total_file_count),
        "code_files": str(snapshot.code_file_count),
        "description": _text_fact(snapshot.description_text, config.NO_README),
        "skills": _skills(snapshot),
        "language_breakdown": _language_breakdown(snapshot),
        "code_patterns": "\n".join(snapshot.code_patterns) or config.NO_CODE_PATTERNS,
        "file_listing": file_listing,
        "code_sample": _text_fact(snapshot.code_sample, config.NO_CODE_SAMPLE),
        "portfolio_projects": _portfolio_projects(snapshot),
    }


def extract_facts(
    snapshot: Optional[ProjectSnapshot] = None,
    *,
    feature_text: Optional[str] = None,
    job_text: Optional[str] = None,
    doc_target: Optional[str] = None,
    author_name: Optional[str] = None,
    github_url: Optional[str] = None,
    max_length: int = config.DEFAULT_MAX_FACT_LENGTH,
) -> Dict[str, str]:
    facts = _project_facts(snapshot)
    facts.update(
        feature_text=_text_fact(feature_text, config.NO_FEATURE_TEXT),
        job_text=_text_fact(job_text, config.NO_JOB_TEXT),
        doc_target=_text_fact(doc_target, config.NO_DOC_TARGET),
        author_name=_text_fact(author_name, config.NO_AUTHOR),
        github_url=_text_fact(github_url, config.NO_GITHUB),
    )
    return {name: truncate(value, max_length) for name, value in facts.items()}
