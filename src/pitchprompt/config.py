# src/pitchprompt/config.py
from functools import lru_cache
from typing import NamedTuple, Optional, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CODE_EXTENSIONS = {
    ".rs",
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    ".py",
    ".go",
    ".java",
    ".kt",
    ".swift",
    ".rb",
    ".php",
    ".c",
    ".h",
    ".cpp",
    ".hpp",
    ".cs",
    ".sh",
}

# Checked in order, matched case-insensitively against the project root.
README_NAMES = ("readme.md", "readme", "readme.rst", "readme.txt")

IGNORE_FILE_NAME = ".promptignore"

# Still counted, but never read for content or listed as portfolio projects.
DEFAULT_IGNORE_PATTERNS = [
    ".git/",
    "node_modules/",
    "venv/",
    ".venv/",
    "__pycache__/",
    "dist/",
    "build/",
    "target/",
    ".vscode/",
    ".idea/",
    ".DS_Store",
    "*.log",
]

# Text files checked for skill markers; code sample reads are not counted
MAX_SAMPLED_FILES = 500
MAX_SAMPLE_BYTES = 64 * 1024
BINARY_CHECK_BYTES = 1024

CODE_SAMPLE_LINES = 50
MAX_CODE_PATTERNS = 5
MAX_LISTED_FILES = 20

DEFAULT_MAX_FACT_LENGTH = 4000
MIN_FACT_LENGTH = 64
TRUNCATION_MARKER = "... (truncated)"

# Fallbacks for facts that could not be extracted
NO_README = "No README found"
NO_SKILLS = "No skills detected"
NO_CODE_FILES = "No code files found"
NO_CODE_SAMPLE = "No code sample available"
NO_CODE_PATTERNS = "No code patterns found"
NO_SUBPROJECTS = "No portfolio projects found"
NO_SUBPROJECT_SUMMARY = "no README summary"
NO_PROJECT = "No project scanned"
NO_FEATURE_TEXT = "No feature description provided"
NO_JOB_TEXT = "No job description provided"
NO_DOC_TARGET = "Not specified (propose README.md, API.md and ARCHITECTURE.md)"
NO_AUTHOR = "Not configured (set PITCHPROMPT_AUTHOR_NAME)"
NO_GITHUB = "Not configured (set PITCHPROMPT_GITHUB_USER)"
# A value that exists but has no content
EMPTY_VALUE = "(empty)"


class SkillSignal(NamedTuple):
    tag: str
    file_patterns: Tuple[str, ...] = ()
    content_markers: Tuple[str, ...] = ()


SKILL_SIGNALS = (
    SkillSignal("Rust", ("*.rs", "Cargo.toml")),
    SkillSignal("TypeScript", ("*.ts", "*.tsx", "tsconfig.json")),
    SkillSignal("JavaScript", ("*.js", "*.jsx", "*.mjs")),
    SkillSignal("Python", ("*.py", "pyproject.toml", "requirements*.txt")),
    SkillSignal("Go", ("*.go", "go.mod")),
    SkillSignal("Docker", ("Dockerfile", "docker-compose*.yml", "compose.yaml")),
    SkillSignal("GitHub-Actions", (".github/workflows/*.yml", ".github/workflows/*.yaml")),
    SkillSignal("REST-API", (), ("axum::", "actix_web", "fastapi", "express()", "@app.route")),
    SkillSignal("Sentiment-Analysis", (), ("sentiment",)),
    SkillSignal(
        "Machine-Learning",
        (),
        ("machine learning", "neural network", "torch", "tensorflow", "scikit-learn", "embedding"),
    ),
    SkillSignal("3D-Visualization", (), ("three.js", "from 'three'", 'from "three"', "webgl")),
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PITCHPROMPT_", env_file=".env", extra="ignore")
    author_name: Optional[str] = None
    github_user: Optional[str] = None
    portfolio_dir: str = "portfolio"
    output_dir: str = "prompts"
    timestamped: bool = True
    max_fact_length: int = Field(DEFAULT_MAX_FACT_LENGTH, ge=MIN_FACT_LENGTH)

    @property
    def github_url(self) -> Optional[str]:
        if not self.github_user:
            return None
        return f"https://github.com/{self.github_user}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
