# tests/conftest.py
import pytest

from pitchprompt.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path_factory, monkeypatch):
    """Keeps each test away from the developer's env vars, .env and cwd."""
    for var in (
        "PITCHPROMPT_AUTHOR_NAME",
        "PITCHPROMPT_GITHUB_USER",
        "PITCHPROMPT_PORTFOLIO_DIR",
        "PITCHPROMPT_OUTPUT_DIR",
        "PITCHPROMPT_TIMESTAMPED",
        "PITCHPROMPT_MAX_FACT_LENGTH",
    ):
        monkeypatch.delenv(var, raising=False)
    workdir = tmp_path_factory.mktemp("cwd")
    monkeypatch.chdir(workdir)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_project(tmp_path):
    """
    10 files, 3 of them code (.rs/.ts), no README:
    - src/lib.rs, src/main.rs, web/app.ts (code)
    - Cargo.toml, LICENSE, config.yaml, notes.txt, data/a.csv, data/b.csv, assets/logo.png
    """
    root = tmp_path / "sentiment-api"
    (root / "src").mkdir(parents=True)
    (root / "web").mkdir()
    (root / "data").mkdir()
    (root / "assets").mkdir()

    (root / "src" / "lib.rs").write_text("pub fn helper() -> u32 {\n    42\n}\n", encoding="utf-8")
    (root / "src" / "main.rs").write_text(
        "use axum::Router;\n\npub async fn analyze(text: &str) -> f32 {\n    // sentiment score\n    0.5\n}\n",
        encoding="utf-8",
    )
    (root / "web" / "app.ts").write_text("export function render(): void {}\n", encoding="utf-8")
    (root / "Cargo.toml").write_text('[package]\nname = "sentiment-api"\n', encoding="utf-8")
    (root / "LICENSE").write_text("MIT\n", encoding="utf-8")
    (root / "config.yaml").write_text("port: 8080\n", encoding="utf-8")
    (root / "notes.txt").write_text("remember to add caching\n", encoding="utf-8")
    (root / "data" / "a.csv").write_text("text,label\n", encoding="utf-8")
    (root / "data" / "b.csv").write_text("text,label\n", encoding="utf-8")
    (root / "assets" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    return root


@pytest.fixture
def portfolio(tmp_path):
    """A portfolio directory with two projects, one with a README."""
    root = tmp_path / "portfolio"
    api = root / "rustml-sentiment-api"
    viz = root / "sentiment-dashboard"
    api.mkdir(parents=True)
    viz.mkdir()

    (api / "README.md").write_text(
        "# RustML Sentiment API\n\n![build](https://img.shields.io/badge/build-passing-green)\n\n"
        "High-throughput sentiment analysis service in Rust.\n",
        encoding="utf-8",
    )
    (api / "main.rs").write_text("fn main() {}\n", encoding="utf-8")
    (viz / "app.ts").write_text("import * as THREE from 'three';\n", encoding="utf-8")
    return root
