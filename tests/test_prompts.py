# tests/test_prompts.py
import pytest

from pitchprompt import prompts
from pitchprompt.core.facts import extract_facts
from pitchprompt.errors import MissingRequiredFactError, UnknownTemplateError


def test_fixed_template_enumeration():
    assert set(prompts.TEMPLATES) == {"feature", "portfolio", "proposal", "docs", "market-research"}


@pytest.mark.parametrize("template_id", sorted(prompts.TEMPLATES))
def test_required_set_matches_body(template_id):
    template = prompts.TEMPLATES[template_id]
    assert template.required == prompts.placeholders(template.body)
    assert template.required


@pytest.mark.parametrize("template_id", sorted(prompts.TEMPLATES))
def test_render_resolves_every_placeholder(template_id):
    rendered = prompts.render(template_id, extract_facts())
    assert rendered.template_id == template_id
    for name in prompts.TEMPLATES[template_id].required:
        assert "{" + name + "}" not in rendered.text


def test_missing_fact_is_reported_by_name():
    facts = extract_facts()
    del facts["job_text"]
    del facts["skills"]
    with pytest.raises(MissingRequiredFactError) as exc_info:
        prompts.render("proposal", facts)
    assert exc_info.value.missing == ["job_text", "skills"]
    assert "job_text, skills" in str(exc_info.value)


def test_unknown_template():
    with pytest.raises(UnknownTemplateError, match="blog-post"):
        prompts.render("blog-post", extract_facts())


def test_fact_values_are_not_expanded():
    facts = extract_facts(job_text="Build {skills} with {{braces}}")
    rendered = prompts.render("proposal", facts)
    assert "Build {skills} with {{braces}}" in rendered.text


def test_extra_facts_are_ignored():
    facts = extract_facts()
    facts["unused"] = "whatever"
    rendered = prompts.render("market-research", facts)
    assert "whatever" not in rendered.text


def test_proposal_with_no_skills_uses_fallback():
    facts = extract_facts(job_text="Need a REST API in X")
    rendered = prompts.render("proposal", facts)
    assert "Need a REST API in X" in rendered.text
    assert "Skills: No skills detected" in rendered.text
