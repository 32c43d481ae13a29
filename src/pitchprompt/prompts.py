# src/pitchprompt/prompts.py
import logging
from string import Formatter
from typing import Dict, FrozenSet, Mapping

from pitchprompt.errors import MissingRequiredFactError, UnknownTemplateError
from pitchprompt.models import PromptTemplate, RenderedPrompt

logger = logging.getLogger(__name__)

FEATURE = "feature"
PORTFOLIO = "portfolio"
PROPOSAL = "proposal"
DOCS = "docs"
MARKET_RESEARCH = "market-research"

FEATURE_PROMPT = """\
I need to implement this feature in my project "{project_name}":

**Feature**: {feature_text}

**Current Project Structure**:
- Total files: {total_files}
- Code files: {code_files}
{language_breakdown}

**Existing Code Patterns**:
{code_patterns}

Please generate:
1. Complete implementation (main code file)
2. Comprehensive test suite
3. Frontend integration (if needed)
4. Documentation updates

Match the existing code style and use production-ready patterns with proper error handling.\
"""

PORTFOLIO_PROMPT = """\
I need to create Upwork portfolio content for my project:

**Project**: {project_name}
**Files**: {total_files} total, {code_files} code files
**Detected skills**: {skills}

**Project README**:
{description}

Please generate Upwork portfolio content:

1. **Project Title** (60 characters max)
   - Catchy, professional, includes tech stack

2. **Project Description** (under 600 characters)
   - Focus on business value and results
   - Include impressive metrics
   - Mention technologies
   - Client-focused language

3. **Your Role** (100 characters max)
   - Solo developer or team lead
   - Key responsibilities

4. **Skills** (list 8-10)
   - Technologies used
   - Marketable skills

5. **Key Achievements** (5 bullet points)
   - Quantified results
   - Technical accomplishments
   - Business impact

6. **Suggested Pricing**
   - Project value range ($2K-$10K)
   - Justification

7. **Target Client Types**
   - Who would hire for this skill set

Make it compelling and conversion-optimized!\
"""

PROPOSAL_PROMPT = """\
I need to write a winning Upwork proposal for this job:

**Job Details**:
{job_text}

**About Me**:
- Name: {author_name}
- GitHub: {github_url}

**My Portfolio**:
- Code files: {code_files}
- Skills: {skills}

**Portfolio Projects**:
{portfolio_projects}

Please write a winning proposal that:

1. **Personalized Opening** (2-3 sentences)
   - Reference specific details from their job posting
   - Show you actually read and understood it

2. **Proof of Skills**
   - Mention 1-2 relevant portfolio projects
   - Include a brief code sample or metric
   - Link to GitHub repository

3. **Specific Approach**
   - How you'll solve their problem
   - Timeline estimate (be realistic)
   - Key deliverables

4. **Pricing**
   - Competitive hourly rate or fixed price
   - Justify the value

5. **Strong CTA**
   - Availability
   - Next steps
   - Friendly tone

**Requirements**:
- 200-400 words (not too long!)
- Professional but friendly
- No generic templates
- Focus on THEIR needs, not your experience
- Include relevant GitHub link

Make it feel personal and conversion-optimized!\
"""

DOCS_PROMPT = """\
Generate comprehensive documentation for the project "{project_name}".

**Documentation Target**: {doc_target}

**Project Structure**:
{file_listing}

**Code Sample**:
{code_sample}

Please create:

1. **README.md** with:
   - Project overview
   - Features list
   - Quick start guide
   - API documentation
   - Usage examples
   - Contributing guidelines

2. **API.md** with:
   - All endpoints
   - Request/response examples
   - Error codes
   - Rate limits

3. **ARCHITECTURE.md** with:
   - System design
   - Component diagram
   - Data flow
   - Tech stack details

Make it professional and comprehensive!\
"""

MARKET_RESEARCH_PROMPT = """\
I'm a freelance developer ({author_name}, {github_url}) with these skills:

**Portfolio**:
{portfolio_projects}

**Tech Stack**:
{skills}

Please research and provide:

1. **Trending Technologies** on GitHub for my stack
2. **Upwork Job Demand** for my skill combinations
3. **Project Ideas** that would:
   - Be in high demand on Upwork
   - Leverage my existing skills
   - Take 20-40 hours to build
   - Have strong ROI (jobs x rate / time)

4. **Suggested Next Project** with:
   - Why it's marketable
   - Expected Upwork job count
   - Suggested hourly rate
   - Implementation roadmap

Make it data-driven and actionable!\
"""


def placeholders(body: str) -> FrozenSet[str]:
    """Names of the {placeholders} appearing in a template body."""
    return frozenset(name for _, name, _, _ in Formatter().parse(body) if name)


def _template(identifier: str, title: str, body: str) -> PromptTemplate:
    return PromptTemplate(identifier=identifier, title=title, body=body, required=placeholders(body))


TEMPLATES: Dict[str, PromptTemplate] = {
    t.identifier: t
    for t in (
        _template(FEATURE, "AI Feature Generator", FEATURE_PROMPT),
        _template(PORTFOLIO, "Upwork Portfolio Content", PORTFOLIO_PROMPT),
        _template(PROPOSAL, "Upwork Proposal Generator", PROPOSAL_PROMPT),
        _template(DOCS, "Documentation Generator", DOCS_PROMPT),
        _template(MARKET_RESEARCH, "Market Research", MARKET_RESEARCH_PROMPT),
    )
}


def get_template(template_id: str) -> PromptTemplate:
    try:
        return TEMPLATES[template_id]
    except KeyError:
        raise UnknownTemplateError(template_id, TEMPLATES) from None


def render(template_id: str, facts: Mapping[str, str]) -> RenderedPrompt:
    """
    Substitutes facts into the named template in a single pass.
    Fact values are inserted literally, so braces inside them are never expanded.
    """
    template = get_template(template_id)
    missing = template.required - facts.keys()
    if missing:
        raise MissingRequiredFactError(template_id, missing)

    text = template.body.format_map({name: facts[name] for name in template.required})
    logger.info(f"Rendered '{template_id}' prompt ({len(text)} chars)")
    return RenderedPrompt(template_id=template_id, text=text)
