# src/pitchprompt/cli.py
import argparse
import logging
import sys
from typing import Optional, Set

from pitchprompt import pipeline, prompts
from pitchprompt.config import get_settings
from pitchprompt.errors import EXIT_ENVIRONMENT, PitchPromptError
from pitchprompt.models import GenerationResult

logger = logging.getLogger(__name__)

RULE = "=" * 63

NEXT_STEPS = {
    prompts.FEATURE: [
        "Paste the prompt into your assistant",
        "Copy the generated code and tests into your project",
        "Run the test suite and commit when it passes",
    ],
    prompts.PORTFOLIO: [
        "Paste the prompt into your assistant",
        "Copy the results into your Upwork portfolio entry",
    ],
    prompts.PROPOSAL: [
        "Paste the prompt into your assistant",
        "Review and customize the proposal",
        "Send it on Upwork within the hour",
    ],
    prompts.DOCS: [
        "Paste the prompt into your assistant",
        "Save the generated README.md, API.md and ARCHITECTURE.md",
    ],
    prompts.MARKET_RESEARCH: [
        "Paste the prompt into your assistant for market insights",
    ],
}


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="pitchprompt",
        description="Build ready-to-paste assistant prompts (features, portfolio entries, proposals, docs, market research) from a local project.",
    )
    parser.add_argument("-o", "--output-dir", type=str, default=None, help="Directory for saved prompts (default: PITCHPROMPT_OUTPUT_DIR or 'prompts')")
    parser.add_argument("--no-timestamp", action="store_true", help="Name files after the template only (numbered on clash)")
    parser.add_argument("-e", "--extensions", type=str, default=None, help="Comma-separated code file extensions, e.g. '.rs,.ts'")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")

    sub = parser.add_subparsers(dest="command", required=True)

    feature = sub.add_parser("feature", help="Prompt for implementing a new feature")
    feature.add_argument("text", help="Feature description ('-' reads stdin)")
    feature.add_argument("--project", default=None, help="Project to analyze (default: portfolio dir)")

    portfolio = sub.add_parser("portfolio", help="Prompt for Upwork portfolio content")
    portfolio.add_argument("path", help="Project directory to showcase")

    proposal = sub.add_parser("proposal", help="Prompt for an Upwork job proposal")
    proposal.add_argument("text", help="Job posting URL or description ('-' reads stdin)")
    proposal.add_argument("--portfolio", default=None, help="Portfolio directory (default: portfolio dir)")

    docs = sub.add_parser("docs", help="Prompt for project documentation")
    docs.add_argument("path", help="Project directory to document")
    docs.add_argument("--target", default=None, help="Documentation file(s) to produce")

    market = sub.add_parser("market", help="Prompt for market research")
    market.add_argument("--portfolio", default=None, help="Portfolio directory (default: portfolio dir)")

    return parser


def parse_extensions(raw: Optional[str]) -> Optional[Set[str]]:
    if raw is None:
        return None
    return {e.strip() for e in raw.split(",") if e.strip()}


def _read_text(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def run(args) -> GenerationResult:
    updates = {}
    if args.output_dir:
        updates["output_dir"] = args.output_dir
    if args.no_timestamp:
        updates["timestamped"] = False
    settings = get_settings().model_copy(update=updates)
    options = dict(settings=settings, extensions=parse_extensions(args.extensions))

    if args.command == "feature":
        return pipeline.generate_feature_prompt(_read_text(args.text), args.project, **options)
    if args.command == "portfolio":
        return pipeline.generate_portfolio_prompt(args.path, **options)
    if args.command == "proposal":
        return pipeline.generate_proposal_prompt(_read_text(args.text), args.portfolio, **options)
    if args.command == "docs":
        return pipeline.generate_docs_prompt(args.path, args.target, **options)
    return pipeline.generate_market_prompt(args.portfolio, **options)


def main(argv=None):
    parser = create_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s %(levelname)s [%(module)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        result = run(args)
    except PitchPromptError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unhandled error")
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(EXIT_ENVIRONMENT)

    template = prompts.get_template(result.prompt.template_id)
    print(RULE)
    print(f"PROMPT READY: {template.title}")
    print(RULE)
    print()
    print(result.prompt.text)
    print()
    print(RULE)
    print(f"Saved to: {result.path}")
    print()
    print("Next steps:")
    for i, step in enumerate(NEXT_STEPS[template.identifier], start=1):
        print(f"{i}. {step}")


if __name__ == "__main__":
    main()
