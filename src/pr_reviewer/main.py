# src/pr_reviewer/main.py
import asyncio
import logging
import click

from pr_reviewer.config import Settings, load_rules_guide, load_settings
from pr_reviewer.errors import ConfigurationError, ReviewError
from pr_reviewer.models.review import Decision
from pr_reviewer.platforms.bitbucket import BitbucketClient
from pr_reviewer.providers.base import LLMProvider
from pr_reviewer.providers.chat import ChatCompletionsProvider
from pr_reviewer.providers.openai import OpenAIProvider
from pr_reviewer.review.engine import ReviewEngine
from pr_reviewer.review.report import format_report


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DECLINED_EXIT_CODE = 2


def get_provider(settings: Settings) -> LLMProvider:
    """Get LLM provider based on settings."""
    api_key = settings.ai_api_key.get_secret_value()
    if settings.ai_provider == "http":
        return ChatCompletionsProvider(
            api_key=api_key,
            model=settings.ai_model,
            endpoint=settings.ai_endpoint,
        )
    elif settings.ai_provider == "openai":
        return OpenAIProvider(
            api_key=api_key,
            model=settings.ai_model,
            base_url=OpenAIProvider.base_url_from_endpoint(settings.ai_endpoint),
        )
    raise ConfigurationError(f"Unknown AI_PROVIDER: {settings.ai_provider!r}")


def get_platform(settings: Settings) -> BitbucketClient:
    return BitbucketClient(
        username=settings.bitbucket_username,
        app_password=settings.bitbucket_app_password.get_secret_value(),
        base_url=settings.bitbucket_api_url,
    )


@click.command()
@click.option("--pr", "pr_number", type=int, default=None, help="Pull request id (overrides PR_NUMBER).")
@click.option(
    "--prompt-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Rules guide file (overrides PROMPT_FILE_PATH).",
)
@click.option(
    "--output",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Report format.",
)
@click.option("--fail-on-decline", is_flag=True, help=f"Exit with code {DECLINED_EXIT_CODE} when the PR is declined.")
@click.pass_context
def cli(ctx: click.Context, pr_number: int | None, prompt_file: str | None, output: str, fail_on_decline: bool):
    """Review a single Bitbucket pull request with a language model."""
    try:
        settings = load_settings(pr_number=pr_number, prompt_file_path=prompt_file)
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
        settings.check_required()
        rules_guide = load_rules_guide(settings.prompt_file_path)
        engine = ReviewEngine(
            platform=get_platform(settings),
            provider=get_provider(settings),
            target=settings.target(),
        )
        report = asyncio.run(engine.run(settings.pr_number, rules_guide))
    except ReviewError as e:
        logger.error(f"Review process failed: {e}")
        raise click.ClickException(str(e)) from e

    if output == "json":
        click.echo(report.model_dump_json(indent=2))
    else:
        click.echo(format_report(report))
    logger.info("Review completed successfully.")

    if fail_on_decline and report.review.decision == Decision.DECLINE:
        ctx.exit(DECLINED_EXIT_CODE)


if __name__ == "__main__":
    cli()
