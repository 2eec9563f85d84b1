"""CLI Main Entry Point"""

import logging
import sys

from conventional_commits_ai.config import Config, load_config, get_config_path
from conventional_commits_ai.git import GitInspector, GitError
from conventional_commits_ai.llm import (
    LLMError,
    OpenAIClient,
    decode_commit_message,
    validate_commit_message,
)
from conventional_commits_ai.output import print_error, Spinner
from conventional_commits_ai.prompts import PromptBuilder

from conventional_commits_ai.cli.args import parse_args

logger = logging.getLogger(__name__)


def _configure_logging(config: Config) -> None:
    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _collect_repository_context(inspector: GitInspector, log_count: int) -> tuple[str, str, str]:
    """Run the three repository queries in order: diff, log, branch."""
    diff = inspector.get_working_diff()
    log = inspector.get_recent_log(log_count)
    branch = inspector.get_current_branch()
    if not branch:
        logger.info("Detached HEAD, sending an empty branch name")
    return diff, log, branch


def generate_commit_message(config: Config, inspector: GitInspector | None = None) -> int:
    """Main commit message generation flow.

    Returns:
        int: Exit code
    """
    # Credential first: no subprocess or network activity without it
    try:
        client = OpenAIClient(model=config.model, timeout=config.timeout)
    except LLMError as e:
        print_error(str(e))
        return 1

    inspector = inspector or GitInspector()
    try:
        diff, log, branch = _collect_repository_context(inspector, config.log_count)
    except GitError as e:
        print_error(str(e))
        return 1

    messages = PromptBuilder().build(branch=branch, diff=diff, log=log)

    try:
        with Spinner(f"Generating with {client.name}..."):
            response = client.generate(messages)
        result = decode_commit_message(response.content)
    except LLMError as e:
        print_error(str(e))
        return 1

    is_valid, reason = validate_commit_message(result.commit_message)
    if not is_valid:
        logger.warning(reason)

    # The whole line is encoded before anything reaches stdout
    try:
        print(result.commit_message)
    except UnicodeEncodeError as e:
        print_error(f"Failed to write commit message: {e}")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parse_args(argv)

    config = load_config()
    _configure_logging(config)
    logger.debug("Configuration loaded from %s", get_config_path() or "defaults")

    return generate_commit_message(config)


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
