"""Prompt Builder - Construct chat messages for commit message generation."""

from conventional_commits_ai import COMMIT_TYPES


class PromptBuilder:
    """Builds the system instruction and the three context messages."""

    def build(self, branch: str, diff: str, log: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt()},
            {"role": "user", "content": f"Current branch: {branch}"},
            {"role": "user", "content": f"Git diff:\n{diff}"},
            {"role": "user", "content": f"Git log:\n{log}"},
        ]

    def system_prompt(self) -> str:
        sections = [
            self._build_role_section(),
            self._build_format_section(),
            self._build_type_section(),
            self._build_scope_section(),
            self._build_subject_section(),
        ]
        return "\n\n".join(sections) + "\n"

    def _build_role_section(self) -> str:
        return """You are a commit message generator.
You will be given a git diff of the current changes, a log of the last commits, and the current branch name.
Your job is to generate a commit message that is as short as possible but as descriptive as possible.
The generated commit message will be similar to the convention of the last commit messages (in terms of type, scope, subject)
and MUST be in the following format (conventional commits):"""

    def _build_format_section(self) -> str:
        return "<type>(<scope>): <subject>"

    def _build_type_section(self) -> str:
        types_list = "\n".join(f"- {t}: {desc}" for t, desc in COMMIT_TYPES.items())
        return f"<type> can be one of the following:\n{types_list}"

    def _build_scope_section(self) -> str:
        return """<scope> is optional and can be anything specifying the place of the commit change.
If the git log contains previous examples of conventional commits, the scope should follow the pattern of the previous commits.
If the previous similar commits:
- do not contain a scope, then the scope should be the type of the commit.
- contain a ticket number or pull request number, then the scope should be the ticket number or pull request number."""

    def _build_subject_section(self) -> str:
        return "<subject> is a short description of the change."


SYSTEM_PROMPT = PromptBuilder().system_prompt()
