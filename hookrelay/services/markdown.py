"""Markdown fragments for chat messages. Every helper returns a string."""
import re
from typing import Optional, Sequence, Union

from hookrelay.schemas.payloads import Account, Commit, Issue, PullRequest, Repository

SHORT_HASH_LENGTH = 7

_METACHARACTERS = re.compile(r"([\\\[\]()_*])")


def escape(text: str) -> str:
    """Backslash-escape the characters that could open a link or emphasis"""
    return _METACHARACTERS.sub(r"\\\1", text)


def repository_link(repository: Repository) -> str:
    return f"[{escape(repository.full_name)}]({repository.html_url})"


def repository_link_line(repository: Repository) -> str:
    return f"__\\[{repository_link(repository)}\\]__"


def issue_link(item: Union[Issue, PullRequest], url: Optional[str] = None) -> str:
    """Link to an issue or pull request, optionally pointing somewhere else (e.g. a comment)"""
    return f"[#{item.number}: {escape(item.title)}]({url or item.html_url})"


def account_link(account: Account) -> str:
    return f"[{escape(account.login)}]({account.html_url})"


def short_hash(commit_id: str) -> str:
    return commit_id[:SHORT_HASH_LENGTH]


def commit_link(commit: Commit) -> str:
    return f"[`{short_hash(commit.id)}`]({commit.url})"


def code_span(text: str) -> str:
    """Wrap text in a backtick fence longer than any backtick run it contains"""
    longest = max((len(run) for run in re.findall(r"`+", text)), default=0)
    fence = "`" * (longest + 1)
    if text.startswith("`") or text.endswith("`"):
        text = f" {text} "
    return f"{fence}{text}{fence}"


def block_quote(text: Optional[str]) -> str:
    """
    Quote each non-empty line of text with "> ".
    Returns an empty string when there is nothing to quote.
    """
    if not text:
        return ""
    return "\n".join(f"> {line}" for line in text.splitlines() if line)


def join_names(names: Sequence[str]) -> str:
    """["A", "B", "C"] -> "A, B and C" """
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} and {names[-1]}"


def compose(*lines: str) -> str:
    """Join message lines, skipping empty fragments"""
    return "\n".join(line for line in lines if line)
