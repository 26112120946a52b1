"""
Turns a GitHub webhook payload into a chat message.

Each event type maps to a formatter taking the decoded JSON payload and the
raw X-Github-Event value. A formatter returns the message text, or None when
the event is acknowledged without posting anything.
"""
import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PayloadValidationError

from hookrelay.core.errors import FormattingError
from hookrelay.schemas.payloads import (
    ActionPayload,
    CreatePayload,
    DeletePayload,
    GenericPayload,
    IssueCommentPayload,
    IssuesPayload,
    PingPayload,
    PullRequest,
    PullRequestPayload,
    PullRequestReviewCommentPayload,
    PushPayload,
)
from hookrelay.schemas.webhook import EventType
from hookrelay.services.markdown import (
    account_link,
    block_quote,
    code_span,
    commit_link,
    compose,
    escape,
    issue_link,
    join_names,
    repository_link_line,
)

logger = logging.getLogger(__name__)

TPayload = TypeVar("TPayload", bound=BaseModel)
Formatter = Callable[[Dict[str, Any], str], Optional[str]]


def parse_payload(model: Type[TPayload], payload: Dict[str, Any]) -> TPayload:
    try:
        return model.model_validate(payload)
    except PayloadValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        if error["type"] == "missing":
            raise FormattingError(f"Missing payload field: {field}") from e
        raise FormattingError(f"Invalid payload field: {field}") from e


def _header(description: str) -> str:
    return f"__{description}__"


def format_ping(payload: Dict[str, Any], event_name: str) -> Optional[str]:
    data = parse_payload(PingPayload, payload)
    return compose(
        repository_link_line(data.repository) if data.repository else "",
        _header("Ping received."),
        block_quote(data.zen),
    )


def format_issues(payload: Dict[str, Any], event_name: str) -> Optional[str]:
    if parse_payload(ActionPayload, payload).action == "labeled":
        return None

    data = parse_payload(IssuesPayload, payload)
    issue = data.issue
    return compose(
        repository_link_line(data.repository),
        _header(
            f"The issue {issue_link(issue)} {escape(data.action)}"
            f" by {account_link(issue.user)}."
        ),
        block_quote(issue.body) if data.action == "opened" else "",
    )


def format_create(payload: Dict[str, Any], event_name: str) -> Optional[str]:
    data = parse_payload(CreatePayload, payload)
    creator = f" by {account_link(data.sender)}" if data.sender else ""
    return compose(
        repository_link_line(data.repository),
        _header(f"New {escape(data.ref_type)} {code_span(data.ref)} created{creator}."),
        block_quote(data.description),
    )


def format_delete(payload: Dict[str, Any], event_name: str) -> Optional[str]:
    data = parse_payload(DeletePayload, payload)
    return compose(
        repository_link_line(data.repository),
        _header(
            f"A {escape(data.ref_type)} named {code_span(data.ref)}"
            f" was deleted by {account_link(data.sender)}."
        ),
    )


def format_push(payload: Dict[str, Any], event_name: str) -> Optional[str]:
    data = parse_payload(PushPayload, payload)
    if not data.commits:
        return None

    count = len(data.commits)
    branch = data.ref.split("/")[-1]
    noun = "commit" if count == 1 else "commits"
    lines = [
        f"{commit_link(c)} {escape(_summary(c.message))} - {escape(c.author.display_name)}"
        for c in data.commits
    ]
    return compose(
        repository_link_line(data.repository),
        _header(f"{count} {noun} pushed to branch [{escape(branch)}]({data.compare})."),
        *lines,
    )


def _summary(message: str) -> str:
    # Only the subject line, so each commit stays on one line
    lines = message.splitlines()
    return lines[0] if lines else ""


def format_issue_comment(payload: Dict[str, Any], event_name: str) -> Optional[str]:
    data = parse_payload(IssueCommentPayload, payload)
    return compose(
        repository_link_line(data.repository),
        _header(
            f"New comment {escape(data.action)} by {account_link(data.sender)}"
            f" on issue {issue_link(data.issue, url=data.comment.html_url)}."
        ),
        block_quote(data.comment.body),
    )


def _pull_request_action(action: str, pull_request: PullRequest) -> str:
    if action != "review_requested":
        return escape(action.lower())

    reviewers = [escape(r.login) for r in pull_request.requested_reviewers]
    if not reviewers:
        return "requested review"
    return f"requested review to {join_names(reviewers)}"


def format_pull_request(payload: Dict[str, Any], event_name: str) -> Optional[str]:
    data = parse_payload(PullRequestPayload, payload)
    pr = data.pull_request
    return compose(
        repository_link_line(data.repository),
        _header(
            f"The pull request {issue_link(pr)}"
            f" {_pull_request_action(data.action, pr)}"
            f" by {account_link(data.sender)}."
        ),
        block_quote(pr.body) if data.action == "opened" else "",
    )


def format_pull_request_review_comment(
    payload: Dict[str, Any], event_name: str
) -> Optional[str]:
    if parse_payload(ActionPayload, payload).action != "created":
        return None

    data = parse_payload(PullRequestReviewCommentPayload, payload)
    return compose(
        repository_link_line(data.repository),
        _header(
            f"New comment created by {account_link(data.sender)} on pull request"
            f" {issue_link(data.pull_request, url=data.comment.html_url)}."
        ),
        block_quote(data.comment.body),
    )


def format_unsupported(payload: Dict[str, Any], event_name: str) -> Optional[str]:
    data = parse_payload(GenericPayload, payload)
    return compose(
        repository_link_line(data.repository) if data.repository else "",
        _header(f"Unsupported event: {code_span(event_name or EventType.UNKNOWN.value)}."),
    )


def acknowledge(payload: Dict[str, Any], event_name: str) -> Optional[str]:
    return None


ACKNOWLEDGED_EVENTS = (
    EventType.PULL_REQUEST_REVIEW,
    EventType.LABEL,
    EventType.GOLLUM,
    EventType.MEMBER,
    EventType.PUBLIC,
    EventType.WATCH,
    EventType.PROJECT,
    EventType.PROJECT_COLUMN,
    EventType.PROJECT_CARD,
    EventType.STATUS,
)

FORMATTERS: Dict[EventType, Formatter] = {
    EventType.PING: format_ping,
    EventType.ISSUES: format_issues,
    EventType.CREATE: format_create,
    EventType.DELETE: format_delete,
    EventType.PUSH: format_push,
    EventType.ISSUE_COMMENT: format_issue_comment,
    EventType.PULL_REQUEST: format_pull_request,
    EventType.PULL_REQUEST_REVIEW_COMMENT: format_pull_request_review_comment,
    **{event_type: acknowledge for event_type in ACKNOWLEDGED_EVENTS},
}


def format_event(
    event_type: EventType, payload: Dict[str, Any], event_name: str = ""
) -> Optional[str]:
    """
    Format a webhook payload for the chat channel.

    Event types without a dedicated formatter (including UNKNOWN) get the
    generic "Unsupported event" message.

    Raises:
        FormattingError: the payload lacks a field the formatter needs
    """
    formatter = FORMATTERS.get(event_type, format_unsupported)
    message = formatter(payload, event_name)
    if message is None:
        logger.debug(f"No message for {event_type.value} event")
    return message
