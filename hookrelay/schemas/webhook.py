from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class EventType(str, Enum):
    """GitHub webhook event kinds, valued by their X-Github-Event spelling"""

    PING = "ping"
    ISSUES = "issues"
    CREATE = "create"
    DELETE = "delete"
    PUSH = "push"
    ISSUE_COMMENT = "issue_comment"
    PULL_REQUEST = "pull_request"
    PULL_REQUEST_REVIEW_COMMENT = "pull_request_review_comment"
    PULL_REQUEST_REVIEW = "pull_request_review"
    LABEL = "label"
    GOLLUM = "gollum"
    MEMBER = "member"
    PUBLIC = "public"
    WATCH = "watch"
    PROJECT = "project"
    PROJECT_COLUMN = "project_column"
    PROJECT_CARD = "project_card"
    STATUS = "status"
    COMMIT_COMMENT = "commit_comment"
    DEPLOYMENT = "deployment"
    DEPLOYMENT_STATUS = "deployment_status"
    DOWNLOAD = "download"
    FOLLOW = "follow"
    FORK = "fork"
    FORK_APPLY = "fork_apply"
    GIST = "gist"
    INSTALLATION = "installation"
    INSTALLATION_REPOSITORIES = "installation_repositories"
    MARKETPLACE_PURCHASE = "marketplace_purchase"
    MEMBERSHIP = "membership"
    MILESTONE = "milestone"
    ORGANIZATION = "organization"
    ORG_BLOCK = "org_block"
    PAGE_BUILD = "page_build"
    RELEASE = "release"
    REPOSITORY = "repository"
    TEAM = "team"
    TEAM_ADD = "team_add"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Optional[str]) -> "EventType":
        """
        Match a header value against the member names, ignoring case and
        underscores, so "pull_request", "PullRequest" and "PULLREQUEST" agree.
        Anything else is UNKNOWN.
        """
        if not value:
            return cls.UNKNOWN
        key = value.replace("_", "").lower()
        for member in cls:
            if member.name.replace("_", "").lower() == key:
                return member
        return cls.UNKNOWN


class WebhookRequest(BaseModel):
    """An authenticated delivery, ready for formatting"""

    model_config = ConfigDict(frozen=True)

    body: bytes  # Exactly as received; the signature covers these bytes
    channel: str
    event_type: EventType
    event_name: str = ""  # Raw X-Github-Event value
