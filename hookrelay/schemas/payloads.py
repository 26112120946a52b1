"""
Typed views of the GitHub webhook payloads, limited to the fields the
formatters read. Unknown fields are ignored; a missing required field fails
validation and surfaces as a FormattingError.

https://docs.github.com/en/webhooks/webhook-events-and-payloads
"""
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class Account(BaseModel):
    login: str
    html_url: str


class Reviewer(BaseModel):
    login: str


class Repository(BaseModel):
    full_name: str
    html_url: str


class Issue(BaseModel):
    number: int
    title: str
    html_url: str
    body: Optional[str] = None
    user: Account


class PullRequest(BaseModel):
    number: int
    title: str
    html_url: str
    body: Optional[str] = None
    requested_reviewers: List[Reviewer] = []


class Comment(BaseModel):
    html_url: str
    body: Optional[str] = None


class CommitAuthor(BaseModel):
    name: Optional[str] = None
    username: Optional[str] = None  # Absent when the email is not linked to a GitHub account

    @model_validator(mode="after")
    def require_identity(self):
        if not (self.username or self.name):
            raise ValueError("commit author has neither username nor name")
        return self

    @property
    def display_name(self) -> str:
        return self.username or self.name


class Commit(BaseModel):
    id: str = Field(min_length=7)
    message: str
    url: str
    author: CommitAuthor


class ActionPayload(BaseModel):
    action: str


class RepositoryPayload(BaseModel):
    repository: Repository


class PingPayload(BaseModel):
    zen: str
    repository: Optional[Repository] = None


class IssuesPayload(RepositoryPayload):
    action: str
    issue: Issue


class CreatePayload(RepositoryPayload):
    ref: str
    ref_type: str
    description: Optional[str] = None
    sender: Optional[Account] = None


class DeletePayload(RepositoryPayload):
    ref: str
    ref_type: str
    sender: Account


class PushPayload(RepositoryPayload):
    ref: str
    compare: str
    commits: List[Commit]


class IssueCommentPayload(RepositoryPayload):
    action: str
    issue: Issue
    comment: Comment
    sender: Account


class PullRequestPayload(RepositoryPayload):
    action: str
    pull_request: PullRequest
    sender: Account


class PullRequestReviewCommentPayload(RepositoryPayload):
    action: str
    pull_request: PullRequest
    comment: Comment
    sender: Account


class GenericPayload(BaseModel):
    repository: Optional[Repository] = None
