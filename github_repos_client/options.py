"""Typed option models for the repos endpoints.

Every field is optional. Only fields that were explicitly set are sent, so an
unset field means "use the server default".
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class Options(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def to_options(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class RepoListOptions(Options):
    type: Literal["all", "owner", "public", "private", "member", "forks", "sources"] | None = None
    sort: Literal["created", "updated", "pushed", "full_name"] | None = None
    direction: Literal["asc", "desc"] | None = None


class CreateRepoOptions(Options):
    description: str | None = None
    homepage: str | None = None
    private: bool | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_downloads: bool | None = None
    auto_init: bool | None = None


class CreateOrgRepoOptions(CreateRepoOptions):
    # team granted access to the new repository
    team_id: int | None = None


class EditRepoOptions(Options):
    name: str | None = None
    description: str | None = None
    homepage: str | None = None
    private: bool | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_downloads: bool | None = None
    default_branch: str | None = None


class ContributorsOptions(Options):
    anon: bool | None = None


class CommitsOptions(Options):
    sha: str | None = None
    path: str | None = None
    author: str | None = None
    since: str | None = None
    until: str | None = None


class CollaboratorOptions(Options):
    permission: Literal["pull", "triage", "push", "maintain", "admin"] | None = None


class CommitCommentOptions(Options):
    # Documented as required by GitHub, but position is what places the comment.
    line: int | None = None
