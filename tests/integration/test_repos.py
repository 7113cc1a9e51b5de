"""Integration tests for the repos endpoint wrappers.

Requests go through the real builder and executor; the network is an
httpx.MockTransport that records each request and replays a queued response.
"""

import json

import httpx
import pytest

from github_repos_client.client import GitHubApiClient
from github_repos_client.errors import ApiError, TemplateArityError
from github_repos_client.options import (
    CollaboratorOptions,
    CommitCommentOptions,
    CreateOrgRepoOptions,
    CreateRepoOptions,
    EditRepoOptions,
    RepoListOptions,
)
from github_repos_client.repos import ReposApi
from github_repos_client.settings import Settings


class FakeGitHub:
    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def reply(self, status=200, body=None):
        if body is None:
            self.responses.append(httpx.Response(status))
        else:
            self.responses.append(httpx.Response(status, json=body))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        return self.last.url.raw_path.decode().split("?")[0]

    @property
    def last_json(self):
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def github():
    return FakeGitHub()


@pytest.fixture
def api(github):
    settings = Settings(_env_file=None, github_token="test-token")
    client = GitHubApiClient(settings=settings, transport=httpx.MockTransport(github))
    yield ReposApi(client)
    client.close()


class TestPrimaryRepos:
    def test_repos(self, api, github):
        github.reply(200, [{"name": "a"}])
        assert api.repos(RepoListOptions(type="owner")) == [{"name": "a"}]
        assert github.last.method == "GET"
        assert github.last_path == "/user/repos"
        assert github.last.url.params["type"] == "owner"

    def test_user_repos(self, api, github):
        api.user_repos("octocat", {"type": "member"})
        assert github.last_path == "/users/octocat/repos"
        assert github.last.url.params["type"] == "member"

    def test_org_repos(self, api, github):
        api.org_repos("github")
        assert github.last_path == "/orgs/github/repos"

    def test_create_repo(self, api, github):
        github.reply(201, {"name": "Hello-World"})
        result = api.create_repo("Hello-World", {"has-issues": False, "description": "hi"})
        assert result == {"name": "Hello-World"}
        assert github.last.method == "POST"
        assert github.last_path == "/user/repos"
        assert github.last_json == {"has_issues": False, "description": "hi", "name": "Hello-World"}

    def test_create_repo_with_typed_options(self, api, github):
        api.create_repo("x", CreateRepoOptions(has_wiki=False))
        assert github.last_json == {"has_wiki": False, "name": "x"}

    def test_create_org_repo(self, api, github):
        api.create_org_repo("acme", "tool", CreateOrgRepoOptions(team_id=7))
        assert github.last_path == "/orgs/acme/repos"
        assert github.last_json == {"team_id": 7, "name": "tool"}

    def test_specific_repo(self, api, github):
        github.reply(200, {"full_name": "octocat/Hello-World"})
        assert api.specific_repo("octocat", "Hello-World") == {"full_name": "octocat/Hello-World"}
        assert github.last_path == "/repos/octocat/Hello-World"

    def test_edit_repo_defaults_name(self, api, github):
        api.edit_repo("octocat", "Hello-World", {"description": "new"})
        assert github.last.method == "PATCH"
        assert github.last_json == {"description": "new", "name": "Hello-World"}

    def test_edit_repo_keeps_explicit_name(self, api, github):
        api.edit_repo("octocat", "Hello-World", EditRepoOptions(name="Renamed"))
        assert github.last_json == {"name": "Renamed"}

    def test_edit_repo_replaces_empty_name(self, api, github):
        api.edit_repo("octocat", "Hello-World", EditRepoOptions(name=None, has_wiki=False))
        assert github.last_json == {"name": "Hello-World", "has_wiki": False}

    def test_create_repo_name_overrides_caller_name(self, api, github):
        api.create_repo("real", {"name": "ignored", "has-wiki": True})
        assert github.last_json == {"name": "real", "has_wiki": True}

    @pytest.mark.parametrize("method", ["contributors", "languages", "teams", "tags", "branches"])
    def test_sub_resource_listings(self, api, github, method):
        github.reply(200, [])
        assert getattr(api, method)("octocat", "Hello-World") == []
        assert github.last.method == "GET"
        assert github.last_path == f"/repos/octocat/Hello-World/{method}"

    def test_contributors_anon(self, api, github):
        api.contributors("o", "r", {"anon": True})
        assert github.last.url.params["anon"] == "true"


class TestCollaborators:
    def test_collaborators(self, api, github):
        github.reply(200, [{"login": "u"}])
        assert api.collaborators("o", "r") == [{"login": "u"}]
        assert github.last_path == "/repos/o/r/collaborators"

    def test_is_collaborator_true_on_empty_2xx(self, api, github):
        github.reply(204)
        assert api.is_collaborator("o", "r", "u") is True
        assert github.last_path == "/repos/o/r/collaborators/u"

    def test_is_collaborator_false_on_404(self, api, github):
        github.reply(404, {"message": "Not Found"})
        assert api.is_collaborator("o", "r", "u") is False

    def test_is_collaborator_false_on_2xx_with_body(self, api, github):
        github.reply(200, {"login": "u"})
        assert api.is_collaborator("o", "r", "u") is False

    def test_membership_check_agrees_with_add_on_2xx_with_body(self, api, github):
        github.reply(200, {"login": "u"})
        github.reply(200, {"login": "u"})
        assert api.add_collaborator("o", "r", "u") is api.is_collaborator("o", "r", "u") is False

    def test_is_collaborator_raises_on_500(self, api, github):
        github.reply(500, {"message": "Server Error"})
        with pytest.raises(ApiError) as exc_info:
            api.is_collaborator("o", "r", "u")
        assert exc_info.value.status == 500

    def test_add_collaborator(self, api, github):
        github.reply(204)
        assert api.add_collaborator("o", "r", "u", CollaboratorOptions(permission="push")) is True
        assert github.last.method == "PUT"
        assert github.last_json == {"permission": "push"}

    def test_add_collaborator_with_body_is_false(self, api, github):
        github.reply(201, {"id": 1, "invitee": {"login": "u"}})
        assert api.add_collaborator("o", "r", "u") is False

    def test_remove_collaborator(self, api, github):
        github.reply(204)
        assert api.remove_collaborator("o", "r", "u") is True
        assert github.last.method == "DELETE"
        assert github.last_path == "/repos/o/r/collaborators/u"

    def test_remove_collaborator_error_propagates(self, api, github):
        github.reply(403, {"message": "Forbidden"})
        with pytest.raises(ApiError):
            api.remove_collaborator("o", "r", "u")


class TestCommits:
    def test_commits(self, api, github):
        api.commits("o", "r", {"sha": "main", "path": "README"})
        assert github.last_path == "/repos/o/r/commits"
        assert github.last.url.params["sha"] == "main"
        assert github.last.url.params["path"] == "README"

    def test_specific_commit(self, api, github):
        api.specific_commit("o", "r", "abc123")
        assert github.last_path == "/repos/o/r/commits/abc123"

    def test_commit_comments(self, api, github):
        api.commit_comments("o", "r")
        assert github.last_path == "/repos/o/r/comments"

    def test_specific_commit_comments(self, api, github):
        api.specific_commit_comments("o", "r", "abc123")
        assert github.last_path == "/repos/o/r/commits/abc123/comments"

    def test_create_commit_comment(self, api, github):
        github.reply(201, {"id": 9})
        result = api.create_commit_comment("o", "r", "abc123", "src/main.py", 4, "Nice")
        assert result == {"id": 9}
        assert github.last.method == "POST"
        assert github.last_path == "/repos/o/r/commits/abc123/comments"
        assert github.last_json == {
            "body": "Nice",
            "commit_id": "abc123",
            "path": "src/main.py",
            "position": 4,
        }

    def test_create_commit_comment_fixed_fields_override_hyphenated_keys(self, api, github):
        api.create_commit_comment("o", "r", "abc", "f.py", 1, "x", {"commit-id": "other", "line": 2})
        assert github.last_json == {
            "commit_id": "abc",
            "line": 2,
            "body": "x",
            "path": "f.py",
            "position": 1,
        }

    def test_create_commit_comment_with_line(self, api, github):
        api.create_commit_comment("o", "r", "abc", "f.py", 1, "x", CommitCommentOptions(line=12))
        assert github.last_json["line"] == 12

    def test_specific_commit_comment(self, api, github):
        api.specific_commit_comment("o", "r", 42)
        assert github.last_path == "/repos/o/r/comments/42"

    def test_update_commit_comment(self, api, github):
        api.update_commit_comment("o", "r", 42, "edited")
        assert github.last.method == "PATCH"
        assert github.last_json == {"body": "edited"}

    def test_delete_commit_comment(self, api, github):
        github.reply(204)
        assert api.delete_commit_comment("o", "r", 42) is True
        assert github.last.method == "DELETE"
        assert github.last_path == "/repos/o/r/comments/42"

    def test_compare_commits(self, api, github):
        api.compare_commits("o", "r", "main", "topic")
        assert github.last_path == "/repos/o/r/compare/main...topic"


class TestDownloads:
    def test_downloads(self, api, github):
        api.downloads("o", "r")
        assert github.last_path == "/repos/o/r/downloads"

    def test_specific_download(self, api, github):
        api.specific_download("o", "r", 3)
        assert github.last_path == "/repos/o/r/downloads/3"

    def test_delete_download(self, api, github):
        github.reply(204)
        assert api.delete_download("o", "r", 3) is True
        assert github.last.method == "DELETE"


class TestPathArguments:
    def test_arguments_are_url_encoded(self, api, github):
        api.specific_commit("o", "r", "feature/x")
        assert github.last_path == "/repos/o/r/commits/feature%2Fx"

    def test_client_call_fails_fast_on_arity(self, api):
        with pytest.raises(TemplateArityError):
            api.client.call("GET", "repos/%s/%s", ["only-one"])
