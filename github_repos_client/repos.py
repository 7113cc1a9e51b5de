"""GitHub Repos API: https://docs.github.com/en/rest/repos

Every wrapper fixes an HTTP method, a path template and its path arguments;
the request builder and executor in client.py do the rest. Options may be a
typed model from options.py or a plain mapping.
"""

from .client import GitHubApiClient, get_client
from .models import NO_CONTENT, Method
from .request import build_request, normalize_options

REPO = "repos/{owner}/{repo}"


class ReposApi:
    def __init__(self, client: GitHubApiClient | None = None):
        self.client = client or get_client()

    def _call(self, method, template, path_args=None, options=None):
        return self.client.call(method, template, path_args, options)

    def _action(self, method, template, path_args, options=None) -> bool:
        """Action endpoints succeed with an empty 2xx body."""
        return self._call(method, template, path_args, options) is NO_CONTENT

    def _repo_get(self, sub, owner, repo, options=None):
        return self._call(Method.GET, f"{REPO}/{sub}", {"owner": owner, "repo": repo}, options)

    # Primary repos API

    def repos(self, options=None):
        """List the authenticated user's repositories (RepoListOptions)."""
        return self._call(Method.GET, "user/repos", options=options)

    def user_repos(self, user, options=None):
        """List a user's repositories (RepoListOptions)."""
        return self._call(Method.GET, "users/{user}/repos", {"user": user}, options)

    def org_repos(self, org, options=None):
        """List repositories for an organization (RepoListOptions)."""
        return self._call(Method.GET, "orgs/{org}/repos", {"org": org}, options)

    def create_repo(self, name, options=None):
        """Create a repository for the authenticated user (CreateRepoOptions)."""
        return self._call(Method.POST, "user/repos", options=_with(options, name=name))

    def create_org_repo(self, org, name, options=None):
        """Create a repository in an organization (CreateOrgRepoOptions)."""
        return self._call(Method.POST, "orgs/{org}/repos", {"org": org}, _with(options, name=name))

    def specific_repo(self, owner, repo, options=None):
        return self._call(Method.GET, REPO, {"owner": owner, "repo": repo}, options)

    def edit_repo(self, owner, repo, options=None):
        """Edit a repository (EditRepoOptions). The name defaults to the current one.

        Sent as PATCH, the method GitHub documents for edits, rather than POST.
        """
        body = _with(options)
        if not body.get("name"):
            body["name"] = repo
        return self._call(Method.PATCH, REPO, {"owner": owner, "repo": repo}, body)

    def contributors(self, owner, repo, options=None):
        """List contributors (ContributorsOptions; anon=True includes anonymous ones)."""
        return self._repo_get("contributors", owner, repo, options)

    def languages(self, owner, repo, options=None):
        return self._repo_get("languages", owner, repo, options)

    def teams(self, owner, repo, options=None):
        return self._repo_get("teams", owner, repo, options)

    def tags(self, owner, repo, options=None):
        return self._repo_get("tags", owner, repo, options)

    def branches(self, owner, repo, options=None):
        return self._repo_get("branches", owner, repo, options)

    # Collaborators

    def collaborators(self, owner, repo, options=None):
        return self._repo_get("collaborators", owner, repo, options)

    def is_collaborator(self, owner, repo, collaborator, options=None) -> bool:
        """Check if a user is a collaborator. A 404 means no; other errors raise ApiError."""
        descriptor = build_request(
            Method.GET,
            f"{REPO}/collaborators/{{username}}",
            {"owner": owner, "repo": repo, "username": collaborator},
            options,
        )
        return self.client.check(descriptor, absent_status=404).unwrap()

    def add_collaborator(self, owner, repo, collaborator, options=None) -> bool:
        """Add a collaborator (CollaboratorOptions)."""
        return self._action(
            Method.PUT,
            f"{REPO}/collaborators/{{username}}",
            {"owner": owner, "repo": repo, "username": collaborator},
            options,
        )

    def remove_collaborator(self, owner, repo, collaborator, options=None) -> bool:
        return self._action(
            Method.DELETE,
            f"{REPO}/collaborators/{{username}}",
            {"owner": owner, "repo": repo, "username": collaborator},
            options,
        )

    # Commits and commit comments

    def commits(self, owner, repo, options=None):
        """List commits (CommitsOptions: sha or branch to start from, path filter)."""
        return self._repo_get("commits", owner, repo, options)

    def specific_commit(self, owner, repo, sha, options=None):
        return self._call(
            Method.GET, f"{REPO}/commits/{{sha}}", {"owner": owner, "repo": repo, "sha": sha}, options
        )

    def commit_comments(self, owner, repo, options=None):
        return self._repo_get("comments", owner, repo, options)

    def specific_commit_comments(self, owner, repo, sha, options=None):
        return self._call(
            Method.GET,
            f"{REPO}/commits/{{sha}}/comments",
            {"owner": owner, "repo": repo, "sha": sha},
            options,
        )

    def create_commit_comment(self, owner, repo, sha, path, position, body, options=None):
        """Comment on a commit.

        ``path`` is the file being commented on; ``position`` is the index of
        the line in the diff, not the line number in the file. The sha goes in
        both the URL and the body as ``commit_id``.
        """
        return self._call(
            Method.POST,
            f"{REPO}/commits/{{sha}}/comments",
            {"owner": owner, "repo": repo, "sha": sha},
            _with(options, body=body, commit_id=sha, path=path, position=position),
        )

    def specific_commit_comment(self, owner, repo, comment_id, options=None):
        return self._call(
            Method.GET, f"{REPO}/comments/{{id}}", {"owner": owner, "repo": repo, "id": comment_id}, options
        )

    def update_commit_comment(self, owner, repo, comment_id, body, options=None):
        """Replace the body of a commit comment. Sent as PATCH, as GitHub documents for edits."""
        return self._call(
            Method.PATCH,
            f"{REPO}/comments/{{id}}",
            {"owner": owner, "repo": repo, "id": comment_id},
            _with(options, body=body),
        )

    def delete_commit_comment(self, owner, repo, comment_id, options=None) -> bool:
        return self._action(
            Method.DELETE, f"{REPO}/comments/{{id}}", {"owner": owner, "repo": repo, "id": comment_id}, options
        )

    def compare_commits(self, owner, repo, base, head, options=None):
        return self._call(
            Method.GET,
            f"{REPO}/compare/{{base}}...{{head}}",
            {"owner": owner, "repo": repo, "base": base, "head": head},
            options,
        )

    # Downloads

    def downloads(self, owner, repo, options=None):
        return self._repo_get("downloads", owner, repo, options)

    def specific_download(self, owner, repo, download_id, options=None):
        return self._call(
            Method.GET,
            f"{REPO}/downloads/{{id}}",
            {"owner": owner, "repo": repo, "id": download_id},
            options,
        )

    def delete_download(self, owner, repo, download_id, options=None) -> bool:
        return self._action(
            Method.DELETE,
            f"{REPO}/downloads/{{id}}",
            {"owner": owner, "repo": repo, "id": download_id},
            options,
        )


def _with(options, **fields) -> dict:
    """Merge fixed body fields into caller options (typed model or mapping).

    Caller keys are normalized first so that fixed fields override them.
    """
    merged = normalize_options(options)
    merged.update(fields)
    return merged
