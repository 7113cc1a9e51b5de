"""CLI commands for the GitHub repos client."""

import argparse
import json
import sys


def _parse_option(raw: str) -> tuple[str, object]:
    key, sep, value = raw.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    try:
        return key, json.loads(value)
    except ValueError:
        return key, value


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Call the GitHub repos API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # api subcommand
    api_parser = subparsers.add_parser(
        "api",
        help="Make a single GitHub REST API call",
    )
    api_parser.add_argument(
        "template",
        help="Path template (e.g., repos/%%s/%%s/branches)",
    )
    api_parser.add_argument(
        "args",
        nargs="*",
        help="Path arguments, substituted in order",
    )
    api_parser.add_argument(
        "--method",
        default="GET",
        help="HTTP method (default: GET)",
    )
    api_parser.add_argument(
        "--option",
        action="append",
        default=[],
        type=_parse_option,
        metavar="KEY=VALUE",
        help="Option sent as query parameter (GET) or body field (repeatable, e.g., --option has-wiki=false)",
    )

    # is-collaborator subcommand
    collab_parser = subparsers.add_parser(
        "is-collaborator",
        help="Check whether a user is a collaborator on a repository",
    )
    collab_parser.add_argument("owner")
    collab_parser.add_argument("repo")
    collab_parser.add_argument("user")

    args = parser.parse_args(argv)

    from .errors import GitHubError

    try:
        if args.command == "api":
            from .client import get_client
            from .models import NO_CONTENT

            result = get_client().call(args.method, args.template, args.args, dict(args.option))
            json.dump(None if result is NO_CONTENT else result, sys.stdout, indent=2)
            sys.stdout.write("\n")
        elif args.command == "is-collaborator":
            from .repos import ReposApi

            found = ReposApi().is_collaborator(args.owner, args.repo, args.user)
            print(json.dumps(found))
        else:
            parser.print_help()
    except (GitHubError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
