import argparse
import sys
from typing import List, Optional

from . import __version__
from .adapters.git_adapter import GitAdapter
from .config import load_settings
from .errors import ConfigurationError, ElpError
from .modes import CommitSpec, OperationMode, RemoteTarget
from .preferences import configure_user_preferences
from .update import select_update_strategy
from .utils import configure_logging
from .workflow import Workflow


def handle_start(args: argparse.Namespace, workflow: Workflow, mode: OperationMode) -> None:
    target = RemoteTarget(branch=args.branch, url=args.url)
    workflow.initialize_and_link(target.url, target.branch, mode)


def handle_push(args: argparse.Namespace, workflow: Workflow, mode: OperationMode) -> None:
    commit = CommitSpec(title=args.title, message=args.message, skip=args.no_commit)
    workflow.add_commit_push(commit, args.branch, mode)


def handle_pull(args: argparse.Namespace, workflow: Workflow, mode: OperationMode) -> None:
    workflow.pull(args.branch, mode)


def handle_setup(_: argparse.Namespace, workflow: Workflow, mode: OperationMode) -> None:
    updated = configure_user_preferences(workflow.git)
    if not mode.quiet:
        print(f"Updated: {', '.join(updated) or '(nothing)'}")


def handle_update(_: argparse.Namespace, workflow: Workflow, mode: OperationMode) -> None:
    workflow.self_update(mode)


def handle_default(_: argparse.Namespace, workflow: Workflow, mode: OperationMode) -> None:
    workflow.default_cycle(mode)


def _add_mode_flags(parser: argparse.ArgumentParser, suppress: bool = False) -> None:
    # Subcommand copies use SUPPRESS so they don't reset flags given before the subcommand
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=argparse.SUPPRESS if suppress else 0,
        help="Pass -v to git (-vv when repeated)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="Pass -q to git; cannot be combined with --verbose",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elp",
        description="A helper for git to simplify many mundane tasks. "
        "Without a command, pulls, commits everything and pushes.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Log every command elp runs")
    _add_mode_flags(parser)
    parser.set_defaults(func=handle_default)
    sub = parser.add_subparsers(dest="command")

    start = sub.add_parser("start", help="Create a repository, optionally linked to a remote URL")
    start.add_argument("url", nargs="?", help="Remote repository URL to add as origin and push to")
    start.add_argument("-b", "--branch", help="Branch to push (default: current)")
    _add_mode_flags(start, suppress=True)
    start.set_defaults(func=handle_start)

    push = sub.add_parser("push", help="Add, commit and push everything")
    push.add_argument("title", nargs="?", help="Commit title (default from settings)")
    push.add_argument("-m", "--commit-message", dest="message", help="Commit message body")
    push.add_argument("-b", "--branch", help="Branch to push (default: current)")
    push.add_argument(
        "-n", "--no-commit", dest="no_commit", action="store_true", help="Skip the commit step"
    )
    _add_mode_flags(push, suppress=True)
    push.set_defaults(func=handle_push)

    pull = sub.add_parser("pull", help="Pull from origin")
    pull.add_argument("-b", "--branch", help="Branch to pull (default: current)")
    _add_mode_flags(pull, suppress=True)
    pull.set_defaults(func=handle_pull)

    setup = sub.add_parser("setup", help="Set global git preferences interactively")
    _add_mode_flags(setup, suppress=True)
    setup.set_defaults(func=handle_setup)

    update = sub.add_parser("update", help="Update elp itself")
    _add_mode_flags(update, suppress=True)
    update.set_defaults(func=handle_update)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        mode = OperationMode(verbosity=args.verbose, quiet=args.quiet)
    except ConfigurationError as exc:
        parser.error(str(exc))

    configure_logging(debug=args.debug, quiet=mode.quiet)

    try:
        settings = load_settings()
        workflow = Workflow(
            git=GitAdapter(program=settings.git, remote=settings.remote),
            settings=settings,
            update_strategy=select_update_strategy(settings),
        )
        args.func(args, workflow, mode)
    except KeyboardInterrupt:
        return 130
    except ElpError as exc:
        print(f"elp: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
