import pytest

from elp.config import Settings
from elp.errors import ExecutionError
from elp.modes import CommitSpec, OperationMode
from elp.workflow import Workflow

PLAIN = OperationMode()


def test_resolve_branch_explicit_skips_git(workflow, recorder):
    assert workflow.resolve_branch("feature-x") == "feature-x"
    assert recorder.calls == []


def test_resolve_branch_queries_current_branch_once(workflow, recorder):
    recorder.branch = "develop"
    assert workflow.resolve_branch(None) == "develop"
    assert recorder.calls == [("capture", "git", ["branch", "--show-current"])]


def test_initialize_without_url_only_inits_and_stages(workflow, recorder):
    workflow.initialize_and_link(None, None, PLAIN)
    assert recorder.argvs == [["init"], ["add", "-A"]]


def test_initialize_with_url_links_and_pushes_current_branch(workflow, recorder):
    url = "git@example.com:me/project.git"
    workflow.initialize_and_link(url, None, PLAIN)
    assert recorder.calls == [
        ("run", "git", ["init"]),
        ("run", "git", ["add", "-A"]),
        ("run", "git", ["commit", "-m", "First commit"]),
        ("run", "git", ["remote", "add", "origin", url]),
        ("capture", "git", ["branch", "--show-current"]),
        ("run", "git", ["push", "--set-upstream", "origin", "main"]),
    ]


def test_initialize_with_explicit_branch(workflow, recorder):
    workflow.initialize_and_link("https://example.com/r.git", "trunk", OperationMode(verbosity=1))
    assert "capture" not in [kind for kind, _, _ in recorder.calls]
    assert recorder.argvs[-1] == ["push", "-v", "--set-upstream", "origin", "trunk"]


def test_add_commit_push_with_title_and_message(workflow, recorder):
    spec = CommitSpec(title="Fix parser", message="Handles empty input")
    workflow.add_commit_push(spec, "feature-x", PLAIN)
    assert recorder.argvs == [
        ["add", "-A"],
        ["commit", "-m", "Fix parser", "-m", "Handles empty input"],
        ["push", "--set-upstream", "origin", "feature-x"],
    ]


def test_add_commit_push_falls_back_to_placeholder_title(workflow, recorder):
    workflow.add_commit_push(CommitSpec(), "main", OperationMode(quiet=True))
    assert recorder.argvs[1] == ["commit", "-q", "-m", "Auto-commit"]


def test_add_commit_push_skip_commit(workflow, recorder):
    workflow.add_commit_push(CommitSpec(title="ignored", skip=True), None, PLAIN)
    assert recorder.subcommands == ["add", "branch", "push"]


def test_pull_uses_resolved_branch(workflow, recorder):
    recorder.branch = "release"
    workflow.pull(None, OperationMode(verbosity=2))
    assert recorder.argvs == [
        ["branch", "--show-current"],
        ["pull", "-vv", "origin", "release"],
    ]


def test_default_cycle_order(workflow, recorder):
    workflow.default_cycle(PLAIN)
    assert recorder.argvs == [
        ["branch", "--show-current"],
        ["pull", "origin", "main"],
        ["add", "-A"],
        ["commit", "-m", "Auto-commit"],
        ["push", "--set-upstream", "origin", "main"],
    ]


def test_settings_change_titles_and_remote(recorder):
    from elp.adapters.git_adapter import GitAdapter

    settings = Settings(remote="upstream", first_commit_title="Initial import")
    workflow = Workflow(git=GitAdapter(remote=settings.remote, executor=recorder), settings=settings)
    workflow.initialize_and_link("https://example.com/r.git", "main", PLAIN)
    assert ["commit", "-m", "Initial import"] in recorder.argvs
    assert ["remote", "add", "upstream", "https://example.com/r.git"] in recorder.argvs
    assert recorder.argvs[-1] == ["push", "--set-upstream", "upstream", "main"]


def test_spawn_failure_stops_remaining_steps(workflow, recorder):
    recorder.fail_on.add("commit")
    with pytest.raises(ExecutionError) as excinfo:
        workflow.add_commit_push(CommitSpec(title="wip"), None, PLAIN)
    assert excinfo.value.context == "failed to commit"
    assert recorder.subcommands == ["add"]


def test_spawn_failure_mid_link_leaves_earlier_steps(workflow, recorder):
    recorder.fail_on.add("remote")
    with pytest.raises(ExecutionError):
        workflow.initialize_and_link("https://example.com/r.git", None, PLAIN)
    assert recorder.subcommands == ["init", "add", "commit"]
