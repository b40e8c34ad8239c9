from unittest.mock import Mock, call

import pytest

from kvhooks.commands.runner import CommandRunner
from kvhooks.errors import DuplicateHookError, HookNotFoundError, SpawnError
from kvhooks.hooks import HookEngine
from kvhooks.models import Hook, KVStore, OpType


@pytest.fixture
def runner():
    return Mock(spec=CommandRunner)


@pytest.fixture
def engine(runner):
    return HookEngine(runner)


def _hook(name, cmd_name="c1", run_on=OpType.SET, key="a"):
    return Hook(name=name, cmd_name=cmd_name, run_on=run_on, key=key)


def test_dispatch_runs_matching_hook_once(engine, runner):
    store = KVStore(cmds={"c1": "echo hi"}, hooks=[_hook("h1")])

    runs = engine.dispatch(store, OpType.SET, "a")

    runner.run.assert_called_once_with("c1", "echo hi")
    assert [run.status for run in runs] == ["RAN"]


def test_dispatch_ignores_other_keys_and_ops(engine, runner):
    store = KVStore(cmds={"c1": "echo hi"}, hooks=[_hook("h1")])

    assert engine.dispatch(store, OpType.SET, "b") == []
    assert engine.dispatch(store, OpType.GET, "a") == []
    runner.run.assert_not_called()


def test_dispatch_preserves_list_order(engine, runner):
    store = KVStore(
        cmds={"c1": "echo one", "c2": "echo two"},
        hooks=[_hook("second", cmd_name="c2"), _hook("first", cmd_name="c1")],
    )

    engine.dispatch(store, OpType.SET, "a")

    assert runner.run.call_args_list == [call("c2", "echo two"), call("c1", "echo one")]


def test_dangling_command_is_reported_and_dispatch_continues(engine, runner):
    store = KVStore(
        cmds={"c1": "echo hi"},
        hooks=[_hook("ghost", cmd_name="gone"), _hook("h1")],
    )

    runs = engine.dispatch(store, OpType.SET, "a")

    assert [run.status for run in runs] == ["MISSING_CMD", "RAN"]
    assert runs[0].message == 'Error! Bad hook! Hook "ghost" has no cmd!'
    runner.run.assert_called_once_with("c1", "echo hi")


def test_spawn_failure_does_not_stop_dispatch(engine, runner):
    runner.run.side_effect = [SpawnError("c1", "boom"), None]
    store = KVStore(
        cmds={"c1": "echo one", "c2": "echo two"},
        hooks=[_hook("h1", cmd_name="c1"), _hook("h2", cmd_name="c2")],
    )

    runs = engine.dispatch(store, OpType.SET, "a")

    assert [run.status for run in runs] == ["SPAWN_FAILED", "RAN"]
    assert "boom" in runs[0].message
    assert runner.run.call_count == 2


def test_command_is_resolved_at_dispatch_time(engine, runner):
    store = KVStore(cmds={"c1": "echo old"})
    engine.add_hook(store, "h1", "c1", OpType.SET, "a")
    store.cmds["c1"] = "echo new"

    engine.dispatch(store, OpType.SET, "a")

    runner.run.assert_called_once_with("c1", "echo new")


def test_add_hook_accepts_unknown_command(engine):
    store = KVStore()

    hook = engine.add_hook(store, "h1", "not-yet", OpType.GET, "a")

    assert store.hooks == [hook]
    assert hook.run_on is OpType.GET


def test_add_hook_rejects_duplicate_name(engine):
    store = KVStore(hooks=[_hook("h1")])

    with pytest.raises(DuplicateHookError) as excinfo:
        engine.add_hook(store, "h1", "c2", OpType.DEL, "b")

    assert excinfo.value.fatal
    assert "kv cmd del-hook h1" in str(excinfo.value)
    assert store.hooks == [_hook("h1")]


def test_remove_hook_removes_first_match_only(engine):
    store = KVStore(
        hooks=[_hook("h1"), _hook("h2"), _hook("h1", cmd_name="c9")],
    )

    removed = engine.remove_hook(store, "h1")

    assert removed == _hook("h1")
    assert store.hooks == [_hook("h2"), _hook("h1", cmd_name="c9")]


def test_remove_unknown_hook_is_fatal(engine):
    store = KVStore(hooks=[_hook("h1")])

    with pytest.raises(HookNotFoundError) as excinfo:
        engine.remove_hook(store, "nope")

    assert excinfo.value.fatal
    assert str(excinfo.value) == "Error! Hook nope does not exist!"
    assert store.hooks == [_hook("h1")]
