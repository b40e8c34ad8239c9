"""Command-line interface for the kv store."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from kvhooks.commands.registry import add_command
from kvhooks.commands.runner import CommandRunner
from kvhooks.config import Settings
from kvhooks.errors import KVHooksError
from kvhooks.hooks.engine import HookEngine
from kvhooks.kv import delete_value, get_value, set_value
from kvhooks.models import OpType
from kvhooks.storage.json_store import StoreFile

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

_GET_HELP = """\
Get the value of <key> from storage

Example:
~> kv set my-key my-key-value
~> kv get my-key
my-key-value
"""

_SET_HELP = """\
Set <key> to <val> in storage.

Example:
~> kv set my-key my-key-value
~> kv get my-key
my-key-value
"""

_DEL_HELP = """\
Delete <key> in storage (and its value)

Example:
~> kv set my-key my-key-value
~> kv del my-key
~> kv get my-key

~>
"""


@dataclass
class Context:
    settings: Settings
    storage: StoreFile
    runner: CommandRunner
    engine: HookEngine


def _print_result(value: Optional[str]) -> None:
    print(value if value is not None else "")


def _run_hooks(ctx: Context, op: OpType, key: str) -> None:
    # Hooks see the store as persisted by the operation that triggered them.
    store = ctx.storage.load()
    for run in ctx.engine.dispatch(store, op, key):
        if not run.ok:
            print(run.message)


def handle_get(args: argparse.Namespace, ctx: Context) -> None:
    store = ctx.storage.load()
    _print_result(get_value(store, args.key))
    _run_hooks(ctx, OpType.GET, args.key)


def handle_set(args: argparse.Namespace, ctx: Context) -> None:
    store = ctx.storage.load()
    set_value(store, args.key, args.val)
    ctx.storage.save(store)
    _run_hooks(ctx, OpType.SET, args.key)


def handle_del(args: argparse.Namespace, ctx: Context) -> None:
    store = ctx.storage.load()
    removed = delete_value(store, args.key)
    ctx.storage.save(store)
    _print_result(removed)
    _run_hooks(ctx, OpType.DEL, args.key)


def handle_cmd_add(args: argparse.Namespace, ctx: Context) -> None:
    store = ctx.storage.load()
    add_command(store, args.cmd_name, args.cmd_value)
    ctx.storage.save(store)


def handle_cmd_run(args: argparse.Namespace, ctx: Context) -> None:
    store = ctx.storage.load()
    ctx.runner.run_named(store, args.cmd_name)


def handle_add_hook(args: argparse.Namespace, ctx: Context) -> None:
    store = ctx.storage.load()
    ctx.engine.add_hook(
        store,
        name=args.hook_name,
        cmd_name=args.cmd_name,
        run_on=OpType.from_cli(args.trigger),
        key=args.key,
    )
    ctx.storage.save(store)


def handle_del_hook(args: argparse.Namespace, ctx: Context) -> None:
    store = ctx.storage.load()
    ctx.engine.remove_hook(store, args.hook_name)
    ctx.storage.save(store)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kv", description="Simple key, value storage")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--store", help="Path of the JSON store (overrides KV_STORE_PATH)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    get_parser = subparsers.add_parser(
        "get",
        help="Get key from storage",
        description=_GET_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    get_parser.add_argument("key", help="key to get from storage")
    get_parser.set_defaults(func=handle_get)

    set_parser = subparsers.add_parser(
        "set",
        help="set key to value in storage",
        description=_SET_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    set_parser.add_argument("key", help="key to set in storage")
    set_parser.add_argument("val", help="<val> you wish to set <key> to.")
    set_parser.set_defaults(func=handle_set)

    del_parser = subparsers.add_parser(
        "del",
        help="Delete key and value from storage",
        description=_DEL_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    del_parser.add_argument("key", help="key to delete from storage")
    del_parser.set_defaults(func=handle_del)

    cmd_parser = subparsers.add_parser("cmd", help="Add, Run, and hook commands")
    cmd_parser.set_defaults(parser=cmd_parser)
    cmd_subparsers = cmd_parser.add_subparsers(dest="cmd_command")

    run_parser = cmd_subparsers.add_parser("run", help="Run commands <cmd-name>")
    run_parser.add_argument("cmd_name", metavar="cmd-name")
    run_parser.set_defaults(func=handle_cmd_run)

    add_parser = cmd_subparsers.add_parser(
        "add", help="Add command with name <cmd-name>, and value <cmd-value>"
    )
    add_parser.add_argument("cmd_name", metavar="cmd-name")
    add_parser.add_argument("cmd_value", metavar="cmd-value")
    add_parser.set_defaults(func=handle_cmd_add)

    add_hook_parser = cmd_subparsers.add_parser(
        "add-hook",
        help="Add hook with name <hook-name> to run <cmd-name> when <key> is --trigger=<get,set,del>",
    )
    add_hook_parser.add_argument("hook_name", metavar="hook-name")
    add_hook_parser.add_argument("cmd_name", metavar="cmd-name")
    add_hook_parser.add_argument("--trigger", required=True, choices=["get", "set", "del"])
    add_hook_parser.add_argument("key")
    add_hook_parser.set_defaults(func=handle_add_hook)

    del_hook_parser = cmd_subparsers.add_parser("del-hook", help="Remove hook with name <hook-name>")
    del_hook_parser.add_argument("hook_name", metavar="hook-name")
    del_hook_parser.set_defaults(func=handle_del_hook)

    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.getenv("KV_LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv(find_dotenv(usecwd=True))
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    if getattr(args, "func", None) is None:
        getattr(args, "parser", parser).print_help()
        raise SystemExit(2)

    try:
        settings = Settings.from_env(store_path=args.store)
        runner = CommandRunner(settings.shell)
        ctx = Context(
            settings=settings,
            storage=StoreFile(settings.store_path),
            runner=runner,
            engine=HookEngine(runner),
        )
        args.func(args, ctx)
    except KVHooksError as exc:
        if exc.fatal:
            logger.debug("Fatal: %s", exc)
            raise SystemExit(str(exc)) from exc
        print(exc)


if __name__ == "__main__":
    main()
