#!/usr/bin/env python3
"""
TODOLIST - CLI Interface
========================
Command-line front end for the task list.

Usage:
    todolist add "Buy milk" -p high
    todolist toggle 1
    todolist edit 2 "Buy oat milk"
    todolist delete 3
    todolist clear
    todolist list --filter active
    todolist stats
    todolist theme
    todolist shell             # in-memory session, lost on exit
"""

import argparse
import json
import logging
import os
import shlex
import sys
from typing import Callable, Optional

from .errors import InvalidArgumentError
from .manager import TaskStore
from .projector import ViewProjector
from .schema import TaskPriority, TaskView, create_demo_tasks
from .storage import JsonFileStorage, MemoryStorage, TaskStorage

logger = logging.getLogger("todolist")

DEFAULT_TASKS_DIR = ".todo"

PRIORITY_ICONS = {
    TaskPriority.HIGH: "🔴",
    TaskPriority.MEDIUM: "🟡",
    TaskPriority.LOW: "🟢",
}

SHELL_HELP = """Commands:
  add TEXT [-p high|medium|low]   Add a task
  toggle ID                       Mark done / not done
  edit ID TEXT                    Change task text
  delete ID                       Remove a task
  clear                           Remove completed tasks
  filter all|active|completed|high
  list [-f FILTER] | stats | theme | help | quit"""


# ========================================
# BOOTSTRAP
# ========================================

def open_store(storage: TaskStorage, seed_demo: bool = True) -> TaskStore:
    """Load the store; an empty one gets the demo tasks"""
    store = TaskStore(storage)
    if seed_demo and len(store) == 0:
        store.seed(create_demo_tasks())
    return store


# ========================================
# RENDERING
# ========================================

def render_view(view: TaskView, dark_theme: bool = False) -> str:
    """Human-readable task list"""
    lines = [
        f"📋 Tasks [{view.filter.value}]  {'☀️' if dark_theme else '🌙'}",
        "-" * 60,
    ]

    if view.is_empty:
        lines.append("  No tasks here. Add one with: add TEXT")
    for task in view.tasks:
        check = "☑️" if task.completed else "⬜"
        lines.append(f"  {check} {PRIORITY_ICONS[task.priority]} [{task.id}] {task.text}")

    stats = view.stats
    lines.extend([
        "-" * 60,
        f"{stats.total} total | {stats.completed} completed | {stats.active} active",
    ])
    if view.show_clear_completed:
        lines.append("🧹 Remove completed tasks with: clear")

    return "\n".join(lines)


def show(store: TaskStore, storage: TaskStorage) -> None:
    print(render_view(ViewProjector.project(store), storage.load_theme()))


# ========================================
# ARGUMENTS
# ========================================

def build_parser(shell: bool = False) -> argparse.ArgumentParser:
    """Parser for the command line, or for one line inside the shell"""
    parser = argparse.ArgumentParser(
        prog="" if shell else "todolist",
        description="Todolist - session task list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=not shell,
        epilog=None if shell else """
Examples:
  todolist add "Write report" -p high    Add a high priority task
  todolist toggle 1                      Complete / reopen task 1
  todolist edit 1 "Write the report"     Change the text of task 1
  todolist list -f active                Show open tasks only
  todolist shell                         Interactive in-memory session
        """
    )
    if not shell:
        parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
        parser.add_argument(
            "--dir",
            default=os.environ.get("TODOLIST_DIR", DEFAULT_TASKS_DIR),
            help="Tasks directory (env: TODOLIST_DIR)"
        )
        parser.add_argument("--no-demo", action="store_true", help="Don't seed demo tasks into an empty list")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("text", help="Task text")
    add_parser.add_argument(
        "-p", "--priority",
        default=TaskPriority.MEDIUM.value,
        help="high, medium or low (default: medium)"
    )

    # TOGGLE command
    toggle_parser = subparsers.add_parser("toggle", help="Mark a task done / not done")
    toggle_parser.add_argument("task_id", type=int, help="Task ID")

    # EDIT command
    edit_parser = subparsers.add_parser("edit", help="Change the text of a task")
    edit_parser.add_argument("task_id", type=int, help="Task ID")
    edit_parser.add_argument("text", help="New text")

    # DELETE command
    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("task_id", type=int, help="Task ID")

    # CLEAR command
    subparsers.add_parser("clear", help="Remove completed tasks")

    # LIST command
    list_parser = subparsers.add_parser("list", help="Show tasks")
    list_parser.add_argument("-f", "--filter", help="all, active, completed or high")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # STATS command
    stats_parser = subparsers.add_parser("stats", help="Show task counts")
    stats_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # THEME command
    subparsers.add_parser("theme", help="Toggle dark theme")

    if shell:
        filter_parser = subparsers.add_parser("filter", help="Set the filter")
        filter_parser.add_argument("mode", help="all, active, completed or high")
        subparsers.add_parser("help")
        subparsers.add_parser("quit")
        subparsers.add_parser("exit")
    else:
        shell_parser = subparsers.add_parser("shell", help="Interactive session")
        shell_parser.add_argument(
            "--persist", action="store_true",
            help="Keep tasks in the tasks directory instead of memory"
        )

    return parser


# ========================================
# COMMANDS
# ========================================

def run_command(store: TaskStore, storage: TaskStorage, args: argparse.Namespace) -> int:
    """Execute one parsed command against the store"""
    try:
        return _dispatch(store, storage, args)
    except InvalidArgumentError as e:
        print(f"❌ {e}")
        return 1


def _dispatch(store: TaskStore, storage: TaskStorage, args: argparse.Namespace) -> int:
    if args.command == "add":
        task = store.add(args.text, args.priority)
        if not task:
            print("❌ Task text cannot be empty")
            return 1
        print(f"✅ Added: [{task.id}] {task.text}")

    elif args.command == "toggle":
        task = store.toggle_completed(args.task_id)
        if not task:
            print(f"❌ Task not found: {args.task_id}")
            return 1
        print(f"{'☑️ Completed' if task.completed else '⬜ Reopened'}: {task.text}")

    elif args.command == "edit":
        if not args.text.strip():
            print("❌ Task text cannot be empty")
            return 1
        task = store.edit(args.task_id, args.text)
        if not task:
            print(f"❌ Task not found: {args.task_id}")
            return 1
        print(f"✏️ Edited: [{task.id}] {task.text}")

    elif args.command == "delete":
        if not store.delete(args.task_id):
            print(f"❌ Task not found: {args.task_id}")
            return 1
        print(f"🗑️ Deleted: {args.task_id}")

    elif args.command == "clear":
        removed = store.clear_completed()
        print(f"🧹 Removed {removed} completed tasks")

    elif args.command == "filter":
        store.set_filter(args.mode)

    elif args.command == "list":
        if args.filter is not None:
            store.set_filter(args.filter)
        if args.json:
            view = ViewProjector.project(store)
            print(json.dumps(view.model_dump(mode="json"), indent=2, ensure_ascii=False))
            return 0

    elif args.command == "stats":
        stats = ViewProjector.stats(store.tasks)
        if args.json:
            print(json.dumps(stats.model_dump(), indent=2))
        else:
            print(f"{stats.total} total | {stats.completed} completed | {stats.active} active")
        return 0

    elif args.command == "theme":
        dark = not storage.load_theme()
        storage.save_theme(dark)
        print(f"{'☀️ Dark' if dark else '🌙 Light'} theme")

    show(store, storage)
    return 0


def run_shell(
    store: TaskStore,
    storage: TaskStorage,
    read: Callable[[str], str] = input
) -> int:
    """Read commands until quit/EOF, re-rendering after each one"""
    parser = build_parser(shell=True)
    show(store, storage)

    while True:
        try:
            line = read("todo> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        try:
            argv = shlex.split(line)
        except ValueError as e:
            print(f"❌ {e}")
            continue
        if not argv:
            continue

        try:
            args = parser.parse_args(argv)
        except SystemExit:
            # argparse already printed the usage error
            continue

        if args.command in ("quit", "exit"):
            break
        if args.command == "help":
            print(SHELL_HELP)
            continue
        run_command(store, storage, args)

    return 0


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "shell" and not args.persist:
        storage: TaskStorage = MemoryStorage()
    else:
        storage = JsonFileStorage(tasks_dir=args.dir)
    logger.debug(f"Using storage: {type(storage).__name__}")

    store = open_store(storage, seed_demo=not args.no_demo)

    if args.command == "shell":
        return run_shell(store, storage)
    return run_command(store, storage, args)


if __name__ == "__main__":
    sys.exit(main())
