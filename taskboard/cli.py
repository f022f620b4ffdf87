#!/usr/bin/env python3
"""
TASKBOARD - CLI Interface
=========================
Terminal host for the task list page.

Usage:
    taskboard list
    taskboard add "Buy milk" errand
    taskboard complete 2
    taskboard toggle 2
    taskboard shell
"""

import argparse
import json
import logging
import sys

from .app import App
from .config import get_settings
from .errors import ElementNotFoundError
from .page import ADD_BUTTON, TAG_INPUT, TASK_INPUT, Page
from .render import control_id, format_page, update_counter
from .schema import TaskSequence

SHELL_HELP = """Commands:
  add              Create a task (asks for name and tag)
  complete <id>    Press the task's "Concluir" button
  toggle <id>      Flip the task's completion flag
  list             Redraw the task list
  help             Show this help
  quit             Leave the shell"""


def _alert(message: str) -> None:
    print(f"⚠️ {message}", file=sys.stderr)


def _show(app: App) -> None:
    print(format_page(app.page.task_list, update_counter(app.store.tasks)))


def _parse_id(raw: str):
    try:
        return int(raw)
    except ValueError:
        print(f"❌ Invalid task id: {raw}")
        return None


def _complete(app: App, task_id: int) -> bool:
    """Click the task's completion control, as the page would"""
    try:
        app.page.click(control_id(task_id))
    except ElementNotFoundError:
        print(f"❌ Task not found: {task_id}")
        return False
    return True


def run_shell(app: App) -> int:
    _show(app)
    while True:
        try:
            line = input("\n: ").strip()
        except EOFError:
            print()
            return 0
        if not line:
            continue

        command, _, rest = line.partition(" ")
        command = command.lower()

        if command in ("quit", "exit"):
            return 0
        elif command == "help":
            print(SHELL_HELP)
            continue
        elif command == "add":
            try:
                app.page.type_text(TASK_INPUT, input("Nome da tarefa: "))
                app.page.type_text(TAG_INPUT, input("Etiqueta: "))
            except EOFError:
                print()
                return 0
            app.page.keypress(TAG_INPUT, "Enter")
        elif command in ("complete", "toggle"):
            task_id = _parse_id(rest.strip())
            if task_id is None:
                continue
            if command == "complete":
                _complete(app, task_id)
            elif not app.controller.toggle(task_id):
                print(f"❌ Task not found: {task_id}")
        elif command != "list":
            print(f"Unknown command: {command}. Type 'help'.")
            continue

        _show(app)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Taskboard - tagged task list with completion counter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taskboard list                        Show tasks and completed count
  taskboard list --json                 Dump the stored task list
  taskboard add "Buy milk" errand       Create a task
  taskboard complete 2                  Mark task 2 as completed
  taskboard toggle 2                    Flip task 2 (completed <-> open)
  taskboard shell                       Interactive session
        """
    )
    parser.add_argument("--dir", help="Storage directory (env TASKBOARD_DIR)")
    parser.add_argument("--key", help="Storage key (env TASKBOARD_KEY)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at INFO level")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # LIST command
    list_parser = subparsers.add_parser("list", help="Show the task list")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Create a task")
    add_parser.add_argument("name", help="Task name")
    add_parser.add_argument("tag", help="Category tag")

    # COMPLETE command
    complete_parser = subparsers.add_parser("complete", help="Mark a task as completed")
    complete_parser.add_argument("task_id", type=int, help="Task ID")

    # TOGGLE command
    toggle_parser = subparsers.add_parser("toggle", help="Flip a task's completion")
    toggle_parser.add_argument("task_id", type=int, help="Task ID")

    # SHELL command
    subparsers.add_parser("shell", help="Interactive session")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = get_settings(
        data_dir=args.dir,
        storage_key=args.key,
        log_level="INFO" if args.verbose else None
    )
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = App.from_settings(settings, page=Page(alert_handler=_alert)).start()

    # Execute command
    if args.command == "list":
        if args.json:
            data = TaskSequence.dump_python(list(app.store.tasks), mode="json", by_alias=True)
            print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            _show(app)

    elif args.command == "add":
        app.page.type_text(TASK_INPUT, args.name)
        app.page.type_text(TAG_INPUT, args.tag)
        app.page.click(ADD_BUTTON)
        if app.page.alerts:
            return 1
        task = app.store.tasks[-1]
        print(f"✅ Created: [{task.id}] {task.name} ({task.tag})")

    elif args.command == "complete":
        if not _complete(app, args.task_id):
            return 1
        task = app.store.get(args.task_id)
        print(f"✅ Completed: {task.name}")

    elif args.command == "toggle":
        task = app.controller.toggle(args.task_id)
        if not task:
            print(f"❌ Task not found: {args.task_id}")
            return 1
        state = "completed" if task.is_complete else "open"
        print(f"🔁 [{task.id}] {task.name} is now {state}")

    elif args.command == "shell":
        return run_shell(app)

    return 0


if __name__ == "__main__":
    sys.exit(main())
