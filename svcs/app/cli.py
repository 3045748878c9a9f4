"""SVCS command-line interface.

Every outcome, including user mistakes, is printed to stdout and exits 0.
Only I/O failures escape, as uncaught exceptions.

The argument after the command is taken literally, so messages, usernames
and commit IDs may start with '-'.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable

from .. import __version__
from ..core.controller import VersionControl
from ..utils.env import get_project_root
from ..utils.log import log_debug


class Command(str, Enum):
    CONFIG = "config"
    ADD = "add"
    LOG = "log"
    COMMIT = "commit"
    CHECKOUT = "checkout"


COMMAND_DESCRIPTIONS: dict[Command, str] = {
    Command.CONFIG: "Get and set a username.",
    Command.ADD: "Add a file to the index.",
    Command.LOG: "Show commit logs.",
    Command.COMMIT: "Save changes.",
    Command.CHECKOUT: "Restore a file.",
}

HELP_FLAGS = ("--help", "-h")
VERSION_FLAGS = ("--version", "-v")


def help_text() -> str:
    lines = ["These are SVCS commands:"]
    for command in Command:
        lines.append(f"{command.value:<11}{COMMAND_DESCRIPTIONS[command]}")
    return "\n".join(lines)


def main(args: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if args is None else args)

    if not argv or argv[0] in HELP_FLAGS:
        print(help_text())
        return 0

    if argv[0] in VERSION_FLAGS:
        print(f"svcs {__version__}")
        return 0

    try:
        command = Command(argv[0])
    except ValueError:
        print(f"'{argv[0]}' is not a SVCS command.")
        return 0

    value = argv[1] if len(argv) > 1 else ""
    if len(argv) > 2:
        log_debug(f"Ignoring extra arguments: {argv[2:]}")

    controller = VersionControl(project_root=get_project_root())
    controller.init_layout()

    return HANDLERS[command](value, controller)


def cmd_config(username: str, controller: VersionControl) -> int:
    username = controller.config_username(username)
    if not username:
        print("Please, tell me who you are.")
    else:
        print(f"The username is {username}.")
    return 0


def cmd_add(path: str, controller: VersionControl) -> int:
    if not path:
        print(controller.tracked_summary())
        return 0

    print(controller.add(path).message)
    return 0


def cmd_log(_: str, controller: VersionControl) -> int:
    print(controller.log().message)
    return 0


def cmd_commit(message: str, controller: VersionControl) -> int:
    print(controller.commit(message).message)
    return 0


def cmd_checkout(commit_id: str, controller: VersionControl) -> int:
    print(controller.checkout(commit_id).message)
    return 0


HANDLERS: dict[Command, Callable[[str, VersionControl], int]] = {
    Command.CONFIG: cmd_config,
    Command.ADD: cmd_add,
    Command.LOG: cmd_log,
    Command.COMMIT: cmd_commit,
    Command.CHECKOUT: cmd_checkout,
}


if __name__ == "__main__":
    sys.exit(main())
