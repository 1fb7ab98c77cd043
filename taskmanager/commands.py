"""Help texts for the interactive commands."""

from __future__ import annotations

HELP = (
    "- `help [<command>]`\n"
    "- `load <conf.file>`\n"
    "- `reload`\n"
    "- `start [<service> ... ]`\n"
    "- `restart [<service> ... ]`\n"
    "- `stop [<service> ... ]`\n"
    "- `info <service>`\n"
    "- `list`\n"
    "- `exit`\n."
)

HELP_HELP = "Usage: `help [<command>]`\nSee the Help for said command.\n"
HELP_LOAD = "Usage: `load <conf.file>`\nLoad say config file into memory.\n"
HELP_RELOAD = "Usage: `reload`\nReload the previous loaded config file.\n"
HELP_START = (
    "Usage: `start [<service> ... ]`\nWill start said service.\n"
    "If no argument is provided, will launch them all\n"
)
HELP_RESTART = (
    "Usage: `restart [<service> ... ]`\nWill restart said service.\n"
    "If no argument is provided, will launch them all\n"
)
HELP_STOP = (
    "Usage: `stop [<service> ... ]`\nWill stop and kill said service.\n"
    "If no argument is provided, will stop and kill all services\n"
)
HELP_INFO = "Usage: `info <service>`\nPrint the informations of that service.\n"
HELP_LIST = "Usage: `list`\nPrint out all the services.\n"
HELP_EXIT = "Usage: `exit`\nWill kill all services, and quit Taskmaster.\n"

COMMAND_HELP = {
    "help": HELP_HELP,
    "load": HELP_LOAD,
    "reload": HELP_RELOAD,
    "start": HELP_START,
    "restart": HELP_RESTART,
    "stop": HELP_STOP,
    "info": HELP_INFO,
    "list": HELP_LIST,
    "exit": HELP_EXIT,
}


def unknown_command_message(name: str) -> str:
    """Message for a command name that has no help entry."""
    return f"Taskmaster: {name}: This function does not exist. Use help to see commands"


def help_text(command: str | None = None) -> str:
    """Text printed by ``help``, for all commands or for one of them."""
    if command is None:
        return HELP + "\n"
    try:
        return COMMAND_HELP[command]
    except KeyError:
        return unknown_command_message(command) + "\n"