"""Service definitions read from the task configuration."""

from __future__ import annotations

import enum
import signal
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DISCARD_PATH = "/dev/null"


class ServiceConfigError(ValueError):
    """Raised when a service entry of the configuration cannot be decoded."""


class AutoRestart(enum.Enum):
    """When a service is restarted after it exits."""

    ALWAYS = "always"
    NEVER = "never"
    ON_FAILURE = "on_failure"


class KillSignal(enum.IntEnum):
    """Signals a service may be stopped with."""

    HUP = signal.SIGHUP
    INT = signal.SIGINT
    QUIT = signal.SIGQUIT
    ILL = signal.SIGILL
    ABRT = signal.SIGABRT
    FPE = signal.SIGFPE
    KILL = signal.SIGKILL
    SEGV = signal.SIGSEGV
    PIPE = signal.SIGPIPE
    ALRM = signal.SIGALRM
    TERM = signal.SIGTERM
    USR1 = signal.SIGUSR1
    USR2 = signal.SIGUSR2
    CHLD = signal.SIGCHLD
    STOP = signal.SIGSTOP
    TSTP = signal.SIGTSTP
    TTIN = signal.SIGTTIN
    TTOU = signal.SIGTTOU


@dataclass
class LogFiles:
    """Where the standard output and error of a service go."""

    stdout_file: str = DISCARD_PATH
    stderr_file: str = DISCARD_PATH


_AUTO_RESTART_WORDS = {
    "always": AutoRestart.ALWAYS,
    "yes": AutoRestart.ALWAYS,
    "y": AutoRestart.ALWAYS,
    "never": AutoRestart.NEVER,
    "no": AutoRestart.NEVER,
    "n": AutoRestart.NEVER,
    "on_failure": AutoRestart.ON_FAILURE,
    "failure": AutoRestart.ON_FAILURE,
    "fail": AutoRestart.ON_FAILURE,
    "f": AutoRestart.ON_FAILURE,
}

_BOOL_WORDS = {
    "y": True,
    "yes": True,
    "true": True,
    "on": True,
    "n": False,
    "no": False,
    "false": False,
    "off": False,
}


def parse_auto_restart(value: Any) -> AutoRestart:
    """Decode an ``auto_restart`` value, accepting its usual aliases."""
    if isinstance(value, bool):
        # YAML turns bare yes/no into booleans before we see them.
        return AutoRestart.ALWAYS if value else AutoRestart.NEVER
    if not isinstance(value, str):
        raise ServiceConfigError(f"invalid auto_restart value: {value!r}")
    try:
        return _AUTO_RESTART_WORDS[value.lower()]
    except KeyError:
        raise ServiceConfigError(f"invalid auto_restart value: {value!r}") from None


def _scalar_text(value: Any, what: str) -> str:
    if value is None or isinstance(value, (Mapping, list)):
        raise ServiceConfigError(f"{what} must be a scalar")
    return str(value)


def parse_log_files(node: Any) -> LogFiles:
    """Decode a ``log_file`` mapping; ``discard`` means the null device."""
    if not isinstance(node, Mapping):
        raise ServiceConfigError("log_file must be a mapping")
    if node.get("stdout") is None or node.get("stderr") is None:
        raise ServiceConfigError("log_file needs both stdout and stderr")
    stdout_file = _scalar_text(node["stdout"], "log_file.stdout")
    stderr_file = _scalar_text(node["stderr"], "log_file.stderr")
    return LogFiles(
        stdout_file=DISCARD_PATH if stdout_file == "discard" else stdout_file,
        stderr_file=DISCARD_PATH if stderr_file == "discard" else stderr_file,
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _optional_int(node: Mapping, key: str, default: int) -> int:
    value = node.get(key)
    return value if _is_int(value) else default


def _optional_bool(node: Mapping, key: str, default: bool) -> bool:
    value = node.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _BOOL_WORDS.get(value.lower(), default)
    return default


def _exit_codes(node: Mapping, default: list[int]) -> list[int]:
    value = node.get("normal_exit_code")
    if isinstance(value, list) and all(_is_int(code) for code in value):
        return list(value)
    return list(default)


def _stop_signal(node: Mapping, default: KillSignal) -> KillSignal:
    """Any configured stop signal resolves to KILL; TERM when none is given."""
    return KillSignal.KILL if "stop_signal" in node else default


@dataclass
class Service:
    """A program managed by the task manager, as described in the config."""

    name: str
    cmd: str
    auto_restart: AutoRestart
    umask: int
    num_procs: int = 1
    auto_start: bool = True
    normal_exit_code: list[int] = field(default_factory=lambda: [0])
    startup_grace_period: int = 10
    num_retry: int = 3
    stop_signal: KillSignal = KillSignal.TERM
    stop_timeout: int = 10
    log_file: LogFiles = field(default_factory=LogFiles)

    @classmethod
    def from_node(cls, name: str, node: Any) -> Service:
        """Build a service from its configuration mapping."""
        if not isinstance(node, Mapping):
            raise ServiceConfigError(f"service {name!r} must be a mapping")
        if node.get("cmd") is None:
            raise ServiceConfigError(f"service {name!r} has no cmd")
        if "auto_restart" not in node:
            raise ServiceConfigError(f"service {name!r} has no auto_restart")
        if "log_file" not in node:
            raise ServiceConfigError(f"service {name!r} has no log_file")
        umask = node.get("umask")
        if not _is_int(umask) or umask < 0:
            raise ServiceConfigError(f"service {name!r} needs a non-negative umask")

        defaults = cls(name=name, cmd="", auto_restart=AutoRestart.NEVER, umask=0)
        return cls(
            name=name,
            cmd=_scalar_text(node["cmd"], "cmd"),
            auto_restart=parse_auto_restart(node["auto_restart"]),
            umask=umask,
            num_procs=_optional_int(node, "num_procs", defaults.num_procs),
            auto_start=_optional_bool(node, "auto_start", defaults.auto_start),
            normal_exit_code=_exit_codes(node, defaults.normal_exit_code),
            startup_grace_period=_optional_int(
                node, "startup_grace_period", defaults.startup_grace_period
            ),
            num_retry=_optional_int(node, "num_retry", defaults.num_retry),
            stop_signal=_stop_signal(node, defaults.stop_signal),
            stop_timeout=_optional_int(node, "stop_timeout", defaults.stop_timeout),
            log_file=parse_log_files(node["log_file"]),
        )