"""Loading of the task manager configuration file."""

from __future__ import annotations

import enum
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from taskmanager.service import Service, ServiceConfigError


class ConfigStatus(enum.Enum):
    """State of a loaded configuration."""

    OK = "ok"
    NOT_OK = "not_ok"
    NOT_INITIALIZED = "not_initialized"


class Config:
    """A YAML configuration file describing the services under management."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = None if path is None else str(path)
        self._document: Any = None
        if self.path is None:
            self.status = ConfigStatus.NOT_INITIALIZED
            return
        try:
            with open(self.path, encoding="utf-8") as stream:
                self._document = yaml.safe_load(stream)
        except OSError:
            self.status = ConfigStatus.NOT_OK
            print(f"bad file: {self.path}", file=sys.stderr)
            return
        if not isinstance(self._document, Mapping):
            self.status = ConfigStatus.NOT_OK
            print(f"TaskManager: `{self.path}` is not a valid config file", file=sys.stderr)
            return
        self.status = ConfigStatus.OK

    def services(self) -> list[Service]:
        """Decode every entry of the ``task`` section, in file order."""
        if not isinstance(self._document, Mapping):
            return []
        tasks = self._document.get("task")
        if tasks is None:
            return []
        if not isinstance(tasks, Mapping):
            raise ServiceConfigError("`task` must be a mapping of services")
        return [Service.from_node(str(name), node) for name, node in tasks.items()]