# taskmanager

An interactive shell for services described in a YAML configuration
file, together with a reader for that configuration. The shell shows a
prompt and reads one command per line.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The shell

Start it with:

```
taskmanager
```

It shows the prompt `$Taskmaster>` (in green) and reads a line at a time.
Words are separated by spaces. The shell ends on `exit` or at end of
input (Ctrl-D); a last line without a trailing newline also counts as
end of input. On leaving it prints `Exiting...`.

Commands:

- `help`: list all commands.
- `help <command>`: show the usage of one command. For a name that is not
  a command it prints
  `Taskmaster: <name>: This function does not exist. Use help to see commands`.
- `exit`: leave the shell.
- `load <conf.file>`, `reload`, `start [<service> ... ]`,
  `restart [<service> ... ]`, `stop [<service> ... ]`, `info <service>`,
  `list`: recognised, but they have no effect yet (see below).

Any other command name gets:

```
TaskMaster: <name>: This function does not exist. Use help to see commands
```

## Configuration file

The configuration file is a YAML mapping. Services go under a `task` key:

```yaml
task:
  web:
    cmd: "/usr/bin/python3 -m http.server"
    num_procs: 1
    auto_start: true
    auto_restart: on_failure
    normal_exit_code: [0]
    startup_grace_period: 10
    num_retry: 3
    stop_signal: TERM
    stop_timeout: 10
    log_file:
      stdout: /tmp/web.out
      stderr: discard
    umask: 022
```

Required fields: `cmd`, `auto_restart`, `log_file` (with both `stdout`
and `stderr`) and a non-negative integer `umask`. The others fall back to
the defaults shown above (`stop_signal` defaults to `TERM`).

- `auto_restart` accepts `always`/`yes`/`y`, `never`/`no`/`n` and
  `on_failure`/`failure`/`fail`/`f`, in any case; YAML booleans map to
  `always` and `never`.
- A `log_file` path of `discard` becomes `/dev/null`.
- Optional integer fields that are not integers, and a `normal_exit_code`
  that is not a list of integers, fall back to their defaults.
- Any `stop_signal` that is present resolves to `KillSignal.KILL`,
  whatever its value.

## Library use

```python
from taskmanager.config import Config, ConfigStatus

config = Config("services.yaml")
if config.status is ConfigStatus.OK:
    for service in config.services():
        print(service.name, service.cmd, service.auto_restart)
```

- `Config()` with no path has status `ConfigStatus.NOT_INITIALIZED`.
  A file that cannot be read, or whose top level is not a mapping, gives
  `ConfigStatus.NOT_OK` and a message on standard error.
- `Config.services()` returns the services of the `task` section in file
  order, or an empty list when there is none.
- `taskmanager.service.Service.from_node(name, node)` builds one
  `Service` from an already parsed mapping. It and `Config.services()`
  raise `ServiceConfigError` (a `ValueError`) for a missing or invalid
  field. `parse_auto_restart` and `parse_log_files` decode single fields.
- `taskmanager.commands.help_text(command=None)` returns the text the
  `help` command prints.
- `taskmanager.controller.Controller(out)` runs command lines with
  `execute(line)`, writing to `out`; `exit` raises `ExitRequested`.

## What it does not do

The package does not start, stop or watch any process. The shell does
not load a configuration file: `load`, `reload`, `start`, `restart`,
`stop`, `info` and `list` are accepted and do nothing, and `exit` only
leaves the shell. The configuration reader is available to programs
that import it, but nothing acts on the services it describes.