import signal

import pytest
import yaml

from taskmanager.service import (
    AutoRestart,
    KillSignal,
    LogFiles,
    Service,
    ServiceConfigError,
    parse_auto_restart,
    parse_log_files,
)

MINIMAL = """
cmd: /bin/true
auto_restart: never
umask: 18
log_file:
  stdout: discard
  stderr: discard
"""


def _node(text=MINIMAL, **extra):
    node = yaml.safe_load(text)
    node.update(extra)
    return node


@pytest.mark.parametrize(
    "word,expected",
    [
        ("always", AutoRestart.ALWAYS),
        ("YES", AutoRestart.ALWAYS),
        ("y", AutoRestart.ALWAYS),
        ("never", AutoRestart.NEVER),
        ("No", AutoRestart.NEVER),
        ("n", AutoRestart.NEVER),
        ("on_failure", AutoRestart.ON_FAILURE),
        ("failure", AutoRestart.ON_FAILURE),
        ("fail", AutoRestart.ON_FAILURE),
        ("F", AutoRestart.ON_FAILURE),
    ],
)
def test_parse_auto_restart_aliases(word, expected):
    assert parse_auto_restart(word) is expected


def test_parse_auto_restart_yaml_booleans():
    assert parse_auto_restart(yaml.safe_load("yes")) is AutoRestart.ALWAYS
    assert parse_auto_restart(yaml.safe_load("no")) is AutoRestart.NEVER


@pytest.mark.parametrize("value", ["sometimes", "", 3, None])
def test_parse_auto_restart_rejects(value):
    with pytest.raises(ServiceConfigError):
        parse_auto_restart(value)


def test_parse_log_files_discard_maps_to_null_device():
    files = parse_log_files({"stdout": "discard", "stderr": "/tmp/err.log"})
    assert files == LogFiles(stdout_file="/dev/null", stderr_file="/tmp/err.log")


def test_parse_log_files_keeps_paths():
    files = parse_log_files({"stdout": "/tmp/out.log", "stderr": "/tmp/err.log"})
    assert files.stdout_file == "/tmp/out.log"
    assert files.stderr_file == "/tmp/err.log"


@pytest.mark.parametrize(
    "node",
    [["stdout", "stderr"], {"stdout": "a"}, {"stderr": "b"}, {"stdout": None, "stderr": "b"}],
)
def test_parse_log_files_rejects(node):
    with pytest.raises(ServiceConfigError):
        parse_log_files(node)


@pytest.mark.parametrize(
    "number,expected",
    [
        (signal.SIGTERM, KillSignal.TERM),
        (signal.SIGKILL, KillSignal.KILL),
        (signal.SIGHUP, KillSignal.HUP),
    ],
)
def test_kill_signal_matches_system_signals(number, expected):
    assert KillSignal(int(number)) is expected


def test_from_node_applies_defaults():
    service = Service.from_node("web", _node())
    expected = Service(
        name="web",
        cmd="/bin/true",
        auto_restart=AutoRestart.NEVER,
        umask=18,
        log_file=LogFiles(),
    )
    assert service == expected
    assert service.stop_signal is KillSignal.TERM
    assert service.normal_exit_code == [0]


def test_from_node_reads_all_fields():
    node = _node(
        num_procs=4,
        auto_start=False,
        normal_exit_code=[0, 2],
        startup_grace_period=5,
        num_retry=7,
        stop_timeout=30,
    )
    service = Service.from_node("worker", node)
    assert service.num_procs == 4
    assert service.auto_start is False
    assert service.normal_exit_code == [0, 2]
    assert service.startup_grace_period == 5
    assert service.num_retry == 7
    assert service.stop_timeout == 30


def test_from_node_any_stop_signal_is_kill():
    service = Service.from_node("web", _node(stop_signal="TERM"))
    assert service.stop_signal is KillSignal.KILL


def test_from_node_bad_optional_values_fall_back():
    node = _node(num_procs="many", auto_start="maybe", normal_exit_code="zero")
    service = Service.from_node("web", node)
    reference = Service.from_node("web", _node())
    assert service == reference


def test_from_node_auto_start_words():
    assert Service.from_node("web", _node(auto_start="off")).auto_start is False


@pytest.mark.parametrize("missing", ["cmd", "auto_restart", "log_file", "umask"])
def test_from_node_required_fields(missing):
    node = _node()
    del node[missing]
    with pytest.raises(ServiceConfigError):
        Service.from_node("web", node)


def test_from_node_rejects_negative_umask():
    with pytest.raises(ServiceConfigError):
        Service.from_node("web", _node(umask=-1))


def test_from_node_rejects_non_mapping():
    with pytest.raises(ServiceConfigError):
        Service.from_node("web", ["cmd"])