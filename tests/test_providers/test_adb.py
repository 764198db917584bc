"""Tests for AdbProvider."""

import subprocess

import pytest

from settings_signals import Namespace, ProviderError, SettingsDataSource
from settings_signals.providers import AdbProvider


class FakeAdb:
    """Stands in for ``subprocess.run`` and records each command."""

    def __init__(self, stdout="", returncode=0, stderr="", exc=None):
        self.stdout = stdout
        self.returncode = returncode
        self.stderr = stderr
        self.exc = exc
        self.commands = []
        self.kwargs = []

    def __call__(self, command, **kwargs):
        self.commands.append(command)
        self.kwargs.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(command, self.returncode, self.stdout, self.stderr)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ANDROID_SERIAL", raising=False)
    monkeypatch.delenv("ADB_PATH", raising=False)


@pytest.fixture
def fake(monkeypatch):
    adb = FakeAdb()
    monkeypatch.setattr(subprocess, "run", adb)
    return adb


def test_lookup_builds_settings_get_command(fake):
    fake.stdout = "1\n"
    provider = AdbProvider(adb_path="/opt/adb")
    result = provider.lookup(Namespace.GLOBAL, "adb_enabled")

    assert result.ok
    assert result.value == "1"
    assert fake.commands == [["/opt/adb", "shell", "settings", "get", "global", "adb_enabled"]]


def test_serial_selects_device(fake):
    fake.stdout = "1.0"
    AdbProvider(serial="emulator-5554", adb_path="adb").lookup(Namespace.SYSTEM, "font_scale")
    assert fake.commands[0][:3] == ["adb", "-s", "emulator-5554"]


def test_env_fallbacks(fake, monkeypatch):
    monkeypatch.setenv("ANDROID_SERIAL", "R58M123")
    monkeypatch.setenv("ADB_PATH", "/sdk/platform-tools/adb")
    provider = AdbProvider()
    provider.lookup(Namespace.SECURE, "accessibility_enabled")

    assert provider.serial == "R58M123"
    assert fake.commands[0][:3] == ["/sdk/platform-tools/adb", "-s", "R58M123"]


def test_timeout_passed_through(fake):
    AdbProvider(adb_path="adb", timeout=2.5).lookup(Namespace.GLOBAL, "http_proxy")
    assert fake.kwargs[0]["timeout"] == 2.5


@pytest.mark.parametrize("stdout", ["null\n", "", "\n"])
def test_null_output_is_missing(fake, stdout):
    fake.stdout = stdout
    assert not AdbProvider(adb_path="adb").lookup(Namespace.SECURE, "rtt_calling_mode").ok


def test_nonzero_exit_raises(fake):
    fake.returncode = 1
    fake.stderr = "error: no devices/emulators found"
    with pytest.raises(ProviderError, match="no devices"):
        AdbProvider(adb_path="adb").lookup(Namespace.GLOBAL, "adb_enabled")


def test_missing_binary_raises(fake):
    fake.exc = FileNotFoundError("adb")
    with pytest.raises(ProviderError):
        AdbProvider(adb_path="adb").lookup(Namespace.GLOBAL, "adb_enabled")


def test_timeout_raises(fake):
    fake.exc = subprocess.TimeoutExpired(["adb"], 1.0)
    with pytest.raises(ProviderError):
        AdbProvider(adb_path="adb").lookup(Namespace.GLOBAL, "adb_enabled")


def test_api_level(fake):
    fake.stdout = "33\n"
    assert AdbProvider(adb_path="adb").api_level() == 33
    assert fake.commands[0] == ["adb", "shell", "getprop", "ro.build.version.sdk"]


def test_api_level_garbage_raises(fake):
    fake.stdout = "unknown"
    with pytest.raises(ProviderError):
        AdbProvider(adb_path="adb").api_level()


def test_data_source_contains_adb_failures(fake):
    fake.returncode = 255
    source = SettingsDataSource(AdbProvider(adb_path="adb"))
    assert source.adb_enabled() == ""
    assert source.rtt_calling_mode() == ""


def test_rtt_gate_queries_sdk_before_setting(fake):
    fake.stdout = "27"
    source = SettingsDataSource(AdbProvider(adb_path="adb"))
    assert source.rtt_calling_mode() == ""
    assert fake.commands == [["adb", "shell", "getprop", "ro.build.version.sdk"]]


@pytest.mark.parametrize("stdout", [" dd/MM/yyyy \n", " dd/MM/yyyy \r\n"])
def test_surrounding_whitespace_preserved(fake, stdout):
    fake.stdout = stdout
    result = AdbProvider(adb_path="adb").lookup(Namespace.SYSTEM, "date_format")
    assert result.value == " dd/MM/yyyy "


def test_data_source_returns_adb_value_unmodified(fake):
    fake.stdout = "\tcom.example/.Ime  \n"
    source = SettingsDataSource(AdbProvider(adb_path="adb"))
    assert source.default_input_method() == "\tcom.example/.Ime  "
