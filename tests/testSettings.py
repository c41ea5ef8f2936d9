from pathlib import Path

import pytest

from adjust.settings import Settings, loadSettings, settingsPath


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = loadSettings(str(tmp_path / "missing.yaml"))
    assert cfg == Settings()
    assert cfg.quitKey == "q"
    assert cfg.stderrSuffix == " 2>/dev/null"
    assert cfg.logLevel == "WARNING"
    assert cfg.logFile is None


def test_loads_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "# personal overrides\n"
        "adjustmentsPath: /etc/adjustments\n"
        "quitKey: x\n"
        "logLevel: debug\n")
    cfg = loadSettings(str(path))
    assert cfg.adjustmentsPath == "/etc/adjustments"
    assert cfg.quitKey == "x"
    assert cfg.logLevel == "DEBUG"


def test_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert loadSettings(str(path)) == Settings()


def test_expands_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert Settings().adjustmentsPath == str(tmp_path / ".adjustments")


def test_bad_quit_key(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("quitKey: quit\n")
    with pytest.raises(RuntimeError, match="settings validation failed"):
        loadSettings(str(path))


def test_path_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("ADJUST_CONFIG", str(tmp_path / "alt.yaml"))
    assert settingsPath() == str(tmp_path / "alt.yaml")
    monkeypatch.delenv("ADJUST_CONFIG")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert settingsPath() == str(tmp_path / ".config" / "adjust" / "config.yaml")


@pytest.mark.parametrize("text", ["- one\n- two\n", "just a string\n"])
def test_non_mapping_document(tmp_path: Path, text: str):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    with pytest.raises(RuntimeError, match="not a mapping"):
        loadSettings(str(path))
