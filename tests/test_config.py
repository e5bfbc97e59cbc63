import logging

import pytest

from texted import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TEXTED_SYNTAX", "TEXTED_SCRIPT_SUFFIXES", "TEXTED_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_default_syntax(monkeypatch):
    assert config.get_default_syntax() == "shell"
    monkeypatch.setenv("TEXTED_SYNTAX", " SEXP ")
    assert config.get_default_syntax() == "sexp"


def test_invalid_default_syntax(monkeypatch):
    monkeypatch.setenv("TEXTED_SYNTAX", "yaml")
    with pytest.raises(ValueError):
        config.get_default_syntax()


def test_script_suffixes(monkeypatch):
    monkeypatch.setenv("TEXTED_SCRIPT_SUFFIXES", config._sep().join([".tx=shell", "lisp=SEXP", ""]))
    suffixes = config.get_script_suffixes()
    assert suffixes[".tx"] == "shell"
    assert suffixes[".lisp"] == "sexp"
    assert suffixes[".json"] == "json"


def test_script_suffix_with_unknown_syntax(monkeypatch):
    monkeypatch.setenv("TEXTED_SCRIPT_SUFFIXES", ".tx=yaml")
    with pytest.raises(ValueError):
        config.get_script_suffixes()


@pytest.mark.parametrize(
    "path,syntax",
    [
        ("edit.texted", "shell"),
        ("EDIT.SEXP", "sexp"),
        ("dir/prog.json", "json"),
        ("notes.txt", "shell"),
    ],
)
def test_syntax_for_path(path, syntax):
    assert config.syntax_for_path(path) == syntax


def test_syntax_for_unknown_path_uses_default(monkeypatch):
    monkeypatch.setenv("TEXTED_SYNTAX", "json")
    assert config.syntax_for_path("script.unknown") == "json"


def test_log_level(monkeypatch):
    assert config.get_log_level() == "WARNING"
    monkeypatch.setenv("TEXTED_LOG_LEVEL", "debug")
    assert config.get_log_level() == "DEBUG"


def test_configure_logging_is_idempotent():
    logger = logging.getLogger("texted")
    before = list(logger.handlers)
    try:
        config.configure_logging("info")
        config.configure_logging("debug")
        ours = [h for h in logger.handlers if getattr(h, "_texted_handler", False)]
        assert len(ours) == 1
        assert logger.level == logging.DEBUG
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
