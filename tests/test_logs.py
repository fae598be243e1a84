import re

from hitlanes.logs import (
    LogLevel,
    LogManager,
    format_log,
    get_logs_manager,
    log,
    log_to_file,
)

STAMP = r"#\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"
STAMP_LENGTH = len("#2000-01-01 00:00:00")


def test_format_log_normal():
    text = format_log("hi")
    assert re.fullmatch(STAMP, text[:STAMP_LENGTH]) is not None
    assert text[STAMP_LENGTH:] == ": hi\n"


def test_format_log_tags():
    warning = format_log("w", LogLevel.WARNING)
    error = format_log("e", LogLevel.ERROR)
    assert re.fullmatch(STAMP, warning[:STAMP_LENGTH]) is not None
    assert warning[STAMP_LENGTH:] == "[warning]: w\n"
    assert re.fullmatch(STAMP, error[:STAMP_LENGTH]) is not None
    assert error[STAMP_LENGTH:] == "[error]: e\n"


def test_log_to_file_appends(tmp_path):
    path = tmp_path / "out.txt"
    log_to_file(str(path), "one")
    log_to_file(str(path), "two", LogLevel.ERROR)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith(": one")
    assert lines[1].endswith("[error]: two")


def test_log_to_file_missing_directory(tmp_path):
    path = tmp_path / "missing" / "out.txt"
    log_to_file(str(path), "one")
    assert not path.exists()


def test_first_log_clears_file(tmp_path, capsys):
    path = tmp_path / "log.txt"
    path.write_text("junk\n", encoding="utf-8")
    manager = LogManager()
    manager.init(str(path))
    manager.log("a")
    manager.log("b")
    content = path.read_text(encoding="utf-8")
    assert "junk" not in content
    assert len(content.splitlines()) == 2
    assert len(manager.internal_logs) == 2
    assert capsys.readouterr().out.count("\n") == 2


def test_production_skips_console(tmp_path, capsys):
    manager = LogManager(development=False)
    manager.init(str(tmp_path / "log.txt"))
    manager.log("quiet")
    assert capsys.readouterr().out == ""
    assert manager.internal_logs[-1].endswith(": quiet\n")


def test_internal_log_cap():
    manager = LogManager()
    for i in range(150):
        manager.log_internally(f"m{i}")
    assert len(manager.internal_logs) == LogManager.MAX_INTERNAL_LOG_COUNT
    assert manager.internal_logs[-1].endswith(": m149\n")
    first = 150 - LogManager.MAX_INTERNAL_LOG_COUNT
    assert manager.internal_logs[0].endswith(f": m{first}\n")


def test_default_file_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    manager = LogManager()
    manager.init("")
    manager.log_to_file("x")
    assert manager.name == LogManager.DEFAULT_LOG_FILE
    assert (tmp_path / LogManager.DEFAULT_LOG_FILE).read_text(encoding="utf-8").endswith(": x\n")


def test_shared_manager(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    manager = get_logs_manager()
    manager.init(str(tmp_path / "shared.txt"))
    log("hello", LogLevel.WARNING)
    assert get_logs_manager().internal_logs[-1].endswith("[warning]: hello\n")
    assert "hello" in capsys.readouterr().out