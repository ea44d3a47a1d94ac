import pytest

from cee.cli import TASKS, Task, UsageError, main, run_task, usage
from cee.defs import load_scope
from cee.printer import format_scope, format_tokens
from cee.tokenize import tokenize_text

SOURCE = """fun main(a: int): int {
    const x: int = a * 2;
    print(x);
    return x;
}
"""


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "main.cee"
    path.write_text(SOURCE, encoding="utf-8")
    return path


def test_tokens_task_output(source_file, capsys):
    assert main(["tokens", str(source_file)]) == 0
    assert capsys.readouterr().out == format_tokens(tokenize_text(SOURCE))


def test_ast_task_output(source_file, capsys):
    assert main(["ast", str(source_file)]) == 0
    assert capsys.readouterr().out == format_scope(load_scope(source_file))


def test_missing_task_name(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "ERROR: missing task name" in out
    assert out.endswith(usage(TASKS))


def test_unknown_task(capsys):
    assert main(["bogus"]) == 0
    assert 'ERROR: unknown task "bogus"' in capsys.readouterr().out


def test_tokens_missing_path(capsys):
    assert main(["tokens"]) == 1
    assert "ERROR: missing source file path" in capsys.readouterr().out


def test_ast_missing_path(capsys):
    assert main(["ast"]) == 1
    assert "ERROR: missing file path" in capsys.readouterr().out


@pytest.mark.parametrize("task", ["tokens", "ast"])
def test_missing_file(task, tmp_path, capsys):
    assert main([task, str(tmp_path / "absent.cee")]) == 1
    assert "task finished due to internal error" in capsys.readouterr().out


def test_unrecognized_token(tmp_path, capsys):
    path = tmp_path / "bad.cee"
    path.write_text("const $x;\n", encoding="utf-8")
    assert main(["tokens", str(path)]) == 1
    assert "ERROR: cannot recognize token" in capsys.readouterr().out


def test_run_task_dispatches_arguments():
    calls = []
    tasks = [Task("x", "do x", "", calls.append)]
    run_task(tasks, ["x", "a", "b"])
    assert calls == [["a", "b"]]


def test_run_task_requires_name():
    with pytest.raises(UsageError):
        run_task(TASKS, [])


def test_usage_lists_tasks():
    tasks = [
        Task("x", "do x", "", lambda args: None),
        Task("y", "do y", "<f>", lambda args: None),
    ]
    text = usage(tasks)
    assert text.startswith("usage: ")
    assert "\tx - do x\n" in text
    assert "\ty <f> - do y\n" in text


def test_default_usage_mentions_every_task():
    text = usage(TASKS)
    assert all(f"\t{task.name} {task.args} - {task.description}\n" in text for task in TASKS)