# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todolist import cli
from todolist.projector import ViewProjector
from todolist.schema import TaskStats
from todolist.storage import JsonFileStorage, MemoryStorage


def run(tmp_path: Path, *argv: str) -> int:
    return cli.main(["--dir", str(tmp_path), *argv])


def fake_input(lines: list[str]):
    it = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_empty_load_seeds_demo_tasks() -> None:
    store = cli.open_store(MemoryStorage())

    assert {t.id for t in store.tasks} == {1, 2, 3}
    assert ViewProjector.stats(store.tasks) == TaskStats(total=3, completed=1, active=2)


def test_demo_seed_can_be_disabled() -> None:
    assert len(cli.open_store(MemoryStorage(), seed_demo=False)) == 0


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_stats_json_on_first_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(tmp_path, "stats", "--json") == 0

    assert json.loads(capsys.readouterr().out) == {"total": 3, "completed": 1, "active": 2}


def test_add_toggle_edit_delete(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(tmp_path, "--no-demo", "add", "Write report", "-p", "high") == 0
    task = JsonFileStorage(tmp_path).load()[0]
    assert "Write report" in capsys.readouterr().out

    assert run(tmp_path, "toggle", str(task.id)) == 0
    assert JsonFileStorage(tmp_path).load()[0].completed is True

    assert run(tmp_path, "edit", str(task.id), "Write the report") == 0
    assert JsonFileStorage(tmp_path).load()[0].text == "Write the report"

    assert run(tmp_path, "delete", str(task.id)) == 0
    assert JsonFileStorage(tmp_path).load() == []


def test_refused_commands_exit_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(tmp_path, "add", "   ") == 1
    assert run(tmp_path, "add", "x", "-p", "urgent") == 1
    assert run(tmp_path, "toggle", "999") == 1
    assert run(tmp_path, "delete", "999") == 1
    assert run(tmp_path, "edit", "1", "  ") == 1
    assert run(tmp_path, "list", "-f", "bogus") == 1

    out = capsys.readouterr().out
    assert "Task not found: 999" in out
    assert "Invalid filter" in out
    assert len(JsonFileStorage(tmp_path).load()) == 3


def test_list_filter_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(tmp_path, "list", "-f", "active", "--json") == 0

    view = json.loads(capsys.readouterr().out)
    assert view["filter"] == "active"
    assert [t["id"] for t in view["tasks"]] == [1, 2]
    assert view["stats"]["total"] == 3
    assert view["show_clear_completed"] is True


def test_clear_then_render(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(tmp_path, "clear") == 0

    out = capsys.readouterr().out
    assert "Removed 1 completed tasks" in out
    assert "2 total | 0 completed | 2 active" in out
    assert "clear" not in out.splitlines()[-1]


def test_theme_toggles(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(tmp_path, "theme") == 0
    assert JsonFileStorage(tmp_path).load_theme() is True
    assert "☀️" in capsys.readouterr().out

    assert run(tmp_path, "theme") == 0
    assert JsonFileStorage(tmp_path).load_theme() is False


def test_shell_session(capsys: pytest.CaptureFixture[str]) -> None:
    storage = MemoryStorage()
    store = cli.open_store(storage)

    code = cli.run_shell(store, storage, fake_input([
        'add "Ship it" -p high',
        "toggle 3",
        "filter active",
        "filter nonsense",
        "not-a-command",
        "",
        "help",
        "quit",
        "add never reached",
    ]))

    assert code == 0
    assert [t.text for t in store.tasks][-1] == "Ship it"
    assert len(store) == 4
    assert store.get(3).completed is False
    assert store.filter.value == "active"
    out = capsys.readouterr().out
    assert "Invalid filter" in out
    assert "Commands:" in out


def test_shell_ends_on_eof(capsys: pytest.CaptureFixture[str]) -> None:
    storage = MemoryStorage()
    store = cli.open_store(storage, seed_demo=False)

    assert cli.run_shell(store, storage, fake_input(["add one"])) == 0
    assert [t.text for t in store.tasks] == ["one"]


def test_render_empty_view() -> None:
    store = cli.open_store(MemoryStorage(), seed_demo=False)

    text = cli.render_view(ViewProjector.project(store), dark_theme=False)

    assert "No tasks here" in text
    assert "🌙" in text
    assert "0 total | 0 completed | 0 active" in text
