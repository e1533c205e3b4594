import pandas as pd

from deadline_scheduler.__main__ import main


def test_main_uses_default_deadlines(capsys):
    assert main(["--no-table"]) == 0
    out = capsys.readouterr().out
    assert "task  1 has deadline at time  1" in out
    assert "task  8 is scheduled in time slot  9" in out
    assert "repre. of its set" not in out


def test_main_prints_tables_by_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.count("repre. of its set |") == 10


def _schedule_output(capsys):
    return capsys.readouterr().out.split("--- Scheduling finished")[0]


def test_main_random_tasks_are_seeded(capsys):
    assert main(["--tasks", "6", "--seed", "4", "--no-table"]) == 0
    first = _schedule_output(capsys)
    assert main(["--tasks", "6", "--seed", "4", "--no-table"]) == 0
    assert _schedule_output(capsys) == first
    assert "task 6 has deadline at time" in first


def test_main_seed_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("DEADLINE_SCHEDULER_SEED", "9")
    assert main(["--tasks", "5", "--no-table"]) == 0
    first = _schedule_output(capsys)
    assert main(["--tasks", "5", "--no-table"]) == 0
    assert _schedule_output(capsys) == first


def test_main_rejects_non_positive_task_count(capsys):
    assert main(["--tasks", "0"]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_main_prompt_falls_back_to_defaults(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "not a number")
    assert main(["--prompt", "--no-table"]) == 0
    assert "task 10 has deadline at time  1" in capsys.readouterr().out


def test_main_prompt_accepts_a_count(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "3")
    assert main(["--prompt", "--no-table", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "task 3 has deadline at time" in out
    assert "task 4" not in out


def test_main_quiet_file_mode(tmp_path, capsys):
    source = tmp_path / "tasks.csv"
    target = tmp_path / "schedule.csv"
    pd.DataFrame({"deadline": [1, 1, 3]}).to_csv(source, index=False)

    assert main(["--input", str(source), "--output", str(target), "--quiet", "--disable-tqdm"]) == 0
    assert capsys.readouterr().out == ""
    assert pd.read_csv(target)["time_slot"].tolist() == [1, 3, 2]


def test_main_file_mode_reports_errors(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "missing.csv"), "--quiet"]) == 1
    assert "ERROR" in capsys.readouterr().out
