import json
from pathlib import Path
from typing import Iterator

from choicerules.presentation.cli import app
from choicerules.presentation.cli.render import format_choice_label


def _feed(*answers: str):
    iterator: Iterator[str] = iter(answers)
    return lambda _prompt: next(iterator)


def _make_data_dir(tmp_path: Path, choices: list[str], **prompt) -> Path:
    data_dir = tmp_path / "definitions"
    data_dir.mkdir()
    (data_dir / "choice_rules.json").write_text(
        json.dumps({"disabled_se": "Buzzer1", "hidden_default": "hidden3", "error_handling": "error3"}),
        encoding="utf-8",
    )
    (data_dir / "demo_scenario.json").write_text(
        json.dumps(
            {
                "state": {"switches": {"1": True}},
                "prompts": {"only": {"choices": choices, **prompt}},
            }
        ),
        encoding="utf-8",
    )
    return data_dir


def test_format_choice_label_marks_disabled() -> None:
    assert format_choice_label("\\C[7]Locked") == "Locked (disabled)"
    assert format_choice_label("Open") == "Open"


def test_play_rejects_disabled_then_commits(tmp_path: Path, capsys) -> None:
    data_dir = _make_data_dir(tmp_path, ["<<[s[1]]>>Locked", "(([s[1]]))Secret", "Open"], default=1)

    code = app.main(["--data-dir", str(data_dir)], input_fn=_feed("x", "9", "1", "2"))

    output = capsys.readouterr().out
    assert code == 0
    assert "> 2. Open" in output
    assert "1. Locked (disabled)" in output
    assert "Secret" not in output
    assert "Please enter a number." in output
    assert "Please enter a value between 1 and 2." in output
    assert "not available. [Buzzer1]" in output
    assert "Chose option 3: Open" in output


def test_cancel_defers_to_host(tmp_path: Path, capsys) -> None:
    data_dir = _make_data_dir(tmp_path, ["A", "B"], cancel=-2)

    code = app.main(["--data-dir", str(data_dir)], input_fn=_feed("c"))

    assert code == 0
    assert "Cancelled." in capsys.readouterr().out


def test_throw_policy_aborts_session(tmp_path: Path) -> None:
    data_dir = _make_data_dir(tmp_path, ["<<[v[1]]>>Broken"])

    assert app.main(["--data-dir", str(data_dir)], input_fn=_feed()) == 1


def test_check_reports_markup_errors(tmp_path: Path, capsys) -> None:
    data_dir = _make_data_dir(tmp_path, ["<<[v[1]]>>Broken", "Fine <<[s[1]]>>"])

    code = app.main(["--data-dir", str(data_dir), "--check"])

    output = capsys.readouterr().out
    assert code == 1
    assert "MALFORMED_RULE" in output
    assert "ILLEGAL_TAG_POSITION" in output


def test_check_passes_on_bundled_scenario(capsys) -> None:
    assert app.main(["--check"]) == 0
    assert "Choice markup is valid." in capsys.readouterr().out


def test_unknown_prompt_reports_error(tmp_path: Path, capsys) -> None:
    data_dir = _make_data_dir(tmp_path, ["A"])

    assert app.main(["--data-dir", str(data_dir), "--prompt", "missing"]) == 1
    assert "Unable to load scenario" in capsys.readouterr().out
