"""Console host that drives choice prompts through the rule engine."""
from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from choicerules.data.errors import DataError
from choicerules.data.repositories import EngineConfigRepository, ScenarioRepository
from choicerules.domain.choice_models import (
    ChoiceCommittedEvent,
    ChoiceRejectedEvent,
    HostCancelEvent,
    PromptDescriptor,
    SelectionEvent,
)
from choicerules.presentation.cli.render import (
    format_choice_label,
    render_bullet_lines,
    render_choice_menu,
    render_heading,
)
from choicerules.services import (
    ConditionalChoiceService,
    RuleEvaluationError,
    format_issue,
    validate_choice_markup,
)
from choicerules.services.markup_validator import has_errors

log = logging.getLogger(__name__)

InputFn = Callable[[str], str]
_CANCEL_KEY = "c"


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play choice prompts with conditional options.")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory holding choice_rules.json and scenario files.",
    )
    parser.add_argument(
        "--scenario",
        default="demo_scenario.json",
        help="Scenario file name inside the data directory.",
    )
    parser.add_argument("--prompt", default=None, help="Only play the prompt with this id.")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate choice markup and exit without playing.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log per-choice verdicts.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None, input_fn: InputFn = input) -> int:
    """Run the CLI session and return a process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    scenario_repo = ScenarioRepository(filename=args.scenario, base_path=args.data_dir)
    config_repo = EngineConfigRepository(base_path=args.data_dir)
    try:
        prompt_ids = [args.prompt] if args.prompt else scenario_repo.prompt_ids()
        prompts = [(prompt_id, scenario_repo.get(prompt_id)) for prompt_id in prompt_ids]
        if args.check:
            return _run_check(prompts)
        service = ConditionalChoiceService(config_repo.get_config(), scenario_repo.get_state())
    except (DataError, KeyError) as exc:
        print(f"Unable to load scenario: {exc}")
        return 1

    for prompt_id, descriptor in prompts:
        try:
            _play_prompt(service, prompt_id, descriptor, input_fn)
        except RuleEvaluationError as exc:
            log.error(f"Prompt '{prompt_id}' aborted: {exc}")
            return 1
    print("Goodbye!")
    return 0


def _run_check(prompts: Sequence[tuple[str, PromptDescriptor]]) -> int:
    issues = []
    for prompt_id, descriptor in prompts:
        issues.extend(validate_choice_markup(descriptor.choices, prompt_id=prompt_id))
    if not issues:
        print("Choice markup is valid.")
        return 0
    render_heading("Markup issues")
    render_bullet_lines(format_issue(issue) for issue in issues)
    return 1 if has_errors(issues) else 0


def _play_prompt(
    service: ConditionalChoiceService,
    prompt_id: str,
    descriptor: PromptDescriptor,
    input_fn: InputFn,
) -> SelectionEvent | None:
    view = service.open_prompt(descriptor)
    if view is None:
        print(f"Prompt '{prompt_id}' has no choices.")
        return None
    render_choice_menu(prompt_id, view)
    while True:
        raw = input_fn("Select an option (c to cancel): ").strip().lower()
        if raw == _CANCEL_KEY:
            event = service.cancel()
        else:
            try:
                row = int(raw) - 1
            except ValueError:
                print("Please enter a number.")
                continue
            event = service.confirm(row)
        if isinstance(event, ChoiceCommittedEvent):
            label = view.labels[view.original_indices.index(event.original_index)]
            print(f"Chose option {event.original_index + 1}: {format_choice_label(label)}")
            return event
        if isinstance(event, HostCancelEvent):
            print("Cancelled.")
            return event
        if isinstance(event, ChoiceRejectedEvent):
            cue = f" [{event.sound.name}]" if event.sound is not None else ""
            print(f"That choice is not available.{cue}")
            continue
        print(f"Please enter a value between 1 and {view.row_count}.")
