"""Answer sources for declarative prompt definitions.

Prompt definitions come straight from setup.config.json and follow the
inquirer-style schema (type, name, message, choices, default). The wizard
never looks inside them; a prompter turns a batch of them into answers.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

import questionary
import yaml
from dotenv import dotenv_values
from questionary import Style

from setup_wizard.errors import ConfigError, MissingAnswerError, SetupCancelled

logger = logging.getLogger(__name__)

STYLE = Style(
    [
        ("qmark", "fg:ansiblue bold"),
        ("question", "bold"),
        ("answer", "fg:ansigreen"),
        ("pointer", "fg:ansiblue bold"),
        ("highlighted", "fg:ansiblue"),
        ("instruction", "fg:ansibrightblack italic"),
    ]
)

# inquirer type name -> questionary type name
_TYPE_ALIASES: dict[str, str] = {
    "list": "select",
    "rawlist": "rawselect",
    "input": "text",
    "number": "text",
    "editor": "text",
    "expand": "select",
}


class Prompter(Protocol):
    """Returns answers keyed by prompt name for a batch of prompt definitions."""

    def prompt(self, questions: Sequence[Mapping[str, Any]]) -> dict[str, Any]: ...


def _to_questionary(question: Mapping[str, Any]) -> dict[str, Any]:
    out = dict(question)
    qtype = out.get("type", "text")
    out["type"] = _TYPE_ALIASES.get(qtype, qtype)
    if out["type"] == "text" and "default" in out and not isinstance(out["default"], str):
        out["default"] = str(out["default"])
    return out


class QuestionaryPrompter:
    """Interactive console prompts. Ctrl+C propagates as KeyboardInterrupt."""

    def prompt(self, questions: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
        answers = questionary.unsafe_prompt(
            [_to_questionary(q) for q in questions], style=STYLE
        )
        return dict(answers)


def _choice_values(choices: Sequence[Any]) -> list[Any]:
    values = []
    for choice in choices:
        if isinstance(choice, Mapping):
            values.append(choice.get("value", choice.get("name")))
        else:
            values.append(choice)
    return values


class ScriptedPrompter:
    """Non-interactive prompter backed by canned answers.

    Unanswered prompts fall back to their ``default``. Select-style prompts
    only accept one of their declared choices.
    """

    def __init__(self, answers: Mapping[str, Any]) -> None:
        self._answers = dict(answers)

    def prompt(self, questions: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for question in questions:
            name = question.get("name")
            if not name:
                raise MissingAnswerError("Prompt definition without a name")
            if name in self._answers:
                value = self._answers[name]
            elif "default" in question:
                value = question["default"]
            else:
                raise MissingAnswerError(f"No scripted answer for {name!r}")

            choices = question.get("choices")
            qtype = _TYPE_ALIASES.get(question.get("type", ""), question.get("type"))
            if choices and qtype in ("select", "rawselect"):
                allowed = _choice_values(choices)
                if value not in allowed:
                    raise MissingAnswerError(
                        f"Answer {value!r} for {name!r} is not one of {allowed}"
                    )
            out[name] = value
        return out


def load_answers(path: Path) -> dict[str, Any]:
    """Read a JSON, YAML or dotenv mapping of prompt name -> answer."""
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix == ".env" or path.name == ".env":
            data = {k: v for k, v in dotenv_values(path).items() if v is not None}
        elif path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot load answers from {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Answers file {path} must contain a mapping")
    logger.info("Using scripted answers from %s", path)
    return data


def select_one(prompter: Prompter, name: str, message: str, choices: Sequence[str]) -> Any:
    """Ask a single select question and return the chosen value."""
    answers = prompter.prompt(
        [{"type": "select", "name": name, "message": message, "choices": list(choices)}]
    )
    value = answers.get(name)
    if value is None:
        raise SetupCancelled(f"No selection made for {name!r}")
    return value
