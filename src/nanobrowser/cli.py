"""
Interactive CLI for the NanoBrowser shell.
"""

from __future__ import annotations

import logging
import os
import shlex
from typing import Any, Dict

from .env import ACTION_DEFINITIONS, DEFAULT_START_PAGE, BrowserShellEnv
from .errors import BrowserError, InvalidLocationError
from .labels import DEFAULT_LANGUAGE

PROMPT = """
Commands:
  - go example.com
  - go location=https://www.python.org
  - back
  - next
  - set_home
  - home
  - add_favorite name="Python"
  - favorite Python
  - help
  - quit
"""


def parse_command(raw: str) -> tuple[str, Dict[str, Any]]:
    """Split ``action key=value ...`` into the action and its kwargs.

    A single bare argument is taken as the action's first required or
    optional argument, so ``go example.com`` works like
    ``go location=example.com``.
    """
    try:
        parts = shlex.split(raw)
    except ValueError as exc:
        raise BrowserError(f"Could not parse `{raw}`: {exc}") from exc
    if not parts:
        raise BrowserError("Empty command")
    action, *chunks = parts
    action = action.lower()
    kwargs: Dict[str, Any] = {}
    names = _arg_names(action)
    # a lone chunk is key=value only when the key is one of the action's args
    if len(chunks) == 1 and chunks[0].split("=", 1)[0] not in names:
        if not names:
            raise BrowserError(f"`{action}` takes no arguments")
        kwargs[names[0]] = chunks[0]
        return action, kwargs
    for chunk in chunks:
        if "=" not in chunk:
            raise BrowserError(f"Expected key=value, got `{chunk}`")
        key, value = chunk.split("=", 1)
        kwargs[key] = value
    return action, kwargs


def _arg_names(action: str) -> list[str]:
    if action not in ACTION_DEFINITIONS:
        raise BrowserError(f"Unknown action `{action}`")
    spec = ACTION_DEFINITIONS[action]
    return spec["required"] + spec["optional"]


def _print_action_specs(env: BrowserShellEnv) -> None:
    print("Available actions:")
    for name, spec in env.action_space.items():
        print(f"- {name}: {spec['description']}")
        if spec["required"]:
            print(f"    required: {spec['required']}")
        if spec["optional"]:
            print(f"    optional: {spec['optional']}")


def _configure_logging() -> None:
    level_name = os.getenv("NANOBROWSER_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise BrowserError(
            f"Invalid NANOBROWSER_LOG_LEVEL value `{level_name}` (expected a logging level)."
        )
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_env() -> BrowserShellEnv:
    start_page = os.getenv("NANOBROWSER_START_PAGE", DEFAULT_START_PAGE)
    language = os.getenv("NANOBROWSER_LANGUAGE", DEFAULT_LANGUAGE)
    return BrowserShellEnv(start_page=start_page or None, language=language)


def handle_line(env: BrowserShellEnv, raw: str) -> None:
    """Run one command and print the new state, or the error."""
    try:
        action, kwargs = parse_command(raw)
        state = env.step(action, **kwargs)
    except InvalidLocationError as exc:
        print(f"[{env.labels['ErrorTitle']}] {env.load_error(exc.raw)}")
        return
    except BrowserError as exc:
        print(f"[{env.labels['ErrorTitle']}] {exc}")
        return
    env.pretty_print(state)


def run_cli() -> None:
    _configure_logging()
    env = build_env()
    state = env.reset()
    print(PROMPT)
    _print_action_specs(env)
    env.pretty_print(state)

    while True:
        try:
            raw = input("action> ").strip()
        except EOFError:
            break
        if not raw:
            continue
        if raw.lower() in {"quit", "exit"}:
            break
        if raw.lower() == "help":
            _print_action_specs(env)
            continue
        handle_line(env, raw)


def main() -> None:
    try:
        run_cli()
    except BrowserError as exc:
        raise SystemExit(f"[error] {exc}") from exc


if __name__ == "__main__":
    main()
