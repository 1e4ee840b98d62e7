"""Centralized input routing.

Transforms raw pygame events into the semantic actions the run
understands. Keyboard, mouse and touch all map onto the same
``jump_press`` / ``jump_release`` pair; duplicate actions within one frame
are collapsed (touch input also synthesizes mouse events), preserving the
order of first occurrence.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

import pygame

Action = str
Rule = Callable[[pygame.event.Event], Action | None]

JUMP_PRESS = "jump_press"
JUMP_RELEASE = "jump_release"
RESTART = "restart"
QUIT = "quit"


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


def _mouse_button_rule(button: int, action: Action, event_type=pygame.MOUSEBUTTONDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "button", None) == button:
            return action
        return None

    return _r


def _event_rule(event_type: int, action: Action) -> Rule:
    def _r(e: pygame.event.Event):
        return action if e.type == event_type else None

    return _r


class InputRouter:
    """Maps pygame events to run actions."""

    def __init__(self, key_bindings: Dict[str, List[int]] | None = None) -> None:
        if key_bindings is None:
            from runner.settings import get_settings

            key_bindings = get_settings().key_bindings
        self._rules: List[Rule] = []
        self._register_default_rules(key_bindings)

    def _register_default_rules(self, key_bindings: Dict[str, List[int]]) -> None:
        for key in key_bindings.get("jump", []):
            self._rules.append(_key_rule(key, JUMP_PRESS, pygame.KEYDOWN))
            self._rules.append(_key_rule(key, JUMP_RELEASE, pygame.KEYUP))
        for key in key_bindings.get("restart", []):
            self._rules.append(_key_rule(key, RESTART))
        for key in key_bindings.get("quit", []):
            self._rules.append(_key_rule(key, QUIT))
        self._rules.append(_mouse_button_rule(1, JUMP_PRESS, pygame.MOUSEBUTTONDOWN))
        self._rules.append(_mouse_button_rule(1, JUMP_RELEASE, pygame.MOUSEBUTTONUP))
        self._rules.append(_event_rule(pygame.FINGERDOWN, JUMP_PRESS))
        self._rules.append(_event_rule(pygame.FINGERUP, JUMP_RELEASE))
        self._rules.append(_event_rule(pygame.QUIT, QUIT))

    def register_rules(self, rules: Iterable[Rule], append: bool = True) -> None:
        if append:
            self._rules.extend(rules)
        else:
            self._rules = list(rules)

    def process(self, events: Iterable[pygame.event.Event]) -> List[Action]:
        actions: List[Action] = []
        for e in events:
            for rule in self._rules:
                a = rule(e)
                if a is not None and a not in actions:
                    actions.append(a)
                    break
        return actions


def dispatch(actions: Iterable[Action], run) -> bool:
    """Apply routed actions to a RunState. Returns False when quitting."""
    for action in actions:
        if action == QUIT:
            return False
        if action == JUMP_PRESS:
            run.on_jump_press()
        elif action == JUMP_RELEASE:
            run.on_jump_release()
        elif action == RESTART:
            run.on_restart_request()
    return True


__all__ = ["InputRouter", "dispatch", "JUMP_PRESS", "JUMP_RELEASE", "RESTART", "QUIT"]
