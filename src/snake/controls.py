# controls.py
from enum import Enum
from typing import Dict, List, Optional, Tuple

import pygame  # type: ignore

from .config import BOARD_PX, CONTROLS_H, HUD_H, UP, DOWN, LEFT, RIGHT


class Action(Enum):
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    TOGGLE_PAUSE = "pause"
    RESTART = "restart"


MOVES = {
    Action.MOVE_UP: UP,
    Action.MOVE_DOWN: DOWN,
    Action.MOVE_LEFT: LEFT,
    Action.MOVE_RIGHT: RIGHT,
}

KEY_ACTIONS: Dict[int, Action] = {
    pygame.K_UP: Action.MOVE_UP,
    pygame.K_w: Action.MOVE_UP,
    pygame.K_DOWN: Action.MOVE_DOWN,
    pygame.K_s: Action.MOVE_DOWN,
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_a: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_d: Action.MOVE_RIGHT,
    pygame.K_SPACE: Action.TOGGLE_PAUSE,
    pygame.K_p: Action.TOGGLE_PAUSE,
    pygame.K_RETURN: Action.RESTART,
    pygame.K_KP_ENTER: Action.RESTART,
}

# Left-to-right order of the on-screen buttons
BUTTON_LAYOUT: List[Tuple[Action, str]] = [
    (Action.MOVE_LEFT, "Left"),
    (Action.MOVE_UP, "Up"),
    (Action.MOVE_DOWN, "Down"),
    (Action.MOVE_RIGHT, "Right"),
    (Action.TOGGLE_PAUSE, "Pause"),
    (Action.RESTART, "Restart"),
]


def button_rects(top: int = HUD_H + BOARD_PX, width: int = BOARD_PX, height: int = CONTROLS_H,
                 margin: int = 6) -> Dict[Action, pygame.Rect]:
    """Split the control strip into equal buttons, one per BUTTON_LAYOUT entry."""
    n = len(BUTTON_LAYOUT)
    slot = width // n
    rects = {}
    for i, (action, _label) in enumerate(BUTTON_LAYOUT):
        rects[action] = pygame.Rect(i * slot + margin, top + margin,
                                    slot - 2 * margin, height - 2 * margin)
    return rects


def action_for_click(pos: Tuple[int, int], rects: Dict[Action, pygame.Rect]) -> Optional[Action]:
    for action, rect in rects.items():
        if rect.collidepoint(pos):
            return action
    return None


def action_for_event(event, rects: Dict[Action, pygame.Rect]) -> Optional[Action]:
    """Keyboard and button clicks both end up as the same Action."""
    if event.type == pygame.KEYDOWN:
        return KEY_ACTIONS.get(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return action_for_click(event.pos, rects)
    return None


def apply_action(session, action: Action) -> None:
    state = session.state
    if action in MOVES:
        session.set_direction(MOVES[action])
    elif action is Action.TOGGLE_PAUSE:
        if not state.terminal:
            session.toggle_pause()
    elif action is Action.RESTART:
        # only a finished game can be restarted
        if state.terminal:
            session.restart()
