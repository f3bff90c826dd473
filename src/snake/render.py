# render.py
"""
Drawing is split in two: `build_frame` turns a GameState into plain draw
commands (no pygame needed, easy to test), and `draw_frame` replays them on
a pygame surface. The HUD, overlay and buttons draw straight to pygame.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

import pygame  # type: ignore

from .config import (
    BG, GRID_LINE, FOOD, HEAD, BODY, TEXT, PANEL, BUTTON,
    CELL_SIZE, WIDTH, HUD_H, BOARD_PX,
)
from .game import GameState, Outcome

Color = Tuple[int, int, int]


# ---------- Draw commands ----------
@dataclass(frozen=True)
class FillRect:
    color: Color
    x: int
    y: int
    w: int
    h: int

@dataclass(frozen=True)
class Line:
    color: Color
    start: Tuple[int, int]
    end: Tuple[int, int]

@dataclass(frozen=True)
class Circle:
    color: Color
    center: Tuple[int, int]
    radius: int

@dataclass(frozen=True)
class RoundRect:
    color: Color
    x: int
    y: int
    w: int
    h: int
    radius: int

DrawCommand = Union[FillRect, Line, Circle, RoundRect]


def build_frame(state: GameState, n: int, cell_size: int = CELL_SIZE) -> List[DrawCommand]:
    """Board background, grid, food, then the snake with its head last."""
    size_px = n * cell_size
    cmds: List[DrawCommand] = [FillRect(BG, 0, 0, size_px, size_px)]

    # interior grid lines only
    for i in range(1, n):
        p = i * cell_size
        cmds.append(Line(GRID_LINE, (p, 0), (p, size_px)))
        cmds.append(Line(GRID_LINE, (0, p), (size_px, p)))

    fx, fy = state.food
    cmds.append(Circle(
        FOOD,
        (fx * cell_size + cell_size // 2, fy * cell_size + cell_size // 2),
        cell_size // 3,
    ))

    radius = min(6, cell_size // 3)
    last = len(state.snake) - 1
    for i, (x, y) in enumerate(state.snake):
        cmds.append(RoundRect(
            HEAD if i == last else BODY,
            x * cell_size + 1, y * cell_size + 1,
            cell_size - 2, cell_size - 2,
            radius,
        ))
    return cmds


def overlay_message(state: GameState) -> Optional[str]:
    if state.terminal:
        if state.outcome is Outcome.BOARD_FULL:
            return "Board cleared! Press Enter or Restart"
        return "Game Over - press Enter or Restart"
    if state.paused:
        return "Paused - press Space to resume"
    return None


# ---------- pygame backends ----------
def draw_frame(surface: pygame.Surface, commands: List[DrawCommand], offset: Tuple[int, int] = (0, 0)) -> None:
    ox, oy = offset
    for c in commands:
        if isinstance(c, FillRect):
            pygame.draw.rect(surface, c.color, pygame.Rect(c.x + ox, c.y + oy, c.w, c.h))
        elif isinstance(c, Line):
            pygame.draw.line(surface, c.color, (c.start[0] + ox, c.start[1] + oy), (c.end[0] + ox, c.end[1] + oy))
        elif isinstance(c, Circle):
            pygame.draw.circle(surface, c.color, (c.center[0] + ox, c.center[1] + oy), c.radius)
        elif isinstance(c, RoundRect):
            pygame.draw.rect(surface, c.color, pygame.Rect(c.x + ox, c.y + oy, c.w, c.h), border_radius=c.radius)
        else:
            raise TypeError(f"Unknown draw command: {c!r}")


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, score: int, best: int) -> None:
    pygame.draw.rect(surface, PANEL, pygame.Rect(0, 0, WIDTH, HUD_H))
    txt = font.render(f"Score: {score}", True, TEXT)
    surface.blit(txt, (8, (HUD_H - txt.get_height()) // 2))
    best_txt = font.render(f"Best: {best}", True, TEXT)
    surface.blit(best_txt, (WIDTH - best_txt.get_width() - 8, (HUD_H - best_txt.get_height()) // 2))


def draw_overlay(surface: pygame.Surface, font: pygame.font.Font, message: str) -> None:
    # Dim the board with a translucent layer
    overlay = pygame.Surface((BOARD_PX, BOARD_PX), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    surface.blit(overlay, (0, HUD_H))

    title = font.render(message, True, (240, 240, 250))
    surface.blit(title, title.get_rect(center=(BOARD_PX // 2, HUD_H + BOARD_PX // 2)))


def draw_buttons(surface: pygame.Surface, font: pygame.font.Font,
                 rects: Dict, labels: Dict) -> None:
    for action, rect in rects.items():
        pygame.draw.rect(surface, BUTTON, rect, border_radius=8)
        label = font.render(labels[action], True, TEXT)
        surface.blit(label, label.get_rect(center=rect.center))


def draw_game(surface: pygame.Surface, font: pygame.font.Font, state: GameState, best: int,
              n: int, rects: Dict, labels: Dict) -> None:
    surface.fill(PANEL)
    draw_hud(surface, font, state.score, best)
    draw_frame(surface, build_frame(state, n), offset=(0, HUD_H))
    draw_buttons(surface, font, rects, labels)
    message = overlay_message(state)
    if message is not None:
        draw_overlay(surface, font, message)
