# main.py
import argparse
import random

import pygame # type: ignore

from .board import BOARD
from .config import CFG, Config, WIDTH, HEIGHT
from .controls import BUTTON_LAYOUT, action_for_event, apply_action, button_rects
from .render import draw_game
from .scheduler import TickScheduler
from .session import Session
from .store import ScoreStore


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement (default: random each run)")
    parser.add_argument("--best-file", type=str, default=CFG.best_score_file,
                        help="where the best score is kept")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    cfg = Config(best_score_file=args.best_file)
    if args.seed is not None:
        cfg.seed = args.seed
        rng = random.Random(args.seed)
    else:
        rng = random.Random()

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    # SCALED keeps the logical size and scales by whole device pixels
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.SCALED)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    rects = button_rects()
    labels = dict(BUTTON_LAYOUT)

    session = Session(ScoreStore(cfg.best_score_file), TickScheduler(), cfg=cfg, board=BOARD, rng=rng)
    session.start()
    print(f"[SNAKE] Started, best score {session.best_score} ({cfg.best_score_file})")

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif session.scheduler.dispatch(event):
                continue
            else:
                action = action_for_event(event, rects)
                if action is not None:
                    apply_action(session, action)

        if session.dirty:
            draw_game(screen, font, session.state, session.best_score, BOARD.size, rects, labels)
            pygame.display.flip()
            session.dirty = False
        clock.tick(60)  # ticks come from the timer event; this only caps the loop

    session.scheduler.cancel()
    pygame.quit()

if __name__ == "__main__":
    main()
