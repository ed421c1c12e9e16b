"""RoboGuy: a little robot that grows angry when nobody plays with it."""

from __future__ import annotations

import argparse
import sys

import pygame

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60
ANGRY_AFTER_SECONDS = 10.0

BACKGROUND = (22, 30, 96)
RED = (230, 41, 55)
GRAY = (130, 130, 130)
YELLOW = (253, 249, 0)

HAPPY = "happy"
ANGRY = "angry"


def emotion_for(seconds_since_play: float, threshold: float = ANGRY_AFTER_SECONDS) -> str:
    """The robot's mood after ``seconds_since_play`` seconds without play."""
    return ANGRY if seconds_since_play >= threshold else HAPPY


class _Text:
    def __init__(self) -> None:
        self._fonts: dict[int, pygame.font.Font] = {}

    def draw(self, screen: pygame.Surface, text: str, x: int, y: int, size: int, color) -> None:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        screen.blit(font.render(text, True, color), (x, y))


def _draw_frame(screen: pygame.Surface, text: _Text, emotion: str, playing: bool) -> None:
    cx, cy = SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2
    screen.fill(BACKGROUND)
    text.draw(screen, "RoboGuy", 0, 0, 50, RED)
    pygame.draw.rect(screen, GRAY, (cx - 100, cy - 100, 200, 200))
    if playing:
        text.draw(screen, "Playing!", 550, 100, 50, RED)

    color = YELLOW if emotion == HAPPY else RED
    pygame.draw.circle(screen, color, (cx - 45, cy - 40), 25)
    pygame.draw.circle(screen, color, (cx + 45, cy - 40), 25)
    pygame.draw.rect(screen, color, (cx - 75, cy + 25, 150, 35))
    if emotion == HAPPY:
        text.draw(screen, "RoboGuy is happy!", 250, 450, 30, RED)
    else:
        text.draw(screen, "RoboGuy is not happy with you", 150, 450, 30, RED)


def main(argv=None) -> int:
    """Show RoboGuy until the window is closed; hold P to play with him."""
    parser = argparse.ArgumentParser(prog="roboguy", description="Keep RoboGuy company.")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Raylib")
        text = _Text()
        clock = pygame.time.Clock()
        time_played = 0.0
        frame = 0
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            now = pygame.time.get_ticks() / 1000
            seconds_since_play = now - time_played
            playing = bool(pygame.key.get_pressed()[pygame.K_p])
            if playing:
                time_played = now
            _draw_frame(screen, text, emotion_for(seconds_since_play), playing)
            pygame.display.flip()
            clock.tick(FPS)
            frame += 1
            if args.frames is not None and frame >= args.frames:
                break
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())