import pygame
import pytest

from bowguy.roboguy import ANGRY, HAPPY, RED, YELLOW, _draw_frame, _Text, emotion_for, main


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    pygame.font.init()
    yield
    pygame.quit()


def test_fresh_play_is_happy():
    assert emotion_for(0, 10) == "happy"


def test_threshold_reached_is_angry():
    assert emotion_for(10, 10) == "angry"


def test_just_before_threshold_is_happy():
    assert emotion_for(9.5, 10) == HAPPY


def test_default_threshold_is_ten_seconds():
    assert emotion_for(9.9) == HAPPY
    assert emotion_for(10) == ANGRY


def test_happy_eyes_are_yellow(headless):
    screen = pygame.Surface((800, 600))
    _draw_frame(screen, _Text(), HAPPY, False)
    assert tuple(screen.get_at((355, 260)))[:3] == YELLOW


def test_angry_eyes_are_red(headless):
    screen = pygame.Surface((800, 600))
    _draw_frame(screen, _Text(), ANGRY, True)
    assert tuple(screen.get_at((445, 260)))[:3] == RED


def test_main_runs_frames(headless):
    assert main(["--frames", "2"]) == 0