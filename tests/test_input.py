from types import SimpleNamespace

import pygame
import pytest

from tetris_input import KEY_COMMANDS, TouchTracker, classify_swipe, handle_key


@pytest.mark.parametrize("dx,dy,cmd", [
    (40, 5, "right"),
    (-40, 5, "left"),
    (20, 5, None),
    (5, 40, "drop"),
    (5, -40, None),
    (10, 10, "rotate"),
    (0, 0, "rotate"),
])
def test_classify_swipe(dx, dy, cmd):
    assert classify_swipe(dx, dy, threshold=30) == cmd


def test_key_bindings(engine):
    assert handle_key(engine, pygame.K_LEFT) == "left"
    assert engine.current.x == 2
    assert handle_key(engine, pygame.K_RIGHT) == "right"
    assert engine.current.x == 3
    assert handle_key(engine, pygame.K_DOWN) == "down"
    assert engine.current.y == 1
    assert handle_key(engine, pygame.K_p) == "pause"
    assert engine.paused
    assert handle_key(engine, pygame.K_p) == "pause"
    assert not engine.paused


def test_unbound_key(engine):
    assert handle_key(engine, pygame.K_a) is None
    assert engine.current.x == 3


def test_hard_drop_keys():
    assert KEY_COMMANDS[pygame.K_SPACE] == "drop"
    assert KEY_COMMANDS[pygame.K_RETURN] == "drop"
    assert KEY_COMMANDS[pygame.K_UP] == "rotate"
    assert KEY_COMMANDS[pygame.K_r] == "reset"


def test_touch_swipe_right(engine):
    touch = TouchTracker((400, 600), threshold=30)
    assert touch.handle(engine, SimpleNamespace(type=pygame.FINGERDOWN, x=0.5, y=0.5)) is None
    cmd = touch.handle(engine, SimpleNamespace(type=pygame.FINGERUP, x=0.6, y=0.51))
    assert cmd == "right"
    assert engine.current.x == 4


def test_touch_swipe_down_hard_drops(engine):
    touch = TouchTracker((400, 600), threshold=30)
    touch.down(0.5, 0.1)
    assert touch.up(0.5, 0.9) == "drop"


def test_touch_up_without_down():
    touch = TouchTracker((400, 600), threshold=30)
    assert touch.up(0.5, 0.5) is None
