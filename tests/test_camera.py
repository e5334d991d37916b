from dungeoncrawl.camera import Camera
from dungeoncrawl.geometry import Point
from dungeoncrawl.map import DISPLAY_WIDTH


def test_centered_on_player():
    cam = Camera.centered_on(Point(40, 25))
    assert (cam.left_x + cam.right_x) // 2 == 40
    assert (cam.top_y + cam.bottom_y) // 2 == 25
    assert cam.right_x - cam.left_x == DISPLAY_WIDTH


def test_on_player_move_matches_new_camera():
    cam = Camera.centered_on(Point(10, 10))
    cam.on_player_move(Point(30, 17))
    assert cam == Camera.centered_on(Point(30, 17))


def test_move_shifts_window_by_delta():
    a = Camera.centered_on(Point(10, 10))
    b = Camera.centered_on(Point(13, 8))
    assert b.left_x - a.left_x == 3
    assert b.top_y - a.top_y == -2