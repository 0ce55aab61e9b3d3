import pytest

from questrpg.geometry import Rect, Vec2, is_collision, is_hit


@pytest.fixture
def button():
    # The play button of the main menu.
    return Rect(1293.68, 150, 316.09, 111.11)


def test_right_and_bottom_follow_size(button):
    assert button.right == button.left + button.width
    assert button.bottom == button.top + button.height


def test_vec_addition_and_subtraction_round_trip():
    a = Vec2(475, 500)
    b = Vec2(30, 55)
    assert (a + b) - b == a


def test_shifted_matches_addition():
    a = Vec2(475, 500)
    assert a.shifted(30, 55) == a + Vec2(30, 55)


def test_moved_to_keeps_size(button):
    moved = button.moved_to(Vec2(0, 0))
    assert moved.position == Vec2(0, 0)
    assert (moved.width, moved.height) == (button.width, button.height)


def test_centre_is_inside_for_both_tests(button):
    centre = Vec2(button.left + button.width / 2, button.top + button.height / 2)
    assert is_collision(centre, button) is True
    assert is_hit(centre, button) is True


@pytest.mark.parametrize("corner", ["top_left", "bottom_right"])
def test_edges_count_for_clicks_but_not_hits(button, corner):
    if corner == "top_left":
        pos = Vec2(button.left, button.top)
    else:
        pos = Vec2(button.right, button.bottom)
    assert is_collision(pos, button) is True
    assert is_hit(pos, button) is False


@pytest.mark.parametrize(
    "dx, dy",
    [(-1, 0), (0, -1)],
)
def test_outside_before_corner(button, dx, dy):
    pos = Vec2(button.left, button.top).shifted(dx, dy)
    assert is_collision(pos, button) is False
    assert is_hit(pos, button) is False


@pytest.mark.parametrize(
    "dx, dy",
    [(1, 0), (0, 1)],
)
def test_outside_past_corner(button, dx, dy):
    pos = Vec2(button.right, button.bottom).shifted(dx, dy)
    assert is_collision(pos, button) is False
    assert is_hit(pos, button) is False


def test_rect_is_immutable(button):
    with pytest.raises(AttributeError):
        button.left = 0
    assert button == Rect(1293.68, 150, 316.09, 111.11)
    assert button.left == 1293.68