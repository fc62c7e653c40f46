import pytest

from visclust.colors import BLACK, GRAY, PALETTE, color_for_label


def test_unlabeled_is_gray():
    assert color_for_label(-1) == GRAY


def test_minus_two_is_black():
    assert color_for_label(-2) == BLACK


def test_first_labels_follow_palette():
    assert color_for_label(0) == (255, 0, 0)
    assert color_for_label(1) == (0, 255, 0)
    assert color_for_label(2) == (0, 0, 255)


@pytest.mark.parametrize("label", [0, 5, 17, 29])
def test_palette_wraps(label):
    assert color_for_label(label + len(PALETTE)) == color_for_label(label)


def test_other_negative_labels_use_absolute_value():
    assert color_for_label(-3) == color_for_label(3)
    assert color_for_label(-7) == PALETTE[7]


def test_colors_are_valid_rgb():
    for label in range(len(PALETTE)):
        rgb = color_for_label(label)
        assert len(rgb) == 3
        assert all(0 <= channel <= 255 for channel in rgb)