from quadlite.atlas import Atlas
from quadlite.image import Image
from quadlite.math import Rect

RED = (1.0, 0.0, 0.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)


def _corners(rect):
    x, y = int(rect.x), int(rect.y)
    w, h = int(rect.w), int(rect.h)
    return [(x, y), (x + w - 1, y), (x, y + h - 1), (x + w - 1, y + h - 1)]


def test_unique_ids_start_after_offset():
    atlas = Atlas()
    first = atlas.new_unique_id()
    second = atlas.new_unique_id()
    assert first == Atlas.UNIQUENESS_OFFSET + 1
    assert second == first + 1


def test_new_atlas_is_empty_and_clean():
    atlas = Atlas()
    assert (atlas.width, atlas.height) == (512, 512)
    assert atlas.get(1) is None
    assert atlas.get_uv_rect(1) is None
    assert atlas.dirty is False


def test_cache_sprite_places_after_gap_and_copies_pixels():
    atlas = Atlas()
    sprite = Image.gen_image_color(4, 3, RED)
    sprite.set_pixel(1, 2, BLUE)
    atlas.cache_sprite(7, sprite)

    placed = atlas.get(7)
    assert placed.rect == Rect(Atlas.GAP, 0, 4, 3)
    assert atlas.dirty is True
    for j in range(3):
        for i in range(4):
            assert atlas.image.get_pixel(Atlas.GAP + i, j) == sprite.get_pixel(i, j)


def test_sprites_on_same_row_do_not_overlap():
    atlas = Atlas()
    atlas.cache_sprite(1, Image.gen_image_color(5, 5, RED))
    atlas.cache_sprite(2, Image.gen_image_color(5, 5, GREEN))
    a = atlas.get(1).rect
    b = atlas.get(2).rect
    assert a.y == b.y
    assert b.x >= a.right() + Atlas.GAP


def test_uv_rect_is_normalised():
    atlas = Atlas()
    atlas.cache_sprite(3, Image.gen_image_color(8, 8, RED))
    rect = atlas.get(3).rect
    uv = atlas.get_uv_rect(3)
    assert uv == Rect(rect.x / atlas.width, rect.y / atlas.height,
                      rect.w / atlas.width, rect.h / atlas.height)


def test_atlas_grows_and_keeps_sprites():
    atlas = Atlas()
    colors = {1: RED, 2: GREEN, 3: BLUE}
    for key, color in colors.items():
        atlas.cache_sprite(key, Image.gen_image_color(200, 300, color))

    assert (atlas.width, atlas.height) == (1024, 1024)
    assert set(atlas.sprites) == set(colors)
    for key, color in colors.items():
        rect = atlas.get(key).rect
        assert (rect.w, rect.h) == (200, 300)
        assert rect.bottom() <= atlas.height
        for x, y in _corners(rect):
            assert atlas.image.get_pixel(x, y) == color