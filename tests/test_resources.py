import os
import wave

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from guts_sos.resources import (
    MUSIC,
    SOUNDS,
    TEXTURES,
    ResourceError,
    Resources,
    TextureInfo,
    get_scale,
)


def _write_png(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(pygame.Surface((4, 4)), str(path))


def _write_wav(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(22050)
        handle.writeframes(b"\x00\x00" * 200)


@pytest.fixture
def tree(tmp_path):
    for rel, _info in TEXTURES.values():
        _write_png(tmp_path / rel)
    for rel in list(SOUNDS.values()) + list(MUSIC.values()):
        _write_wav(tmp_path / rel)
    return tmp_path


def test_not_loaded_before_load(tree):
    assert Resources(tree).is_loaded() is False


def test_full_tree_loads(tree):
    res = Resources(tree)
    res.load()
    assert res.is_loaded() is True
    assert set(res.textures) == set(TEXTURES)
    assert set(res.sounds) == set(SOUNDS)
    assert set(res.music) == set(MUSIC)


def test_texture_info_comes_from_table(tree):
    res = Resources(tree)
    res.load()
    assert res.texture_info["light"] == TextureInfo((3840, 2160), (1,))
    assert res.texture_info["bunker"].frame_size == (1920, 1080)


def test_missing_texture_falls_back_to_default(tree):
    (tree / TEXTURES["blocknote"][0]).unlink()
    res = Resources(tree)
    res.load()
    assert res.textures["blocknote"] is res.textures["default"]
    assert res.texture_info["blocknote"] == res.texture_info["default"]


def test_corrupt_texture_falls_back_to_default(tree):
    (tree / TEXTURES["troop"][0]).write_bytes(b"not an image")
    res = Resources(tree)
    res.load()
    assert res.textures["troop"] is res.textures["default"]


def test_missing_default_texture_is_an_error(tree):
    (tree / TEXTURES["default"][0]).unlink()
    res = Resources(tree)
    with pytest.raises(ResourceError):
        res.load()
    assert res.is_loaded() is False


def test_missing_sound_is_an_error(tree):
    (tree / SOUNDS["stamp"]).unlink()
    with pytest.raises(ResourceError):
        Resources(tree).load()


def test_missing_music_is_an_error(tree):
    (tree / MUSIC["voice"]).unlink()
    with pytest.raises(ResourceError):
        Resources(tree).load()


def test_missing_fonts_fall_back_to_builtin(tree):
    res = Resources(tree)
    res.load()
    assert res.fonts["cybersomething"] is None
    font = res.font("cybersomething", 20)
    assert font.get_height() > 0
    assert res.font("cybersomething", 20) is font


def test_font_before_load_is_an_error(tree):
    with pytest.raises(ResourceError):
        Resources(tree).font("default", 12)


def test_scale_of_target_resolution_is_one():
    assert get_scale((1280, 720)) == (1.0, 1.0)


@pytest.mark.parametrize("factor", [0.5, 2, 3])
def test_scale_is_uniform_and_proportional(factor):
    assert get_scale((1280 * factor, 720 * factor)) == pytest.approx((factor, factor))


def test_scale_takes_the_larger_axis():
    sx, sy = get_scale((1280, 1440))
    assert sx == sy
    assert sx == pytest.approx(get_scale((1280 * 2, 720 * 2))[0])