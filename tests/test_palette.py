from chromaspace import Palette, ColorSet, ColorInfo, SRGB24, SRGB, HSV, BaseColor
from chromaspace.errors import ColorWithoutSetError, PaletteError
import pytest


def test_parse(palette_lines):
    palette = Palette.parse(palette_lines)
    sets = list(palette.iter_colorsets())
    assert [name for name, _ in sets] == ["Warm colors", "Cool colors"]

    warm = sets[0][1]
    assert isinstance(warm, ColorSet)
    assert len(warm) == 2
    assert list(warm) == [SRGB24((0xB2, 0x22, 0x22)), SRGB24((0xF2, 0x85, 0x00))]
    assert len(palette) == 4


def test_name_color(palette_lines):
    palette = Palette.parse(palette_lines)
    assert palette.name_color(SRGB24((0xB2, 0x22, 0x22))) == "brick red"
    assert palette.name_color(SRGB((0.0, 128 / 255, 128 / 255))) == "teal"
    assert palette.name_color(SRGB24((1, 2, 3))) is None
    assert SRGB24((0, 0, 0x80)) in palette


def test_from_file(palette_file):
    palette = Palette.from_file(palette_file)
    assert palette.name_color(SRGB24.from_hex("#F28500")) == "tangerine"


def test_color_without_set():
    with pytest.raises(ColorWithoutSetError) as info:
        Palette.parse(["* Lonely #123456\n", "Set:\n"])
    assert info.value.name == "lonely"
    assert info.value.line_number == 1
    assert "Lonely".lower() in str(info.value)
    assert isinstance(info.value, PaletteError)


def test_malformed_color_line_warns():
    with pytest.warns(UserWarning, match="line 2"):
        palette = Palette.parse(["Set:\n", "* broken #12\n", "* fine #010203\n"])
    assert len(palette) == 1


def test_warnings_point_at_the_caller(tmp_path):
    with pytest.warns(UserWarning) as record:
        Palette.parse(["Set:\n", "* broken #12\n"])
    assert record[0].filename == __file__

    path = tmp_path / "broken.txt"
    path.write_text("Set:\n* broken #12\n* first #010203\n* second #010203\n", encoding="utf-8")
    with pytest.warns(UserWarning) as record:
        Palette.from_file(path)
    assert len(record) == 2
    assert all(warning.filename == __file__ for warning in record)


def test_duplicate_color_warns_and_keeps_first_name():
    with pytest.warns(UserWarning, match="already named"):
        palette = Palette.parse(["Set:\n", "* first #010203\n", "* second #010203\n"])
    assert palette.name_color(SRGB24((1, 2, 3))) == "first"


def test_unknown_lines_are_ignored():
    palette = Palette.parse(["just some text\n", "\n", "Set:\n", "- not a bullet #010203\n"])
    assert len(palette) == 0
    assert [name for name, _ in palette.iter_colorsets()] == ["Set"]


def test_color_info_single_shade():
    info = ColorInfo(SRGB24((255, 0, 0)))
    assert str(info) == "sRGB: (255,   0,   0), HSV: (  0.0°,100.0%,100.0%), lum:  21%, is a shade of red."


def test_color_info_several_shades():
    info = ColorInfo(SRGB24((255, 128, 0)))
    assert str(info).endswith("is shades of yellow and red.")
    assert [base for base, _ in info.shades_of] == [BaseColor.YELLOW, BaseColor.RED]


def test_color_info_accepts_other_classes():
    info = ColorInfo(HSV((0.0, 0.0, 1.0)))
    assert info.srgb == SRGB24((255, 255, 255))
    assert str(info).endswith("is a shade of white.")
    linear = ColorInfo(SRGB24((255, 0, 0)).to_linear())
    assert linear.srgb == SRGB24((255, 0, 0))
