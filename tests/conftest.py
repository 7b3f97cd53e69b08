import pytest

PALETTE_TEXT = """\
Warm colors:
* Brick Red  #B22222
* Tangerine #F28500

Cool colors:
* Teal  #008080
* Navy #000080
"""


@pytest.fixture
def palette_lines():
    return PALETTE_TEXT.splitlines(keepends=True)


@pytest.fixture
def palette_file(tmp_path):
    path = tmp_path / "palette.txt"
    path.write_text(PALETTE_TEXT, encoding="utf-8")
    return path
