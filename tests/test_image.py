import io

import pytest

from weekendtracer.color import Color
from weekendtracer.image import Image


def test_num_chunks_counts_all_tiles():
    img = Image(8, 6, 2, 3)
    assert img.num_chunks == (8 // 2) * (6 // 3)


def test_chunks_tile_image_exactly_once():
    img = Image(8, 6, 2, 3)
    covered = []
    for chunk_id in range(img.num_chunks):
        chunk = img.get(chunk_id)
        assert chunk.width == 2
        assert chunk.height == 3
        covered.extend(
            (i, j)
            for i in range(chunk.x, chunk.x + chunk.height)
            for j in range(chunk.y, chunk.y + chunk.width)
        )
    assert sorted(covered) == [(i, j) for i in range(6) for j in range(8)]


def test_first_chunk_starts_at_origin():
    chunk = Image(8, 6, 2, 3).get(0)
    assert (chunk.x, chunk.y) == (0, 0)


def test_chunk_shares_pixels_with_image():
    img = Image(4, 2, 2, 1)
    chunk = img.get(1)
    chunk.pixels[chunk.x][chunk.y] = Color(1.0, 0.0, 0.25)
    assert img.pixels[chunk.x][chunk.y] == Color(1.0, 0.0, 0.25)


def test_get_out_of_range():
    img = Image(4, 2, 2, 1)
    with pytest.raises(IndexError):
        img.get(img.num_chunks)


@pytest.mark.parametrize(
    "args",
    [(5, 2, 2, 1), (4, 3, 2, 2), (4, 2, 0, 1), (4, 2, 2, 0)],
)
def test_bad_chunk_sizes_rejected(args):
    with pytest.raises(ValueError):
        Image(*args)


def test_write_defaults_to_stdout(capsys):
    Image(2, 1, 1, 1).write()
    assert capsys.readouterr().out.splitlines()[:2] == ["P3", "2 1"]