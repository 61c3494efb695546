from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import numpy as np
import pytest

from outlinediff.compare import ErrorKind, Status, compare_files, compare_images
from outlinediff.core.raster import Raster
from outlinediff.core.types import RED, Color, Point
from outlinediff.presets import ScanParams

WHITE = Color(255, 255, 255)
BLUE = Color(0, 0, 255)


def _pair(width, height, *changed):
    base = Raster.blank(width, height, WHITE)
    other = base.copy()
    for row, col in changed:
        other.set_pixel(row, col, BLUE)
    return base, other


def test_identical_images():
    image, _ = _pair(6, 5)
    result = compare_images(image, image)
    assert result.status is Status.IDENTICAL
    assert result.error is ErrorKind.NO_ERROR
    assert result.error_message == ""
    assert result.contour_count == 0
    assert result.image is None


def test_single_pixel_scenario():
    a, b = _pair(4, 4, (1, 1))
    result = compare_images(a, b)
    assert result.status is Status.DIFFERENT
    assert result.ok
    assert result.contour_count == 1
    assert len(result.contours[0]) == 4
    assert result.to_dict()["contours"] == [{"edges": 4, "bbox": [1, 1, 2, 2]}]


def test_every_scanned_pixel_is_detected():
    width, height = 5, 4
    for row in range(height - 1):
        for col in range(width - 1):
            a, b = _pair(width, height, (row, col))
            result = compare_images(a, b)
            assert result.status is Status.DIFFERENT, (row, col)
            assert result.contour_count == 1


def test_outline_drawn_around_origin_cell():
    a, b = _pair(4, 4, (0, 0))
    result = compare_images(a, b)
    outline = {(0, 0), (0, 1), (1, 0), (1, 1)}
    for row in range(4):
        for col in range(4):
            expected = RED if (row, col) in outline else b.pixel(row, col)
            assert result.image.pixel(row, col) == expected, (row, col)


def test_inputs_are_not_modified():
    a, b = _pair(4, 4, (1, 1))
    a_before, b_before = a.copy(), b.copy()
    compare_images(a, b)
    assert a == a_before
    assert b == b_before


def test_compare_is_idempotent():
    a, b = _pair(8, 6, (1, 1), (4, 3), (2, 5))
    first = compare_images(a, b)
    second = compare_images(a, b)
    assert first.image == second.image
    assert first.contour_count == second.contour_count == 3
    assert first.contours == second.contours


def test_adjacent_pixels_merge_into_one_contour():
    a, b = _pair(6, 6, (2, 2), (2, 3), (3, 2))
    result = compare_images(a, b)
    assert result.contour_count == 1
    assert len(result.contours[0]) == 8


def test_diagonal_pixels():
    a, b = _pair(6, 6, (1, 1), (2, 2))
    assert compare_images(a, b).contour_count == 2
    joined = compare_images(a, b, params=ScanParams(join_corners=True))
    assert joined.contour_count == 1


def test_different_dimensions():
    result = compare_images(Raster.blank(4, 4), Raster.blank(4, 5))
    assert result.status is Status.UNKNOWN
    assert result.error is ErrorKind.DIFFERENT_DIMENSIONS
    assert result.error_message == "Images have different dimensions"
    assert result.image is None


def test_null_images_are_invalid():
    for first, second in ((Raster(), Raster.blank(2, 2)), (Raster.blank(2, 2), Raster()), (Raster(), Raster())):
        result = compare_images(first, second)
        assert result.status is Status.UNKNOWN
        assert result.error is ErrorKind.INVALID_IMAGE
        assert not result.ok


def test_highlight_color():
    a, b = _pair(4, 4, (1, 1))
    green = Color(0, 255, 0)
    result = compare_images(a, b, highlight_color=green)
    assert result.image.pixel(1, 1) == green

    params = ScanParams(highlight_color=Color(1, 2, 3))
    assert compare_images(a, b, params=params).image.pixel(1, 1) == Color(1, 2, 3)


def test_coarse_cells():
    a, b = _pair(8, 8, (2, 5))
    result = compare_images(a, b, params=ScanParams(cell_width=4, cell_height=4))
    assert result.contour_count == 1
    assert result.to_dict()["contours"][0]["bbox"] == [4, 0, 7, 4]
    assert result.image.pixel(0, 7) == RED
    assert result.image.pixel(4, 4) == RED
    assert result.image.pixel(2, 5) == BLUE


def test_compare_files(tmp_path):
    a, b = _pair(5, 5, (2, 2))
    path_a = tmp_path / "a.png"
    path_b = tmp_path / "b.png"
    assert a.save(path_a) and b.save(path_b)

    assert compare_files(path_a, path_a).status is Status.IDENTICAL
    result = compare_files(path_a, path_b)
    assert result.status is Status.DIFFERENT
    assert result.contour_count == 1
    assert result.image.pixel(2, 2) == RED


def test_compare_files_invalid(tmp_path):
    good = tmp_path / "good.png"
    Raster.blank(3, 3).save(good)
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"not an image")

    for first, second in ((good, tmp_path / "missing.png"), (broken, good)):
        result = compare_files(first, second)
        assert result.status is Status.UNKNOWN
        assert result.error is ErrorKind.INVALID_IMAGE


def test_compare_files_different_dimensions(tmp_path):
    small = tmp_path / "small.png"
    large = tmp_path / "large.png"
    Raster.blank(3, 3).save(small)
    Raster.blank(3, 4).save(large)
    assert compare_files(small, large).error is ErrorKind.DIFFERENT_DIMENSIONS


def _make_pdf(path, rectangles):
    fitz = pytest.importorskip("fitz")
    doc = fitz.open()
    page = doc.new_page(width=200, height=200)
    for rect in rectangles:
        page.draw_rect(fitz.Rect(*rect), color=(0, 0, 0), fill=(0, 0, 0))
    doc.save(str(path))
    doc.close()


def test_compare_pdf_pages(tmp_path):
    old_pdf = tmp_path / "old.pdf"
    new_pdf = tmp_path / "new.pdf"
    _make_pdf(old_pdf, [(50, 50, 120, 120)])
    _make_pdf(new_pdf, [(50, 50, 120, 120), (140, 140, 170, 170)])

    params = ScanParams(cell_width=2, cell_height=2, pdf_dpi=36)
    assert compare_files(old_pdf, old_pdf, params=params).status is Status.IDENTICAL
    result = compare_files(old_pdf, new_pdf, params=params)
    assert result.status is Status.DIFFERENT
    assert result.contour_count >= 1
    assert (result.image.width, result.image.height) == (100, 100)


def test_compare_pdf_missing_page(tmp_path):
    pdf = tmp_path / "one.pdf"
    _make_pdf(pdf, [])
    result = compare_files(pdf, pdf, params=ScanParams(pdf_page=3))
    assert result.error is ErrorKind.INVALID_IMAGE


@pytest.mark.parametrize(
    "empty",
    [Raster.blank(0, 0), Raster.blank(5, 0), Raster.from_array(np.zeros((0, 5, 3), dtype=np.uint8))],
)
def test_zero_sized_raster_is_invalid(empty):
    assert empty.is_null
    for first, second in ((empty, empty), (empty, Raster.blank(5, 5)), (Raster.blank(5, 5), empty)):
        result = compare_images(first, second)
        assert result.status is Status.UNKNOWN
        assert result.error is ErrorKind.INVALID_IMAGE
        assert result.error_message == "Invalid image provided"
