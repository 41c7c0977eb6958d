import pytest

from hellkit.number_blitter import Justification, build_vertices, glyph_metrics

SHEET_ORDER = "1234567890/"


def test_glyphs_are_contiguous_across_sheet():
    for current, following in zip(SHEET_ORDER, SHEET_ORDER[1:]):
        begin, width = glyph_metrics(current)
        assert glyph_metrics(following)[0] == begin + width


def test_last_glyph_ends_at_sheet_width():
    begin, width = glyph_metrics("/")
    assert begin + width == 161


def test_unknown_character_uses_slash_glyph():
    assert glyph_metrics("x") == glyph_metrics("/")


def test_four_vertices_per_character():
    vertices = build_vertices("123", 100, 50, 1920, 1080, 1.0, Justification.LEFT)
    assert len(vertices) == 12


def test_empty_text_gives_no_vertices():
    assert build_vertices("", 0, 0, 1920, 1080, 1.0, Justification.LEFT) == []


def test_top_left_origin_maps_to_ndc_corner():
    vertices = build_vertices("7", 0, 0, 800, 600, 1.0, Justification.LEFT)
    assert vertices[0].position[0] == pytest.approx(-1.0)
    assert vertices[0].position[1] == pytest.approx(1.0)


def test_left_justified_quads_are_adjacent():
    vertices = build_vertices("42", 10, 10, 800, 600, 1.0, Justification.LEFT)
    first_right = vertices[2].position[0]
    second_left = vertices[4].position[0]
    assert second_left == pytest.approx(first_right)


def test_uv_layout_of_each_quad():
    vertices = build_vertices("5", 10, 10, 800, 600, 1.0, Justification.LEFT)
    assert [v.uv[1] for v in vertices] == [0.0, 1.0, 0.0, 1.0]
    assert vertices[0].uv[0] == vertices[1].uv[0]
    assert vertices[2].uv[0] > vertices[0].uv[0]


def test_right_justified_text_ends_at_start_position():
    left = build_vertices("123", 400, 300, 800, 600, 1.0, Justification.LEFT)
    right = build_vertices("123", 400, 300, 800, 600, 1.0, Justification.RIGHT)
    start_x = left[0].position[0]
    assert right[2].position[0] == pytest.approx(start_x)
    left_span = left[-1].position[0] - left[0].position[0]
    right_span = right[2].position[0] - right[-4].position[0]
    assert right_span == pytest.approx(left_span)


def test_right_justified_processes_last_character_first():
    right = build_vertices("17", 400, 300, 800, 600, 1.0, Justification.RIGHT)
    left = build_vertices("7", 400, 300, 800, 600, 1.0, Justification.LEFT)
    assert right[0].uv[0] == pytest.approx(left[0].uv[0])


def test_scale_doubles_quad_size():
    single = build_vertices("8", 100, 100, 800, 600, 1.0, Justification.LEFT)
    double = build_vertices("8", 100, 100, 800, 600, 2.0, Justification.LEFT)
    width_1 = single[2].position[0] - single[0].position[0]
    width_2 = double[2].position[0] - double[0].position[0]
    height_1 = single[0].position[1] - single[1].position[1]
    height_2 = double[0].position[1] - double[1].position[1]
    assert width_2 == pytest.approx(2 * width_1)
    assert height_2 == pytest.approx(2 * height_1)