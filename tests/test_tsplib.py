import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tspbound.tsplib import Point, distance_matrix, parse_tsplib, parse_tsplib_text

SAMPLE = """NAME : sample
TYPE : TSP
DIMENSION : 4
EDGE_WEIGHT_TYPE : EUC_2D
NODE_COORD_SECTION
1 0 0
2 0 10
3 10 10
4 10 0
EOF
"""

SQUARE = [Point(0.0, 0.0), Point(0.0, 10.0), Point(10.0, 10.0), Point(10.0, 0.0)]


def test_parse_text_reads_declared_points():
    assert parse_tsplib_text(SAMPLE) == SQUARE


def test_parse_file(tmp_path):
    path = tmp_path / "square.tsp"
    path.write_text(SAMPLE, encoding="utf-8")
    assert parse_tsplib(path) == SQUARE


def test_parse_accepts_path_as_string(tmp_path):
    path = tmp_path / "square.tsp"
    path.write_text(SAMPLE, encoding="utf-8")
    assert parse_tsplib(str(path)) == SQUARE


def test_dimension_limits_points_read():
    text = SAMPLE.replace("DIMENSION : 4", "DIMENSION : 2")
    assert parse_tsplib_text(text) == SQUARE[:2]


def test_dimension_token_with_trailing_text():
    text = SAMPLE.replace("DIMENSION : 4", "DIMENSION : 3nodes")
    assert parse_tsplib_text(text) == SQUARE[:3]


def test_dimension_glued_to_keyword_is_not_read():
    text = SAMPLE.replace("DIMENSION : 4", "DIMENSION:4")
    assert parse_tsplib_text(text) == []


def test_missing_dimension_gives_no_points():
    text = SAMPLE.replace("DIMENSION : 4\n", "")
    assert parse_tsplib_text(text) == []


def test_coordinates_may_span_lines():
    text = "DIMENSION : 2\nNODE_COORD_SECTION\n1 1.5\n2.5 2 3.5 4.5\n"
    assert parse_tsplib_text(text) == [Point(1.5, 2.5), Point(3.5, 4.5)]


def test_too_few_coordinates_raises():
    text = "DIMENSION : 3\nNODE_COORD_SECTION\n1 0 0\n2 1 1\n"
    with pytest.raises(ValueError):
        parse_tsplib_text(text)


def test_missing_section_with_dimension_raises():
    with pytest.raises(ValueError):
        parse_tsplib_text("DIMENSION : 2\n")


def test_malformed_coordinate_raises():
    text = "DIMENSION : 1\nNODE_COORD_SECTION\n1 zero 0\n"
    with pytest.raises(ValueError):
        parse_tsplib_text(text)


def test_distance_of_three_four_five_triangle():
    adj = distance_matrix([Point(0, 0), Point(3, 4)])
    assert adj == [[0, 5], [5, 0]]


def test_half_distances_round_up():
    adj = distance_matrix([Point(0, 0), Point(0.5, 0), Point(2.5, 0)])
    assert adj[0][1] == 1
    assert adj[0][2] == 3


def test_square_matrix_values_from_sample():
    adj = distance_matrix(parse_tsplib_text(SAMPLE))
    side = adj[0][1]
    assert side == adj[1][2] == adj[2][3] == adj[3][0]
    assert adj[0][2] == adj[1][3]
    assert adj[0][2] > side


def test_empty_point_list_gives_empty_matrix():
    assert distance_matrix([]) == []


coordinates = st.floats(min_value=-1000, max_value=1000, allow_nan=False)
point_lists = st.lists(st.builds(Point, coordinates, coordinates), max_size=8)


@given(point_lists)
def test_matrix_is_symmetric_with_zero_diagonal(points):
    adj = distance_matrix(points)
    assert len(adj) == len(points)
    for i, row in enumerate(adj):
        assert len(row) == len(points)
        assert row[i] == 0
        for j, value in enumerate(row):
            assert value == adj[j][i]
            assert value >= 0


@given(point_lists)
def test_entries_within_half_of_true_distance(points):
    adj = distance_matrix(points)
    for i, a in enumerate(points):
        for j, b in enumerate(points):
            if i != j:
                assert abs(adj[i][j] - math.dist((a.x, a.y), (b.x, b.y))) <= 0.5 + 1e-9


@given(st.lists(st.tuples(st.integers(-100, 100), st.integers(-100, 100)), max_size=6))
def test_text_round_trip(pairs):
    body = "\n".join(f"{k} {x} {y}" for k, (x, y) in enumerate(pairs, start=1))
    text = f"NAME : t\nDIMENSION : {len(pairs)}\nNODE_COORD_SECTION\n{body}\nEOF\n"
    assert parse_tsplib_text(text) == [Point(float(x), float(y)) for x, y in pairs]