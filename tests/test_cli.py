import pytest

from tspbound.cli import main

SQUARE_TSP = """NAME : square
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


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "square.tsp"
    path.write_text(SQUARE_TSP, encoding="utf-8")
    return path


def test_sequential_run(square_file, capsys):
    assert main([str(square_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Archivo: {square_file}"
    assert out[1] == "Distancia mínima del TSP: 40"
    assert out[2].startswith("Tiempo de ejecución: ")
    assert out[2].endswith(" segundos")


def test_parallel_run(square_file, capsys):
    assert main([str(square_file), "--workers", "2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "Distancia mínima del TSP: 40"
    assert out[2].startswith("Tiempo de ejecución (paralelo, 2 procesos): ")


def test_missing_argument(capsys):
    assert main([]) == 1
    assert "Uso:" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.tsp")]) == 1
    assert capsys.readouterr().err.startswith("tspbound:")


def test_zero_workers_is_error(square_file, capsys):
    assert main([str(square_file), "-j", "0"]) == 1
    assert "worker" in capsys.readouterr().err