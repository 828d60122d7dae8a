import pytest

from forestfire.files import (
    ForestInput,
    InputError,
    SimulationLog,
    direction_label,
    read_forest,
)


def test_read_forest_parses_header_and_grid(tmp_path):
    path = tmp_path / "input.dat"
    path.write_text("2 3 1 2\n1 1 0\n4 1 1\n", encoding="utf-8")
    forest = read_forest(path)
    assert forest == ForestInput(2, 3, 1, 2, [[1, 1, 0], [4, 1, 1]])


def test_read_forest_accepts_values_split_anyhow(tmp_path):
    path = tmp_path / "input.dat"
    path.write_text("2 2 0 0\n1 1 1\n1\n", encoding="utf-8")
    forest = read_forest(path)
    assert forest.grid == [[1, 1], [1, 1]]


def test_read_forest_missing_file(tmp_path):
    with pytest.raises(InputError, match="Arquivo não encontrado"):
        read_forest(tmp_path / "absent.dat")


@pytest.mark.parametrize("header", ["0 3 0 0", "3 -1 0 0"])
def test_read_forest_invalid_dimensions(tmp_path, header):
    path = tmp_path / "input.dat"
    path.write_text(header + "\n1 1 1\n", encoding="utf-8")
    with pytest.raises(InputError, match="Dimensões da matriz inválidas."):
        read_forest(path)


def test_read_forest_empty_file(tmp_path):
    path = tmp_path / "input.dat"
    path.write_text("", encoding="utf-8")
    with pytest.raises(InputError):
        read_forest(path)


def test_read_forest_too_few_cells(tmp_path):
    path = tmp_path / "input.dat"
    path.write_text("2 2 0 0\n1 1 1\n", encoding="utf-8")
    with pytest.raises(InputError):
        read_forest(path)


def test_read_forest_non_numeric(tmp_path):
    path = tmp_path / "input.dat"
    path.write_text("2 2 0 0\n1 x 1 1\n", encoding="utf-8")
    with pytest.raises(InputError):
        read_forest(path)


@pytest.mark.parametrize(
    "dx, dy, label",
    [
        (-1, 0, "acima"),
        (1, 0, "abaixo"),
        (0, -1, "esquerda"),
        (0, 1, "direita"),
        (-1, -1, ""),
        (1, 1, "direção inválida"),
    ],
)
def test_direction_label(dx, dy, label):
    assert direction_label(dx, dy) == label


def test_log_header_and_iteration(tmp_path):
    path = tmp_path / "output.dat"
    with SimulationLog(path) as log:
        log.write_iteration(1, [[1, 2], [3, 4]])
    assert path.read_text(encoding="utf-8") == (
        "RESULTADO DA SIMULAÇÃO: \n\nIteração: 1\n1 2 \n3 4 \n\n"
    )


def test_log_fire_change_with_and_without_direction(tmp_path):
    path = tmp_path / "output.dat"
    with SimulationLog(path) as log:
        log.fire_change(1, 2, 2, -1, 0)
        log.fire_change(0, 0, 3, -1, -1)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[-2:] == ["- (1, 2) vira 2 (acima)", "- (0, 0) vira 3"]


def test_log_summary_survived(tmp_path):
    path = tmp_path / "output.dat"
    with SimulationLog(path) as log:
        log.write_animal_summary([["*", "9"]], 1, False, -1, 0)
    text = path.read_text(encoding="utf-8")
    assert "DADOS FINAIS: \nCaminho percorrido pelo animal: \n* 9 \n" in text
    assert "Total de passos: 1\n" in text
    assert "Condição final do animal: sobreviveu\n" in text
    assert "morreu" not in text


def test_log_summary_died(tmp_path):
    path = tmp_path / "output.dat"
    with SimulationLog(path) as log:
        log.write_animal_summary([["9"]], 0, True, 5, 2)
    text = path.read_text(encoding="utf-8")
    assert "Quantidade de vezes que encontrou água: 2\n" in text
    assert text.endswith("Iteração em que o animal morreu: 5")


def test_log_close_is_idempotent(tmp_path):
    log = SimulationLog(tmp_path / "output.dat")
    log.close()
    log.close()
    assert log.closed is True
    with pytest.raises(ValueError):
        log.write_iteration(0, [[1]])