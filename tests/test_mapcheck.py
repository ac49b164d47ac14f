import pytest

from berchk.mapcheck import (
    ElementCounts,
    LineKind,
    MapError,
    check_extension,
    check_params,
    check_rectangular,
    check_walls,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("maps/level.ber", True),
        ("level.ber", True),
        ("level.txt", False),
        ("level", False),
        (".ber", False),
        ("level.ber.txt", False),
        ("level.berx", False),
    ],
)
def test_check_extension(name, expected):
    assert check_extension(name, ".ber") is expected


def test_check_params_wrong_count():
    with pytest.raises(MapError, match="Wrong number of arguments"):
        check_params([])
    with pytest.raises(MapError, match="Wrong number of arguments"):
        check_params(["a.ber", "b.ber"])


def test_check_params_wrong_extension(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("111\n")
    with pytest.raises(MapError, match="Wrong file extension"):
        check_params([str(path)])


def test_check_params_missing_file(tmp_path):
    with pytest.raises(MapError, match="File not found"):
        check_params([str(tmp_path / "absent.ber")])


def test_check_params_returns_path(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("111\n")
    assert check_params([str(path)]) == path


def test_check_rectangular_returns_width():
    rows = ["11111\n", "1PCE1\n", "11111"]
    assert check_rectangular(rows) == len("11111")


def test_check_rectangular_rejects_ragged():
    with pytest.raises(MapError, match="Map is not rectangular"):
        check_rectangular(["1111\n", "1PCE01\n", "1111"])


def test_check_rectangular_width_set_by_first_non_empty_line():
    assert check_rectangular(["", "111", "111"]) == len("111")


def test_first_line_rules():
    assert check_walls("11111\n", LineKind.FIRST)
    with pytest.raises(MapError, match="First line is not valid"):
        check_walls("11011\n", LineKind.FIRST)


def test_middle_line_rules():
    assert check_walls("1PCE0N1\n", LineKind.MIDDLE)
    assert check_walls("10001", LineKind.MIDDLE)
    for bad in ("0PCE1\n", "1PCE0\n", "1PXE1\n", "\n", ""):
        with pytest.raises(MapError, match="Medium line is not valid"):
            check_walls(bad, LineKind.MIDDLE)


def test_last_line_rules():
    assert check_walls("11111", LineKind.LAST)
    assert check_walls("11111\n", LineKind.LAST)
    with pytest.raises(MapError, match="Last line is not valid"):
        check_walls("10111", LineKind.LAST)


def test_last_line_final_character_unchecked():
    assert check_walls("1110", LineKind.LAST)


def test_counts_accumulate_over_lines():
    counts = ElementCounts()
    for line in ("1PC1\n", "1CE1\n"):
        counts.count(line)
    assert counts == ElementCounts(players=1, exits=1, collectibles=2)
    counts.validate()
    assert counts.players == 1


def test_validate_rejects_missing_player():
    counts = ElementCounts()
    counts.count("1CE1")
    with pytest.raises(MapError, match="not player found"):
        counts.validate()


def test_validate_rejects_two_players():
    counts = ElementCounts()
    counts.count("1PPCE1")
    with pytest.raises(MapError, match="More than one player"):
        counts.validate()


def test_validate_rejects_bad_exit_count():
    counts = ElementCounts()
    counts.count("1PCEE1")
    with pytest.raises(MapError, match="More than one exit"):
        counts.validate()
    none = ElementCounts()
    none.count("1PC01")
    with pytest.raises(MapError, match="not exit found"):
        none.validate()


def test_validate_rejects_no_collectibles():
    counts = ElementCounts()
    counts.count("1PE1")
    with pytest.raises(MapError, match="No collectibles on map."):
        counts.validate()