import pytest

from aocsolve.y2020_day24 import HexFloor, part1, part2


def test_loop_path_flips_reference_tile():
    assert HexFloor(["nwwswee", ""]).black_tile_count() == 0


def test_identical_paths_cancel():
    assert HexFloor(["esew", "esew"]).black_tile_count() == HexFloor([]).black_tile_count()


def test_distinct_tiles_add_up():
    combined = HexFloor(["e", "w"]).black_tile_count()
    assert combined == HexFloor(["e"]).black_tile_count() + HexFloor(["w"]).black_tile_count()


def test_opposite_steps_return_to_reference():
    assert HexFloor(["ew"]).black_tile_count() == HexFloor([""]).black_tile_count()


@pytest.mark.parametrize("path", ["n", "ex", "nn"])
def test_unknown_direction_raises(path):
    with pytest.raises(ValueError):
        HexFloor([path])


def test_lone_tile_turns_white():
    floor = HexFloor(["e"])
    floor.advance_days(1)
    assert floor.black_tile_count() == HexFloor([]).black_tile_count()


def test_adjacent_pair_gains_shared_neighbours():
    floor = HexFloor(["e", ""])
    floor.advance_days(1)
    assert floor.black_tile_count() == 4


def test_zero_days_changes_nothing():
    floor = HexFloor(["e", "se", "nwnw"])
    before = floor.black_tile_count()
    floor.advance_days(0)
    assert floor.black_tile_count() == before


def test_days_accumulate():
    paths = ["e", "", "se", "nwnw", "ww"]
    once = HexFloor(paths)
    once.advance_days(3)
    stepwise = HexFloor(paths)
    for _ in range(3):
        stepwise.advance_days(1)
    assert once.black_tile_count() == stepwise.black_tile_count()


def test_negative_days_raise():
    with pytest.raises(ValueError):
        HexFloor([]).advance_days(-1)


def test_part1_matches_floor():
    assert part1("esew\nnwwswee\n") == HexFloor(["esew", "nwwswee"]).black_tile_count()


def test_part2_lone_tile_vanishes():
    assert part2("esew\n") == part1("")