import pytest

from aocsolve.y2021_day19 import align_scanner, locate_all, parse_scanners, part1, part2

REFERENCE = [
    (404, -588, -901),
    (528, -643, 409),
    (-838, 591, 734),
    (390, -675, -793),
    (-537, -823, -458),
    (-485, -357, 347),
    (-345, -311, 381),
    (-661, -816, -575),
    (-876, 649, 763),
    (-618, -824, -621),
    (553, 345, -567),
    (474, 580, 667),
    (-447, -329, 318),
    (-584, 868, -557),
]
EXTRA = [(17, 23, -900), (-333, 101, 55)]
PERM = (1, 2, 0)
SIGNS = (1, -1, 1)
POSITION = (68, -1246, -43)


def to_local(point):
    local = [0, 0, 0]
    for axis, (target, sign, offset) in enumerate(zip(PERM, SIGNS, POSITION)):
        local[target] = sign * (point[axis] - offset)
    return tuple(local)


def scanner_text(scanners):
    blocks = []
    for index, points in enumerate(scanners):
        lines = [f"--- scanner {index} ---"]
        lines += [",".join(str(c) for c in point) for point in points]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


SECOND = [to_local(point) for point in REFERENCE[:12]] + EXTRA


def test_parse_scanners():
    text = "--- scanner 0 ---\n1,2,3\n\n--- scanner 1 ---\n-4,5,6\n"
    assert parse_scanners(text) == [[(1, 2, 3)], [(-4, 5, 6)]]


def test_parse_round_trip():
    assert parse_scanners(scanner_text([REFERENCE, SECOND])) == [REFERENCE, SECOND]


def test_beacon_before_header_rejected():
    with pytest.raises(ValueError):
        parse_scanners("1,2,3\n")


def test_malformed_beacon_rejected():
    with pytest.raises(ValueError):
        parse_scanners("--- scanner 0 ---\n1,2\n")


def test_align_finds_position():
    beacons = set()
    alignment = align_scanner(beacons, REFERENCE, SECOND)
    assert alignment.position == POSITION
    assert set(REFERENCE[:12]) <= set(alignment.beacons)
    assert len(beacons) == len(REFERENCE) + len(EXTRA)


def test_align_needs_twelve_matches():
    beacons = set()
    other = [to_local(point) for point in REFERENCE[:11]] + EXTRA
    assert align_scanner(beacons, REFERENCE, other) is None
    assert beacons == set(REFERENCE)


def test_locate_all():
    beacons, positions = locate_all([REFERENCE, SECOND])
    assert positions == {0: (0, 0, 0), 1: POSITION}
    assert set(REFERENCE) <= beacons


def test_unreachable_scanner_left_out():
    far = [(1000 + i * 7, i * i, -i) for i in range(5)]
    _, positions = locate_all([REFERENCE, far])
    assert 1 not in positions


def test_part1_counts_distinct_beacons():
    assert part1(scanner_text([REFERENCE, SECOND])) == len(REFERENCE) + len(EXTRA)


def test_part2_distance_from_origin():
    assert part2(scanner_text([REFERENCE, SECOND])) == sum(abs(c) for c in POSITION)


def test_part2_single_scanner():
    assert part2(scanner_text([REFERENCE])) == 0