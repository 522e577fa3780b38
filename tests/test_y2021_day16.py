import pytest

from aocsolve.y2021_day16 import evaluate_packet, hex_to_bits, part1


def literal(value, version=0):
    digits = format(value, "b")
    digits = digits.zfill(-(-len(digits) // 4) * 4)
    groups = [digits[i : i + 4] for i in range(0, len(digits), 4)]
    body = "".join(
        ("0" if i == len(groups) - 1 else "1") + group for i, group in enumerate(groups)
    )
    return format(version, "03b") + "100" + body


def operator(type_id, subs, length_type=0):
    body = "".join(subs)
    head = "000" + format(type_id, "03b")
    if length_type == 0:
        return head + "0" + format(len(body), "015b") + body
    return head + "1" + format(len(subs), "011b") + body


@pytest.mark.parametrize("value", [0, 1, 15, 16, 2021, 123456789])
def test_literal_round_trip(value):
    assert evaluate_packet(literal(value)) == value


def test_literal_with_padding():
    assert evaluate_packet(literal(42) + "0000") == 42


@pytest.mark.parametrize("type_id", [0, 1, 2, 3])
def test_single_subpacket_is_identity(type_id):
    assert evaluate_packet(operator(type_id, [literal(37)])) == 37


def test_min_and_max_pick_from_subpackets():
    subs = [literal(5), literal(9), literal(2)]
    assert evaluate_packet(operator(2, subs)) == 2
    assert evaluate_packet(operator(3, subs)) == 9


@pytest.mark.parametrize("type_id", [0, 1, 2, 3, 5, 6, 7])
def test_length_types_agree(type_id):
    subs = [literal(6), literal(11)]
    assert evaluate_packet(operator(type_id, subs, 0)) == evaluate_packet(
        operator(type_id, subs, 1)
    )


def test_comparisons():
    assert evaluate_packet(operator(5, [literal(9), literal(5)])) == 1
    assert evaluate_packet(operator(6, [literal(9), literal(5)])) == 0
    assert evaluate_packet(operator(7, [literal(4), literal(4)])) == 1


def test_nested_packets():
    inner = operator(3, [literal(8), literal(3)], 1)
    assert evaluate_packet(operator(2, [inner, literal(20)])) == 8


def test_part1_examples():
    assert part1("C200B40A82") == 3
    assert part1("9C0141080250320F1802104A08") == 1


def test_hex_to_bits_round_trip():
    text = "8A004A801A8002F478"
    bits = hex_to_bits(text + "\n")
    assert len(bits) == 4 * len(text)
    assert int(bits, 2) == int(text, 16)


def test_hex_to_bits_rejects_bad_digit():
    with pytest.raises(ValueError):
        hex_to_bits("1G")


def test_truncated_packet_raises():
    with pytest.raises(ValueError):
        evaluate_packet(literal(2021)[:-3])


def test_empty_operator_raises():
    with pytest.raises(ValueError):
        evaluate_packet(operator(0, []))