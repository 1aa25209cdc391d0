import pytest

from pwkit.properties import attack_rate_text, chi_bars_text


def test_attack_rate_twenty_ticks_is_one_per_second():
    assert attack_rate_text(20) == "1.00 atq/seg."


def test_attack_rate_suffix_and_two_decimals():
    text = attack_rate_text(7)
    number, suffix = text.split(" ", 1)
    assert suffix == "atq/seg."
    assert len(number.split(".")[1]) == 2


def test_attack_rate_decreases_with_slower_speed():
    fast = float(attack_rate_text(10).split()[0])
    slow = float(attack_rate_text(30).split()[0])
    assert fast > slow


@pytest.mark.parametrize("speed", [0, -5])
def test_attack_rate_non_positive_raises(speed):
    with pytest.raises(ValueError):
        attack_rate_text(speed)


@pytest.mark.parametrize(
    "max_ap, expected",
    [
        (99, "Nenhuma barra de chi"),
        (199, "1 barra de chi"),
        (299, "2 barras de chi"),
        (399, "3 barras de chi"),
    ],
)
def test_chi_bars_text(max_ap, expected):
    assert chi_bars_text(max_ap) == expected


@pytest.mark.parametrize("max_ap", [0, 100, 400])
def test_chi_bars_unknown_raises(max_ap):
    with pytest.raises(ValueError):
        chi_bars_text(max_ap)