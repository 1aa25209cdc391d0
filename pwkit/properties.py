"""Display texts for player property values."""

__all__ = ["attack_rate_text", "chi_bars_text"]

_CHI_BARS = {
    99: "Nenhuma barra de chi",
    199: "1 barra de chi",
    299: "2 barras de chi",
    399: "3 barras de chi",
}


def attack_rate_text(attack_speed):
    """Attacks per second for an attack speed given in 0.05 second ticks."""
    if attack_speed <= 0:
        raise ValueError(f"attack speed must be positive, got {attack_speed}")
    return f"{1 / (attack_speed * 0.05):.2f} atq/seg."


def chi_bars_text(max_ap):
    """Describe how many chi bars a maximum AP value gives."""
    try:
        return _CHI_BARS[max_ap]
    except KeyError:
        raise ValueError(f"no chi bar text for max AP {max_ap}") from None