"""
RoundingMode — Режимы округления

Закрытое перечисление из семи режимов, используемых при обрезке значения
до заданного scale. Семантика совпадает с java.math.RoundingMode и
режимами ROUND_* модуля decimal:

- UP:        от нуля при любом ненулевом остатке
- DOWN:      к нулю (усечение)
- CEILING:   к +inf
- FLOOR:     к -inf
- HALF_UP:   к ближайшему, ничья — от нуля
- HALF_DOWN: к ближайшему, ничья — к нулю
- HALF_EVEN: к ближайшему, ничья — к чётной последней цифре (banker's)
"""

from enum import Enum


class RoundingMode(str, Enum):
    """Режим округления"""

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
