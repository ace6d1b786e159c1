"""
Математические и служебные константы Deci.
"""

from typing import Final

from src.deci.deci import Deci

# Число π
PI: Final[Deci] = Deci("3.1415926535897932384626433832795")

# Число Эйлера e
E: Final[Deci] = Deci("2.7182818284590452353602874713527")

HALF: Final[Deci] = Deci("0.5")
TWO: Final[Deci] = Deci("2")
HUNDRED: Final[Deci] = Deci("100")
THOUSAND: Final[Deci] = Deci("1000")
MILLION: Final[Deci] = Deci("1000000")
NEGATIVE_ONE: Final[Deci] = Deci("-1")
ONE_TENTH: Final[Deci] = Deci("0.1")
ONE_HUNDREDTH: Final[Deci] = Deci("0.01")
ONE_THOUSANDTH: Final[Deci] = Deci("0.001")
