"""Temperature — Закрытый набор температурных единиц

Неизвестный символ отклоняется на границе (TemperatureUnit.parse),
поэтому конвертер никогда не получает «единицу по умолчанию».
"""

from enum import Enum
from typing import Final

from src.core.domain.errors import UnknownUnitError


class TemperatureUnit(str, Enum):
    """Температурная единица."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @classmethod
    def parse(cls, value: "TemperatureUnit | str") -> "TemperatureUnit":
        """
        Приведение символа к TemperatureUnit.

        Принимает канонические имена и короткие алиасы ('c', '°F', 'K').

        Raises:
            UnknownUnitError: Если символ не распознан
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            unit = _ALIASES.get(key)
            if unit is not None:
                return unit
        raise UnknownUnitError("temperature", value)


_ALIASES: Final[dict[str, TemperatureUnit]] = {
    "celsius": TemperatureUnit.CELSIUS,
    "c": TemperatureUnit.CELSIUS,
    "°c": TemperatureUnit.CELSIUS,
    "fahrenheit": TemperatureUnit.FAHRENHEIT,
    "f": TemperatureUnit.FAHRENHEIT,
    "°f": TemperatureUnit.FAHRENHEIT,
    "kelvin": TemperatureUnit.KELVIN,
    "k": TemperatureUnit.KELVIN,
}

# Абсолютный ноль в градусах Цельсия
ABSOLUTE_ZERO_C: Final[float] = -273.15
