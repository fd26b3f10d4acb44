"""
Errors — Исключения конвертера единиц

Все исключения наследуются от ConversionError (подкласс ValueError), чтобы
вызывающий код мог ловить их одной веткой.

Ошибки локальны для одного вызова конверсии и не фатальны для процесса.
"""


class ConversionError(ValueError):
    """Базовое исключение конвертера."""

    pass


class UnknownUnitError(ConversionError):
    """
    Символ единицы отсутствует в таблице домена.

    Attributes:
        domain: Имя домена (например, 'length')
        unit: Запрошенный символ единицы
    """

    def __init__(self, domain: str, unit: object):
        self.domain = domain
        self.unit = unit
        super().__init__(f"Unknown unit {unit!r} for domain '{domain}'")


class UnknownDomainError(ConversionError):
    """Домен не входит в фиксированный список доменов."""

    def __init__(self, domain: object):
        self.domain = domain
        super().__init__(f"Unknown domain: {domain!r}")


class InvalidInputError(ConversionError):
    """Значение отсутствует, не является числом или не конечно (NaN/Inf)."""

    pass


class NonLinearDomainError(ConversionError):
    """Запрошен масштабный коэффициент для домена с аффинной конверсией."""

    pass


class RegistryError(ConversionError):
    """Нарушение инвариантов таблицы коэффициентов при её построении."""

    pass
