"""Calendar dates used for bookings."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

_MESES_31 = frozenset({1, 3, 5, 7, 8, 10, 12})
_MESES_30 = frozenset({4, 6, 9, 11})


def es_bisiesto(anio: int) -> bool:
    """Return True when ``anio`` is a leap year in the Gregorian calendar."""
    return anio % 400 == 0 or (anio % 4 == 0 and anio % 100 != 0)


def dias_en_mes(mes: int, anio: int) -> int:
    """Number of days in ``mes`` of ``anio``; unknown months count as 30."""
    if mes in _MESES_31:
        return 31
    if mes in _MESES_30:
        return 30
    if mes == 2:
        return 29 if es_bisiesto(anio) else 28
    return 30


@total_ordering
@dataclass(frozen=True)
class Fecha:
    """A day, month and year; ordered chronologically."""

    dia: int = 1
    mes: int = 1
    anio: int = 2000

    def _clave(self) -> tuple[int, int, int]:
        return (self.anio, self.mes, self.dia)

    def __lt__(self, otra: object) -> bool:
        if not isinstance(otra, Fecha):
            return NotImplemented
        return self._clave() < otra._clave()

    def es_fecha_valida(self) -> bool:
        """True when the month is 1-12 and the day exists in that month."""
        if not 1 <= self.mes <= 12:
            return False
        return 1 <= self.dia <= dias_en_mes(self.mes, self.anio)

    def sumar_dias(self, dias: int) -> Fecha:
        """Return the date ``dias`` days later."""
        if dias < 0:
            raise ValueError("the number of days cannot be negative")
        dia, mes, anio = self.dia + dias, self.mes, self.anio
        while dia > dias_en_mes(mes, anio):
            dia -= dias_en_mes(mes, anio)
            mes += 1
            if mes > 12:
                mes = 1
                anio += 1
        return Fecha(dia, mes, anio)