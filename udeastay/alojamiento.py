"""Lodgings offered by hosts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .fecha import Fecha


def hay_conflicto(fechas: Iterable[Fecha], ocupadas: Iterable[Fecha]) -> bool:
    """True when any date in ``fechas`` is also in ``ocupadas``."""
    ocupadas = set(ocupadas)
    return any(fecha in ocupadas for fecha in fechas)


@dataclass
class Alojamiento:
    """A lodging and the host who owns it."""

    codigo: int
    nombre: str
    documento: int
    departamento: str
    municipio: str
    tipo: str
    direccion: str
    precio: int
    amenidades: str

    def esta_disponible(
        self, nuevas_fechas: Iterable[Fecha], fechas_ocupadas: Iterable[Fecha]
    ) -> bool:
        """True when none of the requested dates is already taken."""
        return not hay_conflicto(nuevas_fechas, fechas_ocupadas)