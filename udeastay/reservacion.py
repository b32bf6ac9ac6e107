"""Bookings of a lodging by a guest."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .alojamiento import hay_conflicto
from .fecha import Fecha


@dataclass
class Reservacion:
    """A booking of ``duracion`` nights starting at ``fecha_entrada``."""

    codigo_reserva: int
    duracion: int
    codigo: int
    documento_huesped: int
    metodo_pago: str
    monto: float
    anotaciones: str
    fecha_entrada: Fecha = field(default_factory=Fecha)

    def fechas_reservadas(self) -> list[Fecha]:
        """Every date covered by the booking, in order."""
        fechas = []
        actual = self.fecha_entrada
        for _ in range(self.duracion):
            fechas.append(actual)
            actual = actual.sumar_dias(1)
        return fechas

    def reservacion_es_valida(
        self, fechas: Iterable[Fecha], fechas_reservadas: Iterable[Fecha]
    ) -> bool:
        """True when ``fechas`` do not collide with ``fechas_reservadas``."""
        return not hay_conflicto(fechas, fechas_reservadas)