from datetime import date, timedelta

import pytest

from udeastay.fecha import Fecha
from udeastay.reservacion import Reservacion


def _reserva(duracion, entrada=None):
    extra = {} if entrada is None else {"fecha_entrada": entrada}
    return Reservacion(
        codigo_reserva=7,
        duracion=duracion,
        codigo=1,
        documento_huesped=42,
        metodo_pago="PSE",
        monto=250.0,
        anotaciones="",
        **extra,
    )


def test_default_entry_date():
    assert _reserva(1).fecha_entrada == Fecha()


@pytest.mark.parametrize("duracion", [0, 1, 3, 40])
def test_fechas_reservadas_length(duracion):
    assert len(_reserva(duracion, Fecha(20, 12, 2024)).fechas_reservadas()) == duracion


def test_fechas_reservadas_are_consecutive_days():
    inicio = date(2024, 12, 28)
    reserva = _reserva(6, Fecha(inicio.day, inicio.month, inicio.year))
    esperadas = [inicio + timedelta(days=i) for i in range(6)]
    assert reserva.fechas_reservadas() == [Fecha(d.day, d.month, d.year) for d in esperadas]


def test_fechas_reservadas_start_at_entry_and_increase():
    entrada = Fecha(27, 2, 2024)
    fechas = _reserva(5, entrada).fechas_reservadas()
    assert fechas[0] == entrada
    assert all(a < b for a, b in zip(fechas, fechas[1:]))


def test_reservacion_valida_without_collision():
    reserva = _reserva(2, Fecha(1, 6, 2024))
    otras = _reserva(2, Fecha(3, 6, 2024)).fechas_reservadas()
    assert reserva.reservacion_es_valida(reserva.fechas_reservadas(), otras) is True


def test_reservacion_invalida_with_collision():
    reserva = _reserva(3, Fecha(1, 6, 2024))
    otras = _reserva(2, Fecha(3, 6, 2024)).fechas_reservadas()
    assert reserva.reservacion_es_valida(reserva.fechas_reservadas(), otras) is False