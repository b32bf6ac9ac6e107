import pytest

from udeastay.usuarios import Anfitrion, Huesped, Usuario, buscar_usuario

LINEAS = [
    "11,Ana,ana@example.com,0000,3,4.5\n",
    "42,Luis,luis@example.com,0001,7,3.25\n",
    "42,Duplicado,dup@example.com,0002,1,1\n",
]


def test_default_user_is_empty():
    usuario = Usuario()
    assert (usuario.documento, usuario.nombre, usuario.antiguedad, usuario.puntuacion) == (
        "",
        "",
        0,
        0.0,
    )


def test_from_csv_line_reads_every_field():
    huesped = Huesped.from_csv_line("11,Ana,ana@example.com,0000,3,4.5\n")
    assert huesped == Huesped("11", "Ana", "ana@example.com", "0000", 3, 4.5)
    assert isinstance(huesped, Huesped)


def test_from_csv_line_ignores_extra_fields_and_carriage_return():
    anfitrion = Anfitrion.from_csv_line("11,Ana,ana@example.com,0000,3,4.5,extra\r\n")
    assert anfitrion == Anfitrion("11", "Ana", "ana@example.com", "0000", 3, 4.5)


@pytest.mark.parametrize(
    "linea",
    ["11,Ana,ana@example.com,0000", "11,Ana,ana@example.com,0000,x,4.5", "11,Ana,a,b,3,y"],
)
def test_from_csv_line_rejects_bad_numbers(linea):
    with pytest.raises(ValueError):
        Usuario.from_csv_line(linea)


def test_mostrar_lists_each_field():
    texto = Usuario("11", "Ana", "ana@example.com", "0000", 3, 4.5).mostrar()
    assert texto.splitlines() == [
        "documento: 11",
        "nombre: Ana",
        "correo: ana@example.com",
        "telefono: 0000",
        "antiguedad: 3",
        "puntuacion: 4.5",
    ]


def test_mostrar_round_trips_through_csv():
    original = Huesped("42", "Luis", "luis@example.com", "0001", 7, 3.25)
    linea = ",".join(
        linea.split(": ", 1)[1] for linea in original.mostrar().splitlines()
    )
    assert Huesped.from_csv_line(linea) == original


def test_buscar_usuario_returns_first_match():
    encontrado = buscar_usuario(LINEAS, "42", Anfitrion)
    assert encontrado.nombre == "Luis"
    assert isinstance(encontrado, Anfitrion)


def test_buscar_usuario_missing_returns_none():
    assert buscar_usuario(LINEAS, "99", Huesped) is None


def test_buscar_usuario_requires_exact_document():
    assert buscar_usuario(LINEAS, "1", Huesped) is None