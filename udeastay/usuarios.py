"""Guests and hosts, and lookup of them in comma-separated records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

_CAMPOS = 6

U = TypeVar("U", bound="Usuario")


@dataclass
class Usuario:
    """A registered user of the platform."""

    documento: str = ""
    nombre: str = ""
    correo: str = ""
    telefono: str = ""
    antiguedad: int = 0
    puntuacion: float = 0.0

    def mostrar(self) -> str:
        """Text describing the user, one field per line."""
        return (
            f"documento: {self.documento}\n"
            f"nombre: {self.nombre}\n"
            f"correo: {self.correo}\n"
            f"telefono: {self.telefono}\n"
            f"antiguedad: {self.antiguedad}\n"
            f"puntuacion: {self.puntuacion:g}\n"
        )

    @classmethod
    def from_csv_line(cls: type[U], linea: str) -> U:
        """Build a user from ``documento,nombre,correo,telefono,antiguedad,puntuacion``."""
        campos = linea.rstrip("\r\n").split(",")
        campos += [""] * (_CAMPOS - len(campos))
        documento, nombre, correo, telefono, antiguedad, puntuacion = campos[:_CAMPOS]
        try:
            return cls(
                documento,
                nombre,
                correo,
                telefono,
                int(antiguedad.strip()),
                float(puntuacion.strip()),
            )
        except ValueError as exc:
            raise ValueError(f"malformed user record: {linea!r}") from exc


class Huesped(Usuario):
    """A guest who books lodgings."""


class Anfitrion(Usuario):
    """A host who offers lodgings."""


def buscar_usuario(
    lineas: Iterable[str], documento: str, cls: type[U] = Usuario
) -> U | None:
    """Return the first record whose document matches, or None."""
    for linea in lineas:
        if linea.rstrip("\n").split(",", 1)[0] == documento:
            return cls.from_csv_line(linea)
    return None