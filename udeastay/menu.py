"""Interactive console menus for guests and hosts."""

from __future__ import annotations

import string
import sys
from collections import deque
from typing import TextIO

from .usuarios import Anfitrion, Huesped, Usuario, buscar_usuario

_MAX_DIGITOS = 10

_OPCIONES_HUESPED = ("Reservar alojamiento", "Anular reservacion", "Cerrar sesion")
_OPCIONES_ANFITRION = (
    "Consultar reservaciones activas",
    "Anular reservacion",
    "Actualizar historico",
    "Cerrar sesion",
)


class Consola:
    """Reads whitespace-separated tokens and writes text."""

    def __init__(self, entrada: TextIO | None = None, salida: TextIO | None = None):
        self._entrada = entrada if entrada is not None else sys.stdin
        self._salida = salida if salida is not None else sys.stdout
        self._pendientes: deque[str] = deque()

    def escribir(self, texto: str) -> None:
        self._salida.write(texto)

    def leer(self, mensaje: str = "") -> str:
        """Show ``mensaje`` and return the next token; EOFError at end of input."""
        self.escribir(mensaje)
        self._salida.flush()
        while not self._pendientes:
            linea = self._entrada.readline()
            if not linea:
                raise EOFError("no more input")
            self._pendientes.extend(linea.split())
        return self._pendientes.popleft()

    def descartar_linea(self) -> None:
        """Drop whatever is left of the current input line."""
        self._pendientes.clear()


def es_documento_valido(documento: str) -> bool:
    """At most ten characters, all of them ASCII digits."""
    return len(documento) <= _MAX_DIGITOS and all(c in string.digits for c in documento)


def pedir_documento_valido(consola: Consola) -> str:
    """Ask until a valid document number is given."""
    while True:
        documento = consola.leer("Ingrese su numero de documento: ")
        if len(documento) > _MAX_DIGITOS:
            consola.escribir("Error: El documento no debe tener más de 10 dígitos.\n")
        elif not es_documento_valido(documento):
            consola.escribir("Error: El documento debe contener solo números.\n")
        else:
            return documento


def iniciar_sesion(consola: Consola, cls: type[Usuario], etiqueta: str) -> Usuario | None:
    """Ask for a records file and a document; return the matching user or None."""
    ruta = consola.leer(f"ruta {etiqueta}: ")
    try:
        with open(ruta, encoding="utf-8") as archivo:
            lineas = archivo.readlines()
    except OSError:
        lineas = []
    documento = pedir_documento_valido(consola)
    return buscar_usuario(lineas, documento, cls)


def _leer_opcion(consola: Consola, mensaje: str) -> int | None:
    token = consola.leer(mensaje)
    try:
        return int(token)
    except ValueError:
        consola.descartar_linea()
        return None


def _menu_sesion(
    consola: Consola,
    cls: type[Usuario],
    etiqueta: str,
    titulo: str,
    opciones: tuple[str, ...],
) -> None:
    ultima = len(opciones) - 1
    while True:
        usuario = iniciar_sesion(consola, cls, etiqueta)
        if usuario is None:
            consola.escribir("Inicio de sesion invalido...\n")
            continue
        while True:
            consola.escribir(usuario.mostrar())
            consola.escribir(f"\n------ MENU {titulo} ------\n\n")
            consola.escribir("".join(f"({i}) {o}\n" for i, o in enumerate(opciones)) + "\n")
            opcion = _leer_opcion(consola, "Ingrese la opcion que desea realizar: ")
            if opcion is None:
                consola.escribir("Entrada invalida. Intente de nuevo.\n")
            elif not 0 <= opcion <= ultima:
                consola.escribir("Opcion invalida. Por favor ingrese 0, 1 o 2.\n")
            else:
                break
        if opcion == ultima:
            consola.escribir("\nCerrando Sesion...\n")
            return
        consola.escribir(f"\nUsted ha seleccionado: {opciones[opcion]}.\n")


def menu_huesped(consola: Consola) -> None:
    """Guest session: log in and choose actions until the session is closed."""
    _menu_sesion(consola, Huesped, "huespedes", "HUESPED", _OPCIONES_HUESPED)


def menu_anfitrion(consola: Consola) -> None:
    """Host session: log in and choose actions until the session is closed."""
    _menu_sesion(consola, Anfitrion, "anfitriones", "ANFITRION", _OPCIONES_ANFITRION)


def _ejecutar(consola: Consola) -> int:
    while True:
        while True:
            consola.escribir("\n\n------DESAFIO II UDEASTAY-----\n\n")
            consola.escribir("(0) Anfitrion.\n(1) Huesped.\n(2) Salir del programa\n\n")
            ingresar = _leer_opcion(consola, "Ingrese tipo de usuario para iniciar sesion: ")
            if ingresar is not None and 0 <= ingresar <= 2:
                break
            consola.escribir("Opción invalida. Por favor ingrese 0, 1 o 2.\n\n")
        if ingresar == 0:
            menu_anfitrion(consola)
        elif ingresar == 1:
            menu_huesped(consola)
        else:
            consola.escribir("\nSaliendo del programa....\n\n")
            return 0


def main(argv: list[str] | None = None) -> int:
    """Run the main menu on standard input and output."""
    consola = Consola()
    try:
        return _ejecutar(consola)
    except EOFError:
        consola.escribir("\n")
        return 1