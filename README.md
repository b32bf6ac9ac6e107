# udeastay

A small console program for a lodging marketplace. Hosts (*anfitriones*) and
guests (*huéspedes*) sign in with their document number. The package also
models calendar dates, lodgings and reservations.

## Installation

```
pip install .
```

## Running

```
udeastay
```

The main menu asks for the user type:

- `0` host: sign in, then choose between consulting active reservations,
  cancelling a reservation, updating the history, or signing out.
- `1` guest: sign in, then choose between booking a lodging, cancelling a
  reservation, or signing out.
- `2` exit.

To sign in, the program asks for the path of a comma-separated file of users
and then for a document number. The document must be digits only, ten at
most; it is asked for again until it is. If the file cannot be opened or no
line matches, the sign-in is reported as invalid and asked for again. Each
line of the file looks like this:

```
1234567890,Ana Pérez,ana@example.com,000,5,4.5
```

The fields are document, name, e-mail, telephone, seniority and rating.

A non-numeric or out-of-range menu choice is reported and the menu is shown
again. When input runs out, the program stops with exit status 1.

## What it does not do

The menu options other than signing out only report the choice that was
made: the program does not create, cancel or list reservations, does not
update any history, and stores nothing. Lodgings and reservations exist only
as the classes below.

## Library use

```python
from udeastay.fecha import Fecha, dias_en_mes
from udeastay.alojamiento import hay_conflicto
from udeastay.reservacion import Reservacion

entrada = Fecha(28, 2, 2024)
salida = entrada.sumar_dias(2)   # Fecha(dia=1, mes=3, anio=2024); entrada is unchanged
print(dias_en_mes(2, 2023))      # 28
print(entrada < salida)          # True

print(hay_conflicto([salida], [Fecha(1, 3, 2024)]))   # True

reserva = Reservacion(1, 3, 10, 1234567890, "tarjeta", 300000.0, "", fecha_entrada=entrada)
print(reserva.fechas_reservadas())   # 28 Feb, 29 Feb and 1 Mar 2024
```

- `udeastay.fecha`: `Fecha` (an immutable, ordered day/month/year with
  `es_fecha_valida()` and `sumar_dias()`), `dias_en_mes()` and
  `es_bisiesto()`.
- `udeastay.alojamiento`: `Alojamiento`, whose `esta_disponible()` tells
  whether requested dates are clear of taken ones, and `hay_conflicto()`.
- `udeastay.reservacion`: `Reservacion`, with `fechas_reservadas()` listing
  every night from check-in, and `reservacion_es_valida()`.
- `udeastay.usuarios`: `Usuario`, `Huesped` and `Anfitrion`, with
  `from_csv_line()` and `mostrar()` (returns the fields as text), and
  `buscar_usuario()` to find a user by document among CSV lines.
- `udeastay.menu`: `Consola`, `es_documento_valido()`,
  `pedir_documento_valido()`, `iniciar_sesion()`, `menu_huesped()`,
  `menu_anfitrion()` and `main()`.

## Tests

```
pip install .[test]
pytest
```