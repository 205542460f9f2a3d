from __future__ import annotations

import logging
import re
import struct
from enum import Enum

from ..errors import MalformedCatalog, ValidationFailure
from .models import CARBS, MAIN_GENRES, Carb, MainGenre, MenuRecord

logger = logging.getLogger(__name__)

EXPECTED_HEADER: tuple[str, str, str] = ("name", "mainGenre", "carb")

_LINE_BREAK = re.compile(r"\r?\n")
_MASK32 = 0xFFFFFFFF
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
_ID_WIDTH = 11
_BOM = "\ufeff"


# ---------------------------------------------------------------------------
# Field splitting
# ---------------------------------------------------------------------------


def split_fields(line: str) -> list[str]:
    """Split one catalog line on commas, honouring double-quoted fields.

    ``""`` inside a quoted field is a literal quote. A trailing comma
    yields a trailing empty field, and an empty line yields ``[""]``.
    """
    fields: list[str] = []
    i = 0
    length = len(line)

    while i <= length:
        if i == length:
            fields.append("")
            break

        if line[i] == '"':
            i += 1
            chars: list[str] = []
            while i < length:
                if line[i] == '"':
                    if i + 1 < length and line[i + 1] == '"':
                        chars.append('"')
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    chars.append(line[i])
                    i += 1
            fields.append("".join(chars))
            if i < length and line[i] == ",":
                i += 1
            elif i == length:
                break
        else:
            next_comma = line.find(",", i)
            if next_comma == -1:
                fields.append(line[i:])
                break
            fields.append(line[i:next_comma])
            i = next_comma + 1

    return fields


# ---------------------------------------------------------------------------
# Content-derived identity
# ---------------------------------------------------------------------------


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


def _utf16_units(text: str) -> tuple[int, ...]:
    data = text.encode("utf-16-le")
    return struct.unpack(f"<{len(data) // 2}H", data)


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def _token(value: str | Enum) -> str:
    return value.value if isinstance(value, Enum) else value


def stable_id(name: str, main_genre: str | MainGenre, carb: str | Carb) -> str:
    """Return the 11-character base-36 id for a (name, genre, carb) triple.

    53-bit cyrb53 mix over the UTF-16 code units of the tab-joined triple.
    Not collision resistant; identical triples always share an id.
    """
    text = f"{name}\t{_token(main_genre)}\t{_token(carb)}"
    h1 = 0xDEADBEEF
    h2 = 0x41C6CE57
    for unit in _utf16_units(text):
        h1 = _imul(h1 ^ unit, 2654435761)
        h2 = _imul(h2 ^ unit, 1597334677)

    h1 = _imul(h1 ^ (h1 >> 16), 2246822507)
    h1 ^= _imul(h2 ^ (h2 >> 13), 3266489909)
    h2 = _imul(h2 ^ (h2 >> 16), 2246822507)
    h2 ^= _imul(h1 ^ (h1 >> 13), 3266489909)

    combined = ((h2 & 0x1FFFFF) << 32) | h1
    return _to_base36(combined).rjust(_ID_WIDTH, "0")


# ---------------------------------------------------------------------------
# Catalog text -> records
# ---------------------------------------------------------------------------


def _trim(value: str) -> str:
    return value.strip().strip(_BOM).strip()


def _check_header(line: str) -> None:
    header = [_trim(h) for h in split_fields(line)]
    if len(header) < len(EXPECTED_HEADER) or tuple(header[:3]) != EXPECTED_HEADER:
        raise MalformedCatalog(
            f"unexpected header. Expected [{','.join(EXPECTED_HEADER)}] "
            f"but got [{','.join(header)}]",
            expected=EXPECTED_HEADER,
            actual=header,
        )


def parse_catalog_text(raw: str) -> list[MenuRecord]:
    """
    Parse catalog text into validated menu records, in source order.

    Rows with an empty name are skipped. Every invalid row is collected
    and reported together in a single ValidationFailure.
    """
    if raw.startswith(_BOM):
        raw = raw[1:]
    lines = _LINE_BREAK.split(raw)

    header_idx = next((i for i, line in enumerate(lines) if _trim(line)), None)
    if header_idx is None:
        raise MalformedCatalog("empty catalog: no non-blank line found")

    _check_header(lines[header_idx])

    records: list[MenuRecord] = []
    errors: list[str] = []
    bad_rows: list[int] = []

    for i in range(header_idx + 1, len(lines)):
        line = lines[i]
        row_num = i + 1
        if not _trim(line):
            continue

        cols = [_trim(c) for c in split_fields(line)]
        cols += [""] * (3 - len(cols))
        name, raw_genre, raw_carb = cols[:3]
        if not name:
            logger.debug("Row %d: empty name, skipped", row_num)
            continue

        row_errors: list[str] = []
        try:
            main_genre = MainGenre(raw_genre)
        except ValueError:
            row_errors.append(
                f'mainGenre="{raw_genre}" is not one of [{",".join(MAIN_GENRES)}]'
            )
        try:
            carb = Carb(raw_carb)
        except ValueError:
            row_errors.append(f'carb="{raw_carb}" is not one of [{",".join(CARBS)}]')

        if row_errors:
            errors.append(f"Row {row_num}: {'; '.join(row_errors)}")
            bad_rows.append(row_num)
            continue

        records.append(
            MenuRecord(
                id=stable_id(name, main_genre, carb),
                name=name,
                main_genre=main_genre,
                carb=carb,
            )
        )

    if errors:
        logger.warning("Catalog has %d invalid row(s)", len(errors))
        raise ValidationFailure(errors, bad_rows)

    return records
