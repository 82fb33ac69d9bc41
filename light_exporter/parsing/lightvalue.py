"""
Parser for the WTY2001 controller's `dataget` response.

The controller answers with a script payload; each lighting channel shows up
as one call per line:

    javascript:parent.lightValueSet(0,1,1,38,'Light1',0,'WTY22473+20.png');

Field layout:
    lightValueSet(index, info, dimmer_available, brightness, name,
                  via_repeater, 'model_number+icon_num.png')

Only index, brightness and the model number (the icon file name up to `+`)
are kept. Everything else in the payload is ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from light_exporter.errors import ParseError


LIGHT_VALUE_RE = re.compile(
    r"javascript:parent\.lightValueSet\("
    r"(?P<index>\d+),\d+,\d+,(?P<brightness>\d+),"
    r"'[^']*',\d+,"
    r"'(?P<model_number>[^+]+)\+\d+\.png'\);",
    re.ASCII,
)

# index/brightness are decoded as signed 64-bit ints; longer digit runs are a parse error
_INT_MAX = 2**63 - 1


@dataclass(frozen=True)
class LightStatus:
    index: int
    brightness: int
    model_number: str


def _parse_int(field: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise ParseError(f"failed to parse {field} {raw}: {e}") from e

    if value > _INT_MAX:
        raise ParseError(f"failed to parse {field} {raw}: value out of range")
    return value


def parse_api_response(raw: bytes) -> List[LightStatus]:
    """
    Extract one LightStatus per matching line, in input order.

    Lines that don't match are skipped; input with no matches yields [].
    A matched line whose index/brightness can't be decoded aborts the whole
    parse with ParseError (records collected so far are dropped).
    """
    text = raw.decode("utf-8", errors="replace")

    statuses: List[LightStatus] = []
    # only \n ends a line; other unicode separators may appear inside the name field
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        m = LIGHT_VALUE_RE.search(line)
        if m is None:
            continue

        statuses.append(
            LightStatus(
                index=_parse_int("index", m.group("index")),
                brightness=_parse_int("brightness", m.group("brightness")),
                model_number=m.group("model_number"),
            )
        )

    return statuses
