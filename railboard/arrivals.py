"""Contents of the arrivals board: header, per-train rows and redraw selection."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from railboard.constants import DISP_NUM_ARRIVAL, DelayFlag, Status

# Horizontal text offsets of the board's columns.
OFFSET_DUE = 10
OFFSET_ON = OFFSET_DUE + 40
OFFSET_LATE = OFFSET_ON + 30
OFFSET_LOCO = OFFSET_LATE + 20
OFFSET_ARRIVAL_DESC = OFFSET_LOCO + 125
OFFSET_STATUS = OFFSET_ARRIVAL_DESC + 135
OFFSET_DEPARTURE_TIME = OFFSET_STATUS + 130
OFFSET_DEPARTURE_DESC = OFFSET_DEPARTURE_TIME + 40

# Vertical layout of the timetable rows.
FIRST_ROW_Y = 25
ROW_HEIGHT = 17

Colour = tuple[int, int, int]

WHITE: Colour = (255, 255, 255)
AMBER: Colour = (192, 192, 0)
RED: Colour = (255, 0, 0)
GREEN: Colour = (0, 127, 0)
ORANGE: Colour = (255, 128, 0)

INVALID_TIME = "XX:XX"
NO_LOCO = "XXXXX"

# Longest names the board shows for an arrival point and a platform.
ARRIVAL_POINT_WIDTH = 3
PLATFORM_WIDTH = 19


@dataclass(frozen=True)
class Cell:
    """A piece of text drawn at a column offset; colour None is the system text colour."""

    x: int
    text: str
    colour: Colour | None = None


@dataclass(frozen=True)
class ArrivalEntry:
    """What the board needs to know about one timetabled arrival."""

    arrival_time: int
    arrival_point: str
    minutes_late: int = 0
    locos: tuple[str | None, ...] = (None, None)
    delay_flag: int = DelayFlag.NO_DELAYS
    arrival_description: str = ""
    status: int = Status.DUE
    platform: str | None = None
    departure_time: int = 0
    departure_description: str = ""


@dataclass(frozen=True)
class ArrivalRow:
    """A board row that needs drawing: its slot, vertical position and train (or None)."""

    index: int
    y: int
    entry: ArrivalEntry | None = field(default=None)


def arrival_clock(value: int) -> str:
    """Format a time such as 657 as "06:57"; values outside 1..2400 give "XX:XX"."""
    if value <= 0 or value > 2400:
        return INVALID_TIME
    hours, minutes = divmod(value, 100)
    return f"{hours:02d}:{minutes:02d}"


def arrival_headers() -> list[Cell]:
    """Column headings along the top of the board."""
    return [
        Cell(OFFSET_DUE, "Due:"),
        Cell(OFFSET_ON, "On:"),
        Cell(OFFSET_LATE, "+:"),
        Cell(OFFSET_LOCO, "Loco / MU:"),
        Cell(OFFSET_ARRIVAL_DESC, "Description:"),
        Cell(OFFSET_STATUS, "Status:"),
        Cell(OFFSET_DEPARTURE_TIME, "Dep:"),
        Cell(OFFSET_DEPARTURE_DESC, "Description:"),
    ]


def arrival_status(status: int, arrival_point: str, platform: str | None) -> Cell | None:
    """Status text for a train, or None when its state shows nothing."""
    if status == Status.DUE:
        return Cell(OFFSET_STATUS, f"Expected on {arrival_point}", WHITE)
    if status == Status.APPROACH:
        return Cell(OFFSET_STATUS, f"Approaching on {arrival_point}", AMBER)
    if status == Status.HELD:
        return Cell(OFFSET_STATUS, f"Held on {arrival_point}", RED)
    if status == Status.FIRSTHELD:
        return Cell(OFFSET_STATUS, f"First held on {arrival_point}", RED)
    if Status.SETPLAT <= status <= Status.ARRC:
        name = (platform or "")[:PLATFORM_WIDTH]
        return Cell(OFFSET_STATUS, f"Set to platform {name}", GREEN)
    return None


def _loco_text(locos: Sequence[str | None]) -> str:
    text = NO_LOCO
    for slot, number in enumerate(locos[:2]):
        if not number:
            continue
        text = number if slot == 0 else f"{text}+{number}"
    return text


def format_arrival(entry: ArrivalEntry | None, delays_enabled: bool) -> list[Cell]:
    """Cells for one board row; an empty slot gives no cells."""
    if entry is None:
        return []

    point = entry.arrival_point[:ARRIVAL_POINT_WIDTH]
    cells = [
        Cell(OFFSET_DUE, arrival_clock(entry.arrival_time), WHITE),
        Cell(OFFSET_ON, point, WHITE),
        Cell(OFFSET_LATE, str(entry.minutes_late) if delays_enabled else "", WHITE),
    ]

    has_loco = any(entry.locos[:2])
    loco_colour = (
        ORANGE if has_loco and entry.delay_flag == DelayFlag.DELAYS_MAINT else WHITE
    )
    cells.append(Cell(OFFSET_LOCO, _loco_text(entry.locos), loco_colour))
    cells.append(Cell(OFFSET_ARRIVAL_DESC, entry.arrival_description, WHITE))

    status_cell = arrival_status(entry.status, point, entry.platform)
    if status_cell is not None:
        cells.append(status_cell)

    if entry.delay_flag == DelayFlag.DELAYS_THRU:
        departure = "THRU"
    else:
        departure = arrival_clock(entry.departure_time)
    cells.append(Cell(OFFSET_DEPARTURE_TIME, departure, WHITE))
    cells.append(Cell(OFFSET_DEPARTURE_DESC, entry.departure_description, WHITE))
    return cells


def changed_arrivals(
    entries: Sequence[ArrivalEntry | None],
    changed: Sequence[bool],
    redraw: bool,
) -> Iterator[ArrivalRow]:
    """Rows to draw: every row on a full redraw, otherwise only changed ones.

    Raises ValueError if fewer than the board's row count are supplied.
    """
    if len(entries) < DISP_NUM_ARRIVAL or len(changed) < DISP_NUM_ARRIVAL:
        raise ValueError(f"the arrivals board needs {DISP_NUM_ARRIVAL} rows")
    for index, (entry, dirty) in enumerate(
        zip(entries[:DISP_NUM_ARRIVAL], changed[:DISP_NUM_ARRIVAL])
    ):
        if redraw or dirty:
            yield ArrivalRow(index=index, y=FIRST_ROW_Y + index * ROW_HEIGHT, entry=entry)