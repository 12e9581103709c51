"""Contents of the departures board: header, per-train rows and redraw selection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from railboard.arrivals import RED, WHITE, Cell, Colour
from railboard.constants import DISP_NUM_DEPART, Status, StockCode

# Horizontal text offsets of the board's columns.
OFFSET_TIME = 10
OFFSET_TYPE = 50
OFFSET_STOCK = 55
OFFSET_PLATFORM = 90
OFFSET_PLATFORM_CENTRE = 100
OFFSET_DESCRIPTION = 130

# Vertical layout of the timetable rows.
FIRST_ROW_Y = 25
ROW_HEIGHT = 17

BRIGHT_GREEN: Colour = (0, 255, 0)
YELLOW: Colour = (225, 225, 0)
GREY: Colour = (128, 128, 128)

INVALID_TIME = "XX:XX"

# Longest platform name the board shows.
PLATFORM_WIDTH = 3

_STOCK_LABELS: dict[int, str] = {
    StockCode.HST: "HST",
    StockCode.EMU: "EMU",
    StockCode.DELTIC: "DEL",
    StockCode.NORMAL: "NRM",
    StockCode.RELIEF: "RLF",
    StockCode.DMU1: "DMU",
    StockCode.DMU150: "SPR",
    StockCode.PUSHPULL: "P/P",
    StockCode.CLASS37: "37/4",
    StockCode.DMU156: "156",
    StockCode.DMU158: "158",
    StockCode.DMU170: "170",
    StockCode.TWIN156: "T156",
    StockCode.TWIN158: "T158",
    StockCode.TWIN170: "T170",
}


@dataclass(frozen=True)
class DepartureEntry:
    """What the board needs to know about one timetabled departure.

    ``platform`` is None when no platform holds the train.
    """

    departure_time: int
    stock_code: int = StockCode.NORMAL
    status: int = Status.INPLAT
    platform: str | None = None
    description: str = ""


@dataclass(frozen=True)
class DepartureRow:
    """A board row that needs drawing: its slot, vertical position and train (or None)."""

    index: int
    y: int
    entry: DepartureEntry | None = field(default=None)


def departure_clock(value: int) -> str:
    """Format a time such as 657 as "06:57"; values outside 0..2359 give "XX:XX"."""
    if value < 0 or value > 2359:
        return INVALID_TIME
    hours, minutes = divmod(value, 100)
    return f"{hours:02d}:{minutes:02d}"


def departure_headers() -> list[Cell]:
    """Column headings along the top of the board."""
    return [
        Cell(OFFSET_TIME, "Dep:"),
        Cell(OFFSET_TYPE, "Type:"),
        Cell(OFFSET_PLATFORM, "Plat:"),
        Cell(OFFSET_DESCRIPTION, "Description:"),
    ]


def stock_label(code: int) -> str | None:
    """Short label for a train's stock type, or None when it has no label."""
    return _STOCK_LABELS.get(code)


def _truncated_hundreds(value: int) -> int:
    quotient = abs(value) // 100
    return -quotient if value < 0 else quotient


def is_delayed(departure_time: int, work_time: int) -> bool:
    """True once the game clock, in half-minutes, has passed the departure time."""
    minutes = departure_time - 40 * _truncated_hundreds(departure_time)
    return work_time > 2 * minutes


def _platform_cell(entry: DepartureEntry, name: str, delayed: bool) -> Cell:
    if entry.status == Status.READYDEP:
        # The bare name, coloured as the signal disc it sits on.
        return Cell(OFFSET_PLATFORM_CENTRE, name, RED if delayed else BRIGHT_GREEN)
    if entry.status == Status.STOCKOK:
        return Cell(OFFSET_PLATFORM_CENTRE, name, WHITE)
    if delayed:
        colour = RED
    elif entry.status == Status.RELEASE:
        colour = YELLOW
    else:
        colour = WHITE
    return Cell(OFFSET_PLATFORM_CENTRE, f"({name})", colour)


def format_departure(entry: DepartureEntry | None, work_time: int) -> list[Cell]:
    """Cells for one board row; an empty slot gives no cells."""
    if entry is None:
        return []

    delayed = is_delayed(entry.departure_time, work_time)
    cells: list[Cell] = []
    if entry.platform is not None:
        name = entry.platform[:PLATFORM_WIDTH]
        cells.append(_platform_cell(entry, name, delayed))
        colour = WHITE
    else:
        colour = GREY

    cells.append(Cell(OFFSET_TIME, departure_clock(entry.departure_time), colour))
    label = stock_label(entry.stock_code)
    if label is not None:
        cells.append(Cell(OFFSET_STOCK, label, colour))
    cells.append(Cell(OFFSET_DESCRIPTION, entry.description, colour))
    return cells


class DepartureBoard:
    """Remembers each row's last drawn status so unchanged rows are skipped."""

    def __init__(self) -> None:
        self.old_status: list[int] = [Status.NONE] * DISP_NUM_DEPART

    def rows_to_draw(
        self,
        entries: Sequence[DepartureEntry | None],
        changed: Sequence[bool],
        redraw: bool,
    ) -> list[DepartureRow]:
        """Rows to draw, then record the statuses now shown.

        Empty slots are always drawn; a train's row is drawn on a full redraw,
        when flagged as changed, or when its status differs from last time.
        Raises ValueError if fewer than the board's row count are supplied.
        """
        if len(entries) < DISP_NUM_DEPART or len(changed) < DISP_NUM_DEPART:
            raise ValueError(f"the departures board needs {DISP_NUM_DEPART} rows")
        shown = list(entries[:DISP_NUM_DEPART])
        rows = [
            DepartureRow(index=index, y=FIRST_ROW_Y + index * ROW_HEIGHT, entry=entry)
            for index, (entry, dirty, old) in enumerate(
                zip(shown, changed[:DISP_NUM_DEPART], self.old_status)
            )
            if entry is None or redraw or dirty or entry.status != old
        ]
        self.old_status = [
            Status.NONE if entry is None else entry.status for entry in shown
        ]
        return rows