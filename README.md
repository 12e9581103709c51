# railboard

Game logic for a station signalling simulation. Each module works out what a
board or dialog would show and returns it as plain data, such as strings,
dataclasses and enums. Rendering that data is left to the caller.

## Modules

- `railboard.constants` holds the enumerations `Status`, `StockCode`,
  `DelayFlag`, `SelectorType`, `LocoFlag`, `Command` and `DialogControl`.
  It also holds shared values such as `DISP_NUM_ARRIVAL` and
  `DISP_NUM_DEPART`, which give the number of rows on each board (8).
  `Status.is_arriving()` and `Status.is_set_to_platform()` group the train
  states.
- `railboard.arrivals` builds the arrivals board:
  - `arrival_clock(value)` turns a time such as `657` into `"06:57"`. Values
    outside 1..2400 give `"XX:XX"`.
  - `arrival_headers()` returns the column headings as `Cell` objects.
  - `arrival_status(status, arrival_point, platform)` returns the status text
    and its colour.
  - `format_arrival(entry, delays_enabled)` returns the cells for one
    `ArrivalEntry`.
  - `changed_arrivals(entries, changed, redraw)` yields an `ArrivalRow` for
    each row that needs drawing.
- `railboard.departures` builds the departures board:
  - `departure_clock(value)` accepts values from 0 to 2359. Anything else
    gives `"XX:XX"`.
  - `departure_headers()` returns the column headings.
  - `stock_label(code)` gives the short stock label, for example `"37/4"`, or
    `None`.
  - `is_delayed(departure_time, work_time)` compares the departure time with
    the game clock, which counts in half-minutes.
  - `format_departure(entry, work_time)` returns the cells for one row.
  - `DepartureBoard.rows_to_draw(entries, changed, redraw)` returns the rows to
    draw. It always includes empty slots, and any row that is flagged as
    changed or whose status differs from the last call.
- `railboard.finish` handles the end of a shift:
  - `summarise(...)` works out average delays from totals counted in
    half-minutes and returns a `ShiftReport`.
  - `rating(average_delay, any_trains)` gives the performance rating text.
  - `ShiftReport.lines()` returns the lines of the report.
- `railboard.config` holds `Settings`, with `TimerSpeed`, delays, refuelling,
  save on exit, start optimised and sound:
  - `Settings.from_dialog(...)` builds settings from the dialog's choices. It
    raises `ValueError` for an unknown speed.
  - `Settings.describe()` lists the settings.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from railboard.finish import summarise

report = summarise(
    shift_length=4,
    arrival_delay=20,
    arrival_count=5,
    departure_delay=10,
    departure_count=5,
)
for line in report.lines():
    print(line)
```

```python
from railboard.arrivals import arrival_clock
from railboard.departures import departure_clock, stock_label
from railboard.constants import StockCode

arrival_clock(657)              # "06:57"
departure_clock(2400)           # "XX:XX"
stock_label(StockCode.CLASS37)  # "37/4"
```

```python
from railboard.config import Settings, TimerSpeed

settings = Settings.from_dialog(TimerSpeed.NORMAL, True, False, True, False, True)
print(settings.describe())
```

## What it does not do

The package has no user interface, no window or drawing code, and no command to
run. It does not simulate the layout itself. It has no train movement, routes,
locomotive yard or timetable loading. It does not read or write settings files.
The caller supplies the train entries, the game clock and the change flags.