"""Shared identifiers: train states, stock codes, flags and menu commands."""

from __future__ import annotations

from enum import IntEnum

NUM_SELECTORS = 17
NUM_TOOL_BUTTONS = 1
INI_FILE_NAME = "RAILC.INI"
HELP_FILE_NAME = "RAILC.HLP"
APP_NAME = "Rail Control"

# Number of arrival / departure rows shown on the boards.
DISP_NUM_ARRIVAL = 8
DISP_NUM_DEPART = 8

# Resource identifier of the digital clock bitmap.
HR_DIGITAL = 800


class Command(IntEnum):
    """Menu and control command identifiers."""

    FILE_NEW = 100
    FILE_PAUSE = 101
    FILE_STOP = 102
    FILE_SET_DEFAULTS = 103
    FILE_EXIT = 110
    OPTIONS_OPTIMISE = 200
    OPTIONS_CONFIGURE = 201
    WINDOW_ARRIVALS = 300
    WINDOW_DEPARTURES = 301
    WINDOW_PLATFORMS = 302
    WINDOW_LOCO_YARD = 303
    SELECT = 500
    HELP_CONTENTS = 900
    HELP_HELP = 901
    HELP_BUTTON = 998
    HELP_ABOUT = 999
    TIMER = 2100


class DialogControl(IntEnum):
    """Control identifiers used by the configuration, finish and start dialogs."""

    CONF_SLOW = 3000
    CONF_NORMAL = 3001
    CONF_FAST = 3002
    CONF_DELAY = 3003
    CONF_REFUEL = 3004
    CONF_SAVE_EXIT = 3005
    CONF_AUTO_OPTIMISE = 3006
    CONF_SOUND = 3007
    FINISH_ACHIEVED = 1200
    FINISH_ARRIVAL_DELAY = 1201
    FINISH_DEPARTURE_DELAY = 1202
    FINISH_RATING = 1203
    START_TEXT1 = 1300
    START_TEXT2 = 1301
    START_TEXT3 = 1302


class DelayFlag(IntEnum):
    """How a timetabled train may be delayed."""

    NO_DELAYS = 0
    DELAYS = 1
    DELAYS_MAINT = 2
    DELAYS_THRU = 3
    ONLY_LATE = 4
    ONLY_LATE_THRU = 5


class SelectorType(IntEnum):
    """Kinds of selector on the layout."""

    INPUT = 1
    OUTPUT = 2
    PLAT = 3
    ELECTRIC_PLAT = 4
    HOLD = 5
    LOCOYARD = 6


class Status(IntEnum):
    """Progress of a train through the station."""

    NONE = 0
    DUE = 1
    APPROACH = 2
    HELD = 3
    FIRSTHELD = 4
    SETPLAT = 5
    ARRA = 6
    ARRB = 7
    ARRC = 8
    ARRD = 9
    ARRE = 10
    ARRF = 11
    INPLAT = 12
    RELEASE = 13
    STOCKOK = 14
    READYDEP = 15
    STARTDEP = 16
    DEPA = 17
    DEPB = 18
    DEPC = 19
    DEPD = 20
    DEPE = 21
    DEPF = 22
    TWINASSOC = 30

    def is_arriving(self) -> bool:
        """True while the train is due, approaching, held or running in."""
        return Status.DUE <= self <= Status.ARRF

    def is_set_to_platform(self) -> bool:
        """True once a route to a platform has been set but before stage D."""
        return Status.SETPLAT <= self <= Status.ARRC


class LocoFlag(IntEnum):
    """State of a locomotive."""

    UNASSIGN = 1
    ASSIGNED = 2
    INPLAT = 3
    MAINTAIN = 4
    NEEDFUEL = 5
    REFUEL = 6
    LOCOYARD = 7
    LIGHT = 8


class StockCode(IntEnum):
    """Type of rolling stock working a train."""

    ECS = 1
    HST = 2
    EMU = 3
    DELTIC = 4
    NORMAL = 5
    RELIEF = 6
    LIGHTECS = 7
    LIGHTNORM = 8
    LIGHTDELT = 9
    PUSHPULL = 10
    DMU1 = 11
    CLASS37 = 12
    LIGHTRLF = 13
    LIGHT37 = 14
    HEAVYFREIGHT = 15
    DMU156 = 16
    DMU158 = 17
    DMU170 = 18
    TWIN156 = 19
    TWIN158 = 20
    TWIN170 = 21
    DMU150 = 22