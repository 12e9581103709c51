"""Game configuration settings edited through the configuration dialog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

HELP_CONTEXT = 101


class TimerSpeed(IntEnum):
    """Speed of the game clock."""

    SLOW = 1
    NORMAL = 2
    FAST = 3


@dataclass
class Settings:
    """User options controlling the simulation."""

    timer_speed: TimerSpeed = TimerSpeed.NORMAL
    delay_enable: bool = False
    loco_refuel: bool = False
    save_on_exit: bool = False
    start_optimised: bool = False
    sound_enable: bool = False

    def __post_init__(self) -> None:
        self.timer_speed = TimerSpeed(self.timer_speed)
        self.delay_enable = bool(self.delay_enable)
        self.loco_refuel = bool(self.loco_refuel)
        self.save_on_exit = bool(self.save_on_exit)
        self.start_optimised = bool(self.start_optimised)
        self.sound_enable = bool(self.sound_enable)

    def describe(self) -> list[str]:
        """One line per setting, as reported when the dialog opens."""
        flags = (
            ("Delay", self.delay_enable),
            ("LocoRefuel", self.loco_refuel),
            ("SaveOnExit", self.save_on_exit),
            ("StartOptim", self.start_optimised),
            ("SoundEnable", self.sound_enable),
        )
        lines = [f"Timer speed is:{int(self.timer_speed)}"]
        lines.extend(
            f"{name} is {'En' if flag else 'Dis'}abled" for name, flag in flags
        )
        return lines

    @classmethod
    def from_dialog(
        cls, speed, delays, refuel, save_on_exit, start_optimised, sound
    ) -> "Settings":
        """Settings from the dialog's radio choice and check boxes.

        Raises ValueError if the speed is not one of the timer speeds.
        """
        return cls(
            timer_speed=TimerSpeed(speed),
            delay_enable=delays,
            loco_refuel=refuel,
            save_on_exit=save_on_exit,
            start_optimised=start_optimised,
            sound_enable=sound,
        )