import pytest

from railboard.constants import (
    Command,
    DelayFlag,
    LocoFlag,
    SelectorType,
    Status,
    StockCode,
)


def test_status_documented_codes():
    assert Status(1) is Status.DUE
    assert Status(15) is Status.READYDEP
    assert Status(30) is Status.TWINASSOC
    assert Status(1).is_arriving() is True
    assert Status(15).is_arriving() is False


@pytest.mark.parametrize("status", [Status.SETPLAT, Status.ARRA, Status.ARRB, Status.ARRC])
def test_set_to_platform_range(status):
    assert status.is_set_to_platform() is True


@pytest.mark.parametrize(
    "status", [Status.NONE, Status.DUE, Status.FIRSTHELD, Status.ARRD, Status.INPLAT]
)
def test_not_set_to_platform(status):
    assert status.is_set_to_platform() is False


def test_is_arriving_covers_due_to_final_stage():
    arriving = [s for s in Status if s.is_arriving()]
    assert arriving[0] is Status.DUE
    assert arriving[-1] is Status.ARRF
    assert all(not s.is_arriving() for s in (Status.NONE, Status.INPLAT, Status.DEPF))


def test_set_to_platform_implies_arriving():
    set_to_platform = [s for s in Status if s.is_set_to_platform()]
    assert set_to_platform == [Status.SETPLAT, Status.ARRA, Status.ARRB, Status.ARRC]
    assert Status.SETPLAT.is_arriving() is True
    assert Status.ARRC.is_arriving() is True
    assert [s for s in set_to_platform if not s.is_arriving()] == []


def test_stock_codes_from_values():
    assert StockCode(2) is StockCode.HST
    assert StockCode(22) is StockCode.DMU150
    with pytest.raises(ValueError):
        StockCode(23)


def test_other_enums_round_trip():
    assert DelayFlag(DelayFlag.DELAYS_THRU.value) is DelayFlag.DELAYS_THRU
    assert SelectorType(SelectorType.LOCOYARD.value) is SelectorType.LOCOYARD
    assert LocoFlag(LocoFlag.LIGHT.value) is LocoFlag.LIGHT
    assert Command(Command.HELP_ABOUT.value) is Command.HELP_ABOUT


def test_command_values_unique():
    values = [c.value for c in Command]
    assert len(values) == len(set(values))
    assert [Command(v) for v in values] == list(Command)
    assert Command(999) is Command.HELP_ABOUT