import pytest

from seaside.constants import (
    Coprocessor0Fn,
    Coprocessor0RegisterNumber,
    Coprocessor1Fn,
    CpuRegister,
    NumberFormat,
    Opcode,
    RegisterImmediateFn,
    ServiceCode,
    Special2Fn,
    SpecialFn,
)


def test_lookup_by_value_round_trips():
    assert [NumberFormat(int(m)) for m in NumberFormat] == list(NumberFormat)
    assert [Opcode(int(m)) for m in Opcode] == list(Opcode)
    assert [CpuRegister(int(m)) for m in CpuRegister] == list(CpuRegister)
    assert [Coprocessor0RegisterNumber(int(m)) for m in Coprocessor0RegisterNumber] == list(
        Coprocessor0RegisterNumber
    )
    assert [ServiceCode(int(m)) for m in ServiceCode] == list(ServiceCode)
    assert [Coprocessor0Fn(int(m)) for m in Coprocessor0Fn] == list(Coprocessor0Fn)
    assert [Coprocessor1Fn(int(m)) for m in Coprocessor1Fn] == list(Coprocessor1Fn)
    assert [RegisterImmediateFn(int(m)) for m in RegisterImmediateFn] == list(
        RegisterImmediateFn
    )
    assert [SpecialFn(int(m)) for m in SpecialFn] == list(SpecialFn)
    assert [Special2Fn(int(m)) for m in Special2Fn] == list(Special2Fn)


def test_values_are_unique():
    assert len({Opcode(m.value) for m in Opcode}) == len(Opcode.__members__)
    assert len({SpecialFn(m.value) for m in SpecialFn}) == len(SpecialFn.__members__)
    assert len({Special2Fn(m.value) for m in Special2Fn}) == len(Special2Fn.__members__)
    assert len({Coprocessor1Fn(m.value) for m in Coprocessor1Fn}) == len(
        Coprocessor1Fn.__members__
    )
    assert len({ServiceCode(m.value) for m in ServiceCode}) == len(ServiceCode.__members__)
    assert len({CpuRegister(m.value) for m in CpuRegister}) == len(CpuRegister.__members__)


@pytest.mark.parametrize(
    "enum_cls",
    [Opcode, SpecialFn, Special2Fn, RegisterImmediateFn, Coprocessor0Fn, Coprocessor1Fn],
)
def test_codes_fit_in_six_bits(enum_cls):
    assert all(0 <= member < 64 for member in enum_cls)


def test_cpu_registers_cover_zero_to_thirty_one():
    assert sorted(int(CpuRegister(n)) for n in range(32)) == list(range(32))
    assert CpuRegister(0) is CpuRegister.ZERO
    assert CpuRegister(31) is CpuRegister.RA
    assert CpuRegister.ZERO == min(CpuRegister)
    assert CpuRegister.RA == max(CpuRegister)


def test_unknown_values_raise():
    with pytest.raises(ValueError):
        Opcode(0x3F)
    with pytest.raises(ValueError):
        SpecialFn(0x05)
    with pytest.raises(ValueError):
        NumberFormat(21)


def test_pinned_codes():
    assert SpecialFn(0x0C) is SpecialFn.SYSTEM_CALL
    assert Coprocessor0RegisterNumber(14) is Coprocessor0RegisterNumber.EPC
    assert Coprocessor0RegisterNumber.EPC == CpuRegister(14)
    assert ServiceCode(17) is ServiceCode.EXIT_2


def test_service_codes_ordering_groups():
    assert ServiceCode(10) is ServiceCode.EXIT
    assert ServiceCode(30) is ServiceCode.TIME
    assert ServiceCode(44) is ServiceCode.RAND_DOUBLE
    assert ServiceCode(50) is ServiceCode.CONFIRM_DIALOG
    assert ServiceCode.EXIT < ServiceCode.EXIT_2 < ServiceCode.TIME
    assert ServiceCode.RAND_DOUBLE < ServiceCode.CONFIRM_DIALOG


def test_coprocessor0_numbers_alias_cpu_register_numbers():
    assert Coprocessor0RegisterNumber(int(CpuRegister.T0)) is Coprocessor0RegisterNumber.VADDR
    assert Coprocessor0RegisterNumber(int(CpuRegister.T4)) is Coprocessor0RegisterNumber.STATUS
    assert Coprocessor0RegisterNumber(int(CpuRegister.T5)) is Coprocessor0RegisterNumber.CAUSE