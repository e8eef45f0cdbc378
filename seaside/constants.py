"""Numeric codes used by MIPS instructions, registers and syscalls."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class NumberFormat(IntEnum):
    """Floating-point unit number formats."""

    SINGLE_NO_PREFIX = 0
    DOUBLE_NO_PREFIX = 1
    WORD_NO_PREFIX = 4
    SINGLE = 16
    DOUBLE = 17
    WORD = 20


@unique
class Opcode(IntEnum):
    """Primary opcodes of MIPS instructions."""

    SPECIAL = 0x00
    REGISTER_IMMEDIATE = 0x01
    JUMP = 0x02
    JUMP_AND_LINK = 0x03
    BRANCH_EQUAL = 0x04
    BRANCH_NOT_EQUAL = 0x05
    BRANCH_LESS_EQUAL_ZERO = 0x06
    BRANCH_GREATER_THAN_ZERO = 0x07
    ADD_IMMEDIATE = 0x08
    ADD_IMMEDIATE_UNSIGNED = 0x09
    SET_LESS_THAN_IMMEDIATE = 0x0A
    SET_LESS_THAN_IMMEDIATE_UNSIGNED = 0x0B
    AND_IMMEDIATE = 0x0C
    OR_IMMEDIATE = 0x0D
    XOR_IMMEDIATE = 0x0E
    LOAD_UPPER_IMMEDIATE = 0x0F
    COPROCESSOR_0 = 0x10
    COPROCESSOR_1 = 0x11
    SPECIAL_2 = 0x1C
    LOAD_BYTE = 0x20
    LOAD_HALF = 0x21
    LOAD_WORD_LEFT = 0x22
    LOAD_WORD = 0x23
    LOAD_BYTE_UNSIGNED = 0x24
    LOAD_HALF_UNSIGNED = 0x25
    LOAD_WORD_RIGHT = 0x26
    STORE_BYTE = 0x28
    STORE_HALF = 0x29
    STORE_WORD_LEFT = 0x2A
    STORE_WORD = 0x2B
    STORE_CONDITIONAL = 0x2D
    STORE_WORD_RIGHT = 0x2E
    LOAD_LINKED = 0x30
    LOAD_WORD_COPROCESSOR_1 = 0x31
    LOAD_DOUBLE_COPROCESSOR_1 = 0x35
    STORE_WORD_COPROCESSOR_1 = 0x39
    STORE_DOUBLE_COPROCESSOR_1 = 0x3D


@unique
class CpuRegister(IntEnum):
    """CPU register numbers (excluding hi and lo)."""

    ZERO = 0
    AT = 1
    V0 = 2
    V1 = 3
    A0 = 4
    A1 = 5
    A2 = 6
    A3 = 7
    T0 = 8
    T1 = 9
    T2 = 10
    T3 = 11
    T4 = 12
    T5 = 13
    T6 = 14
    T7 = 15
    S0 = 16
    S1 = 17
    S2 = 18
    S3 = 19
    S4 = 20
    S5 = 21
    S6 = 22
    S7 = 23
    T8 = 24
    T9 = 25
    K0 = 26
    K1 = 27
    GP = 28
    SP = 29
    FP = 30
    RA = 31


@unique
class Coprocessor0RegisterNumber(IntEnum):
    """Coprocessor 0 register numbers."""

    VADDR = 8
    STATUS = 12
    CAUSE = 13
    EPC = 14


@unique
class ServiceCode(IntEnum):
    """Syscall service codes, passed in $v0."""

    PRINT_INT = 1
    PRINT_FLOAT = 2
    PRINT_DOUBLE = 3
    PRINT_STRING = 4
    READ_INT = 5
    READ_FLOAT = 6
    READ_DOUBLE = 7
    READ_STRING = 8
    SBRK = 9
    EXIT = 10
    PRINT_CHAR = 11
    READ_CHAR = 12
    OPEN_FILE = 13
    READ_FILE = 14
    WRITE_FILE = 15
    CLOSE_FILE = 16
    EXIT_2 = 17

    TIME = 30
    MIDI_OUT = 31
    SLEEP = 32
    MIDI_OUT_SYNC = 33
    PRINT_HEX = 34
    PRINT_BIN = 35
    PRINT_UINT = 36

    SET_SEED = 40
    RAND_INT = 41
    RAND_INT_RANGE = 42
    RAND_FLOAT = 43
    RAND_DOUBLE = 44

    CONFIRM_DIALOG = 50
    INPUT_DIALOG_INT = 51
    INPUT_DIALOG_FLOAT = 52
    INPUT_DIALOG_DOUBLE = 53
    INPUT_DIALOG_STRING = 54
    MESSAGE_DIALOG = 55
    MESSAGE_DIALOG_INT = 56
    MESSAGE_DIALOG_FLOAT = 57
    MESSAGE_DIALOG_DOUBLE = 58
    MESSAGE_DIALOG_STRING = 59


@unique
class Coprocessor0Fn(IntEnum):
    """Function codes for coprocessor 0 instructions."""

    MOVE_FROM_COPROCESSOR_0 = 0x00
    MOVE_TO_COPROCESSOR_0 = 0x04
    ERROR_RETURN = 0x10


@unique
class Coprocessor1Fn(IntEnum):
    """Function codes for coprocessor 1 (floating-point) instructions."""

    ADD = 0x00
    SUBTRACT = 0x01
    MULTIPLY = 0x02
    DIVIDE = 0x03
    SQUARE_ROOT = 0x04
    ABSOLUTE_VALUE = 0x05
    MOVE = 0x06
    NEGATE = 0x07
    ROUND_WORD = 0x0C
    TRUNCATE_WORD = 0x0D
    CEILING_WORD = 0x0E
    FLOOR_WORD = 0x0F
    MOVE_CONDITIONAL = 0x11
    MOVE_ZERO = 0x12
    MOVE_NOT_ZERO = 0x13
    CONVERT_TO_SINGLE = 0x20
    CONVERT_TO_DOUBLE = 0x21
    CONVERT_TO_WORD = 0x24
    COMPARE_EQUAL = 0x32
    COMPARE_LESS_THAN = 0x3C
    COMPARE_LESS_EQUAL = 0x3E


@unique
class RegisterImmediateFn(IntEnum):
    """Function codes for REGIMM instructions."""

    BRANCH_LESS_THAN_ZERO = 0x00
    BRANCH_GREATER_EQUAL_ZERO = 0x01
    TRAP_GREATER_EQUAL_IMMEDIATE = 0x08
    TRAP_GREATER_EQUAL_IMMEDIATE_UNSIGNED = 0x09
    TRAP_LESS_THAN_IMMEDIATE = 0x0A
    TRAP_LESS_THAN_IMMEDIATE_UNSIGNED = 0x0B
    TRAP_EQUAL_IMMEDIATE = 0x0C
    TRAP_NOT_EQUAL_IMMEDIATE = 0x0E
    BRANCH_LESS_THAN_ZERO_AND_LINK = 0x10
    BRANCH_GREATER_EQUAL_ZERO_AND_LINK = 0x11


@unique
class SpecialFn(IntEnum):
    """Function codes for SPECIAL instructions."""

    SHIFT_LEFT_LOGICAL = 0x00
    MOVE_CONDITIONAL = 0x01
    SHIFT_RIGHT_LOGICAL = 0x02
    SHIFT_RIGHT_ARITHMETIC = 0x03
    SHIFT_LEFT_LOGICAL_VARIABLE = 0x04
    SHIFT_RIGHT_LOGICAL_VARIABLE = 0x06
    SHIFT_RIGHT_ARITHMETIC_VARIABLE = 0x07
    JUMP_REGISTER = 0x08
    JUMP_AND_LINK_REGISTER = 0x09
    MOVE_ZERO = 0x0A
    MOVE_NOT_ZERO = 0x0B
    SYSTEM_CALL = 0x0C
    BREAK = 0x0D
    MOVE_FROM_HIGH = 0x10
    MOVE_TO_HIGH = 0x11
    MOVE_FROM_LOW = 0x12
    MOVE_TO_LOW = 0x13
    MULTIPLY = 0x18
    MULTIPLY_UNSIGNED = 0x19
    DIVIDE = 0x1A
    DIVIDE_UNSIGNED = 0x1B
    ADD = 0x20
    ADD_UNSIGNED = 0x21
    SUBTRACT = 0x22
    SUBTRACT_UNSIGNED = 0x23
    AND = 0x24
    OR = 0x25
    XOR = 0x26
    NOR = 0x27
    SET_LESS_THAN = 0x2A
    SET_LESS_THAN_UNSIGNED = 0x2B
    TRAP_GREATER_EQUAL = 0x30
    TRAP_GREATER_EQUAL_UNSIGNED = 0x31
    TRAP_LESS_THAN = 0x32
    TRAP_LESS_THAN_UNSIGNED = 0x33
    TRAP_EQUAL = 0x34
    TRAP_NOT_EQUAL = 0x36


@unique
class Special2Fn(IntEnum):
    """Function codes for SPECIAL2 instructions."""

    MULTIPLY_ADD = 0x00
    MULTIPLY_ADD_UNSIGNED = 0x01
    MULTIPLY = 0x02
    MULTIPLY_SUBTRACT = 0x04
    MULTIPLY_SUBTRACT_UNSIGNED = 0x05
    COUNT_LEADING_ZEROES = 0x20
    COUNT_LEADING_ONES = 0x21