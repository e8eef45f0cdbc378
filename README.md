# seaside

`seaside` is the configuration and project-loading layer of a MIPS
interpreter engine. It reads and validates `Seaside.toml` configuration
files, describes the emulated machine's memory map, feature switches and
register defaults, and locates the assembled segment files of a project
directory. It also provides the instruction-set constants (opcodes,
function codes, register numbers and syscall service codes) that an
interpreter needs to decode MIPS machine code.

## What this package does not do

There is no MIPS interpreter here: nothing decodes or executes machine
code, and no crash handler is shown. The package installs no command.
`seaside.cli.parse_args` parses the arguments of a `seaside` command line
(`--config PATH`, `--version`, and the subcommands `run DIRECTORY`,
`exe-path` and `experiment`) into an `argparse.Namespace`, but nothing in the
package acts on them.

## Loading a configuration

```python
from seaside.config import load_config, parse_config
from seaside.errors import SeasideError, ErrorKind

config = load_config("Seaside.toml")
config.validate()
```

`load_config(path)` reads a file and `parse_config(text)` parses TOML text
already in memory; neither validates. `Config.from_config(data)` builds a
configuration from a plain mapping, and `Config.to_config()` turns it back
into one. `seaside.config.SEASIDE_VERSION` is the version configurations are
checked against (`"0.1.0"`).

`Config.validate()` checks, in order:

- the configuration's `version` shares its major and minor number with
  `SEASIDE_VERSION` (a different patch number on either side is accepted);
- at least one of the `exit` and `exit_2` system syscalls is enabled;
- the memory map (see below).

Every failure is raised as a `SeasideError`, whose `kind` is an `ErrorKind`
such as `ErrorKind.INVALID_CONFIG`, `ErrorKind.OUTDATED_VERSION`,
`ErrorKind.EXTERNAL_FAILURE` or `ErrorKind.NOT_FOUND`. When an error carries
no message of its own, `str(error)` falls back to the description of its
kind.

## Finding the configuration and a project

```python
from seaside.engine import get_config, find_seaside_toml, locate_project_files

config = get_config()              # searches for Seaside.toml
files = locate_project_files(config, "build/my_program")
```

`get_config(config_path=None)` loads and validates the configuration at an
explicit path, or at the path found by `find_seaside_toml()`, which looks for
`Seaside.toml` in the working directory and then in the directory that holds
the `seaside` package directory.

`locate_project_files(config, directory)` checks that the project path is a
directory and returns a `ProjectFiles` record: the `text` file is required,
while `extern`, `data`, `ktext` and `kdata` are `None` when absent. When the
configuration sets `project_directory_is_cwd`, the working directory is
changed to the project directory first and the returned paths are relative
to it.

## Configuration sections

The top-level table needs `version`, `endian` (or its alias `byte_order`),
`project_directory_is_cwd`, `features`, `memory_map` and
`register_defaults`.

- `endian`: `"little"` / `"lsb"` or `"big"` / `"msb"`; see
  `seaside.endian.Endian`, whose `should_swap_bytes()` tells whether the
  byte order differs from the host's.
- `features`: `kernel_space_accessible`, `self_modifying_code`,
  `delay_slot`, `show_crash_handler`, `assembler` (with
  `pseudo_instructions` and `directives`) and `syscalls` (with `print`,
  `read`, `file`, `system`, `random` and `dialog`, the last holding `input`
  and `message`); see `seaside.features`. Each flag set accepts either a
  table of `name = true/false` entries, whose names are matched regardless
  of case style and whose unknown names are ignored, or one of the presets
  `"everything"` (`"all"`, `"full"`), `"nothing"` (`"none"`, `"empty"`) or
  `"recommended"` (`"default"`). The shared flag machinery lives in
  `seaside.flags` (`PresetFlag`, `BasicPreset`).
- `memory_map`: `user_space` and `kernel_space` address ranges (`base`,
  `limit`, both inclusive), an optional `exception_handler` address, and the
  `text`, `extern`, `data`, `ktext`, `kdata` and `mmio` segments (each with
  `base`, `limit` and `allocate`) and `runtime_data` (with `base`, `limit`,
  `heap_size` and `stack_size`); see `seaside.memory_map`.
- `register_defaults`: optional starting values for `hi`, `lo` and the
  `general_purpose` (`t0`, `sp`, ...), `floating_point` (`f0` ... `f31`) and
  `coprocessor_0` (`vaddr`, `status`, `cause`, `epc`) registers; unknown
  register names are ignored. See `seaside.registers`. Look a value up with
  `config.register_defaults[GeneralPurposeRegister.parse("sp")]`.

### Memory map checks

`MemoryMap.validate()` raises if user space reaches the base of kernel space
(`overlapping` checks only that the first range's limit is not below the
second's base, so ranges are expected in ascending order). If an exception
handler is set, it must lie in kernel space, and the segment placement
checks are then skipped; otherwise the `text`, `extern`, `data` and
`runtime_data` segments must lie within user space and `ktext`, `kdata` and
`mmio` within kernel space. Finally `Segments.validate()` raises if, in
that order, a segment overlaps a later one of the same space.

## Decoding constants

```python
from seaside.constants import Opcode, SpecialFn, ServiceCode

Opcode(0x23)          # Opcode.LOAD_WORD
SpecialFn(0x0C)       # SpecialFn.SYSTEM_CALL
ServiceCode.PRINT_INT
```

`seaside.constants` also has `NumberFormat`, `CpuRegister`,
`Coprocessor0RegisterNumber`, `Coprocessor0Fn`, `Coprocessor1Fn`,
`RegisterImmediateFn` and `Special2Fn`.

## Version comparison

`seaside.version` parses and formats semantic versions (`parse_version`,
`format_version`) and compares them by major and minor number with
`compare_versions(a, b)`, whose `VersionComparison` result gives an `order`
(`VersionOrder.COMPATIBLE`, `A_IS_AHEAD_OF_B` or `B_IS_AHEAD_OF_A`) and, when
compatible, whether `a` has a newer patch (`patch_available`).