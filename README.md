# fujihack

A host-side toolkit for experimenting with Fujifilm camera firmware and the
Frontier app runtime. It parses 32-bit ARM ELF files, describes known camera
models and their firmware addresses, simulates the on-screen drawing and menu
code in memory, keeps runtime symbol tables, and prepares the data sent to a
hacked camera over PTP.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Purpose |
| --- | --- |
| `fujihack.elf` | 32-bit ELF structures and constants: `parse_header`, `parse_section_headers`, `parse_symbols`, `parse_relocations` |
| `fujihack.cpu` | Decoding of the ARM Main ID register: `decode_cpu_id` returns a `CpuInfo` with `describe()` |
| `fujihack.font` | The built-in 5x7 bitmap font: `glyph`, `glyph_width` |
| `fujihack.models` | Known camera models and firmware addresses: `get_model`, `list_models`, `CameraModel`, `stub_assembly` |
| `fujihack.framebuffer` | An in-memory screen with pixels, rectangles, text and BMP rendering: `Framebuffer`, `blue_shade` |
| `fujihack.fuji` | Firmware structures and enums: `FujiKey`, `InputMap`, `FileStats`, `PtpResponse`, `TextEntry`, `eeprom_model_name`, `eeprom_vendor` |
| `fujihack.ui` | A small immediate-mode menu engine: `Ui`, `Button`, `button_to_key`, `key_is_down` |
| `fujihack.symbols` | Runtime symbol tables and their binary entry format: `SymbolTable`, `encode_entry`, `decode_entries`, `ml_symbol` |
| `fujihack.ptp` | Data for the PTP hijack opcode and file upload: `HijackOp`, `hijack_commands`, `build_object_info` |
| `fujihack.pack` | The Frontier build utility: `add_syms`, `gen_app_meta`, `parse_readelf_line`, `AppMetadata`, `main` |

## Examples

Read the section headers of an ELF file:

```python
from fujihack.elf import parse_header, parse_section_headers

with open("app.elf", "rb") as f:
    data = f.read()
header = parse_header(data)
sections = parse_section_headers(data, header)
```

Look at what is known about a camera:

```python
from fujihack.models import get_model, list_models, stub_assembly

print(list_models())
xf1 = get_model("xf1_101")
print(hex(xf1.stub_address("fuji_fopen")))
print(hex(xf1.screen_layer(1)))
print(stub_assembly("fuji_fopen", xf1.stub_address("fuji_fopen"), pic=False))
```

Draw on a simulated screen:

```python
from fujihack.framebuffer import Framebuffer

screen = Framebuffer(720, 480)
screen.clear(0)
screen.fill_rect(10, 10, 100, 40, 0x222222)
screen.draw_string(20, 20, "Hello", 0xFFFFFF)
```

Run one frame of a menu. The key callback reports whether a `Button` is held;
a renderer returning 1 stops the menu:

```python
from fujihack.framebuffer import Framebuffer
from fujihack.ui import Ui

def menu(ui):
    ui.text("Main menu", 0xFFFFFF)
    if ui.button("Start"):
        print("started")
    return 0

ui = Ui(Framebuffer(720, 480), lambda button: False)
closed = ui.frame(menu)
```

Keep a symbol table (a stored name matches any looked-up name that begins
with it):

```python
from fujihack.symbols import SymbolTable, encode_entry

table = SymbolTable()
table.load_table(encode_entry("bmp_clear", 0x1000))
table.add("my_func", 0x2000)
assert table.lookup("my_func") == 0x2000
```

Turn a payload into the hijack commands sent to the camera, and build the
ObjectInfo block for a file upload:

```python
from fujihack.ptp import build_object_info, hijack_commands

with open("hack.bin", "rb") as f:
    payload = f.read()
commands = hijack_commands(payload)          # [(HijackOp, value), ...] ending in EXEC
info = build_object_info(0x10001, len(payload))  # 256 bytes, name AUTO_ACT.SCR
```

Decode the CPU ID register:

```python
from fujihack.cpu import decode_cpu_id

print(decode_cpu_id(0x41069265).describe())
```

## Command line

`frontier-pack` runs `fujihack.pack.main`:

```
frontier-pack -i os.elf -o os.bin -s
```

- `-i <file>` sets the input ELF file (default `os.elf`).
- `-o <file>` sets the output image (default `os.bin`); it must already exist.
- `-s` runs `arm-none-eabi-readelf -s` on the input and appends every `FUNC`
  symbol to the output in the symbol table entry format, then exits.
- `-a <file>` reads a JSON app description with `name`, `url` and `author`
  and prints its name.
- `-h` prints the list of options.

`arm-none-eabi-readelf` must be on your `PATH` for `-s`.

## What this package does not do

- It does not generate ARM patch instructions (branches, calls, NOPs, returns).
- It does not relocate, link or load ELF apps; `fujihack.elf` only parses
  their structures, and nothing fills a `SymbolTable` from an app.
- It does not talk to a camera. `fujihack.ptp` only prepares command values
  and upload data; sending them over USB is left to a PTP library of your
  choice.
- `-a` does not write the metadata into an app file.