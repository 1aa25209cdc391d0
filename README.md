# pwkit

Tools for reading PCK game archives (`.pck`, with an optional `.pkx`
continuation file) and for parsing the icon lists and text tables packed
inside them. No third-party dependencies are needed.

## Installation

```
pip install .
```

## Modules

- `pwkit.stream` — `PckStream(path, key=None)` opens a `.pck` file, and its
  `.pkx` sibling when one exists, as one continuous byte stream. It offers
  `seek`, `length`, `read_bytes`, `write_bytes` and little-endian
  `read_int16` / `read_int32` / `read_uint32` / `read_int64` and
  `write_int16` / `write_int32` / `write_uint32`. Reads past the end are
  padded with zero bytes; writes past the `.pck` size limit spill into the
  `.pkx` file. It is a context manager. Opening a path that does not exist
  creates an empty file.
- `pwkit.keys` — `PckKey`, a frozen dataclass holding the XOR keys and
  signatures (`key_1`, `key_2`, `asig_1`, `asig_2`, `fsig_1`, `fsig_2`) with
  the format's default values.
- `pwkit.engine` — `PckEngine` reads an archive through a stream:
  `read_entries` detects the archive version and returns the file table,
  `read_all_entries` reads it with an already known `version`,
  `files_count` returns the count stored in the trailer, and `read_file`
  returns an entry's contents, inflated when stored compressed.
- `pwkit.entry` — `PckFileEntry` (`path`, `offset`, `size`,
  `compressed_size`). `PckFileEntry.from_bytes(data, version)` parses a
  version 2 or version 3 file table record, compressed or not;
  `to_bytes(compression_level)` serialises a version 2 record, compressed
  when that is shorter.
- `pwkit.zlibcodec` — `decompress(data, size)` inflates into exactly `size`
  bytes (zero-padded when shorter) and raises `DecompressionError` on bad
  or oversized input; `compress(data, level)` returns the deflated data only
  when it is shorter than the input.
- `pwkit.iconlists` — `parse_icon_list(data)` reads an `iconlist_*.txt` file
  (GBK bytes or text) into an `IconList` with `width`, `height`, `rows`,
  `columns`, `names` and `positions`; `IconList.position(name)` returns the
  icon's `(x, y)` pixel offset in its atlas and raises `KeyError` for an
  unknown name.
- `pwkit.configtext` — parsers for the `configs.pck` tables, each taking
  bytes or text:
  - `parse_item_color` → `{item_id: color}`
  - `parse_item_desc` → list of descriptions
  - `parse_item_ext_desc` → `{item_id: text}`
  - `parse_item_ext_prop` → `{addon_id: property_type}` (addon ids as strings)
  - `parse_fixed_msg` → list of messages
- `pwkit.resources` — `load_surfaces(path)` and `load_configs(path)` open an
  archive and gather the files above into a `GameResources` object
  (`images`, `icon_lists`, `item_colors`, `item_desc`, `item_ext_desc`,
  `addon_types`, `fixed_msg`). A missing archive raises `FileNotFoundError`.
- `pwkit.server` — `build_start_command`, `build_stop_command` and
  `build_gs_command` build the shell command lines that start and stop
  server processes, expanding the `$HOME$` placeholder. They only return
  strings and never run anything.
- `pwkit.properties` — `attack_rate_text(attack_speed)` gives attacks per
  second (for example `"1.00 atq/seg."` for 20) and `chi_bars_text(max_ap)`
  names the chi bars for 99, 199, 299 or 399; other values raise
  `ValueError`.

## Reading an archive

```python
from pwkit.engine import PckEngine
from pwkit.stream import PckStream

with PckStream("configs.pck") as stream:
    engine = PckEngine()
    for entry in engine.read_entries(stream):
        if entry.path == "configs\\item_color.txt":
            raw = engine.read_file(stream, entry)
```

Paths inside an archive use backslashes, as the game stores them.

## Loading game resources

```python
from pwkit.resources import load_configs, load_surfaces

surfaces = load_surfaces("surfaces.pck")
configs = load_configs("configs.pck")
print(surfaces.icon_lists["skill"].position(surfaces.icon_lists["skill"].names[0]))
```

## Command line

```
pwkit path/to/configs.pck
pwkit path/to/configs.pck --entry "configs\item_color.txt"
pwkit path/to/configs.pck --entry "configs\item_color.txt" --extract item_color.txt
```

Prints `files: <count> entries: <count>`, then one tab-separated line per
entry: path, offset, size, compressed size. `--entry` limits the listing to
one archive path; `--extract FILE` writes that entry's contents to `FILE`
and requires `--entry`. The exit status is 1 for a missing archive or entry
and 2 for `--extract` without `--entry`.

## What it does not do

- It does not build or repack whole archives: there is no writer for the
  file table or trailer, only the low-level stream writes and
  `PckFileEntry.to_bytes`.
- It does not decode images: atlas and icon files are kept as raw bytes.
- It does not connect to a game server or run any command; the server
  helpers only produce command strings.

## Running the tests

```
pip install .[test]
pytest
```