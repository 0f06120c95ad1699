# auxengine

The core of a small application engine. It has a frame clock and a run
loop that works in standalone or auxiliary mode. It keeps input bindings
for each device and writes a log to a file and to the console. It also
reads and writes the file formats the engine uses. It needs nothing
outside the standard library.

## What is in it

| Module | Purpose |
| --- | --- |
| `auxengine.engine` | `Engine`, `Mode` and the abstract `WindowHandler`. The engine starts, runs, updates and shuts down. |
| `auxengine.app` | `App`, the base class for what the engine runs each frame |
| `auxengine.engine_clock` | `EngineClock` gives frame ticks, delta time and the sleep time for a target FPS. |
| `auxengine.input_handler` | `InputHandler` has key, mouse button, scroll, gamepad button and gamepad axis bindings, along with the `Key`, `MouseButton`, `GamepadButton`, `GamepadAxis` and other enums. |
| `auxengine.config` | `EngineConfig` reads the window and graphics settings from `config/AuxEngine.ini`. |
| `auxengine.debug_log` | `LogLevel`, `format_record`, `debug_init`, `debug_log`, `console_log` and `output_file_log` |
| `auxengine.ini` | `IniFile`, `IniStructure`, `IniMap`, `parse_ini`, `generate_ini` and `merge_lines`. It reads and writes INI files in order and updates them in place. |
| `auxengine.ini_parser` | `IniParser` gives typed getters over an INI file. |
| `auxengine.csv_io` | `CsvReader` and `CsvWriter` |
| `auxengine.json_parser` | `JsonParser` |
| `auxengine.file_utils` | Helpers for files and directories |
| `auxengine.hashing` | `crc32` |

## Writing an app

Subclass `App` and override the hooks you need. `enter`, `update` and
`exit` call `on_enter`, `on_update` and `on_exit`.

```python
from auxengine.app import App
from auxengine.engine import Engine, Mode


class Game(App):
    def on_enter(self):
        print("entered")
        return True

    def on_update(self, delta_time):
        ...

    def on_exit(self):
        print("bye")


engine = Engine.get()
engine.start(Mode.AUXILIARY)
engine.load_app(Game())
engine.update(1 / 30)
engine.shutdown()
```

`Engine.get()` always returns the same engine. You can also build an
engine yourself with `Engine(input_handler, window_factory, clock)`.

`start(mode, output_dir)` first calls `debug_init(output_dir, ...)`,
which creates `Output-Log.txt` in the output directory.

In standalone mode, `start` also does the following:

- It loads `EngineConfig(output_dir)` and sets the clock's FPS from it.
- It creates a window with the window factory and initializes the input handler with that window.

Then `run` loops until the engine stops and shuts it down. Each frame it
updates the clock, calls `update`, and sleeps for the rest of the frame.
The loop stops when Escape's latest keyboard event is a press or a
repeat.

In auxiliary mode the engine opens no window and `run` does nothing.
You drive it yourself with `update`.

## Input bindings

You feed raw events in with the `process_*` methods, for example
`process_keyboard_input(InputEvent(button, action, value, timestamp))`.
`execute_input_bindings()` then runs the matching callbacks, and
`InputHandler.update` calls it. A binding fires once for each new
matching action. A press followed by a release within 350 ms counts as
a click.

```python
from auxengine.input_handler import InputAction, InputEvent, InputHandler, Key

handler = InputHandler()
handler.bind_key(Key.SPACE, InputAction.CLICKED, lambda button, action: print("jump"))
handler.process_keyboard_input(InputEvent(Key.SPACE, InputAction.PRESSED, 0.0, 1000))
handler.process_keyboard_input(InputEvent(Key.SPACE, InputAction.RELEASED, 0.0, 1100))
handler.execute_input_bindings()   # prints "jump"
handler.clear_key_binding(Key.SPACE)
```

Gamepad thumbsticks have a dead zone of 0.25. Triggers rest at -1.0 and
count as moved from -0.95. Gamepads count as connected only after
`device_connected` is called. The keyboard and mouse count as connected
from the start.

## Configuration and INI files

`EngineConfig(output_dir)` creates `<output_dir>config/AuxEngine.ini`
with the `Window` and `Graphics` sections, and keeps any values already
in the file. When the file gives no value, the defaults are:

- name `AuxEngine`
- a 256 × 256 window
- 30 FPS

```python
from auxengine.ini_parser import IniParser

parser = IniParser("settings.ini")
parser.set("Window", "width", "1280")
parser.write()          # creates the file, or changes only what differs and keeps comments
parser.read()
print(parser.get_integer("Window", "width", 256))
```

Section and key names are trimmed and matched without regard to case.
Reading a file that does not exist raises `FileNotFoundError`.

## CSV and JSON

`CsvReader(path)` yields each row as a dictionary keyed by the header
line. If you give no delimiter, it guesses one from `, | tab ; ^`.

`CsvWriter.from_csv(stream)` and `CsvWriter.from_tsv(stream)` return
writers. You write rows with `write_row(row)` or `writer << row`.
Floats are written with `CsvWriter.decimal_places` decimals, which is 5
by default. `CsvWriter.set_decimal_places` changes it.

`JsonParser` parses with `parse_string` or `parse_file`, and you look up
top-level values with `get_value` and `contains`. When a parse fails it
raises `json.JSONDecodeError` and keeps the previous document.

## Logging

```python
from auxengine.debug_log import LogLevel, debug_init, debug_log

debug_init("logs/", "starting up")
debug_log(LogLevel.INFO, "loaded {} assets", 12)
```

Each record has the form
`[MM/DD/YY|HH:MM:SS][INFO][file:line]: message`, where `file` is the
caller's source path. Records are appended to `Output-Log.txt` in the
directory given to `debug_init` and printed to the console.

## File helpers

The functions in `auxengine.file_utils` raise the usual `OSError`
subclasses or `ValueError` when they fail. `create_ini_file` and
`create_csv_file` check the file extension and reject an empty list of
sections or headers. `create_unique_directory` appends ` (1)`, ` (2)`
and so on when the name is already taken.

## Hashing

```python
from auxengine.hashing import crc32

crc32(b"hello")   # standard CRC-32; text is hashed as UTF-8
```

## What it does not do

The package opens no real window and reads no hardware.

- The default window that `Engine` creates exists only in memory. To show anything on screen, pass your own `WindowHandler` subclass through `window_factory`.
- `InputHandler` does not poll keyboards, mice or gamepads. Input reaches it only through its `process_*` and `device_connected` methods.

There is no command-line program. You use the package as a library.