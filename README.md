# mfutils

A collection of small helpers for everyday Python programs. It uses only the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `mfutils.clocks` provides `PauseableSteadyClock`, a monotonic clock measured in seconds.
  - `pause()` and `unpause()` stop and restart it. The time spent paused is left out of `now()`.
  - `paused` and `cumulated_offset` report its state.
  - `PauseableAdjustableSteadyClock` adds `add_offset(seconds)`.
  - Both have `new_clock()`.
- `mfutils.streams` provides lazy `Stream` pipelines.
  - Build one with `from_collection(collection)`, then chain `filter` and `map`.
  - Consume it with `for_each`, `to_list`, iteration or `len()`.
  - Every traversal reads the source again, so later changes to the collection are seen.
- `mfutils.fixed_length_vector` provides `FixedLengthVector(size, factory=None)`, a mutable sequence whose length is fixed.
  - Indexing is bounds-checked and raises `IndexError`.
  - `FixedLengthVector.from_buffer(seq)` wraps an existing sequence without copying it.
- `mfutils.array` provides `Array(size, values=None)`, a fixed-size array.
  - It has `at`, `front`, `back`, `fill`, `swap` and `max_size`.
  - Ordering is element-wise: `a < b` only when every element is smaller.
  - The helpers `get(array, index)` and `to_array(values)` go with it.
- `mfutils.timeparts` holds the calendar helpers.
  - Functions: `is_leap_year`, `days_in_month` (months 0-11) and the `validate_*` functions.
  - Constants for months, weekdays and DST flags, and `MAX_YEAR`.
  - `Interval(seconds, nanos)` is an immutable interval with `*_part` properties and `+`.
  - `DateError` is raised by date operations. Its `kind` is a `DateErrorKind`.
- `mfutils.date` provides `Date`, a local date and time with microseconds.
  - Fields follow C conventions: years count from 1900, months are 0-11.
  - Setting a field re-normalizes the date in the local time zone.
  - Equality and ordering allow a tolerance in microseconds.
  - Subtracting two dates gives an `Interval`.
  - Shared settings live in `Date.settings` (a `DateSettings`): `pattern`, `tolerance` and `ms_separator`.
  - `str(date)` and `Date.parse(text)` need a pattern, either set there or passed in.
- `mfutils.console` provides `ConsoleToolbox`, which writes prompts to an output stream and reads replies from an input stream.
  - `get_user_answer(question)` returns the next non-blank word.
  - `get_user_choice(UserChoiceParams(...))` asks until a word matches one of the regular expressions at its start. It returns the paired answer, or `None` once `max_attempts` is used up.
  - `get_next()` reads one character without echo on a terminal.
  - `press_enter_to_continue()` waits for the end of a line.
- `mfutils.environment` provides `get_env`, `set_env`, `unset_env`, `has_env`, `get_env_or_default`, `list_names` and `list_all`.
  - An empty name raises `ValueError`.
  - `get_env` raises `KeyError` for a variable that is not set.
- `mfutils.paths` provides `is_file`, `is_dir`, `get_file_size`, `create_directory`, `delete_file`, `delete_directory`, `get_cwd` and `list_files_in_directory`.
  - `list_files_in_directory` returns sorted names. Directories end with `FILE_SEPARATOR`.
  - Failures raise `OSError`.
- `mfutils.files` handles file encodings and whole-file reads.
  - `get_file_encoding` detects a UTF-8 or UTF-16LE byte order mark and returns a `FileEncoding`.
  - `open_file` opens a file just past that mark. UTF-8 and UTF-16LE files open as text; other files open in binary mode.
  - `read_whole_file` maps a whole, non-empty file into memory as `WholeFileData`, which is also a context manager.

## Examples

```python
import time
from mfutils.clocks import PauseableSteadyClock

clock = PauseableSteadyClock.new_clock()
start = clock.now()
clock.pause()
time.sleep(0.1)        # not counted
clock.unpause()
elapsed = clock.now() - start
```

```python
from mfutils.streams import from_collection

evens = from_collection([2, 22, 7, 987, -2, 0]).filter(lambda n: n % 2 == 0)
print(evens.to_list())        # [2, 22, -2, 0]
print(len(evens.map(str)))    # 4
```

```python
from mfutils.date import Date

Date.settings.pattern = "%Y-%m-%d %H:%M:%S"
print(Date.now())
```

```python
from mfutils.paths import list_files_in_directory
from mfutils.files import read_whole_file

print(list_files_in_directory("some/folder/"))  # directories end with a separator

with read_whole_file("data.bin") as data:
    print(data.size, data.content[:4])
```

```python
from mfutils.environment import get_env_or_default

home = get_env_or_default("HOME", "/tmp")
```

## What it does not do

This is a library only; it installs no command-line program.

`Date` works in the local time zone of the process. It offers no way to choose or switch time zones.