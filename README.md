# s25util

A small library of general-purpose helpers for games and tools: binary
files, an in-memory serializer, an appendable MD5 hasher, a tokenizer, time
formatting, portable file names, system and environment helpers, and the
basic types for network messages. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `s25util.binaryfile`

`BinaryFile` reads and writes little-endian integers (8, 16 and 32 bit,
signed and unsigned), raw bytes and length-prefixed, NUL-terminated UTF-8
strings (`write_short_string` with a one-byte length, `write_long_string`
with a four-byte length). `open(path, mode)` takes an `OpenFileMode`
(`WRITE`, `APPEND`, `READ`) and returns whether the file could be opened.
A `BinaryFile` is a context manager that closes the file on exit. Failed or
short reads and writes raise `BinaryFileError`; a short string that is too
long raises `ValueError`. `end_of_file()` becomes true once a read ran past
the end of the file.

```python
from s25util.binaryfile import BinaryFile, OpenFileMode

with BinaryFile() as f:
    f.open("data.bin", OpenFileMode.WRITE)
    f.write_unsigned_int(42)
    f.write_short_string("hello")
```

### `s25util.serializer`

`Serializer` is a byte buffer that is written at its end and read from a
moving position. It pushes and pops unsigned chars, 32-bit unsigned ints
(big-endian), bools, variable-size integers (7 bits per byte) and strings
(with a var-size or a 32-bit length). `write_to_file` and `read_from_file`
store and load the buffer through a `BinaryFile`. Popping past the end, or a
var-size entry longer than 5 bytes, raises `SerializerError`.

```python
from s25util.serializer import Serializer

ser = Serializer()
ser.push_var_size(300)
ser.push_string("hello")
ser.push_bool(True)

assert ser.pop_var_size() == 300
assert ser.pop_string() == "hello"
assert ser.pop_bool() is True
```

### `s25util.tokenizer`

`Tokenizer(data, delimiter)` splits a string at any of the delimiter
characters. Use `next()` for one token at a time, iterate over it, or call
`explode()` for all remaining tokens.

```python
from s25util.tokenizer import Tokenizer

assert Tokenizer("a,b;c", ",;").explode() == ["a", "b", "c"]
```

### `s25util.mytime`

`current_time()` returns the Unix time in seconds, `current_tick()` a
monotonic tick count. `format_time(fmt, timestamp=None)` formats a
timestamp in local time with the codes `%Y %m %d %H %i %s %%`; unknown codes
are logged as a warning and copied through.

### `s25util.md5`

`MD5` computes MD5 digests. `process(data, add=True)` appends `data` to the
input of the previous call instead of starting over. Results come from
`digest()` and `hexdigest()`; an `MD5` compares equal to another `MD5` with
the same digest or to its hex string. `clear()` forgets all input.

```python
from s25util.md5 import MD5

h = MD5()
h.process(b"abc")
print(h.hexdigest())  # 900150983cd24fb0d6963f7d28e17f72
```

### `s25util.system`

Environment variables (`env_var_exists`, `get_env_var`,
`get_path_from_env_var`, `set_env_var`, `remove_env_var`), the home path
(`$HOME`, else the current directory), the user name (`$USER`, raising
`RuntimeError` if unset), the path of the running interpreter
(`get_executable_path`), the OS name with its pointer width
(`get_os_name`) and the compiler the interpreter was built with
(`get_compiler_name`). `execute(command, arguments)` runs a program from its
own folder through the shell and returns whether it exited with status 0.
`scoped_current_path_change(path)` is a context manager that changes the
working directory for the duration of a block.

### `s25util.filefuncs`

`make_portable_name()`, `make_portable_file_name()` and
`make_portable_dir_name()` turn a string into a name valid on both POSIX and
Windows, with the matching checks `is_portable_name()`,
`is_portable_file_name()` and `is_portable_directory_name()`.

### `s25util.strfuncs`

`create_rand_string()` builds a random string from lowercase letters,
uppercase letters, digits and special characters as selected;
`create_rand_string_from(length, charset, seed=None)` draws from a given
charset, reproducibly when a seed is given. `copy_limited(text, max_chars)`
raises `BufferTooSmallError` if the text and its terminator do not fit.
`format_hex(value, type_size)` gives uppercase hex such as `0x00FF`.

### `s25util.lifetime`

`LifetimeTracker` calls registered cleanup functions in ascending order of
longevity; registering a function again replaces its earlier entry.
`set_longevity(longevity, func)` registers with a shared tracker that runs
at interpreter exit.

### `s25util.network`

`make_ip(a, b, c, d)` combines four octets into a 32-bit IPv4 address.
`ProxyType` and `ProxySettings` describe a proxy. `Message` is the base of
network messages with a 16-bit id; subclasses list their payload in
`payload_fields` and get `serialize` and `deserialize` for a `Serializer`.
`NullMessage` and `DeadMessage` dispatch to `MessageInterface.on_nms_null`
and `on_nms_dead`, which return False unless overridden.

## What this package does not do

The network module holds only message and proxy types. There are no
sockets, no message queue or transport, no host lookup, no LAN discovery
and no UPnP port mapping; sending and receiving messages is left to the
application.