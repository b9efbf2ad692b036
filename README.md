# xtrlog

Supporting pieces for an asynchronous logging back end, in plain Python with
no third-party dependencies.

## Modules

- `xtrlog.sanitize`: `sanitize(text)` returns text in which every byte
  outside printable ASCII, and the backslash, is written as `\xHH` (upper-case
  hex). This keeps log text from injecting terminal escape sequences.
  `sanitize_char(c)` does the same for one character or byte value.
- `xtrlog.align`: `align(value, alignment)` rounds an unsigned value up to a
  power-of-two boundary. It raises `ValueError` for a negative value or an
  alignment that is not a power of two.
- `xtrlog.pagesize`: `page_size()` and `align_to_page_size(length)`.
- `xtrlog.strings`: `strzcpy(src, size)` truncates to fit a nul-terminated
  field of `size` slots. `rcut(s, pos)` returns the suffix starting at `pos`.
  `rindex(s, c)` returns the last index of `c`, or -1.
- `xtrlog.file_descriptor`: `FileDescriptor` owns an OS file descriptor. It
  has `open(path, flags, mode)`, `is_open()`, `reset(fd)`, `release()`,
  `close()` and `fileno()`, and it works as a context manager.
- `xtrlog.storage`: `StorageInterface`, the abstract base for output back
  ends. Its methods are `allocate_buffer`, `submit_buffer`, `flush`, `sync`
  and `reopen`. The module also defines `NULL_REOPEN_PATH`.
- `xtrlog.protocol`: the binary frames of the command protocol:
  - requests: `Status`, `SetLevel`, `Reopen`;
  - replies: `SinkInfo`, `Success`, `Error`;
  - supporting types: `Pattern`, `PatternType`, `LogLevel`, `MessageId`;
  - functions: `encode_frame`, `decode_frame`, `frame_id_of`,
    `format_log_level` and `format_sink_info`.

  Malformed or unexpected frames raise `FrameError`.
- `xtrlog.matcher`: `Matcher`, the base class for selecting sinks by name.
  The base class accepts every name.
- `xtrlog.transport`: `command_connect(path)`, `command_send(sock, data)`
  and `command_recv(sock)`. They work over local `SOCK_SEQPACKET` sockets,
  with one frame per packet.

## Examples

```python
from xtrlog.sanitize import sanitize

sanitize("hello\x1b[31m")   # 'hello\\x1B[31m'
```

```python
from xtrlog.protocol import (
    LogLevel, Pattern, PatternType, SetLevel, SinkInfo,
    decode_frame, encode_frame, format_sink_info,
)

request = SetLevel(LogLevel.DEBUG, Pattern(PatternType.WILDCARD, False, "net*"))
data = encode_frame(request)
assert decode_frame(data, SetLevel) == request

format_sink_info(SinkInfo(LogLevel.INFO, 65536, 2048, 0, "main"))
# 'main (info) 64K capacity, 2K used, 0 dropped'
```

The following sends a status request to a command socket and reads the
replies:

```python
from xtrlog.protocol import SinkInfo, Status, decode_frame, encode_frame
from xtrlog.transport import command_connect, command_recv, command_send

with command_connect("/tmp/example.sock") as sock:
    command_send(sock, encode_frame(Status()))
    while packet := command_recv(sock):
        print(decode_frame(packet, SinkInfo))
```

## What it does not do

This package is not a logger. It has no sinks, no buffering or formatting of
log records, and no background writer. It has no concrete file back end
behind `StorageInterface`. It has no server that answers command frames, and
no command-line tool. It provides the pieces listed above and nothing more.

## Tests

Install the `test` extra and run `pytest`.