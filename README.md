# sockkit

Small, dependency-free building blocks for writing HTTP and WebSocket
servers in Python.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `sockkit.bloom.BloomFilter` – a 256-bit filter tuned for header names,
  with `add(key)`, `might_have(key)` and `reset()`. Keys may be `str` or
  `bytes`; keys shorter than two bytes are never stored and are always
  reported as possibly present.
- `sockkit.backpressure.BackPressure` – a per-socket send buffer.
  `erase(length)` only marks bytes at the front as removed and compacts
  the buffer once the marked part exceeds 1/32 of it. Also offers
  `append`, `clear`, `reserve`, `resize`, the `data` and `total_length`
  properties, and `len()` for the live length.
- `sockkit.errors` – the `HttpError` codes a request parser can report and
  `error_response(error)`, the raw HTTP response bytes for each; an
  unknown value raises `ValueError`.
- `sockkit.crc32` – `crc32(data, crc)` feeds bytes into a running,
  non-finalised CRC-32 register (starting at `0xFFFFFFFF`), and
  `checksum_hex(chunks)` returns the finalised checksum of all chunks as
  lower-case hex followed by a newline.
- `sockkit.chunking.make_chunked(data)` – yields chunks of a byte string,
  each preceded by a size byte: 0 means all that remains, 1–255 a chunk of
  at most that many bytes.
- `sockkit.content` – `has_ext(file, ext)`, `content_type_for(path)` and
  `resolve_request_path(url)` for simple static file serving. Paths ending
  in `/` are served as `text/html` and resolved to `index.html`; unknown
  extensions give `text/plain`; an empty URL raises `ValueError`.
- `sockkit.compat.has_broken_compression(user_agent)` – detects Safari
  15.0–15.3, whose permessage-deflate support is broken.
- `sockkit.behavior` – the `SocketContextOptions` and `WebSocketBehavior`
  dataclasses. `WebSocketBehavior.validate()` raises `ValueError` unless
  `idle_timeout` is 0 or within 8–960 seconds and `max_lifetime` is within
  0–240 minutes, and returns the behaviour otherwise.
- `sockkit.address.address_as_text(binary)` – renders a packed 4-byte IPv4
  or 16-byte IPv6 address as text (IPv6 as eight uncompressed hex groups);
  an empty address gives `""`, any other length raises `ValueError`.
- `sockkit.optparse` – a reentrant, getopt-like parser: `OptParser` with
  `next(optstring)`, `next_long(longopts)` and `arg()`, plus `LongOption`,
  `ArgType` and `OptionError` (a `ValueError` raised for unknown options,
  missing arguments and arguments given to options that take none).
  Non-option arguments are moved behind the options unless `permute` is
  off.

## Example

```python
from sockkit.crc32 import checksum_hex
from sockkit.content import content_type_for, resolve_request_path
from sockkit.optparse import ArgType, LongOption, OptParser

print(checksum_hex([b"hello ", b"world"]), end="")

print(resolve_request_path("/"))           # /index.html
print(content_type_for("/style.css"))      # text/css

longopts = [
    LongOption("port", "p", ArgType.REQUIRED),
    LongOption("verbose", "v", ArgType.NONE),
]
parser = OptParser(["prog", "--port", "3000", "-v", "file.txt"])
while (opt := parser.next_long(longopts)) is not None:
    print(opt.longname, parser.optarg)
print(parser.arg())                        # file.txt
```

## What this package does not do

sockkit contains no server: it opens no sockets, runs no event loop,
parses no HTTP requests and frames no WebSocket messages. It provides no
command-line program. The pieces above are meant to be used by a server
you write yourself.