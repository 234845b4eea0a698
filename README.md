# scribbleutil

Small building blocks for a music-scrobbling client:

- `scribbleutil.charutil`: ASCII character tests and case conversion that ignore the locale. Examples are `is_digit_ascii`, `is_whitespace_or_null` and `to_upper_ascii`. Each function takes a one-character string or an integer code. The case functions return the same kind of value they were given.
- `scribbleutil.strings`: helpers for stripping and comparing strings: `strip`, `strip_left`, `strip_right`, `string_compare`, `string_after_prefix`, `find_string_suffix` and their case-insensitive variants. Whitespace means the characters 0x00 to 0x20. Case folding covers ASCII letters only.
- `scribbleutil.stringview`: `BufferView` and `StringView`, views over a window of a sequence or string. Shrinking a view only moves its bounds; nothing is copied. `StringView` adds `find`, `split`, `compare`, `starts_with`, `skip_prefix`, `remove_suffix`, `strip` and the related methods.
- `scribbleutil.options`: a small command-line parser built from `OptionDef` entries.
- `scribbleutil.record`: `Record`, the description of one played track.
- `scribbleutil.errors`: helpers for exception chains linked through `__cause__`, and for errno-based `OSError`s.
- `scribbleutil.net.escape`: `url_escape`, which percent-encodes URI parameters.
- `scribbleutil.net.request`: `HttpRequest`, a single HTTP request that reports its outcome to a `ResponseHandler`.
- `scribbleutil.net.client`: `HttpClient`, which runs many requests at once on aiohttp.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing options

```python
from scribbleutil.options import OptionDef, OptionParser

options = [
    OptionDef("verbose", "v", False, "Print more messages"),
    OptionDef("conf", "c", True, "Configuration file"),
]

parser = OptionParser(options, ["prog", "-v", "--conf=/etc/app.conf", "extra"])
for result in parser:
    print(options[result.index].long_option, result.value)
print(parser.remaining())  # ['extra']
```

The first element of `argv` is skipped. The parser accepts these forms:

- `--name`
- `--name=value`
- `--name value`, for options that take a value
- `-c`
- `-c value`

Arguments that do not start with `-` are collected by `remaining()`. An unknown option raises `OptionError`, and so does an option that needs a value but has none. Iterating stops at the end of the command line. You can also call `next()` yourself: at the end it returns an `OptionResult` with index `-1`, and that result is false.

## String views

```python
from scribbleutil.stringview import StringView

view = StringView("  key=value  ")
view.strip()
key, value = view.split("=")
print(str(key), str(value))  # key value
```

## Working with records

```python
from scribbleutil.record import Record

record = Record(artist="Artist", track="Title")
assert record.is_defined()
```

A `Record` has these fields:

- `artist`, `track`, `album`, `number`, `mbid` and `time`: strings
- `length`: a `timedelta`
- `love`: a flag
- `source`: defaults to `"P"`

`is_defined()` is true when both the artist and the track are non-empty.

## Exception chains

```python
from scribbleutil.errors import get_full_message, nest_exception

error = nest_exception(OSError("disk full"), RuntimeError("saving failed"))
print(get_full_message(error))  # "saving failed; disk full"
```

The other helpers in this module are:

- `find_nested` returns the first exception of a given type in the chain.
- `print_exception` writes each message in the chain on its own line, to stderr by default.
- `make_errno` and `format_errno` build `OSError`s.
- `is_errno`, `is_file_not_found`, `is_path_not_found` and `is_access_denied` inspect `OSError`s.

## HTTP requests

```python
import asyncio
from scribbleutil.net.client import HttpClient
from scribbleutil.net.request import ResponseHandler


class Printer(ResponseHandler):
    def on_http_response(self, body):
        print(body)

    def on_http_error(self, error):
        print("failed:", error)


async def main():
    async with HttpClient(proxy=None, user_agent="scribbleutil/0.1") as client:
        client.add("http://localhost:8080/", "", Printer())
        await client.wait()

asyncio.run(main())
```

A request with a non-empty body is sent as a POST; a request without one is sent as a GET.

Each request calls exactly one of its handler's two methods. `on_http_error` receives an `HttpError` in these cases:

- the response body is over 8192 bytes,
- the status is outside 200–299,
- the connection fails.

Other clients:

- `HttpClient.cancel(request)` aborts a running request without calling its handler.
- `HttpClient.close()` cancels every outstanding request and releases the session.
- Leaving the `async with` block normally first waits for all requests to finish.

## What this package does not do

This package is a set of building blocks only. It does not connect to a music player. It does not talk to any scrobbling service's protocol, and it keeps no queue of plays on disk. It provides no command-line program and no daemon.