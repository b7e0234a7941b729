# quickfetch

Building blocks for HTTP requests: a `Request` that holds a URL, a method,
ordered headers and a body, plus the small collections it is made of.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a request

```python
from quickfetch.request import Request, BodyKind

request = Request.from_format("https://example.com/items/%d", 42)
request.set_method("POST")
request.add_header("Accept", "application/json")
request.add_header_fmt("X-Attempt", "%d", 1)

request.send_json({"name": "widget"})
assert request.body_kind is BodyKind.JSON
print(request.body_bytes())  # b'{"name": "widget"}'

request.represent()  # prints the route, method, headers and a raw body
```

- `Request(url, method="GET")` starts with no headers and no body.
- `from_format` and `add_header_fmt` fill the format in with `%` when
  arguments are given, and use it as it stands otherwise.
- `add_header` replaces the value of a header with exactly the same name
  instead of adding a second one.
- `send_any(content)` stores a copy of the bytes; `send_body_str(text)`
  stores the text encoded as UTF-8; `send_json(value)` stores a deep copy of
  the value.
- `create_json_object()` and `create_json_array()` make an empty dict or list
  the body and return it, so filling it in changes the body.
- Setting a body replaces any earlier one; `clear_body()` removes it.
- `body` gives the stored bytes or JSON value (or `None`), `body_kind` says
  which, and `body_bytes()` returns what would go on the wire: the raw bytes,
  the JSON encoded as UTF-8, or `b""`.

## Headers

`quickfetch.headers.Headers` keeps `Header(key, value)` entries in insertion
order.

```python
from quickfetch.headers import Headers

headers = Headers()
headers.append("Content-Type", "text/html")
headers.set("Content-Type", "text/plain")   # replaces the first exact match

headers.get("Content-Type")          # 'text/plain'
headers.get_sanitized("contenttype") # 'text/plain'
headers.key_at(0), headers.value_at(0)
headers.key_at(5)                    # None
```

`append` allows duplicate names. `get_sanitized(key)` strips blanks, `-` and
`_` from each stored name and compares it, ignoring ASCII case, with `key`;
`key` itself is only lower-cased, so pass it without separators.

## Text helpers

`quickfetch.text.sanitize_key(key)` drops spaces, tabs, newlines, `-` and `_`
and lower-cases ASCII letters. `matches_sanitized_key(key, sanitized)` tells
whether the sanitized `key` equals `sanitized` ignoring ASCII case.

## String arrays

`quickfetch.string_array.StringArray` is an ordered list of strings with
`find_position` (returns `None` when absent), `set_value` (ignores indices out
of range), `append`, `pop` (raises `IndexError` when out of range), `merge`,
`clone`, `append_if_not_included` and `represent`, which prints one string per
line. It supports `len`, iteration and indexing.

## What it does not do

The package only builds requests. It does not open connections, send
requests, or parse responses, and it has no command-line program.