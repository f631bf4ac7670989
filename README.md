# wfrest

Small building blocks for HTTP services. The package provides request
verbs, before/after aspect hooks, and helpers for URLs, query strings,
file paths, files and strings. It uses only the standard library.

## Install

```
pip install wfrest
```

To run the tests:

```
pip install "wfrest[test]"
pytest
```

## Modules

### `wfrest.verb`

- `Verb` is an `IntEnum` with the members `ANY`, `GET`, `POST`, `PUT`,
  `DELETE`, `HEAD` and `PATCH`.
- `str_to_verb(verb)` maps a method name to a `Verb`, ignoring case. Any
  name it does not know gives `Verb.ANY`.
- `verb_to_str(verb)` returns the verb's upper-case name. A value that is
  not a `Verb` gives `"[UNKNOWN]"`.

### `wfrest.aop`

- `aop_before(req, resp, aspects)` calls `aspect.before(req, resp)` on
  each aspect in order.
- `aop_after(req, resp, aspects)` calls `aspect.after(req, resp)` on each
  aspect in reverse order.

Both functions stop at the first hook that returns a false value. They
return `True` only if every hook succeeded.

### `wfrest.codeutil`

- `url_encode(value)` percent-encodes the UTF-8 bytes of `value`. Letters,
  digits and `-._~/` are left as they are. Hex digits are upper case.
- `url_decode(value)` turns each `%XX` into the byte it stands for and
  each `+` into a space.
- `is_url_encode(text)` is true when `text` contains `%` or `+`.

### `wfrest.uriutil`

- `split_query(query)` turns `a=1&b=2` into a dict ordered by key. It
  skips empty fields and fields with an empty key. When a key appears more
  than once, the first value wins. A key with no `=` maps to `""`.

### `wfrest.pathutil`

- `is_dir(path)` and `is_file(path)` test for an existing directory or
  regular file.
- `concat_path(lhs, rhs)` joins two paths with exactly one `/` between
  them.
- `base(filepath)` returns the last component and ignores trailing
  slashes. A path made only of slashes gives `"/"`.
- `suffix(filepath)` returns the file's extension without the dot. A name
  with no dot gives `""`.

### `wfrest.fileutil`

- `size(path)` returns the size in bytes. It raises `FileNotFoundError`
  if the path cannot be read.
- `file_exists(path)` is true for an existing regular file.
- `create_directories(path)` creates a directory and any missing parents,
  like `mkdir -p`.
- `remove_directory(path)` deletes a directory together with everything
  inside it.
- `create_file_with_size(path, size_bytes)` writes a file of `size_bytes`
  random printable ASCII characters.

### `wfrest.strutil`

- `ltrim(text)`, `rtrim(text)` and `trim(text)` strip ASCII whitespace.
- `trim_pairs(text, pairs=K_PAIRS)` removes one enclosing pair of
  characters. The default pairs are `{}`, `[]`, `()`, `<>`, `""`, `''` and
  two backticks.
- `split_piece(text, sep)` splits on `sep` and keeps empty fields. An
  empty string gives an empty list.
- `caseless_key(text)` is a sort key that ignores ASCII letter case.

## Example

```python
from wfrest.verb import Verb, str_to_verb
from wfrest.codeutil import url_encode, url_decode
from wfrest.uriutil import split_query
from wfrest.pathutil import concat_path, base, suffix
from wfrest.strutil import trim, trim_pairs

assert str_to_verb("post") is Verb.POST
assert url_decode(url_encode("/您好")) == "/您好"
assert split_query("name=chanchan&id=1") == {"id": "1", "name": "chanchan"}
assert concat_path("/v1/v2/", "/v3") == "/v1/v2/v3"
assert base("/usr/local/image/test.jpg") == "test.jpg"
assert suffix("/usr/local/image/test.jpg") == "jpg"
assert trim("  user  ") == "user"
assert trim_pairs('"boundary"') == "boundary"
```

## What this package does not do

There is no HTTP server, route table or router in this package. It has
no request or response objects and no command to run. The verbs and
aspect hooks are meant to be used by such code, and the package does not
supply it.