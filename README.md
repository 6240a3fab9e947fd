# kuekit

A toolkit of helpers for web back ends:

- `kuekit.constants` – error types, error codes, descriptions and user-facing messages
- `kuekit.errors` – `StatusCodeError`, database error classes, typed error formatting
- `kuekit.dates` – parsing and formatting of dates and times (Asia/Makassar zone), durations
- `kuekit.numbers` – lenient integer parsing, rounding, approximate float comparison
- `kuekit.text` – sort parameter parsing, space/dot replacement
- `kuekit.envar` – typed environment variable lookup with defaults
- `kuekit.slicer` – chunking sequences and restarting them at an id
- `kuekit.paginate` – pagination settings, raw SQL clause building, paged responses
- `kuekit.web` – standard JSON response bodies as `(status code, body)` pairs
- `kuekit.hashing` – bcrypt hashing, short SHA-256 hashes, random strings, code generation
- `kuekit.encryption` – AES-CBC encryption keyed from the environment
- `kuekit.client` – blocking HTTP GET/POST helpers with a 30 second timeout
- `kuekit.glog` – a JSON-lines logger writing to stdout, stderr or a file
- `kuekit.request_id` – request id resolution from headers and storage in the current context

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Conversion helpers:

```python
from kuekit.numbers import str_to_int, round_float64, almost_equal
from kuekit.text import sort_to_map, replace_space_and_dot
from kuekit.dates import string_to_time, get_before_date_string, parse_duration

str_to_int("200", 0)              # 200
str_to_int("xxx500", 500)         # 500 (invalid text gives the default)
round_float64(1.6666666, 2)       # 1.67
almost_equal(3.13, 3.15)          # True (differ by at most 0.1)
sort_to_map("nama,-posisi")       # {"nama": "ASC", "posisi": "DESC"}
replace_space_and_dot("Kue Lapis.Legit", "_")   # "kue_lapis_legit"
string_to_time("2021-06-30 15:00:01", "1")       # datetime in Asia/Makassar
get_before_date_string("2021-02-01")             # "2021-01-31"
parse_duration("2h45m")                          # timedelta(hours=2, minutes=45)
```

Parsing functions in `kuekit.dates` raise `ValueError` on input that does not
match the layout; `parse_to_datetime` instead returns `datetime(1, 1, 1)`.

Environment variables with a typed default (the default is returned when the
variable is unset, blank or does not parse):

```python
from kuekit.envar import get_env

port = get_env("PORT", 8080)       # int
debug = get_env("DEBUG", False)    # bool: 1/t/true or 0/f/false, any case
name = get_env("APP_NAME", "kue")  # str
```

Pagination:

```python
from kuekit.paginate import prepare_pagination, DataPagingResponse

paging = prepare_pagination({"page": "2", "limit": "20", "sort_by": "name"}, ["id", "name"])
paging.build_query("SELECT * FROM product")
# "SELECT * FROM product ORDER BY name, asc LIMIT 20 OFFSET 20"

page = DataPagingResponse(page_number=1, limit=10, total_record_count=25, records=[])
page.set_page_size().page_size   # 3
```

Slicing:

```python
from kuekit.slicer import chunk, restart_slice

chunk([1, 2, 3, 4, 5, 6, 7], 3)      # [[1, 2, 3], [4, 5, 6], [7]]
restart_slice([1, 2, 3, 4], 3)       # [3, 4]
```

Response bodies:

```python
from kuekit.web import response_formatter, response_err_validation

status, body = response_formatter(200, "ok", {"id": 1})
# 200, {"message": "ok", "data": {"id": 1}, "status": "success"}

status, body = response_err_validation("invalid input", {"name": "name is required"})
# 400, {"message": "invalid input", "data": None, "status": "error",
#       "errors": {"name": "name is required"}}
```

Hashing:

```python
from kuekit.hashing import hash_password, check_password_hash, generate_code

password = "password"
hashed = hash_password(password)
check_password_hash(password, hashed)   # True
generate_code("INV", 2024, 7)           # "INV-20240000007"
```

Encryption (`encrypt` and `decrypt` read the key and IV from the
`ENCRYPT_KEY` and `ENCRYPT_IV` environment variables; the key must be 16, 24
or 32 bytes and the IV 16 bytes):

```python
from kuekit.encryption import encrypt, decrypt

token = encrypt("kue lapis")
decrypt(token)   # "kue lapis"
```

Errors:

```python
from kuekit.errors import new_status_error, format_error, trim_error_message

err = new_status_error("data not found", 404)
err.status_code   # 404

formatted = format_error("error database", "error when select data from db")
str(formatted)    # "error database | error when select data from db"
trim_error_message(formatted)
# ("error database", "error when select data from db", Exception(...))
```

HTTP client (`HTTPStatusError` is raised for status codes above 400):

```python
from kuekit.client import post

post("http://localhost:8080/api/v1/product", b'{"name": "bolu"}')
```

Logging:

```python
from kuekit.glog import new_logger

log = new_logger("debug", "")   # empty output means stdout
log.info_t("trace-1", "request started", path="/api/v1/health-check")
```

Request ids:

```python
from kuekit.request_id import resolve_request_id, set_request_id, get_request_id

set_request_id(resolve_request_id({"X-Request-Id": "abc"}))
get_request_id()   # "abc"
```

## What this package does not do

kuekit is a library of helpers only. It has no command, runs no HTTP server
and defines no routes or middleware; `kuekit.web` only builds response bodies
and `kuekit.request_id` only resolves and stores ids. It does not validate
request payloads, and it talks to no database: `Datapaging.build_query` adds
clauses to a raw SQL string and nothing more.