# nettsuspend

A small blocking HTTP client built on the standard library, together with a
helper that runs a callable on a background thread and lets you wait for
its result later.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Making requests

`nettsuspend.client` has one function for each supported method, `get`,
`post`, `patch`, `put` and `delete`, and `request(method, url, headers, body)`
for any method given by name or as an `HttpMethod`.

- `headers` may be a `Headers`, a mapping of strings, an iterable of
  `(key, value)` pairs, or `None`.
- `body` may be `str` (sent as UTF-8), `bytes`, or `None`. A body is required
  for every method except GET and DELETE; leaving it out raises `NettError`.

Each call returns a `Response` with:

- `status_code`: an `HttpStatus` member, or a plain `int` for an unknown code;
- `contents`: the raw body as `bytes`;
- `contents_size`: the number of bytes in the body;
- `text()`: the body decoded as UTF-8, with invalid bytes replaced.

HTTP error statuses (4xx, 5xx) are returned as ordinary responses. Failures
to reach the server or invalid URLs raise `NettError`. At most 64 requests
are performed at the same time; further calls wait for a free slot.

```python
from nettsuspend.client import get, post
from nettsuspend.headers import Headers

headers = Headers()
headers.add("Content-Type", "application/json")
headers.add("Accept", "application/json")

response = post("https://example.com/items", headers, '{"name": "Hodge", "power": 9000}')
print(response.status_code, response.text())

response = get("https://example.com/items", {"Accept": "application/json"})
print(response.contents_size)
```

### Headers

`nettsuspend.headers.Headers` keeps header pairs in insertion order; a key
may appear more than once. It can be built from an iterable of pairs.

- `add(key, value)` appends a pair; both must be strings, otherwise
  `TypeError` is raised.
- `remove(key)` drops every pair whose key matches exactly.
- `items()` returns the pairs as a list.
- `lines()` returns them formatted as `key: value`, each cut to at most
  1023 characters.
- `len()` and iteration work over the pairs currently held.

### Status codes and methods

`nettsuspend.status.HttpStatus` is an `IntEnum` of the standard HTTP status
codes, from `CONTINUE` (100) to `NETWORK_AUTHENTICATION_REQUIRED` (511).
`HttpStatus.from_code(code)` returns the matching member, or the plain
integer if the code is not one of them. `HttpMethod` lists `GET`, `POST`,
`PATCH`, `PUT` and `DELETE`.

## Running work in the background

`nettsuspend.suspend` runs a callable on its own thread. At most twelve such
tasks run at once; starting another blocks until a slot is free.

```python
from nettsuspend.client import get
from nettsuspend.suspend import Suspend, suspend

task = Suspend(lambda: get("https://example.com/", None))
eventually = suspend(task)
response = eventually.wait(None)
print(task.status, response.status_code)
```

- `Suspend(cb)` wraps a callable taking no arguments. Its `status` is a
  `SuspendStatus`: `IDLE`, `AWAITING`, `ERROR` or `DONE`. After it runs,
  `data` holds the result and `error` holds any exception it raised.
- `suspend(task)` starts the task and returns an `Eventually`.
  `Eventually.wait(timeout)` blocks until the task finishes and returns its
  result. It raises `TimeoutError` if the task is still running after
  `timeout` seconds, and `SuspendError` (chained to the original exception)
  if the callable raised.
- `suspend_parallel(task)` starts the task on a daemon thread and returns
  nothing; poll `task.status` to see when it is done.

Starting a task with no callable, or one whose thread cannot be started,
raises `SuspendError`.

## Command line

```
nettsuspend [URL] [--body BODY]
```

Sends `BODY` as a POST request to `URL` on a background task, waits for it,
then prints `Contents: ` followed by the response body and `All done!`.
Without arguments it posts a sample JSON body to a built-in default URL.
If the request fails, the error goes to standard error and the exit status
is 1.

## Limitations

Requests are blocking and have no timeout setting; the whole response body
is read into memory. There is no support for cookies, sessions, streaming
or asyncio; background work runs on plain threads.