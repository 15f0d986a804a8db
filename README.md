# cdpwire

Talk to an already running Chrome or Chromium over the DevTools Protocol.

`cdpwire` gives you:

- dataclasses for DevTools commands in `cdpwire.protocol` (`page.Navigate`,
  `dom.QuerySelector`, `runtime.Evaluate`, `target.CreateTarget`, ...). Each
  knows its method name (`NAME`), serialises its parameters with
  `to_params()` and turns the raw result into a Python value with
  `parse_result()`;
- parsers for incoming messages in `cdpwire.protocol.messages`:
  `parse_raw_message` turns JSON text into an event dataclass, a
  `Response`, or a `ConnectionShutdown`;
- a threaded WebSocket `Transport` (`cdpwire.transport.transport`) that
  matches responses to calls, routes events for the browser and for each
  attached target session, and reports a closed connection as
  `ConnectionClosed`;
- a `Wait` helper (`cdpwire.wait`) for polling until something happens;
- test helpers: a throwaway local HTTP `Server` and an emoji log formatter
  (`cdpwire.testing`).

## Install

```
pip install cdpwire
```

For running the test suite:

```
pip install "cdpwire[test]"
pytest
```

## Example

```python
from cdpwire.protocol import browser, page, target
from cdpwire.transport.transport import Transport

transport = Transport("ws://127.0.0.1:9222/devtools/browser/<id>", None, 30.0)

version = transport.call_method_on_browser(browser.GetVersion())
print(version.product, version.protocol_version)

target_id = transport.call_method_on_browser(target.CreateTarget(url="about:blank"))
session_id = transport.call_method_on_browser(target.AttachToTarget(target_id=target_id))

events = transport.listen_to_target_events(session_id)
transport.call_method_on_target(session_id, page.Enable())
result = transport.call_method_on_target(session_id, page.Navigate(url="https://example.com"))
print(result.frame_id)

transport.shutdown()
```

The third argument of `Transport` is the idle timeout in seconds: if no
message arrives for that long, the transport closes.

Calls to a target session are wrapped in `Target.sendMessageToTarget` and
sent through the browser connection. Each call waits up to
`Transport.CALL_TIMEOUT` (15 seconds) for its response and otherwise raises
`cdpwire.wait.Timeout`. A failure reported by the browser is raised as
`cdpwire.protocol.method.RemoteError`. A call made after the connection has
gone away raises `cdpwire.transport.registry.ConnectionClosed`. Calls still
waiting when the connection closes raise the same error.

Events arrive on the `queue.Queue` returned by `listen_to_target_events` or
`listen_to_browser_events`. When the connection ends, each listener queue
gets a `ConnectionShutdown` as its last item.

## Waiting

```python
from cdpwire.wait import Timeout, Wait

value = Wait.with_timeout(5.0).until(lambda: compute_or_none())
```

`until` keeps calling the predicate until it returns something other than
`None`, and raises `Timeout` when time runs out. `strict_until(predicate,
ignore)` retries only while the predicate raises one of the exception types
in `ignore`, and lets any other exception through. `Wait.forever()` never
times out. The defaults are a 10 second timeout and 0.1 seconds between
attempts.

## Test helpers

```python
from cdpwire.testing.log_format import enable_logging
from cdpwire.testing.server import Server, file_server

enable_logging()
with Server.with_dumb_html("<p>hello</p>") as server:
    print(server.url())
```

`enable_logging()` logs to stderr in the form
`<emoji> [HH:MM:SS.mmm] - <module> - <message>`. It uses the level named in
the `CDPWIRE_LOG` environment variable, and `ERROR` when that variable is
unset. It does nothing if the root logger already has handlers.

`Server(responder)` serves on 127.0.0.1 at a free port and calls
`responder` with each request handler. If the responder raises, `exit()`
raises that error again. `file_server(path)` serves files from a
directory. It maps `/` to `index.html`, serves `.js` and `.css` files with
their content types and everything else as HTML, and answers 404 for
anything missing.

## What it does not do

`cdpwire` does not start, download or manage a browser, and it has no
command-line tool. Launch Chrome yourself with
`--remote-debugging-port=9222` and take the browser WebSocket URL from
`http://127.0.0.1:9222/json/version`.

There is no high-level browser or tab object either. You drive the browser
by sending the command dataclasses through a `Transport`.