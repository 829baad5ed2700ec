# edgellm

Building blocks for an HTTP service in front of a decentralized LLM
inference backend, and a command-line launcher for that backend.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

`edgellm.config.load()` returns a frozen `Config` built from environment
variables:

| Variable    | Field       | Default |
|-------------|-------------|---------|
| `PORT`      | `port`      | `8080`  |
| `LOG_LEVEL` | `log_level` | `info`  |
| `GIN_MODE`  | `gin_mode`  | `debug` |

An unset or empty variable falls back to its default.

## HTTP building blocks

- `edgellm.services`: `HealthService.get_health()` returns a
  `HealthResponse` (`status="healthy"`, `service="edgellm"`,
  `version="1.0.0"`); `APIService.get_hello_message()` returns a
  `HelloResponse` (`message="Hello from EdgeLLM!"`, `version="1.0.0"`).
- `edgellm.models`: the response dataclasses `HealthResponse`,
  `HelloResponse` and `ErrorResponse`, each with `to_dict()`.
- `edgellm.handlers`: `HealthHandler.health()` and `APIHandler.hello()` log
  the request and return `(body_dict, 200)`, which Flask accepts as a view
  return value.
- `edgellm.middleware`: `install_request_id(app)` gives each request an ID
  (`g.request_id`, echoed in the `X-Request-ID` header);
  `install_request_logging(app, logger)` logs method, path, status, latency,
  client address and user agent of each request. `generate_request_id()` and
  `random_string(length)` are available on their own.
- `edgellm.logger`: `Logger(level)` with `info`, `warn`, `error`, `debug`
  (only when the level is `debug`) and `fatal` (logs, then exits with
  status 1). Output goes to standard error.

Wiring them into a Flask application:

```python
from flask import Flask

from edgellm.config import load
from edgellm.handlers import APIHandler, HealthHandler
from edgellm.logger import Logger
from edgellm.middleware import install_request_id, install_request_logging
from edgellm.services import APIService, HealthService

config = load()
log = Logger(config.log_level)

app = Flask(__name__)
install_request_id(app)
install_request_logging(app, log)

app.add_url_rule("/health", view_func=HealthHandler(HealthService(), log).health)
app.add_url_rule("/api/v1/hello", view_func=APIHandler(APIService(), log).hello)

app.run(port=int(config.port))
```

## Inference backend launcher

`edgellm` starts the Python vLLM backend server (`server.py`) as a child
process in its own session, waits until its address accepts connections,
and stops it on interrupt or `SIGTERM` (SIGTERM first, then SIGKILL to the
process group after 10 seconds):

```
edgellm --vllm-server localhost:50051 --vllm-server-max-workers 4 --vllm-startup-timeout 30s -v
```

Options:

- `--config FILE`: YAML config file (default `$HOME/.peerllm.yaml`); it may
  set `vllm-server`, `vllm-server-max-workers` and `vllm-startup-timeout`
- `--vllm-server ADDR`: gRPC server address (default `localhost:50051`)
- `--vllm-server-max-workers N`: worker count for the backend (default 4)
- `--vllm-startup-timeout DURATION`: how long to wait for startup, such as
  `30s`, `1m30s` or a number of seconds (default 30 seconds)
- `-v`, `--verbose`: verbose output

Command-line options take precedence over the config file. The backend
directory is taken from `VLLM_SERVER_PATH`, or `backend/python/vllm` when
that is unset; the launcher exits with status 1 if it does not exist or the
server does not become ready in time. The child process gets
`VLLM_SERVER_ADDR` and `VLLM_MAX_WORKERS` in its environment.

The same can be done in code with `edgellm.runner.VllmServer` and
`RunnerSettings`; start failures raise `RunnerError`.

## Utilities

`edgellm.utils` provides small helpers: `string_in_slice`, `to_json`,
`from_json`, `trim_and_lower` and `format_error`.

## What this package does not do

There is no ready-made HTTP application and no command that starts an HTTP
server: the handlers, services and middleware above have to be registered on
a Flask application of your own, as in the example. The launcher does not
send prompts to the backend or manage models; it only starts, watches and
stops the backend process.