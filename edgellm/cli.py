"""Command line entry point that starts and supervises the inference backend."""

from __future__ import annotations

import argparse
import re
import signal
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from edgellm.runner import RunnerError, RunnerSettings, VllmServer

_KEYS = ("vllm-server", "vllm-server-max-workers", "vllm-startup-timeout")
_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_PART = r"(\d+(?:\.\d+)?)(ns|us|µs|ms|s|m|h)"


def _parse_duration(value: Any) -> float:
    """Parse a duration such as '30s', '1m30s' or a plain number of seconds."""
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    try:
        return float(text)
    except ValueError:
        pass
    if not text or not re.fullmatch(f"(?:{_PART})+", text):
        raise ValueError(f"invalid duration {value!r}")
    return sum(float(amount) * _UNITS[unit] for amount, unit in re.findall(_PART, text))


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the command line options."""
    parser = argparse.ArgumentParser(
        prog="edgellm",
        description="EdgeLLM - Decentralized P2P LLM inference CLI",
    )
    parser.add_argument(
        "--config", default=None, help="config file (default is $HOME/.peerllm.yaml)"
    )
    parser.add_argument(
        "--vllm-server",
        default=None,
        help="gRPC server address (default localhost:50051)",
    )
    parser.add_argument(
        "--vllm-server-max-workers",
        type=int,
        default=None,
        help="maximum number of workers for vLLM server (default 4)",
    )
    parser.add_argument(
        "--vllm-startup-timeout",
        type=_parse_duration,
        default=None,
        help="timeout for vLLM server startup (default 30s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    return parser


def _read_config(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return {key: data[key] for key in _KEYS if key in data}


def load_settings(
    config_file: str | None, overrides: Mapping[str, Any] | None = None
) -> RunnerSettings:
    """Merge defaults, the YAML config file and explicit overrides into settings."""
    path = Path(config_file) if config_file else Path.home() / ".peerllm.yaml"
    values = _read_config(path)
    values.update({k: v for k, v in (overrides or {}).items() if v is not None})

    defaults = RunnerSettings()
    return RunnerSettings(
        server_addr=str(values.get("vllm-server", defaults.server_addr)),
        max_workers=int(values.get("vllm-server-max-workers", defaults.max_workers)),
        startup_timeout=_parse_duration(
            values.get("vllm-startup-timeout", defaults.startup_timeout)
        ),
    )


def _make_shutdown_handler(verbose: bool):
    """Return a signal handler that reports the signal and unwinds to shutdown."""

    def _shutdown(signum: int, frame: Any) -> None:
        if verbose:
            try:
                name = signal.Signals(signum).name
            except ValueError:
                name = str(signum)
            print(f"Received {name}, shutting down", file=sys.stderr)
        raise KeyboardInterrupt

    return _shutdown


def main(argv: Sequence[str] | None = None) -> int:
    """Start the inference backend and keep it running until interrupted."""
    args = build_parser().parse_args(argv)
    settings = load_settings(
        args.config,
        {
            "vllm-server": args.vllm_server,
            "vllm-server-max-workers": args.vllm_server_max_workers,
            "vllm-startup-timeout": args.vllm_startup_timeout,
        },
    )
    if args.verbose:
        print(f"Using settings: {settings}", file=sys.stderr)

    server = VllmServer(None, settings)
    previous = signal.signal(signal.SIGTERM, _make_shutdown_handler(args.verbose))
    try:
        try:
            server.start([])
        except RunnerError as exc:
            print(f"Failed to start VLLM server: {exc}", file=sys.stderr)
            return 1
        if server.process is not None:
            server.process.wait()
    except KeyboardInterrupt:
        pass
    finally:
        server.stop()
        signal.signal(signal.SIGTERM, previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())