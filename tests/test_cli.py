import pytest

from edgellm.cli import build_parser, load_settings, main


def test_parser_defaults_are_unset():
    args = build_parser().parse_args([])
    assert args.vllm_server is None
    assert args.vllm_server_max_workers is None
    assert args.vllm_startup_timeout is None
    assert args.verbose is False


def test_parser_reads_options():
    args = build_parser().parse_args(
        ["--vllm-server", "host:1", "-v", "--vllm-startup-timeout", "2m", "--vllm-server-max-workers", "3"]
    )
    assert args.vllm_server == "host:1"
    assert args.verbose is True
    assert args.vllm_startup_timeout == 120.0
    assert args.vllm_server_max_workers == 3


def test_parser_rejects_bad_duration():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--vllm-startup-timeout", "soon"])


def test_load_settings_defaults_without_config(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    settings = load_settings(None, {})
    assert settings.server_addr == "localhost:50051"
    assert settings.max_workers == 4
    assert settings.startup_timeout == 30.0


def test_load_settings_reads_config_file(tmp_path):
    path = tmp_path / "peer.yaml"
    path.write_text(
        "vllm-server: example.com:6000\nvllm-server-max-workers: 8\nvllm-startup-timeout: 1m30s\n"
    )
    settings = load_settings(str(path), {})
    assert settings.server_addr == "example.com:6000"
    assert settings.max_workers == 8
    assert settings.startup_timeout == 90.0


def test_overrides_beat_config_file(tmp_path):
    path = tmp_path / "peer.yaml"
    path.write_text("vllm-server: example.com:6000\nvllm-server-max-workers: 8\n")
    settings = load_settings(
        str(path), {"vllm-server": "127.0.0.1:7000", "vllm-server-max-workers": None}
    )
    assert settings.server_addr == "127.0.0.1:7000"
    assert settings.max_workers == 8


def test_malformed_config_is_ignored(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("vllm-server: [unclosed\n")
    assert load_settings(str(path), {}) == load_settings(str(tmp_path / "missing.yaml"), {})


def test_main_fails_without_server_script(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("VLLM_SERVER_PATH", str(tmp_path / "absent"))
    assert main([]) == 1
    assert "not found" in capsys.readouterr().err