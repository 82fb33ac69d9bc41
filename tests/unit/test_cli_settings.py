from light_exporter import __main__ as cli
from light_exporter.__main__ import build_settings
from light_exporter.config import DEFAULT_TARGET, Settings


def test_defaults_use_live_controller(monkeypatch):
    monkeypatch.delenv("LIGHT_EXPORTER_TARGET", raising=False)
    monkeypatch.delenv("LIGHT_EXPORTER_MOCK", raising=False)

    settings = build_settings([])

    assert settings.target == DEFAULT_TARGET
    assert settings.mock == ""
    assert settings.uses_mock is False


def test_env_vars_are_read(monkeypatch):
    monkeypatch.setenv("LIGHT_EXPORTER_MOCK", "/tmp/dataget.txt")

    settings = Settings()

    assert settings.mock == "/tmp/dataget.txt"
    assert settings.uses_mock is True


def test_flags_override_env(monkeypatch):
    monkeypatch.setenv("LIGHT_EXPORTER_TARGET", "http://from-env/")

    settings = build_settings(["--target", "http://from-flag/", "--mock", "resp.txt", "--log-level", "debug"])

    assert settings.target == "http://from-flag/"
    assert settings.mock == "resp.txt"
    assert settings.log_level == "debug"


def test_main_serves_app_built_from_cli_flags(monkeypatch, tmp_path):
    served = {}

    def fake_run(app, host, port, **kwargs):
        served.update(app=app, host=host, port=port)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)

    cli.main(["--mock", str(tmp_path / "resp.txt")])

    assert served["port"] == 8080
    assert served["app"].state.settings.mock == str(tmp_path / "resp.txt")


def test_importing_app_module_builds_no_app():
    import light_exporter.main as main_module

    assert not hasattr(main_module, "app")
