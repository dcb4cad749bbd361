from apps.sample_api import main
from lib.config.server_loader import ServerConfig


def test_run_serves_module_app(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    main.run()
    app, kwargs = calls[0]
    assert app is main.app
    assert kwargs["port"] == main.settings.port


def test_run_builds_app_for_explicit_config(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    main.run(ServerConfig(host="127.0.0.1", port=9100))
    app, kwargs = calls[0]
    assert app is not main.app
    assert kwargs == {"host": "127.0.0.1", "port": 9100, "log_level": "info"}
