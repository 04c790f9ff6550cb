from __future__ import annotations

from currency_exchange import main as main_mod
from currency_exchange.settings import Settings


def test_port_defaults_to_3000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings(_env_file=None).PORT == 3000


def test_port_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "4001")
    assert Settings(_env_file=None).PORT == 4001


def test_run_listens_on_configured_port(monkeypatch):
    calls = []
    monkeypatch.setattr(main_mod.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(main_mod.settings, "PORT", 4002)
    monkeypatch.setattr(main_mod.settings, "HOST", "127.0.0.1")

    main_mod.run()

    assert calls == [(main_mod.app, {"host": "127.0.0.1", "port": 4002})]
