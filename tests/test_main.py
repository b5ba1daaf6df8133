import uvicorn

from teamdesk.__main__ import main
from teamdesk.core.config import get_settings


def test_main_serves_app_with_configured_address(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main()

    settings = get_settings()
    assert calls == [
        (
            "teamdesk.main:app",
            {
                "host": settings.host,
                "port": settings.port,
                "log_level": settings.log_level.lower(),
            },
        )
    ]
