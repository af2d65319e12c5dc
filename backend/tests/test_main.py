from unittest.mock import patch

import main
from shared.config import settings


def test_run_serves_app_on_configured_address(monkeypatch):
    monkeypatch.setattr(settings, "HOST", "0.0.0.0")
    monkeypatch.setattr(settings, "PORT", 9100)

    with patch("uvicorn.run") as serve:
        main.run()

    serve.assert_called_once_with("main:app", host="0.0.0.0", port=9100)
