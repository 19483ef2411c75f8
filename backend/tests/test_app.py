"""Application wiring: logging setup and error translation."""

from portfolio import main


def test_configure_logging_uses_configured_level(monkeypatch):
    calls = []
    monkeypatch.setattr(main.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(main.settings, "LOG_LEVEL", "debug")
    main.configure_logging()
    assert calls == [{"level": "DEBUG", "format": main.LOG_FORMAT}]


def test_unconfigured_image_storage_returns_500(admin_client, project_form, png_file, db):
    from portfolio.models.project import Project

    resp = admin_client.post("/api/projects", data=project_form(), files={"mainImage": png_file("main.png")})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "detail": "Image storage is not configured"}
    assert db.query(Project).count() == 0
