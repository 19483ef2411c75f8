"""Project CRUD over the multipart API, including image ownership in external storage."""

from portfolio.models.project import Project


def create(client, project_form, png_file, *, extra_files=None, **fields):
    files = {"mainImage": png_file("main.png")}
    files.update(extra_files or {})
    return client.post("/api/projects", data=project_form(**fields), files=files)


def test_create_project(admin_client, image_storage, project_form, png_file):
    resp = create(
        admin_client,
        project_form,
        png_file,
        extra_files={"fullPageImage": png_file("full.png"), "additionalImage_0": png_file("extra.png")},
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["slug"] == "my-project"
    assert data["features"] == ["Responsive layout", "Admin panel"]
    assert data["createdDate"] == "2024-05-01"
    assert data["mainImage"]["storageId"] == image_storage.uploaded[0]
    assert data["mainImage"]["filename"] == "main.png"
    assert data["fullPageImage"]["storageId"] == image_storage.uploaded[1]
    assert [img["filename"] for img in data["additionalImages"]] == ["extra.png"]
    assert len(image_storage.uploaded) == 3


def test_create_requires_admin(client, image_storage, project_form, png_file):
    resp = create(client, project_form, png_file)
    assert resp.status_code == 401
    assert image_storage.uploaded == []


def test_duplicate_slug_is_rejected(admin_client, image_storage, project_form, png_file, db):
    assert create(admin_client, project_form, png_file).status_code == 200
    resp = create(admin_client, project_form, png_file, title="My Project!")
    assert resp.status_code == 409
    assert db.query(Project).count() == 1
    assert len(image_storage.uploaded) == 1


def test_missing_main_image(admin_client, image_storage, project_form):
    resp = admin_client.post("/api/projects", data=project_form())
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "mainImage"


def test_missing_required_field(admin_client, image_storage, project_form, png_file):
    form = project_form()
    del form["category"]
    resp = admin_client.post("/api/projects", data=form, files={"mainImage": png_file("main.png")})
    assert resp.status_code == 400
    assert "category" in [err["field"] for err in resp.json()["errors"]]


def test_invalid_features_json(admin_client, image_storage, project_form, png_file):
    resp = create(admin_client, project_form, png_file, features="not json")
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "features"


def test_disallowed_image_type(admin_client, image_storage, project_form):
    resp = admin_client.post(
        "/api/projects",
        data=project_form(),
        files={"mainImage": ("notes.txt", b"plain text", "text/plain")},
    )
    assert resp.status_code == 400
    assert image_storage.uploaded == []


def test_failed_upload_persists_nothing(admin_client, image_storage, project_form, png_file, db):
    image_storage.fail_upload_on = "extra.png"
    resp = create(
        admin_client,
        project_form,
        png_file,
        extra_files={"fullPageImage": png_file("full.png"), "additionalImage_0": png_file("extra.png")},
    )
    assert resp.status_code == 500
    assert db.query(Project).count() == 0
    assert image_storage.deleted == image_storage.uploaded
    assert len(image_storage.deleted) == 2


def test_get_by_slug_and_id(admin_client, image_storage, project_form, png_file):
    project_id = create(admin_client, project_form, png_file).json()["data"]["projectId"]

    by_slug = admin_client.get("/api/projects/my-project")
    assert by_slug.status_code == 200
    assert by_slug.json()["data"]["projectId"] == project_id

    by_id = admin_client.get(f"/api/projects/{project_id}")
    assert by_id.json()["data"]["slug"] == "my-project"


def test_get_missing_project(client):
    resp = client.get("/api/projects/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["success"] is False


def test_update_fields_and_slug(admin_client, image_storage, project_form, png_file):
    create(admin_client, project_form, png_file)
    admin_client.get("/api/projects/my-project")

    resp = admin_client.put("/api/projects/my-project", data={"title": "Renamed Project", "category": ""})
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["slug"] == "renamed-project"
    assert data["category"] == "Web Application"

    assert admin_client.get("/api/projects/my-project").status_code == 404
    assert admin_client.get("/api/projects/renamed-project").json()["data"]["title"] == "Renamed Project"


def test_update_replaces_main_image_and_releases_old(admin_client, image_storage, project_form, png_file):
    created = create(admin_client, project_form, png_file).json()["data"]
    old_id = created["mainImage"]["storageId"]

    resp = admin_client.put("/api/projects/my-project", data={}, files={"mainImage": png_file("new-main.png")})
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["mainImage"]["filename"] == "new-main.png"
    assert data["mainImage"]["storageId"] != old_id
    assert image_storage.deleted == [old_id]


def test_update_rename_collision(admin_client, image_storage, project_form, png_file):
    create(admin_client, project_form, png_file)
    create(admin_client, project_form, png_file, title="Other Project")
    resp = admin_client.put("/api/projects/other-project", data={"title": "My Project"})
    assert resp.status_code == 409


def test_update_sets_optional_url(admin_client, image_storage, project_form, png_file):
    create(admin_client, project_form, png_file)
    resp = admin_client.put("/api/projects/my-project", data={"liveUrl": "https://new.example.com"})
    assert resp.json()["data"]["liveUrl"] == "https://new.example.com"


def test_update_clears_optional_url_with_empty_input(admin_client, image_storage, project_form, png_file):
    create(admin_client, project_form, png_file, backendCodeUrl="https://github.com/me/api")
    resp = admin_client.put("/api/projects/my-project", data={"liveUrl": "", "category": ""})
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["liveUrl"] is None
    assert data["backendCodeUrl"] == "https://github.com/me/api"
    assert data["category"] == "Web Application"
    assert admin_client.get("/api/projects/my-project").json()["data"]["liveUrl"] is None


def test_delete_releases_every_image(admin_client, image_storage, project_form, png_file, db):
    create(
        admin_client,
        project_form,
        png_file,
        extra_files={"fullPageImage": png_file("full.png"), "additionalImage_0": png_file("extra.png")},
    )
    image_storage.fail_delete = True

    resp = admin_client.delete("/api/projects/my-project")
    assert resp.status_code == 200
    assert sorted(image_storage.deleted) == sorted(image_storage.uploaded)
    assert len(image_storage.deleted) == 3
    assert db.query(Project).count() == 0
    assert admin_client.get("/api/projects/my-project").status_code == 404


def test_delete_missing_project(admin_client, image_storage):
    assert admin_client.delete("/api/projects/nope").status_code == 404


def test_listing_order_and_featured(admin_client, image_storage, project_form, png_file):
    create(admin_client, project_form, png_file, title="Alpha", order="2")
    create(admin_client, project_form, png_file, title="Beta", order="1", featured="true")
    create(admin_client, project_form, png_file, title="Gamma", order="0")

    listed = [p["slug"] for p in admin_client.get("/api/projects").json()["data"]]
    assert listed == ["beta", "gamma", "alpha"]

    featured = [p["slug"] for p in admin_client.get("/api/projects/featured").json()["data"]]
    assert featured == ["beta"]


def test_featured_is_capped(admin_client, image_storage, project_form, png_file):
    for index in range(7):
        create(admin_client, project_form, png_file, title=f"Project {index}", featured="true", order=str(index))
    featured = admin_client.get("/api/projects/featured").json()["data"]
    assert len(featured) == 6
    assert featured[0]["slug"] == "project-0"


def test_listing_cache_refreshed_after_create(admin_client, image_storage, project_form, png_file):
    assert admin_client.get("/api/projects").json()["data"] == []
    create(admin_client, project_form, png_file)
    assert len(admin_client.get("/api/projects").json()["data"]) == 1
