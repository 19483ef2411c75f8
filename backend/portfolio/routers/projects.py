"""Projects API router. Create/update take multipart forms with image files; mutations revalidate cached pages."""

from typing import Type, TypeVar

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session
from starlette.datastructures import FormData, UploadFile

from portfolio.database import get_db
from portfolio.middleware.auth_middleware import get_current_admin
from portfolio.models.project import Project
from portfolio.schemas.base import CamelModel
from portfolio.schemas.project import URL_FIELDS, ProjectCreate, ProjectOut, ProjectUpdate
from portfolio.services import project_service
from portfolio.services.cache_service import RevalidationDispatcher, get_dispatcher, response_cache
from portfolio.services.image_storage import CloudinaryStorage, get_image_storage
from portfolio.services.project_service import ProjectImages
from portfolio.services.token_service import TokenClaims
from portfolio.utils.errors import ValidationError, field_errors_from_pydantic
from portfolio.utils.helpers import parse_json_list, parse_rich_text, read_image

router = APIRouter(prefix="/api/projects", tags=["projects"])

FORM_FIELDS = (
    "title", "description", "features", "shortDescription", "category", "framework", "duration",
    "createdDate", "responsive", "browserCompatible", "documentation", "tags",
    "liveUrl", "frontendCodeUrl", "backendCodeUrl", "featured", "order",
)
JSON_LIST_FIELDS = {"features", "tags"}
CLEARABLE_FIELDS = {to_camel(name) for name in URL_FIELDS}

SchemaT = TypeVar("SchemaT", bound=CamelModel)


def _project_out(project: Project) -> dict:
    return ProjectOut.model_validate(project).model_dump(mode="json", by_alias=True)


def _detail_targets(*slugs: str) -> list[str]:
    targets = []
    for slug in dict.fromkeys(s for s in slugs if s):
        targets += [f"/api/projects/{slug}", f"/projects/{slug}"]
    return targets


def _form_fields(form: FormData, partial: bool) -> dict:
    fields = {}
    for name in FORM_FIELDS:
        raw = form.get(name)
        if raw is None or isinstance(raw, UploadFile):
            continue
        if partial and raw == "" and name not in CLEARABLE_FIELDS:
            # empty inputs leave the stored value untouched; empty URLs clear it
            continue
        if name in JSON_LIST_FIELDS:
            fields[name] = parse_json_list(raw, name)
        elif name == "description":
            fields[name] = parse_rich_text(raw)
        else:
            fields[name] = raw
    return fields


def _validate(schema: Type[SchemaT], fields: dict) -> SchemaT:
    try:
        return schema.model_validate(fields)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid project data", errors=field_errors_from_pydantic(exc.errors()))


async def _form_images(form: FormData) -> ProjectImages:
    images = ProjectImages(
        main_image=await read_image(form.get("mainImage"), "mainImage"),
        full_page_image=await read_image(form.get("fullPageImage"), "fullPageImage"),
    )
    index = 0
    while form.get(f"additionalImage_{index}") is not None:
        image = await read_image(form.get(f"additionalImage_{index}"), f"additionalImage_{index}")
        if image is not None:
            images.additional_images.append(image)
        index += 1
    return images


@router.get("")
def list_projects(request: Request, db: Session = Depends(get_db)):
    return response_cache.get_or_set(
        request.url.path,
        lambda: {"success": True, "data": [_project_out(p) for p in project_service.list_projects(db)]},
    )


@router.get("/featured")
def list_featured_projects(request: Request, db: Session = Depends(get_db)):
    return response_cache.get_or_set(
        request.url.path,
        lambda: {"success": True, "data": [_project_out(p) for p in project_service.list_featured_projects(db)]},
    )


@router.get("/{identifier}")
def get_project(identifier: str, request: Request, db: Session = Depends(get_db)):
    return response_cache.get_or_set(
        request.url.path,
        lambda: {"success": True, "data": _project_out(project_service.get_project(db, identifier))},
    )


@router.post("")
async def create_project(
    request: Request,
    db: Session = Depends(get_db),
    storage: CloudinaryStorage = Depends(get_image_storage),
    dispatcher: RevalidationDispatcher = Depends(get_dispatcher),
    _admin: TokenClaims = Depends(get_current_admin),
):
    form = await request.form()
    data = _validate(ProjectCreate, _form_fields(form, partial=False))
    images = await _form_images(form)
    project = await run_in_threadpool(project_service.create_project, db, data, images, storage)
    await run_in_threadpool(dispatcher.invalidate, "projects", _detail_targets(project.slug))
    return {"success": True, "data": _project_out(project)}


@router.put("/{identifier}")
async def update_project(
    identifier: str,
    request: Request,
    db: Session = Depends(get_db),
    storage: CloudinaryStorage = Depends(get_image_storage),
    dispatcher: RevalidationDispatcher = Depends(get_dispatcher),
    _admin: TokenClaims = Depends(get_current_admin),
):
    form = await request.form()
    data = _validate(ProjectUpdate, _form_fields(form, partial=True))
    images = await _form_images(form)
    project, previous_slug = await run_in_threadpool(
        project_service.update_project, db, identifier, data, images, storage
    )
    await run_in_threadpool(
        dispatcher.invalidate, "projects", _detail_targets(previous_slug, project.slug, str(project.project_id))
    )
    return {"success": True, "data": _project_out(project)}


@router.delete("/{identifier}")
def delete_project(
    identifier: str,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    storage: CloudinaryStorage = Depends(get_image_storage),
    dispatcher: RevalidationDispatcher = Depends(get_dispatcher),
    _admin: TokenClaims = Depends(get_current_admin),
):
    deleted = project_service.delete_project(db, identifier)
    background_tasks.add_task(project_service.release_images, storage, deleted.storage_ids)
    dispatcher.invalidate("projects", _detail_targets(deleted.slug, str(deleted.project_id)))
    return {"success": True, "message": "Project deleted successfully"}
