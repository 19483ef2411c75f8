"""Project repository: slugged CRUD plus ownership of the project's externally stored images."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from portfolio.models.project import Project
from portfolio.schemas.project import URL_FIELDS, ProjectCreate, ProjectUpdate
from portfolio.services.image_storage import CloudinaryStorage, image_slot
from portfolio.utils.errors import DuplicateSlugError, NotFoundError, StorageError, ValidationError
from portfolio.utils.helpers import ImagePayload, slugify

logger = logging.getLogger(__name__)

IMAGE_FOLDER = "projects"
FEATURED_LIMIT = 6


@dataclass
class ProjectImages:
    main_image: Optional[ImagePayload] = None
    full_page_image: Optional[ImagePayload] = None
    additional_images: List[ImagePayload] = field(default_factory=list)

    def is_empty(self) -> bool:
        return self.main_image is None and self.full_page_image is None and not self.additional_images


@dataclass(frozen=True)
class DeletedProject:
    project_id: int
    slug: str
    storage_ids: List[str]


def list_projects(db: Session) -> List[Project]:
    return (
        db.query(Project)
        .order_by(Project.featured.desc(), Project.order.asc(), Project.created_at.desc(), Project.project_id.desc())
        .all()
    )


def list_featured_projects(db: Session) -> List[Project]:
    return (
        db.query(Project)
        .filter(Project.featured == True)  # noqa: E712
        .order_by(Project.order.asc(), Project.created_at.desc(), Project.project_id.desc())
        .limit(FEATURED_LIMIT)
        .all()
    )


def get_project(db: Session, identifier: str) -> Project:
    """Resolve a project by slug, falling back to its numeric id."""
    project = db.query(Project).filter(Project.slug == identifier).first()
    if project is None and str(identifier).isdigit():
        project = db.get(Project, int(identifier))
    if project is None:
        raise NotFoundError("Project not found")
    return project


def _slug_for(title: str) -> str:
    slug = slugify(title)
    if not slug:
        raise ValidationError.for_field("title", "must contain at least one letter or digit")
    return slug


def _ensure_slug_free(db: Session, slug: str, exclude_id: Optional[int] = None) -> None:
    query = db.query(Project.project_id).filter(Project.slug == slug)
    if exclude_id is not None:
        query = query.filter(Project.project_id != exclude_id)
    if query.first() is not None:
        raise DuplicateSlugError()


def _storage_id(slot: Optional[dict]) -> Optional[str]:
    if not slot:
        return None
    return slot.get("storageId")


def project_storage_ids(project: Project) -> List[str]:
    slots = [project.main_image, project.full_page_image, *(project.additional_images or [])]
    return [sid for sid in (_storage_id(slot) for slot in slots) if sid]


def release_images(storage: CloudinaryStorage, storage_ids: List[str]) -> int:
    """Best-effort delete of stored images. Returns the number of failures, which are only logged."""
    failures = 0
    for storage_id in storage_ids:
        try:
            storage.delete(storage_id)
        except StorageError as exc:
            failures += 1
            logger.warning("[projects] orphaned image %s left in storage: %s", storage_id, exc)
    return failures


def _upload_images(storage: CloudinaryStorage, images: ProjectImages) -> Tuple[Dict[str, object], List[str]]:
    """Upload every provided image or none: on failure, already uploaded images are released."""
    slots: Dict[str, object] = {}
    uploaded: List[str] = []
    try:
        if images.main_image is not None:
            stored = storage.upload(images.main_image, IMAGE_FOLDER)
            uploaded.append(stored.storage_id)
            slots["main_image"] = image_slot(images.main_image, stored)
        if images.full_page_image is not None:
            stored = storage.upload(images.full_page_image, IMAGE_FOLDER)
            uploaded.append(stored.storage_id)
            slots["full_page_image"] = image_slot(images.full_page_image, stored)
        if images.additional_images:
            additional = []
            for image in images.additional_images:
                stored = storage.upload(image, IMAGE_FOLDER)
                uploaded.append(stored.storage_id)
                additional.append(image_slot(image, stored))
            slots["additional_images"] = additional
    except StorageError:
        release_images(storage, uploaded)
        raise
    return slots, uploaded


def _commit_or_release(db: Session, storage: CloudinaryStorage, uploaded: List[str]) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        release_images(storage, uploaded)
        raise DuplicateSlugError()
    except SQLAlchemyError:
        db.rollback()
        release_images(storage, uploaded)
        raise


def create_project(db: Session, data: ProjectCreate, images: ProjectImages, storage: CloudinaryStorage) -> Project:
    if images.main_image is None:
        raise ValidationError.for_field("mainImage", "Main image is required")
    slug = _slug_for(data.title)
    _ensure_slug_free(db, slug)

    slots, uploaded = _upload_images(storage, images)
    project = Project(
        slug=slug,
        **data.model_dump(),
        main_image=slots["main_image"],
        full_page_image=slots.get("full_page_image"),
        additional_images=slots.get("additional_images", []),
    )
    db.add(project)
    _commit_or_release(db, storage, uploaded)
    db.refresh(project)
    logger.info("[projects] created %s with %d image(s)", slug, len(uploaded))
    return project


def update_project(
    db: Session,
    identifier: str,
    data: ProjectUpdate,
    images: ProjectImages,
    storage: CloudinaryStorage,
) -> Tuple[Project, str]:
    """Partially update a project. Returns the project and the slug it had before the update."""
    project = get_project(db, identifier)
    previous_slug = project.slug
    changes = {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or key in URL_FIELDS
    }

    if "title" in changes:
        new_slug = _slug_for(changes["title"])
        if new_slug != project.slug:
            _ensure_slug_free(db, new_slug, exclude_id=project.project_id)
            changes["slug"] = new_slug

    replaced: List[str] = []
    uploaded: List[str] = []
    if not images.is_empty():
        slots, uploaded = _upload_images(storage, images)
        if "main_image" in slots:
            replaced.append(_storage_id(project.main_image))
        if "full_page_image" in slots:
            replaced.append(_storage_id(project.full_page_image))
        if "additional_images" in slots:
            replaced.extend(_storage_id(slot) for slot in (project.additional_images or []))
        changes.update(slots)

    for key, value in changes.items():
        setattr(project, key, value)
    project.updated_at = func.now()
    _commit_or_release(db, storage, uploaded)
    db.refresh(project)

    # Old images go only after the document no longer references them.
    release_images(storage, [sid for sid in replaced if sid])
    return project, previous_slug


def delete_project(db: Session, identifier: str) -> DeletedProject:
    project = get_project(db, identifier)
    deleted = DeletedProject(
        project_id=project.project_id,
        slug=project.slug,
        storage_ids=project_storage_ids(project),
    )
    db.delete(project)
    db.commit()
    logger.info("[projects] deleted %s", deleted.slug)
    return deleted
