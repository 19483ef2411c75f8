"""Content repository for singleton documents. Every read or write goes through the document's well-known key."""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from portfolio.models.site_document import SiteDocument
from portfolio.services.content_defaults import (
    DEFAULT_ABOUT,
    DEFAULT_EXPERTISE,
    DEFAULT_HERO,
    DEFAULT_NAVIGATION,
)
from portfolio.utils.errors import NotFoundError, StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentType:
    name: str
    key: str
    defaults: Dict[str, Any]


CONTENT_TYPES = {
    "hero": ContentType("hero", "hero-1", DEFAULT_HERO),
    "about": ContentType("about", "default-about", DEFAULT_ABOUT),
    "expertise": ContentType("expertise", "default-expertise", DEFAULT_EXPERTISE),
    "navigation": ContentType("navigation", "navigation-default", DEFAULT_NAVIGATION),
}


def _content_type(name: str) -> ContentType:
    if name not in CONTENT_TYPES:
        raise NotFoundError(f"Unknown content type '{name}'")
    return CONTENT_TYPES[name]


def _insert_if_absent(db: Session, ctype: ContentType, data: Dict[str, Any]) -> SiteDocument:
    # The primary key on content_key makes this atomic: a concurrent insert loses and re-reads.
    row = SiteDocument(content_key=ctype.key, content_type=ctype.name, data=copy.deepcopy(data))
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("[content] %s was seeded concurrently, using stored document", ctype.key)
        row = db.get(SiteDocument, ctype.key)
        if row is None:
            raise StorageError(f"Could not read back document '{ctype.key}'")
        return row
    db.refresh(row)
    return row


def get_document(db: Session, name: str) -> SiteDocument:
    ctype = _content_type(name)
    row = db.get(SiteDocument, ctype.key)
    if row is None:
        logger.info("[content] seeding %s with defaults", ctype.key)
        row = _insert_if_absent(db, ctype, ctype.defaults)
    return row


def update_document(db: Session, name: str, payload: Dict[str, Any]) -> SiteDocument:
    """Upsert: top-level fields in payload replace the stored ones whole."""
    ctype = _content_type(name)
    row = db.get(SiteDocument, ctype.key)
    if row is None:
        row = _insert_if_absent(db, ctype, payload)
    row.data = {**(row.data or {}), **copy.deepcopy(payload)}
    row.updated_at = func.now()
    db.commit()
    db.refresh(row)
    return row


def seed_all(db: Session) -> List[str]:
    created = []
    for ctype in CONTENT_TYPES.values():
        if db.get(SiteDocument, ctype.key) is None:
            _insert_if_absent(db, ctype, ctype.defaults)
            created.append(ctype.key)
    return created


def document_to_dict(row: SiteDocument) -> Dict[str, Any]:
    return {
        "id": row.content_key,
        **(row.data or {}),
        "createdAt": row.created_at,
        "updatedAt": row.updated_at,
    }
