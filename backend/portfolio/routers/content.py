"""Singleton content API router (hero, about, expertise, navigation). Reads are cached, writes revalidate."""

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from portfolio.database import get_db
from portfolio.middleware.auth_middleware import get_current_admin
from portfolio.schemas.base import CamelModel
from portfolio.schemas.content import AboutUpdate, ExpertiseUpdate, HeroUpdate, NavigationUpdate
from portfolio.services import content_service
from portfolio.services.cache_service import RevalidationDispatcher, get_dispatcher, response_cache
from portfolio.services.token_service import TokenClaims

router = APIRouter(prefix="/api", tags=["content"])


def _read(db: Session, name: str, request: Request) -> dict:
    return response_cache.get_or_set(
        request.url.path,
        lambda: jsonable_encoder(content_service.document_to_dict(content_service.get_document(db, name))),
    )


def _write(db: Session, name: str, data: CamelModel, dispatcher: RevalidationDispatcher) -> dict:
    row = content_service.update_document(db, name, data.to_document())
    dispatcher.invalidate(name)
    return jsonable_encoder(content_service.document_to_dict(row))


@router.get("/hero")
def get_hero(request: Request, db: Session = Depends(get_db)):
    return _read(db, "hero", request)


@router.put("/hero")
def update_hero(
    data: HeroUpdate,
    db: Session = Depends(get_db),
    dispatcher: RevalidationDispatcher = Depends(get_dispatcher),
    _admin: TokenClaims = Depends(get_current_admin),
):
    return _write(db, "hero", data, dispatcher)


@router.get("/about")
def get_about(request: Request, db: Session = Depends(get_db)):
    return _read(db, "about", request)


@router.put("/about")
def update_about(
    data: AboutUpdate,
    db: Session = Depends(get_db),
    dispatcher: RevalidationDispatcher = Depends(get_dispatcher),
    _admin: TokenClaims = Depends(get_current_admin),
):
    return _write(db, "about", data, dispatcher)


@router.get("/expertise")
def get_expertise(request: Request, db: Session = Depends(get_db)):
    return _read(db, "expertise", request)


@router.put("/expertise")
def update_expertise(
    data: ExpertiseUpdate,
    db: Session = Depends(get_db),
    dispatcher: RevalidationDispatcher = Depends(get_dispatcher),
    _admin: TokenClaims = Depends(get_current_admin),
):
    return _write(db, "expertise", data, dispatcher)


@router.get("/navigation")
def get_navigation(request: Request, db: Session = Depends(get_db)):
    return _read(db, "navigation", request)


@router.put("/navigation")
def update_navigation(
    data: NavigationUpdate,
    db: Session = Depends(get_db),
    dispatcher: RevalidationDispatcher = Depends(get_dispatcher),
    _admin: TokenClaims = Depends(get_current_admin),
):
    return _write(db, "navigation", data, dispatcher)
