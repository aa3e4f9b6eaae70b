"""HTML Fragment Routes - HTMX administration screens over the same services.

Invariants:
    - Every failure goes through core.error_translation.translate(): the status
      of an HTML error response equals the JSON API status for the same error
    - A failed create/update re-renders the submitted form with the translated
      message; a failed delete renders an error alert
    - Form values are passed to the services as submitted (blank stays blank),
      so the rule tables judge them exactly as they judge JSON input

Design Decisions:
    - One set of routes parameterized by screen slug; the screen table lists
      columns, form fields and which service backs it
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from masterdata.api.dependencies import (
    build_person_service, build_reference_service, get_actor,
)
from masterdata.api.error_handlers import log_outcome
from masterdata.core.domain_types import EntityType
from masterdata.core.error_translation import translate
from masterdata.core.errors import ValidationError
from masterdata.infrastructure.database import get_db
from masterdata.services.reference_data import ReferenceDataService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ui", tags=["ui"])

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = "text"            # text | select | checkbox
    options: EntityType | None = None


@dataclass(frozen=True)
class Screen:
    slug: str
    title: str
    entity_type: EntityType
    columns: tuple[tuple[str, str], ...]
    fields: tuple[FormField, ...]


CODED_COLUMNS = (("code", "Code"), ("description", "Description"))
CODED_FIELDS = (FormField("code", "Code"), FormField("description", "Description"))

SCREENS: dict[str, Screen] = {
    screen.slug: screen
    for screen in (
        Screen(
            "countries", "Countries", EntityType.COUNTRY,
            (("code", "Code"), ("name", "Name"), ("year", "Year"), ("cctld", "ccTLD")),
            (
                FormField("code", "Code"), FormField("name", "Name"),
                FormField("year", "Year"), FormField("cctld", "ccTLD"),
            ),
        ),
        Screen("genders", "Genders", EntityType.GENDER, CODED_COLUMNS, CODED_FIELDS),
        Screen("titles", "Titles", EntityType.TITLE, CODED_COLUMNS, CODED_FIELDS),
        Screen("id-types", "ID Types", EntityType.ID_TYPE, CODED_COLUMNS, CODED_FIELDS),
        Screen(
            "persons", "People", EntityType.PERSON,
            (
                ("display_name", "Name"), ("email", "Email"),
                ("id_number", "ID number"), ("is_active", "Active"),
            ),
            (
                FormField("title_id", "Title", "select", EntityType.TITLE),
                FormField("first_name", "First name"),
                FormField("last_name", "Last name"),
                FormField("email", "Email"),
                FormField("gender_id", "Gender", "select", EntityType.GENDER),
                FormField("id_type_id", "ID type", "select", EntityType.ID_TYPE),
                FormField("id_number", "ID number"),
                FormField("is_active", "Active", "checkbox"),
            ),
        ),
    )
}


# ─── Helpers ────────────────────────────────────────────────────

def _screen(slug: str) -> Screen:
    screen = SCREENS.get(slug)
    if screen is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=f"Unknown screen: {slug}")
    return screen


def _service(screen: Screen, db: AsyncSession) -> ReferenceDataService:
    if screen.entity_type is EntityType.PERSON:
        return build_person_service(db)
    return build_reference_service(db, screen.entity_type)


async def _options(screen: Screen, db: AsyncSession) -> dict[str, list]:
    options = {}
    for form_field in screen.fields:
        if form_field.options is not None:
            service = build_reference_service(db, form_field.options)
            options[form_field.name] = await service.list_sorted()
    return options


async def _form_values(screen: Screen, request: Request) -> dict[str, Any]:
    form = await request.form()
    values: dict[str, Any] = {}
    for form_field in screen.fields:
        raw = form.get(form_field.name)
        match form_field.kind:
            case "checkbox":
                values[form_field.name] = raw is not None
            case "select":
                values[form_field.name] = _parse_id(form_field, raw)
            case _:
                values[form_field.name] = raw if raw is not None else ""
    return values


def _parse_id(form_field: FormField, raw: Any) -> int | None:
    if raw is None or str(raw).strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(form_field.name, f"{form_field.label} must be a number")


def _entity_values(screen: Screen, entity: Any) -> dict[str, Any]:
    values = {}
    for form_field in screen.fields:
        value = getattr(entity, form_field.name)
        values[form_field.name] = "" if value is None else value
    return values


async def _render_table(request: Request, screen: Screen, db: AsyncSession, status_code=200):
    entities = await _service(screen, db).list_sorted()
    return templates.TemplateResponse(
        request,
        "fragments/entity_table.html",
        {"screen": screen, "entities": entities},
        status_code=status_code,
    )


async def _render_form(
    request: Request,
    screen: Screen,
    db: AsyncSession,
    values: dict[str, Any],
    entity_id: int | None = None,
    exc: Exception | None = None,
):
    context = {
        "screen": screen,
        "values": values,
        "entity_id": entity_id,
        "options": await _options(screen, db),
        "error": None,
    }
    status_code = status.HTTP_200_OK
    if exc is not None:
        outcome = translate(exc)
        log_outcome(request, exc, outcome)
        context["error"] = outcome
        status_code = outcome.status
    return templates.TemplateResponse(
        request, "fragments/entity_form.html", context, status_code=status_code,
    )


# ─── Routes ─────────────────────────────────────────────────────

@router.get("/")
async def home(request: Request):
    return templates.TemplateResponse(
        request, "index.html", {"screens": list(SCREENS.values())},
    )


@router.get("/{slug}")
async def entity_table(slug: str, request: Request, db: AsyncSession = Depends(get_db)):
    return await _render_table(request, _screen(slug), db)


@router.get("/{slug}/new")
async def create_form(slug: str, request: Request, db: AsyncSession = Depends(get_db)):
    screen = _screen(slug)
    values = {f.name: (True if f.kind == "checkbox" else "") for f in screen.fields}
    return await _render_form(request, screen, db, values)


@router.get("/{slug}/{entity_id}/edit")
async def edit_form(
    slug: str, entity_id: int, request: Request, db: AsyncSession = Depends(get_db),
):
    screen = _screen(slug)
    try:
        entity = await _service(screen, db).get(entity_id)
    except Exception as exc:
        return _render_alert(request, exc)
    return await _render_form(
        request, screen, db, _entity_values(screen, entity), entity_id,
    )


@router.post("/{slug}")
async def create_entity(
    slug: str,
    request: Request,
    db: AsyncSession = Depends(get_db),
    actor: str = Depends(get_actor),
):
    screen = _screen(slug)
    values: dict[str, Any] = {}
    try:
        values = await _form_values(screen, request)
        await _service(screen, db).create(values, actor)
    except Exception as exc:
        await db.rollback()
        return await _render_form(request, screen, db, values, exc=exc)
    return await _render_table(request, screen, db, status.HTTP_201_CREATED)


@router.post("/{slug}/{entity_id}")
async def update_entity(
    slug: str,
    entity_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    actor: str = Depends(get_actor),
):
    screen = _screen(slug)
    values: dict[str, Any] = {}
    try:
        values = await _form_values(screen, request)
        await _service(screen, db).update(entity_id, values, actor)
    except Exception as exc:
        await db.rollback()
        return await _render_form(request, screen, db, values, entity_id, exc=exc)
    return await _render_table(request, screen, db)


@router.delete("/{slug}/{entity_id}")
async def delete_entity(
    slug: str, entity_id: int, request: Request, db: AsyncSession = Depends(get_db),
):
    screen = _screen(slug)
    try:
        await _service(screen, db).delete(entity_id)
    except Exception as exc:
        await db.rollback()
        return _render_alert(request, exc)
    return await _render_table(request, screen, db)


def _render_alert(request: Request, exc: Exception):
    outcome = translate(exc)
    log_outcome(request, exc, outcome)
    return templates.TemplateResponse(
        request,
        "components/error_alert.html",
        {"error": outcome},
        status_code=outcome.status,
    )
