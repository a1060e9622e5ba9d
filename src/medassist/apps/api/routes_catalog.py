from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, HTTPException, Query

from medassist.core.catalog.dashboard import build_dashboard
from medassist.core.catalog.doctors import ALL_SPECIALTIES, SPECIALTIES, get_doctor, list_doctors
from medassist.core.catalog.languages import LANGUAGES
from medassist.core.catalog.schemas import Dashboard, Doctor, Language, Specialty
from medassist.core.config import Settings

from .deps import get_settings

logger = logging.getLogger("medassist.consultation")

router = APIRouter()


@router.get("/dashboard", response_model=Dashboard)
def dashboard(settings: Settings = Depends(get_settings)) -> Dashboard:
    now = datetime.now(ZoneInfo(settings.timezone))
    return build_dashboard(settings.user_name, now)


@router.get("/chat/languages", response_model=list[Language])
def languages() -> list[Language]:
    return LANGUAGES


@router.get("/consultation/specialties", response_model=list[Specialty])
def specialties() -> list[Specialty]:
    return SPECIALTIES


@router.get("/consultation/doctors", response_model=list[Doctor])
def doctors(specialty: str = Query(default=ALL_SPECIALTIES)) -> list[Doctor]:
    try:
        return list_doctors(specialty)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"specialty not found: {specialty}") from exc


@router.post("/consultation/doctors/{doctor_id}/consult")
def consult(doctor_id: str) -> dict[str, str]:
    try:
        doctor = get_doctor(doctor_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"doctor not found: {doctor_id}") from exc
    # Booking is not simulated; the request is only recorded.
    logger.info("consult requested", extra={"extra_fields": {"doctor_id": doctor.id}})
    return {"status": "requested", "doctor_id": doctor.id}
