from __future__ import annotations

from .schemas import Doctor, Specialty

ALL_SPECIALTIES = "all"

SPECIALTIES: list[Specialty] = [
    Specialty(id=ALL_SPECIALTIES, name="All Specialties"),
    Specialty(id="cardio", name="Cardiology", specialization="Cardiologist"),
    Specialty(id="neuro", name="Neurology", specialization="Neurologist"),
    Specialty(id="pediatric", name="Pediatrics", specialization="Pediatrician"),
    Specialty(id="ortho", name="Orthopedics", specialization="Orthopedist"),
]

DOCTORS: list[Doctor] = [
    Doctor(
        id="1",
        name="Dr. Priya Sharma",
        specialization="Cardiologist",
        rating=4.8,
        experience="12 years",
        image="https://example.com/doctor1.jpg",
        availability="Available Today",
        fee="₹500",
    ),
    Doctor(
        id="2",
        name="Dr. Rajesh Kumar",
        specialization="Neurologist",
        rating=4.9,
        experience="15 years",
        image="https://example.com/doctor2.jpg",
        availability="Next: 2:30 PM",
        fee="₹800",
    ),
    Doctor(
        id="3",
        name="Dr. Anjali Patel",
        specialization="Pediatrician",
        rating=4.7,
        experience="8 years",
        image="https://example.com/doctor3.jpg",
        availability="Available Today",
        fee="₹600",
    ),
]


def list_doctors(specialty_id: str = ALL_SPECIALTIES) -> list[Doctor]:
    """Doctors for a specialty id; unknown ids raise KeyError."""
    if specialty_id == ALL_SPECIALTIES:
        return list(DOCTORS)
    for specialty in SPECIALTIES:
        if specialty.id == specialty_id:
            return [doctor for doctor in DOCTORS if doctor.specialization == specialty.specialization]
    raise KeyError(f"Unknown specialty {specialty_id}")


def get_doctor(doctor_id: str) -> Doctor:
    for doctor in DOCTORS:
        if doctor.id == doctor_id:
            return doctor
    raise KeyError(f"Doctor {doctor_id} not found")
