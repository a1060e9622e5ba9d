from __future__ import annotations

from pydantic import BaseModel


class Language(BaseModel):
    code: str
    name: str


class HealthMetric(BaseModel):
    title: str
    value: str
    unit: str
    icon: str
    color: str


class QuickAction(BaseModel):
    title: str
    icon: str
    color: str
    screen: str


class Article(BaseModel):
    id: str
    title: str
    category: str
    read_time: str
    image: str


class Dashboard(BaseModel):
    greeting: str
    user_name: str
    metrics: list[HealthMetric]
    quick_actions: list[QuickAction]
    articles: list[Article]


class Specialty(BaseModel):
    id: str
    name: str
    specialization: str | None = None


class Doctor(BaseModel):
    id: str
    name: str
    specialization: str
    rating: float
    experience: str
    image: str
    availability: str
    fee: str
