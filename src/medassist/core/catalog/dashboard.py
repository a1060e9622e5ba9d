from __future__ import annotations

from datetime import datetime

from .schemas import Article, Dashboard, HealthMetric, QuickAction

HEALTH_METRICS: list[HealthMetric] = [
    HealthMetric(title="Steps", value="8,234", unit="steps", icon="footsteps-outline", color="#4A90E2"),
    HealthMetric(title="Heart Rate", value="72", unit="bpm", icon="heart-outline", color="#E24A4A"),
    HealthMetric(title="Sleep", value="7.5", unit="hrs", icon="moon-outline", color="#4AE2A3"),
    HealthMetric(title="Water", value="1.8", unit="L", icon="water-outline", color="#4A90E2"),
]

QUICK_ACTIONS: list[QuickAction] = [
    QuickAction(title="AI Health Assistant", icon="chatbubbles-outline", color="#4A90E2", screen="/chat"),
    QuickAction(title="Smart Reports", icon="document-text-outline", color="#4AE2A3", screen="/reports"),
    QuickAction(title="Video Consultation", icon="videocam-outline", color="#E24A4A", screen="/consultation"),
    QuickAction(title="AI Tumor Detection", icon="scan-outline", color="#F5A623", screen="/tumor-detection"),
    QuickAction(title="Health Blog", icon="newspaper-outline", color="#9B4AE2", screen="/blog"),
]

ARTICLES: list[Article] = [
    Article(
        id="1",
        title="Understanding Your Blood Pressure Readings",
        category="Cardiovascular Health",
        read_time="5 min read",
        image="https://picsum.photos/200/300",
    ),
    Article(
        id="2",
        title="Tips for Better Sleep Quality",
        category="Sleep Health",
        read_time="4 min read",
        image="https://picsum.photos/200/301",
    ),
]


def greeting_for(now: datetime) -> str:
    if now.hour < 12:
        return "Good Morning"
    if now.hour < 18:
        return "Good Afternoon"
    return "Good Evening"


def build_dashboard(user_name: str, now: datetime) -> Dashboard:
    return Dashboard(
        greeting=greeting_for(now),
        user_name=user_name,
        metrics=list(HEALTH_METRICS),
        quick_actions=list(QUICK_ACTIONS),
        articles=list(ARTICLES),
    )
