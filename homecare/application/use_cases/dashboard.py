from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from homecare.domain.entities.profile import UserProfile
from homecare.domain.entities.role import Role

NOT_SET = "Not set"


@dataclass(frozen=True)
class DashboardTab:
    id: str
    label: str


@dataclass(frozen=True)
class DashboardView:
    role: Role
    title: str
    welcome: str
    tabs: tuple[DashboardTab, ...]
    stats: tuple[dict[str, str], ...] = ()
    profile: dict[str, Any] = field(default_factory=dict)


PATIENT_TABS = (
    DashboardTab("appointments", "Appointments"),
    DashboardTab("services", "Services"),
    DashboardTab("settings", "Settings"),
)

NURSE_TABS = (
    DashboardTab("schedule", "Schedule"),
    DashboardTab("patients", "Patients"),
    DashboardTab("areas", "Service Areas"),
    DashboardTab("settings", "Settings"),
)


def dashboard_path(role: Role) -> str:
    return f"/dashboard/{Role.parse(role).value}"


def build_dashboard(profile: UserProfile) -> DashboardView:
    info = {
        "name": profile.name,
        "email": profile.email,
        "phone": profile.phone or NOT_SET,
        "address": profile.address or NOT_SET,
    }
    welcome = f"Welcome, {profile.name}"

    if profile.role is Role.PATIENT:
        return DashboardView(
            role=Role.PATIENT,
            title="Patient Dashboard",
            welcome=welcome,
            tabs=PATIENT_TABS,
            stats=(
                {"title": "Upcoming Visits", "detail": "No upcoming visits"},
                {"title": "Care Plan", "detail": "No active care plan"},
            ),
            profile=info,
        )
    if profile.role is Role.NURSE:
        return DashboardView(
            role=Role.NURSE,
            title="Nurse Dashboard",
            welcome=welcome,
            tabs=NURSE_TABS,
            stats=(
                {"title": "Today's Schedule", "detail": "No appointments today"},
                {"title": "Active Patients", "detail": "No active patients"},
                {"title": "Service Areas", "detail": "Manage your service areas"},
            ),
            profile=info,
        )
    raise ValueError(f"Unhandled role: {profile.role!r}")
