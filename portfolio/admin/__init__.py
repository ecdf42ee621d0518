"""Admin dashboard: form payloads and mutation flows."""

from portfolio.admin.dashboard import AdminDashboard, DashboardData
from portfolio.admin.forms import (
    CertificateForm,
    ContactForm,
    ContentForm,
    EntryKind,
    ProjectForm,
    SettingsUpdate,
)

__all__ = [
    "AdminDashboard",
    "DashboardData",
    "CertificateForm",
    "ContactForm",
    "ContentForm",
    "EntryKind",
    "ProjectForm",
    "SettingsUpdate",
]
