"""Navigation – the four static per-audience catalogs.

Author order here is display order; the resolver never re-sorts.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from schooldesk.kernel.security.permissions import PERMISSIONS as P
from schooldesk.navigation.model import Audience, Icon, NavigationCatalog, NavItem, NavSection

_ACADEMIC = (P.ACADEMIC_VIEW, P.ACADEMIC_MANAGE)
_FINANCE = (P.FINANCE_VIEW, P.FINANCE_MANAGE)


STAFF_NAVIGATION = NavigationCatalog(
    audience=Audience.STAFF,
    sections=(
        NavSection("Overview", (
            NavItem("Dashboard", "/dashboard", Icon.LAYOUT_DASHBOARD,
                    (P.PORTAL_STAFF, P.PORTAL_ADMIN)),
        )),
        NavSection("People", (
            NavItem("Students", "/students", Icon.GRADUATION_CAP, _ACADEMIC),
            NavItem("Admissions", "/admissions", Icon.USERS, P.ACADEMIC_MANAGE),
            NavItem("Staff", "/staff", Icon.USER_COG, P.IDENTITY_MANAGE),
        )),
        NavSection("Academics", (
            NavItem(
                "Academic Setup", "/academics", Icon.BOOK_OPEN, _ACADEMIC,
                children=(
                    NavItem("Sessions", "/academics/sessions", Icon.CALENDAR, _ACADEMIC),
                    NavItem("Terms", "/academics/terms", Icon.CALENDAR, _ACADEMIC),
                    NavItem("Classes", "/academics/classes", Icon.USERS, _ACADEMIC),
                    NavItem("Subjects", "/academics/subjects", Icon.BOOK_OPEN, _ACADEMIC),
                    NavItem("Grading", "/academics/grading", Icon.FILE_TEXT, _ACADEMIC),
                ),
            ),
            NavItem(
                "Assessments", "/assessments", Icon.CLIPBOARD_CHECK, _ACADEMIC,
                children=(
                    NavItem("CA Entry", "/assessments/ca", Icon.CLIPBOARD_CHECK,
                            P.ACADEMIC_MANAGE),
                    NavItem("Exam Entry", "/assessments/exams", Icon.FILE_TEXT,
                            P.ACADEMIC_MANAGE),
                    NavItem("Timetable", "/assessments/timetable", Icon.CALENDAR, _ACADEMIC),
                ),
            ),
            NavItem("Results", "/results", Icon.FILE_TEXT, _ACADEMIC),
            NavItem("Attendance", "/attendance", Icon.CALENDAR, _ACADEMIC),
        )),
        NavSection("Finance", (
            NavItem("Invoices", "/finance/invoices", Icon.CREDIT_CARD, _FINANCE),
            NavItem("Payments", "/finance/payments", Icon.CREDIT_CARD, _FINANCE),
            NavItem("Ledger", "/finance/ledger", Icon.SCROLL_TEXT, P.FINANCE_MANAGE),
        )),
        NavSection("Communication", (
            NavItem("Messages", "/communications/messages", Icon.MESSAGE_SQUARE,
                    P.COMMUNICATION_SEND),
            NavItem("Discipline", "/discipline", Icon.ALERT_TRIANGLE, _ACADEMIC),
        )),
        NavSection("Reports", (
            NavItem("Analytics", "/reports", Icon.BAR_CHART, P.ACADEMIC_VIEW),
        )),
        NavSection("System", (
            NavItem("Settings", "/settings", Icon.SETTINGS, P.SYSTEM_SETTINGS),
        )),
    ),
)


PARENT_NAVIGATION = NavigationCatalog(
    audience=Audience.PARENT,
    sections=(
        NavSection("Overview", (
            NavItem("Dashboard", "/parent", Icon.LAYOUT_DASHBOARD, P.PORTAL_GUARDIAN),
        )),
        NavSection("My Children", (
            NavItem("Children", "/parent/children", Icon.USERS, P.PORTAL_GUARDIAN),
            NavItem("Results", "/parent/results", Icon.FILE_TEXT, P.PORTAL_GUARDIAN),
            NavItem("Attendance", "/parent/attendance", Icon.CALENDAR, P.PORTAL_GUARDIAN),
        )),
        NavSection("Finance", (
            NavItem("Payments", "/parent/payments", Icon.CREDIT_CARD, P.PORTAL_GUARDIAN),
        )),
        NavSection("Communication", (
            NavItem("Messages", "/parent/messages", Icon.MESSAGE_SQUARE, P.PORTAL_GUARDIAN),
        )),
    ),
)


STUDENT_NAVIGATION = NavigationCatalog(
    audience=Audience.STUDENT,
    sections=(
        NavSection("Overview", (
            NavItem("Dashboard", "/student", Icon.LAYOUT_DASHBOARD, P.PORTAL_STUDENT),
        )),
        NavSection("Academics", (
            NavItem("My Results", "/student/results", Icon.FILE_TEXT, P.PORTAL_STUDENT),
            NavItem("Attendance", "/student/attendance", Icon.CALENDAR, P.PORTAL_STUDENT),
            NavItem("Exams", "/student/exams", Icon.CLIPBOARD_CHECK, P.PORTAL_STUDENT),
        )),
    ),
)


SUPER_ADMIN_NAVIGATION = NavigationCatalog(
    audience=Audience.SUPER_ADMIN,
    sections=(
        NavSection("Overview", (
            NavItem("Dashboard", "/super-admin", Icon.LAYOUT_DASHBOARD, P.SYSTEM_SETTINGS),
        )),
        NavSection("Management", (
            NavItem("Schools", "/super-admin/schools", Icon.BUILDING, P.SYSTEM_SETTINGS),
            NavItem("Onboarding", "/super-admin/onboarding", Icon.USERS, P.SYSTEM_SETTINGS),
        )),
        NavSection("System", (
            NavItem("Audit Logs", "/super-admin/audit", Icon.SCROLL_TEXT, P.SYSTEM_SETTINGS),
            NavItem("Configuration", "/super-admin/config", Icon.SETTINGS, P.SYSTEM_SETTINGS),
            NavItem("Security", "/super-admin/security", Icon.SHIELD, P.SYSTEM_SETTINGS),
        )),
    ),
)


DEFAULT_CATALOGS: Mapping[Audience, NavigationCatalog] = MappingProxyType({
    Audience.STAFF: STAFF_NAVIGATION,
    Audience.PARENT: PARENT_NAVIGATION,
    Audience.STUDENT: STUDENT_NAVIGATION,
    Audience.SUPER_ADMIN: SUPER_ADMIN_NAVIGATION,
})


__all__ = [
    "DEFAULT_CATALOGS",
    "PARENT_NAVIGATION",
    "STAFF_NAVIGATION",
    "STUDENT_NAVIGATION",
    "SUPER_ADMIN_NAVIGATION",
]
