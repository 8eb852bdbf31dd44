from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.json_attendance_repository import JsonAttendanceRepository
from .attendance.service import AttendanceService
from .chat.json_chat_repository import JsonChatRepository
from .chat.service import ChatReadStateService, ChatService
from .dashboard.service import DashboardService
from .database.connection import JsonDocumentStore
from .diary.json_diary_repository import JsonDiaryRepository
from .diary.service import DiaryService
from .exports.service import ExportService
from .leaves.json_leave_repository import JsonLeaveRequestRepository
from .leaves.service import LeaveService
from .office.json_settings_repository import JsonOfficeSettingsRepository
from .office.service import OfficeSettingsService
from .payroll.service import PayrollService
from .projects.json_project_repository import JsonProjectRepository
from .projects.service import ProjectService
from .users.json_admin_repository import JsonAdminRepository
from .users.json_employee_repository import JsonEmployeeRepository
from .users.service import ActorResolver, AdminService, AuthService, EmployeeService


@dataclass(frozen=True)
class Container:
    store: JsonDocumentStore

    employees_repo: JsonEmployeeRepository
    admins_repo: JsonAdminRepository
    attendance_repo: JsonAttendanceRepository
    leaves_repo: JsonLeaveRequestRepository
    chat_repo: JsonChatRepository
    diary_repo: JsonDiaryRepository
    projects_repo: JsonProjectRepository
    settings_repo: JsonOfficeSettingsRepository

    auth_service: AuthService
    actor_resolver: ActorResolver
    employee_service: EmployeeService
    admin_service: AdminService
    attendance_service: AttendanceService
    leave_service: LeaveService
    chat_service: ChatService
    chat_read_state_service: ChatReadStateService
    diary_service: DiaryService
    project_service: ProjectService
    office_service: OfficeSettingsService
    payroll_service: PayrollService
    export_service: ExportService
    dashboard_service: DashboardService


def build_container(*, data_file: Optional[str | Path] = None, store: Optional[JsonDocumentStore] = None) -> Container:
    store = store or JsonDocumentStore(data_file)
    atomic = store.transaction

    employees_repo = JsonEmployeeRepository(store)
    admins_repo = JsonAdminRepository(store)
    attendance_repo = JsonAttendanceRepository(store)
    leaves_repo = JsonLeaveRequestRepository(store)
    chat_repo = JsonChatRepository(store)
    diary_repo = JsonDiaryRepository(store)
    projects_repo = JsonProjectRepository(store)
    settings_repo = JsonOfficeSettingsRepository(store)

    payroll_service = PayrollService(employees_repo, leaves_repo)

    return Container(
        store=store,
        employees_repo=employees_repo,
        admins_repo=admins_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        chat_repo=chat_repo,
        diary_repo=diary_repo,
        projects_repo=projects_repo,
        settings_repo=settings_repo,
        auth_service=AuthService(admins_repo, employees_repo),
        actor_resolver=ActorResolver(admins_repo, employees_repo),
        employee_service=EmployeeService(employees_repo, admins_repo, atomic=atomic),
        admin_service=AdminService(admins_repo, employees_repo, atomic=atomic),
        attendance_service=AttendanceService(attendance_repo, employees_repo, settings_repo, atomic=atomic),
        leave_service=LeaveService(leaves_repo, attendance_repo, employees_repo, atomic=atomic),
        chat_service=ChatService(chat_repo, employees_repo, admins_repo, atomic=atomic),
        chat_read_state_service=ChatReadStateService(chat_repo, admins_repo),
        diary_service=DiaryService(diary_repo, employees_repo, atomic=atomic),
        project_service=ProjectService(projects_repo, employees_repo, atomic=atomic),
        office_service=OfficeSettingsService(settings_repo),
        payroll_service=payroll_service,
        export_service=ExportService(attendance_repo, leaves_repo, employees_repo),
        dashboard_service=DashboardService(employees_repo, attendance_repo, leaves_repo, payroll_service),
    )
