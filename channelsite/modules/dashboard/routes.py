from fastapi import APIRouter, Depends, HTTPException, status
from channelsite.core.dependencies import get_dashboard
from channelsite.modules.catalog.schemas import TableColumns
from channelsite.modules.catalog.service import DatabaseCatalogPanel
from channelsite.modules.creator.schemas import MessageRequest, PreviewModeRequest
from channelsite.modules.creator.service import CreatorWorkspace
from channelsite.modules.dashboard.schemas import (
    CreateRowRequest, ToggleEnabledRequest, FormStateRequest, CopyResponse
)
from channelsite.modules.projects.schemas import ProjectStatusUpdate, ProjectFilter
from channelsite.modules.projects.service import ProjectApprovalPanel
from channelsite.modules.query_runner.schemas import QueryRequest
from channelsite.modules.query_runner.service import QueryRunner
from channelsite.modules.system_status.service import SystemStatusPanel
from channelsite.modules.users.schemas import UserInvite, UserSearch
from channelsite.modules.users.service import UserManagementPanel
from channelsite.panels.base import Section
from channelsite.panels.resource_panel import ResourcePanel
from channelsite.panels.schemas import SectionView
from channelsite.shell.router import Dashboard, VIEWS
from channelsite.shell.schemas import DashboardView

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _active(dashboard: Dashboard) -> Section:
    if dashboard.shell is None or dashboard.shell.active is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No portal is open")
    return dashboard.shell.active


def _require(section: Section, kind: type, operation: str):
    if not isinstance(section, kind):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Section '{section.section_id}' does not support '{operation}'"
        )
    return section


@router.get("", response_model=DashboardView)
async def get_view(dashboard: Dashboard = Depends(get_dashboard)):
    """Current view, menu and mounted panel"""
    return dashboard.snapshot()


@router.post("/home", response_model=DashboardView)
async def go_home(dashboard: Dashboard = Depends(get_dashboard)):
    """Back to the landing page; discards all panel state"""
    await dashboard.home()
    return dashboard.snapshot()


@router.post("/enter/{view}", response_model=DashboardView)
async def enter_view(view: str, dashboard: Dashboard = Depends(get_dashboard)):
    if view not in VIEWS:
        raise HTTPException(status_code=404, detail=f"Unknown view '{view}'")
    await dashboard.enter(view)
    return dashboard.snapshot()


@router.post("/sections/{section_id}", response_model=DashboardView)
async def select_section(section_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    """Unmount the current section and mount the requested one"""
    if dashboard.shell is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No portal is open")
    await dashboard.shell.select(section_id)
    return dashboard.snapshot()


@router.get("/panel", response_model=SectionView)
async def get_panel(dashboard: Dashboard = Depends(get_dashboard)):
    return _active(dashboard).snapshot()


@router.post("/panel/refresh", response_model=SectionView)
async def refresh_panel(dashboard: Dashboard = Depends(get_dashboard)):
    section = _active(dashboard)
    load = getattr(section, "load", None)
    if load is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Section has nothing to reload")
    await load()
    return section.snapshot()


@router.put("/panel/form", response_model=SectionView)
async def set_form_state(body: FormStateRequest, dashboard: Dashboard = Depends(get_dashboard)):
    panel = _require(_active(dashboard), ResourcePanel, "create")
    if body.open:
        panel.open_form()
    else:
        panel.close_form()
    return panel.snapshot()


@router.post("/panel/rows", response_model=SectionView)
async def create_row(body: CreateRowRequest, dashboard: Dashboard = Depends(get_dashboard)):
    """Add a row; failures come back as a toast with the form still open"""
    panel = _require(_active(dashboard), ResourcePanel, "create")
    await panel.create(body.fields)
    return panel.snapshot()


@router.patch("/panel/rows/{row_id}/enabled", response_model=SectionView)
async def toggle_row(row_id: str, body: ToggleEnabledRequest, dashboard: Dashboard = Depends(get_dashboard)):
    panel = _require(_active(dashboard), ResourcePanel, "toggle")
    await panel.toggle_enabled(row_id, body.enabled)
    return panel.snapshot()


@router.delete("/panel/rows/{row_id}", response_model=SectionView)
async def delete_row(row_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    """Delete immediately; there is no confirmation step"""
    panel = _require(_active(dashboard), ResourcePanel, "delete")
    await panel.delete(row_id)
    return panel.snapshot()


@router.post("/panel/rows/{row_id}/reveal", response_model=SectionView)
async def reveal_secret(row_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    panel = _require(_active(dashboard), ResourcePanel, "secrets")
    panel.reveal_secret(row_id)
    return panel.snapshot()


@router.post("/panel/rows/{row_id}/mask", response_model=SectionView)
async def mask_secret(row_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    panel = _require(_active(dashboard), ResourcePanel, "secrets")
    panel.mask_secret(row_id)
    return panel.snapshot()


@router.post("/panel/rows/{row_id}/copy", response_model=CopyResponse)
async def copy_secret(row_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    """Raw secret for the browser to put on the clipboard"""
    panel = _require(_active(dashboard), ResourcePanel, "secrets")
    value = panel.copy_secret(row_id)
    return CopyResponse(value=value, panel=panel.snapshot())


@router.patch("/panel/rows/{row_id}/status", response_model=SectionView)
async def set_project_status(row_id: str, body: ProjectStatusUpdate, dashboard: Dashboard = Depends(get_dashboard)):
    panel = _require(_active(dashboard), ProjectApprovalPanel, "status")
    await panel.set_status(row_id, body.status)
    return panel.snapshot()


@router.put("/panel/filter", response_model=SectionView)
async def set_project_filter(body: ProjectFilter, dashboard: Dashboard = Depends(get_dashboard)):
    panel = _require(_active(dashboard), ProjectApprovalPanel, "filter")
    panel.set_filter(body.status)
    return panel.snapshot()


@router.post("/panel/query", response_model=SectionView)
async def run_query(body: QueryRequest, dashboard: Dashboard = Depends(get_dashboard)):
    runner = _require(_active(dashboard), QueryRunner, "query")
    await runner.run(body.sql)
    return runner.snapshot()


@router.get("/panel/tables/{table}/columns", response_model=TableColumns)
async def get_table_columns(table: str, dashboard: Dashboard = Depends(get_dashboard)):
    catalog = _require(_active(dashboard), DatabaseCatalogPanel, "columns")
    columns = await catalog.columns(table)
    if columns is None:
        raise HTTPException(status_code=400, detail=f"Could not read columns of '{table}'")
    return columns


@router.post("/panel/invite", response_model=SectionView)
async def invite_user(body: UserInvite, dashboard: Dashboard = Depends(get_dashboard)):
    panel = _require(_active(dashboard), UserManagementPanel, "invite")
    await panel.invite(body.email)
    return panel.snapshot()


@router.put("/panel/search", response_model=SectionView)
async def search_users(body: UserSearch, dashboard: Dashboard = Depends(get_dashboard)):
    panel = _require(_active(dashboard), UserManagementPanel, "search")
    panel.search(body.term)
    return panel.snapshot()


@router.post("/panel/status-check", response_model=SectionView)
async def check_system_status(dashboard: Dashboard = Depends(get_dashboard)):
    """Ask the backend to re-check every monitored service"""
    panel = _require(_active(dashboard), SystemStatusPanel, "status-check")
    await panel.refresh()
    return panel.snapshot()


@router.post("/panel/messages", response_model=SectionView)
async def send_message(body: MessageRequest, dashboard: Dashboard = Depends(get_dashboard)):
    workspace = _require(_active(dashboard), CreatorWorkspace, "messages")
    workspace.send_message(body.content)
    return workspace.snapshot()


@router.put("/panel/preview", response_model=SectionView)
async def set_preview_mode(body: PreviewModeRequest, dashboard: Dashboard = Depends(get_dashboard)):
    workspace = _require(_active(dashboard), CreatorWorkspace, "preview")
    workspace.set_preview_mode(body.mode)
    return workspace.snapshot()
