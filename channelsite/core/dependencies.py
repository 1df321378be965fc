"""
Core dependencies: the caller's dashboard session
"""

from fastapi import Depends, Request, Response
from channelsite.config import settings
from channelsite.shell.router import Dashboard
from channelsite.shell.sessions import DashboardSessions


def get_sessions(request: Request) -> DashboardSessions:
    return request.app.state.sessions


async def get_dashboard(
    request: Request,
    response: Response,
    sessions: DashboardSessions = Depends(get_sessions)
) -> Dashboard:
    """Resolve the dashboard for this browser, issuing a session cookie on first use."""
    current = request.cookies.get(settings.session_cookie_name)
    session_id, dashboard = await sessions.get(current)
    if session_id != current:
        response.set_cookie(
            settings.session_cookie_name,
            session_id,
            httponly=True,
            samesite="lax",
            secure=settings.is_production,
        )
    return dashboard
