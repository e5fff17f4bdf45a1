from fastapi import Request

from zentryx.services.dashboard_service import DashboardSession


async def get_dashboard(request: Request) -> DashboardSession:
    return request.app.state.dashboard
