"""
Dependencies shared by every router.

Application-scoped objects live on app.state and are created once by
create_app().
"""

from fastapi import Request

from app.core.config import Settings


def get_settings(request: Request) -> Settings:
    """Return the settings snapshot of the running application."""
    return request.app.state.settings
