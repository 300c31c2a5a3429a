from simplejwt.api.dependencies import get_auth_service, require_api_user
from simplejwt.api.routes import router

__all__ = ["get_auth_service", "require_api_user", "router"]
