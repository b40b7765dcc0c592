from core.services.auth.service import AuthService
from core.services.auth.session import UserSessionContext, UserSessionPrincipal
from core.services.auth.storage import InMemorySessionStorage

__all__ = ["AuthService", "UserSessionPrincipal", "UserSessionContext", "InMemorySessionStorage"]
