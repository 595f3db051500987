# Re-export database dependency
from .db import get_db

# Re-export authentication dependencies
from .auth import get_current_user, RequireRole
from .enums import UserRole

# Role gates shared by the routers
require_manager = RequireRole(UserRole.PROJECT_MANAGER)
require_team_member = RequireRole(UserRole.PROJECT_MANAGER, UserRole.DEVELOPER)
require_admin = RequireRole()
