# API routers package

from zipweather.routers.status import router as status_router
from zipweather.routers.users import router as users_router

# Re-export for easy importing
status = status_router
users = users_router
