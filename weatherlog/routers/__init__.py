# API routers package

from weatherlog.routers.logs import router as logs_router

# Re-export for easy importing
logs = logs_router
