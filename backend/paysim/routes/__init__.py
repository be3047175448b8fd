from paysim.routes.payment import router as payment_router
from paysim.routes.history import router as history_router
from paysim.routes.admin import router as admin_router

__all__ = ["payment_router", "history_router", "admin_router"]
