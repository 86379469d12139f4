from .auth_controller import router as auth_router
from .post_controller import router as post_router
from .user_controller import router as user_router
from .docs_controller import router as docs_router
from .error_handlers import register_error_handlers


__all__ = ["auth_router", "post_router", "user_router", "docs_router", "register_error_handlers"]
