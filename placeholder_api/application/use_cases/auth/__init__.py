from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase

__all__ = [
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
