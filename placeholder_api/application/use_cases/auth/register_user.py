# Local application imports
from ..user.create_user import CreateUserUseCase


class RegisterUserUseCase(CreateUserUseCase):
    """
    Use case for registering a new user.
    
    Registration applies exactly the same rules as direct user creation;
    it is a separate use case so the two routes can evolve independently.
    """
    pass
