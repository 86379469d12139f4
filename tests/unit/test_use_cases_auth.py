"""
Unit tests for auth use cases (Login, Register).
"""
import pytest
from placeholder_api.core.security import hash_password, verify_password
from placeholder_api.application.use_cases.auth.login_user import LoginUserUseCase
from placeholder_api.application.use_cases.auth.register_user import RegisterUserUseCase
from placeholder_api.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest
from placeholder_api.application.dto.user_dto import UserResponse
from placeholder_api.domain.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    ValidationError,
)


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, user_factory):
        user = user_factory(123, email="test@example.com", hashed_password=hash_password("validpass123"))
        mock_user_repo.find_by_email.return_value = user

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="test@example.com", password="validpass123")
        )
        assert isinstance(result, UserResponse)
        assert result.id == 123
        assert "password" not in result.model_dump()

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
            await use_case.execute(
                UserLoginRequest(email="unknown@example.com", password="anypass123")
            )

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, user_factory):
        mock_user_repo.find_by_email.return_value = user_factory(
            1, hashed_password=hash_password("correctpass")
        )

        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
            await use_case.execute(
                UserLoginRequest(email="user1@example.com", password="wrongpassword")
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password", [(None, "x"), ("a@b.c", None), ("", "")])
    async def test_login_missing_fields(self, mock_user_repo, email, password):
        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(ValidationError, match="Email and password required"):
            await use_case.execute(UserLoginRequest(email=email, password=password))
        mock_user_repo.find_by_email.assert_not_called()


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo, user_factory):
        mock_user_repo.create.return_value = user_factory(
            42, name="New User", username="newbie", email="new@example.com"
        )

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserRegistrationRequest(
                name="New User",
                username="newbie",
                email="new@example.com",
                password="password123",
            )
        )
        assert result.id == 42
        assert result.email == "new@example.com"
        mock_user_repo.create.assert_called_once()

    @pytest.mark.asyncio
    async def test_register_stores_hash_not_plain_password(self, mock_user_repo, user_factory):
        mock_user_repo.create.return_value = user_factory(1)

        use_case = RegisterUserUseCase(mock_user_repo)
        await use_case.execute(
            UserRegistrationRequest(name="A", username="a", email="a@example.com", password="plain")
        )
        stored = mock_user_repo.create.call_args.args[0]
        assert stored.hashed_password != "plain"
        assert verify_password("plain", stored.hashed_password)

    @pytest.mark.asyncio
    async def test_register_defaults_optional_fields(self, mock_user_repo, user_factory):
        mock_user_repo.create.return_value = user_factory(1)

        use_case = RegisterUserUseCase(mock_user_repo)
        await use_case.execute(
            UserRegistrationRequest(name="A", username="a", email="a@example.com", password="p")
        )
        stored = mock_user_repo.create.call_args.args[0]
        assert stored.phone == ""
        assert stored.website == ""
        assert stored.address.to_dict() == {}
        assert stored.company.to_dict() == {}

    @pytest.mark.asyncio
    async def test_register_duplicate_raises(self, mock_user_repo):
        mock_user_repo.create.side_effect = DuplicateUserError()

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(DuplicateUserError, match="already exists"):
            await use_case.execute(
                UserRegistrationRequest(
                    name="Duplicate",
                    username="dup",
                    email="existing@example.com",
                    password="password123",
                )
            )

    @pytest.mark.asyncio
    async def test_register_validation_failure_does_not_touch_store(self, mock_user_repo):
        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ValidationError, match="name must be less than 30 characters"):
            await use_case.execute(
                UserRegistrationRequest(name="n" * 31, username="u", email="e@x.com", password="p")
            )
        mock_user_repo.create.assert_not_called()
