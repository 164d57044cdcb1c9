from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime

import pytest

from portfolio.application.services.credentials import CredentialStore
from portfolio.application.use_cases.users import (
    LoginUserUseCase,
    RegisterUserUseCase,
    ResolveIdentityUseCase,
)
from portfolio.domain.users.entities import User
from portfolio.domain.users.exceptions import (
    DuplicateUserError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
)
from portfolio.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from portfolio.shared.errors import ValidationError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        stored = replace(user, id=self._seq)
        self._users[stored.id] = stored
        self._seq += 1
        return stored

    def touch_last_login(self, user_id: int) -> None:
        self._users[user_id] = replace(self._users[user_id], last_login_at=datetime.now(UTC))

    def remove(self, user_id: int) -> None:
        self._users.pop(user_id)

    def __len__(self) -> int:
        return len(self._users)


class PrefixHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class FakeTokenCodec(TokenCodec):
    def __init__(self) -> None:
        self.expired: set[str] = set()

    def issue(self, subject_id: int) -> str:
        return f"token-{subject_id}"

    def verify(self, token: str) -> int:
        if token in self.expired:
            raise ExpiredTokenError()
        if not token.startswith("token-"):
            raise InvalidTokenError()
        return int(token.removeprefix("token-"))


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> FakeTokenCodec:
    return FakeTokenCodec()


@pytest.fixture()
def credentials(users: InMemoryUserRepository) -> CredentialStore:
    return CredentialStore(users=users, password_hasher=PrefixHasher())


def test_register_returns_identity_and_token(credentials, tokens, users) -> None:
    use_case = RegisterUserUseCase(credentials=credentials, tokens=tokens)

    identity, token = use_case.execute("admin", "A@X.com ", "secret123")

    assert identity.username == "admin"
    assert identity.email == "a@x.com"
    assert token == f"token-{identity.id}"
    assert users.find_by_id(identity.id).password_hash == "hashed:secret123"


@pytest.mark.parametrize(
    ("username", "email", "password"),
    [("", "a@x.com", "pw"), ("admin", "  ", "pw"), ("admin", "a@x.com", "")],
)
def test_register_requires_every_field(credentials, tokens, users, username, email, password):
    use_case = RegisterUserUseCase(credentials=credentials, tokens=tokens)

    with pytest.raises(ValidationError) as excinfo:
        use_case.execute(username, email, password)

    assert excinfo.value.status == 400
    assert len(users) == 0


def test_register_rejects_duplicate_email_case_insensitively(credentials, tokens, users) -> None:
    use_case = RegisterUserUseCase(credentials=credentials, tokens=tokens)
    use_case.execute("admin", "a@x.com", "secret123")

    with pytest.raises(DuplicateUserError):
        use_case.execute("other", "A@X.COM", "secret123")
    assert len(users) == 1


def test_register_rejects_duplicate_username(credentials, tokens, users) -> None:
    use_case = RegisterUserUseCase(credentials=credentials, tokens=tokens)
    use_case.execute("admin", "a@x.com", "secret123")

    with pytest.raises(DuplicateUserError):
        use_case.execute("admin", "b@x.com", "secret123")


def test_login_issues_token_and_records_last_login(credentials, tokens, users) -> None:
    RegisterUserUseCase(credentials=credentials, tokens=tokens).execute(
        "admin", "a@x.com", "secret123"
    )
    use_case = LoginUserUseCase(credentials=credentials, tokens=tokens)

    identity, token = use_case.execute("A@x.com", "secret123")

    assert token == f"token-{identity.id}"
    assert users.find_by_id(identity.id).last_login_at is not None


def test_login_failures_are_indistinguishable(credentials, tokens) -> None:
    RegisterUserUseCase(credentials=credentials, tokens=tokens).execute(
        "admin", "a@x.com", "secret123"
    )
    use_case = LoginUserUseCase(credentials=credentials, tokens=tokens)

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        use_case.execute("a@x.com", "nope")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        use_case.execute("ghost@x.com", "secret123")

    assert wrong_password.value.to_dict() == unknown_email.value.to_dict()
    assert wrong_password.value.message == "Invalid email or password"
    assert wrong_password.value.status == 401


def test_resolve_identity_returns_public_fields(credentials, tokens) -> None:
    identity, token = RegisterUserUseCase(credentials=credentials, tokens=tokens).execute(
        "admin", "a@x.com", "secret123"
    )

    resolved = ResolveIdentityUseCase(credentials=credentials, tokens=tokens).execute(token)

    assert resolved == identity
    assert resolved.to_dict() == {"id": identity.id, "username": "admin", "email": "a@x.com"}


def test_resolve_identity_for_deleted_user(credentials, tokens, users) -> None:
    identity, token = RegisterUserUseCase(credentials=credentials, tokens=tokens).execute(
        "admin", "a@x.com", "secret123"
    )
    users.remove(identity.id)

    with pytest.raises(UserNotFoundError):
        ResolveIdentityUseCase(credentials=credentials, tokens=tokens).execute(token)


def test_resolve_identity_propagates_token_errors(credentials, tokens) -> None:
    use_case = ResolveIdentityUseCase(credentials=credentials, tokens=tokens)
    tokens.expired.add("token-1")

    with pytest.raises(ExpiredTokenError):
        use_case.execute("token-1")
    with pytest.raises(InvalidTokenError):
        use_case.execute("garbage")
