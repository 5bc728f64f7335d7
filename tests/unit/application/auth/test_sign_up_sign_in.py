"""Tests for sign-up and sign-in handlers."""

import pytest

from tasklists.application.auth.commands import (
    SignInCommand,
    SignInCommandHandler,
    SignUpCommand,
    SignUpCommandHandler,
)
from tasklists.domain.shared.errors import InvalidCredentialsError
from tasklists.infrastructure.persistence.in_memory import InMemoryUserRepository
from tasklists.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from tasklists.infrastructure.security.jwt_token_service import JwtTokenService


@pytest.fixture
def users():
    return InMemoryUserRepository()


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return JwtTokenService("unit-secret")


@pytest.fixture
def sign_up(users, hasher, tokens):
    return SignUpCommandHandler(users=users, password_hasher=hasher, token_service=tokens)


@pytest.fixture
def sign_in(users, hasher, tokens):
    return SignInCommandHandler(users=users, password_hasher=hasher, token_service=tokens)


@pytest.mark.asyncio
async def test_sign_up_creates_user_and_token(sign_up, users, tokens):
    result = await sign_up.handle(
        SignUpCommand(email="ada@example.com", password="s3cret", name="Ada", avatar="a.png")
    )

    assert result.user.email == "ada@example.com"
    assert result.user.avatar == "a.png"
    assert tokens.resolve(result.token) == result.user.id
    assert users.count() == 1


@pytest.mark.asyncio
async def test_sign_up_never_stores_plaintext(sign_up, users, hasher):
    result = await sign_up.handle(SignUpCommand(email="ada@example.com", password="s3cret", name="Ada"))

    stored = await users.get(result.user.id)
    assert stored.password_hash != "s3cret"
    assert hasher.verify("s3cret", stored.password_hash)


@pytest.mark.asyncio
async def test_sign_up_accepts_duplicate_email(sign_up, users):
    first = await sign_up.handle(SignUpCommand(email="dup@example.com", password="a", name="A"))
    second = await sign_up.handle(SignUpCommand(email="dup@example.com", password="b", name="B"))

    assert first.user.id != second.user.id
    assert users.count() == 2


def test_command_repr_hides_password():
    command = SignUpCommand(email="ada@example.com", password="s3cret", name="Ada")

    assert "s3cret" not in repr(command)
    assert "s3cret" not in repr(SignInCommand(email="ada@example.com", password="s3cret"))


@pytest.mark.asyncio
async def test_sign_in_returns_same_user(sign_up, sign_in, tokens):
    created = await sign_up.handle(SignUpCommand(email="ada@example.com", password="s3cret", name="Ada"))

    result = await sign_in.handle(SignInCommand(email="ada@example.com", password="s3cret"))

    assert result.user.id == created.user.id
    assert tokens.resolve(result.token) == created.user.id


@pytest.mark.asyncio
async def test_sign_in_failures_are_indistinguishable(sign_up, sign_in):
    await sign_up.handle(SignUpCommand(email="ada@example.com", password="s3cret", name="Ada"))

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        await sign_in.handle(SignInCommand(email="ada@example.com", password="wrong"))
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        await sign_in.handle(SignInCommand(email="nobody@example.com", password="s3cret"))

    assert wrong_password.value.message == unknown_email.value.message == "Invalid credentials!"
    assert wrong_password.value.code == unknown_email.value.code


@pytest.mark.asyncio
async def test_sign_in_uses_first_user_for_duplicate_email(sign_up, sign_in):
    first = await sign_up.handle(SignUpCommand(email="dup@example.com", password="a", name="A"))
    await sign_up.handle(SignUpCommand(email="dup@example.com", password="b", name="B"))

    result = await sign_in.handle(SignInCommand(email="dup@example.com", password="a"))

    assert result.user.id == first.user.id
    with pytest.raises(InvalidCredentialsError):
        await sign_in.handle(SignInCommand(email="dup@example.com", password="b"))
