"""Tests for the login and signup checks."""

from __future__ import annotations

from kubedeploy.screens.auth.presenter import AuthPresenter


class TestValidateLogin:
    """Tests for AuthPresenter.validate_login."""

    def test_ok(self) -> None:
        assert AuthPresenter.validate_login("a@b.c", "secret") is None

    def test_missing(self) -> None:
        assert AuthPresenter.validate_login(" ", "secret") == "Email and password are required"
        assert AuthPresenter.validate_login("a@b.c", "") == "Email and password are required"


class TestValidateSignup:
    """Tests for AuthPresenter.validate_signup."""

    def test_ok(self) -> None:
        assert AuthPresenter.validate_signup("a@b.c", "ab", "secret", "secret") is None

    def test_mismatch(self) -> None:
        assert (
            AuthPresenter.validate_signup("a@b.c", "ab", "secret", "secreT")
            == "Passwords do not match"
        )

    def test_too_short(self) -> None:
        assert (
            AuthPresenter.validate_signup("a@b.c", "ab", "12345", "12345")
            == "Password must be at least 6 characters"
        )

    def test_required(self) -> None:
        assert (
            AuthPresenter.validate_signup("a@b.c", "", "secret", "secret")
            == "Email, username and password are required"
        )
