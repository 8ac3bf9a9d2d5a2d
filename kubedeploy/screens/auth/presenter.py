"""Login and signup presenter - client-side checks before calling the backend."""

from __future__ import annotations

from kubedeploy.constants.limits import PASSWORD_MIN_LENGTH


class AuthPresenter:
    """Validates credentials locally; the backend remains the authority."""

    @staticmethod
    def validate_login(email: str, password: str) -> str | None:
        """Return an error message, or None when the form can be submitted."""
        if not email.strip() or not password:
            return "Email and password are required"
        return None

    @staticmethod
    def validate_signup(
        email: str,
        username: str,
        password: str,
        confirm_password: str,
    ) -> str | None:
        if not email.strip() or not username.strip() or not password:
            return "Email, username and password are required"
        if password != confirm_password:
            return "Passwords do not match"
        if len(password) < PASSWORD_MIN_LENGTH:
            return f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
        return None


__all__ = ["AuthPresenter"]
