"""Authentication screens."""

from kubedeploy.screens.auth.login_screen import LoginScreen
from kubedeploy.screens.auth.presenter import AuthPresenter
from kubedeploy.screens.auth.signup_screen import SignupScreen

__all__ = ["AuthPresenter", "LoginScreen", "SignupScreen"]
