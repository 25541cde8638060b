# accounts/views.py

from ._views.login import LoginView
from ._views.logout import LogoutView
from ._views.token_refresh import TokenRefreshView
from ._views.password_reset import ForgotPasswordView, ResetPasswordView
