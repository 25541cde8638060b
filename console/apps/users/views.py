# users/views.py

from ._views.UserView import UserView, RoleView
from ._views.ProfileView import ProfileView
