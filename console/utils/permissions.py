from rest_framework.permissions import BasePermission
from console.utils.api_repository import ACCESS_TOKEN_KEY
from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)


class HasApiSession(BasePermission):
    """
    Allows access only when the console session holds a remote API access token.
    """
    message = "Authentication required"

    def has_permission(self, request, view):
        if not request.session.get(ACCESS_TOKEN_KEY):
            logger.warning(f"Request to {request.path} without an API session")
            return False
        return True


class HasBranchAccess(BasePermission):
    """
    Allows access only to branches the signed-in user was given at login.
    Super admins (no branch list in the session) may use any branch.
    """
    message = "You do not have access to this branch"

    def has_permission(self, request, view):
        branch_id = view.kwargs.get('branch_id') or request.query_params.get('branch_id')
        if branch_id is None and isinstance(request.data, dict):
            branch_id = request.data.get('branch_id')
        if branch_id is None:
            # views that need a branch reject the request themselves
            return True

        allowed = request.session.get('branch_ids')
        if allowed is None:
            return True
        try:
            has_access = int(branch_id) in allowed
        except (TypeError, ValueError):
            logger.warning(f"Malformed branch id {branch_id!r} on {request.path}")
            return False
        if not has_access:
            logger.warning(f"User {request.session.get('user_email')} tried to access branch {branch_id} without permission")
        return has_access
