import re

from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.utils import api_error_response, multipart_parts, parse_id, proxy_response, uploads
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.pagination import PaginationRequest
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)

MIN_PASSWORD_LENGTH = 6
MIN_PHONE_DIGITS = 10


def _phone_error(phone):
    if len(re.sub(r'\D', '', str(phone or ''))) < MIN_PHONE_DIGITS:
        return f"Phone number must be at least {MIN_PHONE_DIGITS} digits"
    return None


class UserView(APIView):
    """
    Console users of the signed-in account:
    - GET: paginated list (page, page_size, sort_by, ascending, search) or one user (/<pk>/)
    - POST: create user (multipart; ProfilePicture optional)
    - PUT: update name, phone, role and branch of /<pk>/
    - DELETE: delete /<pk>/

    A user is bound to one branch; branch access is checked on branch_id like
    every other branch-scoped request.
    """

    def get(self, request, pk=None):
        repository = get_api_repository(request)
        cache = get_query_cache(request)

        if pk is not None:
            api_response = cache.fetch(
                ['users', 'detail', pk],
                lambda: repository.call('get_user_by_id', path_params={'id': pk}),
            )
            return proxy_response(api_response)

        pagination = PaginationRequest.from_query_params(request.query_params, default_sort='name', default_ascending=True)
        api_response = cache.fetch(
            ['users'] + pagination.cache_key(),
            lambda: repository.call('get_users', query=pagination.to_query()),
        )
        return proxy_response(api_response)

    def post(self, request, pk=None):
        if pk is not None:
            return Response({"error": "Method not allowed"}, status=status.HTTP_405_METHOD_NOT_ALLOWED)

        data = request.data
        required_fields = ['name', 'email', 'password', 'phone_number', 'role_id', 'branch_id']
        if missing := [f for f in required_fields if not data.get(f)]:
            logger.warning(f"Attempt to create user with missing fields: {missing}")
            return Response({'error': f'Missing fields: {", ".join(missing)}'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            validate_email(data['email'])
        except ValidationError:
            return Response({'error': 'Valid email is required'}, status=status.HTTP_400_BAD_REQUEST)
        if len(str(data['password'])) < MIN_PASSWORD_LENGTH:
            return Response({'error': f'Password must be at least {MIN_PASSWORD_LENGTH} characters'},
                            status=status.HTTP_400_BAD_REQUEST)
        error = _phone_error(data['phone_number'])
        if error:
            return Response({'error': error}, status=status.HTTP_400_BAD_REQUEST)
        role_id, branch_id = parse_id(data['role_id']), parse_id(data['branch_id'])
        if not role_id or not branch_id:
            return Response({'error': 'role_id and branch_id must be ids'}, status=status.HTTP_400_BAD_REQUEST)

        parts = multipart_parts({
            'Email': data['email'],
            'Name': data['name'],
            'Password': data['password'],
            'MobileNumber': data['phone_number'],
            'RoleId': role_id,
            'BranchId': branch_id,
        }, uploads(request, 'ProfilePicture'))
        api_response = get_api_repository(request).call('create_user', 'POST', files=parts)
        if not api_response.ok:
            logger.warning(f"Creating user {data['email']} failed: {api_response.error}")
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['users'])
        logger.info(f"User {data['email']} created in branch {branch_id} by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_201_CREATED)

    def put(self, request, pk=None):
        if pk is None:
            return Response({'error': 'User ID required'}, status=status.HTTP_400_BAD_REQUEST)

        data = request.data
        if missing := [f for f in ('name', 'phone_number', 'role_id', 'branch_id') if not data.get(f)]:
            return Response({'error': f'Missing fields: {", ".join(missing)}'}, status=status.HTTP_400_BAD_REQUEST)
        error = _phone_error(data['phone_number'])
        if error:
            return Response({'error': error}, status=status.HTTP_400_BAD_REQUEST)
        role_id, branch_id = parse_id(data['role_id']), parse_id(data['branch_id'])
        if not role_id or not branch_id:
            return Response({'error': 'role_id and branch_id must be ids'}, status=status.HTTP_400_BAD_REQUEST)

        # the remote API takes the user id in the body, not the path
        api_response = get_api_repository(request).call('update_user', 'PUT', {
            'id': pk,
            'name': data['name'],
            'mobileNumber': data['phone_number'],
            'roleId': role_id,
            'branchId': branch_id,
        })
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['users'])
        logger.info(f"User {pk} updated by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_200_OK)

    def delete(self, request, pk=None):
        if pk is None:
            return Response({'error': 'User ID required'}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call('delete_user', 'DELETE', path_params={'id': pk})
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['users'])
        logger.info(f"User {pk} deleted by {request.session.get('user_email')}")
        return Response({'status': f'User {pk} deleted'}, status=status.HTTP_200_OK)


class RoleView(APIView):
    """Roles a user can be given"""

    def get(self, request):
        repository = get_api_repository(request)
        api_response = get_query_cache(request).fetch(['roles'], lambda: repository.call('get_roles'))
        return proxy_response(api_response)
