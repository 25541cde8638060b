from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

from console.apps.accounts.tokens import user_id_from
from console.apps.utils import api_error_response
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)


class LoginView(APIView):
    """Signs in against the remote API and keeps its tokens in the console session"""
    permission_classes = [AllowAny]

    def post(self, request):
        email = request.data.get('email')
        password = request.data.get('password')

        if not email or not password:
            return Response(
                {'error': 'Email and password are required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        repository = get_api_repository(request)
        api_response = repository.call(
            'login', 'POST', {'email': email, 'password': password}, requires_auth=False
        )
        if not api_response.ok:
            logger.warning(f"Failed login attempt for {email}")
            if api_response.status in (400, 401, 404):
                return Response({'error': 'Login failed. Please check your credentials.'},
                                status=status.HTTP_401_UNAUTHORIZED)
            return api_error_response(api_response)

        payload = api_response.data or {}
        access_token = payload.get('token') or payload.get('accessToken')
        if not access_token:
            logger.error(f"Login response for {email} carried no token")
            return Response({'error': 'Login failed. No token received.'}, status=status.HTTP_502_BAD_GATEWAY)

        request.session.cycle_key()
        repository.set_tokens(access_token, payload.get('refreshToken'))
        request.session['user_email'] = payload.get('email') or email
        request.session['user_id'] = user_id_from(payload, access_token)
        request.session['roles'] = payload.get('roles') or []
        branch_ids = payload.get('branchIds')
        if isinstance(branch_ids, list):
            request.session['branch_ids'] = [int(b) for b in branch_ids]

        logger.info(f"User {request.session['user_email']} logged in")
        return Response({
            'user': {
                'id': request.session['user_id'],
                'email': request.session['user_email'],
                'full_name': payload.get('fullName'),
                'mobile_number': payload.get('mobileNumber'),
                'profile_picture': payload.get('profilePicture'),
                'roles': request.session['roles'],
            }
        }, status=status.HTTP_200_OK)
