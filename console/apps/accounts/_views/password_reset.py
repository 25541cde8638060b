from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

from console.apps.utils import api_error_response, parse_id
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)

MIN_PASSWORD_LENGTH = 6
# otp type the remote API uses for the forgot-password flow
FORGOT_PASSWORD_OTP = 1


class ForgotPasswordView(APIView):
    """Asks the remote API to send a reset code to the given email"""
    permission_classes = [AllowAny]

    def post(self, request):
        email = (request.data.get('email') or '').strip()
        if not email:
            return Response({'error': 'Email is required'}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call(
            'forgot_password', 'POST', {'email': email}, requires_auth=False
        )
        if not api_response.ok:
            logger.warning(f"Password reset request for {email} failed: {api_response.error}")
            return api_error_response(api_response)

        logger.info(f"Password reset code requested for {email}")
        return Response(api_response.data or {'message': 'Reset code sent'}, status=status.HTTP_200_OK)


class ResetPasswordView(APIView):
    """Sets a new password with the code sent by ForgotPasswordView"""
    permission_classes = [AllowAny]

    def post(self, request):
        data = request.data
        email = (data.get('email') or '').strip()
        otp = (str(data.get('otp') or '')).strip()
        password = data.get('password') or ''
        confirm_password = data.get('confirm_password') or ''

        if not email or not otp or not password or not confirm_password:
            return Response({'error': 'All fields are required.'}, status=status.HTTP_400_BAD_REQUEST)
        if len(password) < MIN_PASSWORD_LENGTH:
            return Response({'error': f'Password must be at least {MIN_PASSWORD_LENGTH} characters long.'},
                            status=status.HTTP_400_BAD_REQUEST)
        if password != confirm_password:
            return Response({'error': 'Passwords do not match.'}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call('reset_password', 'POST', {
            'email': email,
            'password': password,
            'otp': otp,
            'userId': parse_id(data.get('user_id')),
            'otpType': FORGOT_PASSWORD_OTP,
        }, requires_auth=False)
        if not api_response.ok:
            logger.warning(f"Password reset for {email} failed: {api_response.error}")
            return api_error_response(api_response)

        logger.info(f"Password reset for {email}")
        return Response({'message': 'Password reset successfully.'}, status=status.HTTP_200_OK)
