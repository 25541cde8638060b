import re

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.utils import api_error_response, multipart_parts, uploads
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)

MAX_NAME_LENGTH = 100
MOBILE_NUMBER = re.compile(r'^\+?[\d\s\-()]{7,15}$')


class ProfileView(APIView):
    """Name, mobile number and picture of the signed-in user"""

    def put(self, request):
        name = (request.data.get('name') or '').strip()
        mobile_number = (request.data.get('mobile_number') or '').strip()

        if not name:
            return Response({'error': 'Name is required'}, status=status.HTTP_400_BAD_REQUEST)
        if len(name) > MAX_NAME_LENGTH:
            return Response({'error': f'Name must be less than {MAX_NAME_LENGTH} characters'},
                            status=status.HTTP_400_BAD_REQUEST)
        if not MOBILE_NUMBER.match(mobile_number):
            return Response({'error': 'Please enter a valid mobile number'}, status=status.HTTP_400_BAD_REQUEST)

        parts = multipart_parts({'Name': name, 'MobileNumber': mobile_number}, uploads(request, 'ProfilePicture'))
        api_response = get_api_repository(request).call('update_user_profile', 'PUT', files=parts)
        if not api_response.ok:
            return api_error_response(api_response)

        logger.info(f"Profile of {request.session.get('user_email')} updated")
        return Response(api_response.data, status=status.HTTP_200_OK)
