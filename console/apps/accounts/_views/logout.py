"""Logout views"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.permissions import HasApiSession

logger = ConsoleLogger(__name__)


class LogoutView(APIView):
    permission_classes = [HasApiSession]

    def post(self, request):
        email = request.session.get('user_email')
        get_api_repository(request).logout()
        request.session.flush()
        logger.info(f"User {email} logged out successfully")
        return Response({"message": "Logout successful"}, status=status.HTTP_200_OK)
