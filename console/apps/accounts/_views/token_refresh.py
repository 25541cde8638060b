from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)


class TokenRefreshView(APIView):
    """Refreshes the remote access token held in the session ahead of expiry"""
    permission_classes = [AllowAny]

    def post(self, request):
        repository = get_api_repository(request)
        if not repository.tokens.refresh_token:
            return Response({"error": "No refresh token available"}, status=status.HTTP_400_BAD_REQUEST)

        if not repository.refresh_access_token():
            logger.warning(f"Token refresh failed for {request.session.get('user_email')}")
            return Response(
                {"error": "Invalid or expired refresh token"},
                status=status.HTTP_401_UNAUTHORIZED
            )
        return Response({"message": "Token refreshed"}, status=status.HTTP_200_OK)
