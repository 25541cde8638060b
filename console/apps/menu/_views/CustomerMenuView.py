from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.menu.services import fetch_customer_menu
from console.apps.utils import api_error_response
from console.utils.api_repository import get_api_repository
from console.utils.query_cache import get_query_cache


class CustomerMenuView(APIView):
    """Orderable menu of a branch as used by the order builder"""

    def get(self, request, branch_id):
        api_response = fetch_customer_menu(get_api_repository(request), get_query_cache(request), branch_id)
        if not api_response.ok:
            return api_error_response(api_response)
        return Response(api_response.data or {}, status=status.HTTP_200_OK)
