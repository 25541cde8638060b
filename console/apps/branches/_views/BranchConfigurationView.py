from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.branches.schemas import BranchConfiguration
from console.apps.branches.services import fetch_branch_configuration
from console.apps.utils import api_error_response, proxy_response
from console.utils.api_repository import get_api_repository
from console.utils.exceptions import BranchConfigurationError
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)

PERCENTAGE_KEYS = ('discountPercentage', 'serviceChargePercentage', 'taxPercentage')


class BranchConfigurationView(APIView):
    """Branch policy record: order types, opening hours, tax, service charge and discount"""

    def get(self, request, branch_id):
        api_response = fetch_branch_configuration(
            get_api_repository(request), get_query_cache(request), branch_id
        )
        return proxy_response(api_response)

    def put(self, request, branch_id):
        data = dict(request.data)

        for key in PERCENTAGE_KEYS:
            value = data.get(key)
            if value in (None, ''):
                continue
            try:
                percentage = float(value)
            except (TypeError, ValueError):
                return Response({"error": f"{key} must be a number"}, status=status.HTTP_400_BAD_REQUEST)
            if percentage < 0 or percentage > 100:
                return Response({"error": f"{key} must be between 0 and 100"}, status=status.HTTP_400_BAD_REQUEST)
            data[key] = percentage

        if any(key in data for key in PERCENTAGE_KEYS + ('isDiscountOnTotal',)):
            try:
                BranchConfiguration.from_api(data)
            except BranchConfigurationError as e:
                return Response({"error": e.message}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call(
            'update_branch_configuration', 'PUT', data, path_params={'id': branch_id}
        )
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['branchConfiguration', branch_id])
        logger.info(f"Configuration of branch {branch_id} updated by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_200_OK)
