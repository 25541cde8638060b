from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.utils import api_error_response, parse_id, proxy_response
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)


class TableView(APIView):
    """Dining tables of a branch (locations in the remote API)"""

    def get(self, request, branch_id):
        repository = get_api_repository(request)
        api_response = get_query_cache(request).fetch(
            ['locations', branch_id],
            lambda: repository.call('get_locations_by_branch', path_params={'branchId': branch_id}),
        )
        return proxy_response(api_response)

    def post(self, request, branch_id):
        name = (request.data.get('name') or '').strip()
        if not name:
            return Response({"error": "Table name is required"}, status=status.HTTP_400_BAD_REQUEST)

        payload = {**request.data, 'name': name, 'branchId': branch_id}
        api_response = get_api_repository(request).call('create_location', 'POST', payload)
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['locations', branch_id])
        logger.info(f"Table '{name}' created in branch {branch_id}")
        return Response(api_response.data, status=status.HTTP_201_CREATED)

    def put(self, request, branch_id):
        table_id = parse_id(request.data.get('id'))
        if not table_id:
            return Response({"error": "Table ID required"}, status=status.HTTP_400_BAD_REQUEST)

        payload = {**request.data, 'branchId': branch_id}
        api_response = get_api_repository(request).call(
            'update_location', 'PUT', payload, path_params={'id': table_id}
        )
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['locations', branch_id])
        return Response(api_response.data, status=status.HTTP_200_OK)

    def delete(self, request, branch_id):
        table_id = parse_id(request.GET.get('id'))
        if not table_id:
            return Response({"error": "Table ID required"}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call('delete_location', 'DELETE', path_params={'id': table_id})
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['locations', branch_id])
        logger.info(f"Table {table_id} deleted from branch {branch_id}")
        return Response({"status": f"Table {table_id} deleted"}, status=status.HTTP_200_OK)
