from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.utils import api_error_response, form_payload, parse_id, proxy_response
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)


class BranchView(APIView):
    """
    Single endpoint for branch operations:
    - GET: branches of an entity (?entity_id=) or one branch (?id=)
    - POST: create branch (multipart; RestaurantLogo / RestaurantBanner files optional)
    - PUT: update branch (id in body)
    - DELETE: delete branch (?id=)
    """

    def get(self, request):
        repository = get_api_repository(request)
        cache = get_query_cache(request)

        branch_id = parse_id(request.GET.get('id'))
        if branch_id:
            api_response = cache.fetch(
                ['branch', branch_id],
                lambda: repository.call('get_branch_by_id', path_params={'id': branch_id}),
            )
            return proxy_response(api_response)

        entity_id = parse_id(request.GET.get('entity_id'))
        if not entity_id:
            return Response({"error": "entity_id or id is required"}, status=status.HTTP_400_BAD_REQUEST)

        api_response = cache.fetch(
            ['branches', entity_id],
            lambda: repository.call('get_branches_by_entity', path_params={'entityId': entity_id}),
        )
        if not api_response.ok:
            return api_error_response(api_response)
        branches = api_response.data if isinstance(api_response.data, list) else []
        return Response(branches, status=status.HTTP_200_OK)

    def post(self, request):
        data, files = form_payload(request)
        if not data.get('name') and not data.get('Name'):
            return Response({"error": "Branch name is required"}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call('create_branch', 'POST', data, files=files)
        if not api_response.ok:
            logger.warning(f"Branch creation failed for {request.session.get('user_email')}: {api_response.error}")
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['branches'])
        logger.info(f"Branch created by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_201_CREATED)

    def put(self, request):
        data, files = form_payload(request)
        branch_id = parse_id(data.pop('id', None))
        if not branch_id:
            logger.warning("Attempt to update branch without providing ID")
            return Response({"error": "Branch ID required"}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call(
            'update_branch', 'PUT', data, path_params={'id': branch_id}, files=files
        )
        if not api_response.ok:
            return api_error_response(api_response)

        cache = get_query_cache(request)
        cache.invalidate(['branch', branch_id])
        cache.invalidate(['branches'])
        logger.info(f"Branch {branch_id} updated by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_200_OK)

    def delete(self, request):
        branch_id = parse_id(request.GET.get('id'))
        if not branch_id:
            return Response({"error": "Branch ID required"}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call('delete_branch', 'DELETE', path_params={'id': branch_id})
        if not api_response.ok:
            return api_error_response(api_response)

        cache = get_query_cache(request)
        cache.invalidate(['branch', branch_id])
        cache.invalidate(['branches'])
        logger.info(f"Branch {branch_id} deleted by {request.session.get('user_email')}")
        return Response({"status": f"Branch {branch_id} deleted"}, status=status.HTTP_200_OK)
