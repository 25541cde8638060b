from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.utils import api_error_response, branch_id_from, proxy_response
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.pagination import PaginationRequest
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)


class BranchResourceView(APIView):
    """
    CRUD over one branch-scoped remote resource:
    - GET: list for ?branch_id= (paginated, searchable) or one record (/<pk>/)
    - POST: create; branch_id required in the body
    - PUT: update /<pk>/
    - DELETE: delete /<pk>/

    Reads go through the query cache under [cache_key, ...]; every successful
    mutation invalidates the whole [cache_key] prefix and each prefix named in
    `invalidates`.
    """
    resource_name = 'record'
    cache_key = None
    list_endpoint = None
    detail_endpoint = None
    create_endpoint = None
    update_endpoint = None
    delete_endpoint = None
    required_fields = ()
    paginated = True
    default_sort = 'createdAt'
    default_ascending = False
    # list endpoints that take the branch in the query string instead of the path
    branch_query_param = None
    # other cached queries built from this resource
    invalidates = ()
    # console query param -> remote query param, forwarded on list requests
    list_filters = {}

    def invalidate_cache(self, request):
        cache = get_query_cache(request)
        cache.invalidate([self.cache_key])
        for prefix in self.invalidates:
            cache.invalidate([prefix])

    def validate(self, data):
        """Error message for a create/update body, or None"""
        missing = [field for field in self.required_fields if data.get(field) in (None, '', [])]
        if missing:
            return f"Missing required fields: {', '.join(missing)}"
        return None

    def list_query(self, request):
        if not self.paginated:
            return None
        return PaginationRequest.from_query_params(
            request.query_params, default_sort=self.default_sort, default_ascending=self.default_ascending
        )

    def get(self, request, pk=None):
        repository = get_api_repository(request)
        cache = get_query_cache(request)

        if pk is not None:
            if not self.detail_endpoint:
                return Response({"error": "Method not allowed"}, status=status.HTTP_405_METHOD_NOT_ALLOWED)
            api_response = cache.fetch(
                [self.cache_key, 'detail', pk],
                lambda: repository.call(self.detail_endpoint, path_params={'id': pk}),
            )
            return proxy_response(api_response)

        branch_id = branch_id_from(request)
        if not branch_id:
            return Response({"error": "branch_id is required"}, status=status.HTTP_400_BAD_REQUEST)

        pagination = self.list_query(request)
        key = [self.cache_key, branch_id] + (pagination.cache_key() if pagination else [])
        query = pagination.to_query() if pagination else {}
        for name, remote_name in self.list_filters.items():
            value = request.query_params.get(name)
            if value:
                query[remote_name] = value
            key.append(value or None)
        path_params = {'branchId': branch_id}
        if self.branch_query_param:
            query[self.branch_query_param] = str(branch_id)
            path_params = None
        api_response = cache.fetch(
            key,
            lambda: repository.call(self.list_endpoint, path_params=path_params, query=query or None),
        )
        return proxy_response(api_response)

    def post(self, request, pk=None):
        if pk is not None or not self.create_endpoint:
            return Response({"error": "Method not allowed"}, status=status.HTTP_405_METHOD_NOT_ALLOWED)
        branch_id = branch_id_from(request)
        if not branch_id:
            return Response({"error": "branch_id is required"}, status=status.HTTP_400_BAD_REQUEST)

        data = {k: v for k, v in request.data.items() if k != 'branch_id'}
        data['branchId'] = branch_id
        error = self.validate(data)
        if error:
            return Response({"error": error}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call(self.create_endpoint, 'POST', data)
        if not api_response.ok:
            logger.warning(f"Creating {self.resource_name} in branch {branch_id} failed: {api_response.error}")
            return api_error_response(api_response)

        self.invalidate_cache(request)
        logger.info(f"{self.resource_name.capitalize()} created in branch {branch_id} by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_201_CREATED)

    def put(self, request, pk=None):
        if not self.update_endpoint:
            return Response({"error": "Method not allowed"}, status=status.HTTP_405_METHOD_NOT_ALLOWED)
        if pk is None:
            return Response({"error": f"{self.resource_name.capitalize()} ID required"}, status=status.HTTP_400_BAD_REQUEST)

        data = {k: v for k, v in request.data.items() if k != 'branch_id'}
        branch_id = branch_id_from(request)
        if branch_id:
            data['branchId'] = branch_id
        error = self.validate(data)
        if error:
            return Response({"error": error}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call(self.update_endpoint, 'PUT', data, path_params={'id': pk})
        if not api_response.ok:
            return api_error_response(api_response)

        self.invalidate_cache(request)
        logger.info(f"{self.resource_name.capitalize()} {pk} updated by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_200_OK)

    def delete(self, request, pk=None):
        if not self.delete_endpoint:
            return Response({"error": "Method not allowed"}, status=status.HTTP_405_METHOD_NOT_ALLOWED)
        if pk is None:
            return Response({"error": f"{self.resource_name.capitalize()} ID required"}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call(self.delete_endpoint, 'DELETE', path_params={'id': pk})
        if not api_response.ok:
            return api_error_response(api_response)

        self.invalidate_cache(request)
        logger.info(f"{self.resource_name.capitalize()} {pk} deleted by {request.session.get('user_email')}")
        return Response({"status": f"{self.resource_name.capitalize()} {pk} deleted"}, status=status.HTTP_200_OK)
