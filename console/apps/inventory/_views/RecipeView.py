from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.inventory.recipes import calculate_recipe_quantity, validate_recipe
from console.apps.resources import BranchResourceView
from console.apps.utils import api_error_response, branch_id_from, parse_flag
from console.utils.api_repository import get_api_repository
from console.utils.exceptions import RecipeValidationError
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)


class RecipeView(BranchResourceView):
    resource_name = 'recipe'
    cache_key = 'recipes'
    list_endpoint = 'get_recipes'
    detail_endpoint = 'get_recipe_by_id'
    create_endpoint = 'create_recipe'
    update_endpoint = 'update_recipe'
    delete_endpoint = 'delete_recipe'
    branch_query_param = 'branchId'

    def _save(self, request, endpoint, pk=None):
        payload = {k: v for k, v in request.data.items() if k != 'branch_id'}
        branch_id = branch_id_from(request)
        if branch_id:
            payload['branchId'] = branch_id
        elif pk is None:
            return Response({"error": "branch_id is required"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            recipe = validate_recipe(payload)
        except RecipeValidationError as e:
            logger.warning(f"Rejected recipe: {e.message}")
            return Response({"error": e.message, "details": e.details}, status=status.HTTP_400_BAD_REQUEST)

        path_params = {'id': pk} if pk is not None else None
        api_response = get_api_repository(request).call(
            endpoint, 'PUT' if pk is not None else 'POST', recipe.to_api(), path_params=path_params
        )
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate([self.cache_key])
        logger.info(f"Recipe {'updated' if pk is not None else 'created'} by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_200_OK if pk is not None else status.HTTP_201_CREATED)

    def post(self, request, pk=None):
        if pk is not None:
            return Response({"error": "Method not allowed"}, status=status.HTTP_405_METHOD_NOT_ALLOWED)
        return self._save(request, self.create_endpoint)

    def put(self, request, pk=None):
        if pk is None:
            return Response({"error": "Recipe ID required"}, status=status.HTTP_400_BAD_REQUEST)
        return self._save(request, self.update_endpoint, pk)


class RecipeCalculatorView(APIView):
    """
    Per-order quantity helper of the recipe form.
    Answers with the previous quantity whenever the calculator does not apply.
    """

    def post(self, request):
        data = request.data
        previous_quantity = data.get('previous_quantity')
        try:
            previous_quantity = None if previous_quantity in (None, '') else float(previous_quantity)
        except (TypeError, ValueError):
            previous_quantity = None

        quantity = calculate_recipe_quantity(
            data.get('number_of_orders'),
            previous_quantity,
            target_selected=parse_flag(data.get('target_selected'), default=True),
            inventory_item_selected=parse_flag(data.get('inventory_item_selected'), default=True),
        )
        return Response({'quantity': quantity}, status=status.HTTP_200_OK)
