from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.menu.services import CUSTOMER_MENU_CACHE_KEY
from console.apps.resources import BranchResourceView
from console.apps.utils import api_error_response
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)


def _price_error(price, label):
    try:
        value = float(price)
    except (TypeError, ValueError):
        return f"{label} must be a number"
    if value < 0:
        return f"{label} cannot be negative"
    return None


class MenuItemView(BranchResourceView):
    resource_name = 'menu item'
    cache_key = 'menuItems'
    list_endpoint = 'get_menu_items_by_branch'
    detail_endpoint = 'get_menu_item_by_id'
    create_endpoint = 'create_menu_item'
    update_endpoint = 'update_menu_item'
    delete_endpoint = 'delete_menu_item'
    invalidates = (CUSTOMER_MENU_CACHE_KEY,)
    required_fields = ('name', 'menuCategoryId')

    def validate(self, data):
        error = super().validate(data)
        if error:
            return error

        variations = data.get('variations')
        if not isinstance(variations, list) or not variations:
            return "At least one variation is required"
        for variation in variations:
            if not isinstance(variation, dict) or not variation.get('name'):
                return "Every variation needs a name"
            error = _price_error(variation.get('price'), f"Price of {variation['name']}")
            if error:
                return error

        for modifier in data.get('modifiers') or []:
            error = _price_error(modifier.get('price'), f"Price of modifier {modifier.get('name', '')}".strip())
            if error:
                return error
        return None


class MenuItemStockStatusView(APIView):
    """Marks a menu item in or out of stock"""

    def put(self, request, pk):
        in_stock = request.data.get('is_in_stock')
        if not isinstance(in_stock, bool):
            return Response({"error": "is_in_stock must be true or false"}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call(
            'update_menu_item_stock_status', 'PUT', {'isInStock': in_stock}, path_params={'id': pk}
        )
        if not api_response.ok:
            return api_error_response(api_response)

        cache = get_query_cache(request)
        cache.invalidate([MenuItemView.cache_key])
        cache.invalidate([CUSTOMER_MENU_CACHE_KEY])
        logger.info(f"Menu item {pk} marked {'in' if in_stock else 'out of'} stock")
        return Response(api_response.data, status=status.HTTP_200_OK)
