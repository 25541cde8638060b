from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.menu.services import CUSTOMER_MENU_CACHE_KEY
from console.apps.resources import BranchResourceView
from console.apps.utils import api_error_response, parse_id
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)

BULK_TARGETS = {
    'deals': ('bulk_discount_deals', 'dealIds', 'deals'),
    'menu': ('bulk_discount_menu', 'menuItemIds', 'menuItems'),
}


class DiscountView(BranchResourceView):
    # the percentage range is enforced by the API
    resource_name = 'discount'
    cache_key = 'discounts'
    list_endpoint = 'get_discounts_by_branch'
    detail_endpoint = 'get_discount_by_id'
    create_endpoint = 'create_discount'
    update_endpoint = 'update_discount'
    delete_endpoint = 'delete_discount'
    invalidates = (CUSTOMER_MENU_CACHE_KEY,)
    required_fields = ('name', 'value')

    def validate(self, data):
        error = super().validate(data)
        if error:
            return error
        try:
            float(data['value'])
        except (TypeError, ValueError):
            return "Discount value must be a number"
        return None


class BulkDiscountView(APIView):
    """Applies one discount to many deals or menu items"""

    def put(self, request):
        target = request.data.get('target')
        if target not in BULK_TARGETS:
            return Response({"error": "target must be 'deals' or 'menu'"}, status=status.HTTP_400_BAD_REQUEST)

        discount_id = parse_id(request.data.get('discount_id'))
        if not discount_id:
            return Response({"error": "discount_id is required"}, status=status.HTTP_400_BAD_REQUEST)

        ids = [parse_id(i) for i in request.data.get('ids') or []]
        if not ids or None in ids:
            return Response({"error": "ids must be a non-empty list of ids"}, status=status.HTTP_400_BAD_REQUEST)

        endpoint, ids_field, cache_key = BULK_TARGETS[target]
        api_response = get_api_repository(request).call(
            endpoint, 'PUT', {ids_field: ids, 'discountId': discount_id}
        )
        if not api_response.ok:
            return api_error_response(api_response)

        cache = get_query_cache(request)
        cache.invalidate([cache_key])
        cache.invalidate([CUSTOMER_MENU_CACHE_KEY])
        logger.info(f"Discount {discount_id} applied to {len(ids)} {target} by {request.session.get('user_email')}")
        return Response({"status": "Discount applied", "count": len(ids)}, status=status.HTTP_200_OK)
