from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.resources import BranchResourceView
from console.apps.utils import api_error_response, parse_id
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)


class PurchaseOrderView(BranchResourceView):
    """Purchase orders are created and read here; they change state via receive/cancel"""
    resource_name = 'purchase order'
    cache_key = 'purchaseOrders'
    list_endpoint = 'get_purchase_orders_by_branch'
    detail_endpoint = 'get_purchase_order_by_id'
    create_endpoint = 'create_purchase_order'
    required_fields = ('supplierId', 'items')

    def validate(self, data):
        error = super().validate(data)
        if error:
            return error
        items = data['items']
        if not isinstance(items, list):
            return "items must be a list"
        for line in items:
            if not isinstance(line, dict) or not parse_id(line.get('inventoryItemId')):
                return "Every line needs an inventory item"
            try:
                quantity = float(line.get('quantity'))
                unit_price = float(line.get('unitPrice', 0))
            except (TypeError, ValueError):
                return "Quantity and unit price must be numbers"
            if quantity <= 0:
                return "Quantity must be greater than 0"
            if unit_price < 0:
                return "Unit price cannot be negative"
        return None

    def delete(self, request, pk=None):
        return Response({"error": "Purchase orders are cancelled, not deleted"},
                        status=status.HTTP_405_METHOD_NOT_ALLOWED)


def _invalidate_stock(request):
    cache = get_query_cache(request)
    cache.invalidate([PurchaseOrderView.cache_key])
    cache.invalidate(['inventoryItems'])


class ReceivePurchaseOrderView(APIView):
    """Books received quantities against the lines of a purchase order"""

    def put(self, request, pk):
        items = request.data.get('items')
        if not isinstance(items, list) or not items:
            return Response({"error": "items are required"}, status=status.HTTP_400_BAD_REQUEST)

        received = []
        for line in items:
            line_id = parse_id(line.get('purchase_order_item_id')) if isinstance(line, dict) else None
            if not line_id:
                return Response({"error": "Every line needs a purchase_order_item_id"},
                                status=status.HTTP_400_BAD_REQUEST)
            try:
                quantity = float(line.get('received_quantity'))
            except (TypeError, ValueError):
                return Response({"error": "Received quantity must be a number"}, status=status.HTTP_400_BAD_REQUEST)
            if quantity < 0:
                return Response({"error": "Received quantity must be 0 or greater"},
                                status=status.HTTP_400_BAD_REQUEST)
            received.append({'purchaseOrderItemId': line_id, 'receivedQuantity': quantity})

        api_response = get_api_repository(request).call(
            'receive_purchase_order', 'PUT', {'items': received}, path_params={'id': pk}
        )
        if not api_response.ok:
            return api_error_response(api_response)

        _invalidate_stock(request)
        logger.info(f"Purchase order {pk} received by {request.session.get('user_email')}")
        return Response(api_response.data or {"status": "Purchase order received"}, status=status.HTTP_200_OK)


class CancelPurchaseOrderView(APIView):

    def put(self, request, pk):
        api_response = get_api_repository(request).call('cancel_purchase_order', 'PUT', path_params={'id': pk})
        if not api_response.ok:
            return api_error_response(api_response)

        _invalidate_stock(request)
        logger.info(f"Purchase order {pk} cancelled by {request.session.get('user_email')}")
        return Response(api_response.data or {"status": "Purchase order cancelled"}, status=status.HTTP_200_OK)
