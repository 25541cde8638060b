from rest_framework.response import Response
from rest_framework import status

from console.apps.resources import BranchResourceView
from console.apps.utils import api_error_response, branch_id_from, parse_id
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)

STOCK_CACHE_KEYS = ('inventoryStock', 'lowStock', 'inventoryItems')


def _quantity(value, label, minimum=0.0):
    """(quantity, error) from a form or JSON value"""
    try:
        quantity = float(value)
    except (TypeError, ValueError):
        return None, f"{label} must be a number"
    if quantity < minimum:
        return None, f"{label} must be at least {minimum:g}"
    return quantity, None


class StockView(BranchResourceView):
    """
    Stock levels of a branch:
    - GET: current stock per inventory item (?branch_id=, paginated)
    - POST: set the stock of one item {branch_id, inventory_item_id, new_stock, reason}
    """
    resource_name = 'stock level'
    cache_key = 'inventoryStock'
    list_endpoint = 'get_inventory_stock_by_branch'
    invalidates = ('lowStock', 'inventoryItems')
    default_sort = 'itemName'
    default_ascending = True

    def post(self, request, pk=None):
        branch_id = branch_id_from(request)
        if not branch_id:
            return Response({"error": "branch_id is required"}, status=status.HTTP_400_BAD_REQUEST)

        item_id = parse_id(request.data.get('inventory_item_id'))
        if not item_id:
            return Response({"error": "inventory_item_id is required"}, status=status.HTTP_400_BAD_REQUEST)
        new_stock, error = _quantity(request.data.get('new_stock'), "Stock")
        if error:
            return Response({"error": error}, status=status.HTTP_400_BAD_REQUEST)
        reason = (request.data.get('reason') or '').strip()
        if not reason:
            return Response({"error": "Reason is required"}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call(
            'update_inventory_stock', 'POST',
            {'inventoryItemId': item_id, 'newStock': new_stock, 'reason': reason},
            path_params={'branchId': branch_id},
        )
        if not api_response.ok:
            logger.warning(f"Stock update of item {item_id} in branch {branch_id} failed: {api_response.error}")
            return api_error_response(api_response)

        self.invalidate_cache(request)
        logger.info(f"Stock of item {item_id} in branch {branch_id} set to {new_stock:g} by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_200_OK)


class LowStockView(BranchResourceView):
    """Items at or under their reorder level (?branch_id=, paginated)"""
    resource_name = 'low stock item'
    cache_key = 'lowStock'
    list_endpoint = 'get_inventory_low_stock_by_branch'
    default_sort = 'itemName'
    default_ascending = True


class WastageView(BranchResourceView):
    """
    Wasted stock of a branch:
    - GET: wastage between ?from= and ?to= (ISO dates) for ?branch_id=
    - POST: record wastage {branch_id, inventoryItemId, quantity, reason}
    """
    resource_name = 'wastage record'
    cache_key = 'inventoryWastage'
    list_endpoint = 'get_inventory_wastage'
    create_endpoint = 'create_inventory_wastage'
    branch_query_param = 'branchId'
    list_filters = {'from': 'from', 'to': 'to'}
    required_fields = ('inventoryItemId', 'quantity', 'reason')
    invalidates = STOCK_CACHE_KEYS

    def get(self, request, pk=None):
        if pk is None and not (request.query_params.get('from') and request.query_params.get('to')):
            return Response({"error": "from and to dates are required"}, status=status.HTTP_400_BAD_REQUEST)
        return super().get(request, pk)

    def validate(self, data):
        error = super().validate(data)
        if error:
            return error
        data['inventoryItemId'] = parse_id(data['inventoryItemId'])
        if not data['inventoryItemId']:
            return "Please select an item"
        quantity, error = _quantity(data['quantity'], "Quantity", minimum=0.01)
        if error:
            return error
        data['quantity'] = quantity
        return None
