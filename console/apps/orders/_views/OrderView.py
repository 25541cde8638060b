from django.conf import settings
from pydantic import ValidationError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.orders.schemas import OrderDraft
from console.apps.orders.services import build_create_order_request, price_order
from console.apps.resources import BranchResourceView
from console.apps.utils import api_error_response, parse_id
from console.utils.api_repository import get_api_repository
from console.utils.exceptions import ApiError, BranchConfigurationError, InvalidSelectionError
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache
from .OrderPreviewView import order_error_response

logger = ConsoleLogger(__name__)


class OrderView(BranchResourceView):
    """
    Orders of a branch:
    - GET: paginated list for ?branch_id= or one order (/<pk>/)
    - POST: price the draft against the branch menu and place it
    Orders are never edited or deleted from the console; see OrderStatusView.
    """
    resource_name = 'order'
    cache_key = 'orders'
    list_endpoint = 'get_orders_by_branch'
    detail_endpoint = 'get_order_by_id'
    branch_query_param = 'BranchId'

    def post(self, request, pk=None):
        if pk is not None:
            return Response({"error": "Method not allowed"}, status=status.HTTP_405_METHOD_NOT_ALLOWED)

        repository = get_api_repository(request)
        cache = get_query_cache(request)
        try:
            draft = OrderDraft.model_validate(request.data)
            if not draft.items:
                return Response({"error": "Add at least one item to the order"}, status=status.HTTP_400_BAD_REQUEST)
            priced = price_order(repository, cache, draft, settings.CONSOLE_DEFAULT_CURRENCY)
        except (ValidationError, InvalidSelectionError, BranchConfigurationError, ApiError) as e:
            return order_error_response(e)

        order_request = build_create_order_request(priced, request.session.get('user_email') or 'admin')
        api_response = repository.call('create_order', 'POST', order_request.to_api())
        if not api_response.ok:
            logger.warning(f"Order creation failed in branch {draft.branch_id}: {api_response.error}")
            return api_error_response(api_response)

        cache.invalidate(['orders', draft.branch_id])
        data = api_response.data if isinstance(api_response.data, dict) else {}
        logger.info(f"Order {data.get('orderNumber')} created in branch {draft.branch_id} "
                    f"by {request.session.get('user_email')}")
        return Response({
            'order_id': data.get('orderId'),
            'order_number': data.get('orderNumber'),
            'totals': priced.totals.as_display(),
            'currency': priced.currency,
        }, status=status.HTTP_201_CREATED)


class OrderStatusView(APIView):
    """Moves an order to another status"""

    def get(self, request):
        api_response = get_query_cache(request).fetch(
            ['orderStatusTypes'],
            lambda: get_api_repository(request).call('get_order_status_types'),
        )
        if not api_response.ok:
            return api_error_response(api_response)
        return Response(api_response.data or [], status=status.HTTP_200_OK)

    def put(self, request):
        order_id = parse_id(request.data.get('order_id'))
        status_id = parse_id(request.data.get('status'))
        if not order_id or not status_id:
            return Response({"error": "order_id and status are required"}, status=status.HTTP_400_BAD_REQUEST)

        payload = {
            'orderId': order_id,
            'status': status_id,
            'comments': request.data.get('comments') or 'No',
        }
        api_response = get_api_repository(request).call('update_order_status', 'PUT', payload)
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['orders'])
        logger.info(f"Order {order_id} moved to status {status_id} by {request.session.get('user_email')}")
        return Response(api_response.data or {"orderId": order_id}, status=status.HTTP_200_OK)
