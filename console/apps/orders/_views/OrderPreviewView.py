from dataclasses import asdict

from django.conf import settings
from pydantic import ValidationError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.orders.schemas import OrderDraft
from console.apps.orders.services import price_order
from console.utils.api_repository import get_api_repository
from console.utils.currency import currency_symbol, format_currency, round_money
from console.utils.exceptions import ApiError, BranchConfigurationError, InvalidSelectionError
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)


def order_error_response(error):
    """Map pricing failures to console responses"""
    if isinstance(error, ValidationError):
        return Response({"error": "Invalid order", "details": error.errors(include_url=False, include_context=False)},
                        status=status.HTTP_400_BAD_REQUEST)
    if isinstance(error, InvalidSelectionError):
        logger.warning(f"Rejected order line: {error.message}")
        return Response({"error": error.message, "details": error.details}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(error, BranchConfigurationError):
        logger.error(f"Cannot price order: {error.message}")
        return Response({"error": error.message}, status=status.HTTP_424_FAILED_DEPENDENCY)
    code = error.status if error.status >= 400 else status.HTTP_502_BAD_GATEWAY
    return Response({"error": error.message}, status=code)


class OrderPreviewView(APIView):
    """
    Prices an order draft without placing it.

    Totals are recomputed from the current menu and branch configuration on
    every call; 'totals' is rounded for display, 'raw_totals' is not.
    """

    def post(self, request):
        try:
            draft = OrderDraft.model_validate(request.data)
            priced = price_order(
                get_api_repository(request), get_query_cache(request), draft, settings.CONSOLE_DEFAULT_CURRENCY
            )
        except (ValidationError, InvalidSelectionError, BranchConfigurationError, ApiError) as e:
            return order_error_response(e)

        lines = priced.lines()
        for line in lines:
            line['unit_price'] = round_money(line['unit_price'])
            line['line_total'] = round_money(line['line_total'])

        return Response({
            'branch_id': draft.branch_id,
            'currency': priced.currency,
            'currency_symbol': currency_symbol(priced.currency),
            'is_discount_on_total': priced.config.is_discount_on_total,
            'lines': lines,
            'totals': priced.totals.as_display(),
            'raw_totals': asdict(priced.totals),
            'formatted_total': format_currency(priced.totals.total_amount, priced.currency),
        }, status=status.HTTP_200_OK)
