from enum import IntEnum

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.resources import BranchResourceView
from console.apps.utils import api_error_response
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)

MAX_GUESTS = 50


class ReservationAction(IntEnum):
    PENDING = 0
    CONFIRMED = 1
    COMPLETED = 2


class ReservationView(BranchResourceView):
    resource_name = 'reservation'
    cache_key = 'reservations'
    list_endpoint = 'get_reservations_by_branch'
    detail_endpoint = 'get_reservation_by_id'
    create_endpoint = 'create_reservation'
    update_endpoint = 'update_reservation'
    delete_endpoint = 'delete_reservation'
    required_fields = ('reservationName', 'reservationDate', 'tableId', 'numberOfGuests')
    default_sort = 'name'
    default_ascending = True

    def validate(self, data):
        error = super().validate(data)
        if error:
            return error
        if len(str(data['reservationName']).strip()) < 2:
            return "Reservation name must be at least 2 characters"
        try:
            guests = int(data['numberOfGuests'])
        except (TypeError, ValueError):
            return "Number of guests must be a number"
        if guests < 1:
            return "Number of guests must be at least 1"
        if guests > MAX_GUESTS:
            return f"Maximum {MAX_GUESTS} guests allowed"
        return None


class ReservationActionView(APIView):
    """Records the action taken on a reservation together with remarks"""

    def put(self, request, pk):
        try:
            action = ReservationAction(int(request.data.get('action_taken')))
        except (TypeError, ValueError):
            choices = ', '.join(f"{a.value} ({a.name.lower()})" for a in ReservationAction)
            return Response({"error": f"action_taken must be one of {choices}"},
                            status=status.HTTP_400_BAD_REQUEST)

        payload = {'actionTaken': int(action), 'remarks': request.data.get('remarks') or ''}
        api_response = get_api_repository(request).call(
            'update_reservation_action', 'PUT', payload, path_params={'id': pk}
        )
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate([ReservationView.cache_key])
        logger.info(f"Reservation {pk} marked {action.name.lower()} by {request.session.get('user_email')}")
        return Response(api_response.data or payload, status=status.HTTP_200_OK)


class ReservationStatusTypeView(APIView):

    def get(self, request):
        api_response = get_query_cache(request).fetch(
            ['reservationStatusTypes'],
            lambda: get_api_repository(request).call('get_reservation_status_types'),
        )
        if not api_response.ok:
            return api_error_response(api_response)
        return Response(api_response.data or [], status=status.HTTP_200_OK)
