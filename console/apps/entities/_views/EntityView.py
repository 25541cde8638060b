import re
from enum import IntEnum

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from console.apps.utils import api_error_response, multipart_parts, proxy_response, uploads
from console.utils.api_repository import get_api_repository
from console.utils.logger import ConsoleLogger
from console.utils.query_cache import get_query_cache

logger = ConsoleLogger(__name__)

ENTITY_FILES = ('ProfilePicture', 'CertificateFile')
HEX_COLOR = re.compile(r'^#[0-9a-fA-F]{6}$')


class EntityType(IntEnum):
    HOTEL = 1
    RESTAURANT = 2


def entity_fields(data):
    """(form fields, error) for a create/update body"""
    if missing := [f for f in ('name', 'phone', 'address') if not (data.get(f) or '').strip()]:
        return None, f'Missing fields: {", ".join(missing)}'
    try:
        entity_type = EntityType(int(data.get('type', EntityType.RESTAURANT)))
    except (TypeError, ValueError):
        return None, 'type must be 1 (hotel) or 2 (restaurant)'
    return {
        'Name': data['name'].strip(),
        'Phone': data['phone'].strip(),
        'Address': data['address'].strip(),
        'Type': int(entity_type),
    }, None


class EntityView(APIView):
    """
    Businesses (hotels and restaurants) owning the branches:
    - GET: all entities or one entity (/<pk>/)
    - POST: create entity (multipart; ProfilePicture and CertificateFile optional)
    - PUT: update /<pk>/ (multipart)
    - DELETE: delete /<pk>/ together with its branches
    """

    def get(self, request, pk=None):
        repository = get_api_repository(request)
        cache = get_query_cache(request)
        if pk is not None:
            api_response = cache.fetch(
                ['entities', 'detail', pk],
                lambda: repository.call('get_entity_by_id', path_params={'id': pk}),
            )
        else:
            api_response = cache.fetch(['entities'], lambda: repository.call('get_entities'))
        return proxy_response(api_response)

    def post(self, request, pk=None):
        if pk is not None:
            return Response({'error': 'Method not allowed'}, status=status.HTTP_405_METHOD_NOT_ALLOWED)
        fields, error = entity_fields(request.data)
        if error:
            return Response({'error': error}, status=status.HTTP_400_BAD_REQUEST)

        parts = multipart_parts(fields, uploads(request, *ENTITY_FILES))
        api_response = get_api_repository(request).call('create_entity', 'POST', files=parts)
        if not api_response.ok:
            logger.warning(f"Entity creation failed for {request.session.get('user_email')}: {api_response.error}")
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['entities'])
        logger.info(f"Entity {fields['Name']} created by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_201_CREATED)

    def put(self, request, pk=None):
        if pk is None:
            return Response({'error': 'Entity ID required'}, status=status.HTTP_400_BAD_REQUEST)
        fields, error = entity_fields(request.data)
        if error:
            return Response({'error': error}, status=status.HTTP_400_BAD_REQUEST)

        parts = multipart_parts(fields, uploads(request, *ENTITY_FILES))
        api_response = get_api_repository(request).call('update_entity', 'PUT', files=parts, path_params={'id': pk})
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['entities'])
        logger.info(f"Entity {pk} updated by {request.session.get('user_email')}")
        return Response(api_response.data, status=status.HTTP_200_OK)

    def delete(self, request, pk=None):
        if pk is None:
            return Response({'error': 'Entity ID required'}, status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call('delete_entity', 'DELETE', path_params={'id': pk})
        if not api_response.ok:
            return api_error_response(api_response)

        cache = get_query_cache(request)
        cache.invalidate(['entities'])
        cache.invalidate(['branches', pk])
        logger.info(f"Entity {pk} deleted by {request.session.get('user_email')}")
        return Response({'status': f'Entity {pk} deleted'}, status=status.HTTP_200_OK)


class EntityPrimaryColorView(APIView):
    """Brand color of an entity, as #RRGGBB"""

    def get(self, request, pk):
        repository = get_api_repository(request)
        api_response = get_query_cache(request).fetch(
            ['entities', 'primaryColor', pk],
            lambda: repository.call('get_entity_primary_color', path_params={'id': pk}),
        )
        return proxy_response(api_response)

    def put(self, request, pk):
        color = (request.data.get('primary_color') or '').strip()
        if not HEX_COLOR.match(color):
            return Response({'error': 'primary_color must be a hex color like #16A34A'},
                            status=status.HTTP_400_BAD_REQUEST)

        api_response = get_api_repository(request).call(
            'update_entity_primary_color', 'PUT', {'primaryColor': color.upper()}, path_params={'id': pk}
        )
        if not api_response.ok:
            return api_error_response(api_response)

        get_query_cache(request).invalidate(['entities', 'primaryColor', pk])
        logger.info(f"Primary color of entity {pk} set to {color.upper()}")
        return Response(api_response.data, status=status.HTTP_200_OK)
