from rest_framework import status
from rest_framework.response import Response

from console.utils.api_repository import ApiResponse


def api_error_response(api_response: ApiResponse) -> Response:
    """
    Error body for a failed remote call.
    Remote status codes pass through; an unreachable API becomes 502.
    """
    code = api_response.status if api_response.status >= 400 else status.HTTP_502_BAD_GATEWAY
    return Response({'error': api_response.error}, status=code)


def proxy_response(api_response: ApiResponse, success_status=status.HTTP_200_OK) -> Response:
    """Remote data on success, error body otherwise"""
    if not api_response.ok:
        return api_error_response(api_response)
    return Response(api_response.data, status=success_status)


def parse_id(value):
    """Positive int id or None"""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    return parsed if parsed > 0 else None


def branch_id_from(request):
    """branch_id from the query string or the JSON body"""
    branch_id = request.query_params.get('branch_id')
    if branch_id is None and isinstance(request.data, dict):
        branch_id = request.data.get('branch_id')
    return parse_id(branch_id)


def form_payload(request):
    """
    Split a console request into plain fields and upload tuples for a
    multipart call to the remote API. JSON bodies come back with files=None.
    """
    files = {
        name: (upload.name, upload.read(), upload.content_type)
        for name, upload in request.FILES.items()
    }
    data = {key: value for key, value in request.data.items() if key not in files}
    return data, (files or None)


def parse_flag(value, default=None):
    """
    Boolean from a JSON or form-encoded field.
    Strings count as true only for '1', 'true', 'yes' and 'on'; a missing value gives the default.
    """
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def multipart_parts(fields, files=None):
    """
    Form fields and uploads as one `files` mapping for requests, so the remote
    API receives multipart/form-data even when nothing is uploaded.
    None values are left out.
    """
    parts = {name: (None, str(value)) for name, value in fields.items() if value is not None}
    parts.update(files or {})
    return parts


def uploads(request, *names):
    """Upload tuples for the named file fields present on the request"""
    return {
        name: (request.FILES[name].name, request.FILES[name].read(), request.FILES[name].content_type)
        for name in names if name in request.FILES
    }
