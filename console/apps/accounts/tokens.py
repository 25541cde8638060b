import jwt

from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)

USER_ID_CLAIMS = ('nameid', 'sub', 'userId')


def read_claims(token):
    """
    Claims of a remote access token. The remote API owns the signing key, so
    the signature is not checked here; the API verifies it on every call.
    """
    try:
        return jwt.decode(token, options={'verify_signature': False})
    except jwt.PyJWTError as e:
        logger.warning(f"Could not decode access token: {str(e)}")
        return {}


def user_id_from(payload, token):
    """User id from the login payload, falling back to the token claims"""
    for key in ('userId', 'id'):
        if payload.get(key):
            return str(payload[key])
    user = payload.get('user')
    if isinstance(user, dict) and user.get('id'):
        return str(user['id'])

    claims = read_claims(token)
    for claim in USER_ID_CLAIMS:
        if claims.get(claim):
            return str(claims[claim])
    return None
