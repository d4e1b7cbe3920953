from .auth_users import create_access_token, decode_access_token, require_user

__all__ = ["create_access_token", "decode_access_token", "require_user"]
