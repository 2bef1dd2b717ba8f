"""
Auth Token Providers

A provider supplies the token the client attaches to every transport call.
Decoding or verifying the token is left to the service.
"""

import os

from ..cache.errors import InvalidArgumentError


class StringTokenProvider:
    """Provider wrapping a token given directly."""

    def __init__(self, auth_token: str):
        if not isinstance(auth_token, str) or not auth_token:
            raise InvalidArgumentError("Auth token must be a non-empty string")
        self._auth_token = auth_token

    def get_auth_token(self) -> str:
        return self._auth_token


class EnvTokenProvider(StringTokenProvider):
    """
    Provider reading the token from an environment variable.

    The variable is read once, at construction.

    Raises:
        InvalidArgumentError: If the variable is unset or empty
    """

    def __init__(self, env_var_name: str):
        auth_token = os.environ.get(env_var_name)
        if not auth_token:
            raise InvalidArgumentError(f"Environment variable {env_var_name} is empty or null.")
        super().__init__(auth_token)
        self.env_var_name = env_var_name
