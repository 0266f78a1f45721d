"""HTTP options shared by the primary-provider backends."""

import os
import platform
import sys
from typing import Any, Dict

from ..config.constants import CLIENT_VERSION_ENV_VAR, USER_AGENT_PRODUCT


def user_agent() -> str:
    """``<product>/<version> (<platform>; <architecture>)``.

    The version comes from ``CLI_VERSION``, falling back to the interpreter's
    own version.
    """
    version = os.getenv(CLIENT_VERSION_ENV_VAR) or platform.python_version()
    return f"{USER_AGENT_PRODUCT}/{version} ({sys.platform}; {platform.machine()})"


def build_http_options() -> Dict[str, Any]:
    return {
        "headers": {
            "User-Agent": user_agent(),
        },
    }
