""" Allows podkit to be imported as a module. """

import logging
import os

from .api.ctl_commands import (
    create_pod,
    get_pods,
    resume_pod,
    resume_spot_pod,
    stop_pod,
    terminate_pod,
)
from .api.graphql import GraphQLTransport
from .api.models import CreatePodInput, Machine, Pod, PodEnv, PodState
from .cli.groups.config.functions import (
    check_credentials,
    get_credentials,
    set_credentials,
)
from .logger import PodKitLogger
from .version import __version__

__all__ = [
    # API functions
    "create_pod",
    "get_pods",
    "resume_pod",
    "resume_spot_pod",
    "stop_pod",
    "terminate_pod",
    # Types
    "CreatePodInput",
    "GraphQLTransport",
    "Machine",
    "Pod",
    "PodEnv",
    "PodState",
    # Config functions
    "check_credentials",
    "get_credentials",
    "set_credentials",
    # Logger class
    "PodKitLogger",
    # Version
    "__version__",
    # Module variables
    "profile",
    "api_key",
    "api_url_base",
]


profile = "default"  # pylint: disable=invalid-name

api_key = os.environ.get("PODKIT_API_KEY")  # pylint: disable=invalid-name
if api_key is None:
    _credentials = get_credentials(profile)
    if _credentials is not None:
        api_key = _credentials.get("api_key")  # pylint: disable=invalid-name

api_url_base = os.environ.get(
    "PODKIT_API_BASE_URL", "https://api.runpod.io"
)  # pylint: disable=invalid-name


# --------------------------- Force Logging Levels --------------------------- #
logging.getLogger("urllib3").setLevel(logging.WARNING)
