""" User-Agent for the podkit client """

import os
import platform

from podkit.version import __version__ as podkit_version


def construct_user_agent():
    """Constructs the User-Agent string sent with every GraphQL request

    Example:
        PodKit-Python/0.1.0 (Linux 5.4.0-54-generic; x86_64) Language/Python 3.8.5
    """
    os_info = f"{platform.system()} {platform.release()}; {platform.machine()}"
    python_version = platform.python_version()
    integration_method = os.getenv("PODKIT_UA_INTEGRATION")

    ua_components = [
        f"PodKit-Python/{podkit_version}",
        f"({os_info})",
        f"Language/Python {python_version}",
    ]

    if integration_method:
        ua_components.append(f"Integration/{integration_method}")

    return " ".join(ua_components)


USER_AGENT = construct_user_agent()
