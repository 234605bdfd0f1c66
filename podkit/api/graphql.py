"""
podkit | API | GraphQL

The transport used to reach the GraphQL endpoint and the pipeline shared by
every pod operation: build -> execute -> classify -> extract.
"""

import json
from contextlib import closing
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter, Retry

from podkit import error
from podkit.logger import PodKitLogger
from podkit.user_agent import USER_AGENT

from .envelope import SHAPE_OBJECT, decode_response

log = PodKitLogger()

# statuses where the request was not processed, so resending cannot duplicate a mutation
RETRY_STATUS_CODES = [408, 429]


@dataclass(frozen=True)
class GraphQLOperation:
    """
    One fixed GraphQL document with its variables and result contract.

    result_path is the chain of keys below `data` that holds the payload,
    shape is the structural type the payload must have.
    """
    name: str
    document: str
    variables: Dict[str, Any] = field(default_factory=dict)
    result_path: Tuple[str, ...] = ()
    shape: str = SHAPE_OBJECT
    is_mutation: bool = False


def build_request_body(document: str, variables: Optional[Dict[str, Any]] = None) -> str:
    """
    Serializes the GraphQL-over-HTTP request body.

    Raises:
        EncodeError: If a variable has no JSON representation, such as NaN.
    """
    try:
        return json.dumps(
            {"query": document, "variables": variables or {}}, allow_nan=False
        )
    except ValueError as err:
        raise error.EncodeError(f"cannot encode variables: {err}") from err


class GraphQLTransport:
    """
    Posts GraphQL documents to the service endpoint.

    No retries are made unless max_retries is set, in which case only
    connection failures and the statuses in RETRY_STATUS_CODES are retried.
    Read failures and 5xx answers are not retried since the service may
    already have acted on the request, e.g. provisioned a pod.
    GraphQL errors arrive with a 200 status and are never retried.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url_base: Optional[str] = None,
        timeout: int = 30,
        max_retries: int = 0,
    ):
        """
        Args:
            api_key: Optional API key. If not provided, uses global api_key.
            api_url_base: Optional service base URL. If not provided, uses global api_url_base.
            timeout: Seconds to wait for the service before giving up.
            max_retries: How many times a failed request may be retried.

        Raises:
            AuthenticationError: If no API key is available.
        """
        from podkit import (  # pylint: disable=import-outside-toplevel, cyclic-import
            api_key as global_api_key,
            api_url_base as global_api_url_base,
        )

        self.api_key = api_key or global_api_key
        if not self.api_key:
            raise error.AuthenticationError("No API key provided")

        self.url = f"{api_url_base or global_api_url_base}/graphql"
        self.timeout = timeout

        self.session = requests.Session()
        if max_retries:
            retries = Retry(
                total=max_retries,
                read=0,
                backoff_factor=1,
                status_forcelist=RETRY_STATUS_CODES,
                allowed_methods=None,
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retries)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

        self.headers = {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "Authorization": f"Bearer {self.api_key}",
        }

    def execute(
        self, document: str, variables: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        """
        Sends one document and returns the unread response.

        Raises:
            requests.RequestException: If the request could not be completed.
        """
        return self.session.post(
            self.url,
            headers=self.headers,
            data=build_request_body(document, variables),
            timeout=self.timeout,
            stream=True,
        )


def run_graphql_operation(
    operation: GraphQLOperation,
    api_key: Optional[str] = None,
    transport: Optional[Any] = None,
) -> Any:
    """
    Executes an operation and returns the payload found at its result path.

    Args:
        operation: The encoded operation to run.
        api_key: Optional API key, used when no transport is given.
        transport: Optional object with an `execute(document, variables)` method.

    Raises:
        EncodeError: If the variables cannot be serialized, nothing is sent.
        TransportError: If the transport failed before a response was received.
        PodKitError: Any classification failure raised by decode_response.
    """
    request_body = build_request_body(operation.document, operation.variables)

    if transport is None:
        transport = GraphQLTransport(api_key=api_key)

    log.debug("Sending request", operation.name)
    log.trace(request_body, operation.name)

    try:
        response = transport.execute(operation.document, operation.variables)
    except requests.RequestException as err:
        log.debug(f"Transport failure: {err}", operation.name)
        raise error.TransportError(str(err)) from err

    with closing(response):
        try:
            return decode_response(response, operation)
        except error.PodKitError as err:
            log.debug(f"{type(err).__name__}: {err}", operation.name)
            raise
