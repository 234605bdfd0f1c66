"""
podkit | API | Envelope

Classifies a raw GraphQL response and extracts the payload of an operation.

Checks run in a fixed order and the first failing one decides the error:
status code, body read, envelope decoding, GraphQL errors, missing data,
payload shape. A non-200 response may not carry an envelope at all, and an
error response legitimately has null `data`, so the order matters.
"""

import json
from typing import Any, Dict

import requests

from podkit import error

HTTP_STATUS_OK = 200
HTTP_STATUS_UNAUTHORIZED = 401

SHAPE_OBJECT = "object"
SHAPE_LIST = "list"
SHAPE_PRESENCE = "presence"


def read_body(response) -> str:
    """
    Reads the whole response body as text.

    Raises:
        BodyReadError: If the body stream failed before it was fully read.
    """
    try:
        raw_body = response.content
    except requests.RequestException as err:
        raise error.BodyReadError(f"failed to read response body: {err}") from err

    return raw_body.decode("utf-8", errors="replace")


def check_status(response, operation) -> None:
    '''
    Raises StatusError for anything but a 200 response.
    Mutations attach the body text for diagnostics when it can be read.
    '''
    status_code = response.status_code
    if status_code == HTTP_STATUS_OK:
        return

    body = None
    if operation.is_mutation:
        try:
            body = read_body(response)
        except error.BodyReadError:
            # the status failure is reported either way
            body = None

    if status_code == HTTP_STATUS_UNAUTHORIZED:
        message = "Unauthorized request, please check your API key."
    elif body is not None:
        message = f"{operation.name}: statuscode {status_code}: {body}"
    else:
        message = f"{operation.name}: statuscode {status_code}"

    raise error.StatusError(message, status_code=status_code, body=body)


def parse_envelope(body: str) -> Dict[str, Any]:
    """
    Parses the body into a `{data, errors}` envelope.

    Raises:
        DecodeError: If the body is not JSON or not shaped like an envelope.
    """
    try:
        envelope = json.loads(body)
    except ValueError as err:
        raise error.DecodeError(f"invalid JSON response: {err}", body=body) from err

    if not isinstance(envelope, dict):
        raise error.DecodeError("response is not a JSON object", body=body)

    errors = envelope.get("errors")
    if errors is not None:
        if not isinstance(errors, list):
            raise error.DecodeError("errors is not a list", body=body)
        # only the first entry is reported, later ones are kept as they are
        if errors:
            first_error = errors[0]
            if not isinstance(first_error, dict) or not isinstance(first_error.get("message"), str):
                raise error.DecodeError("error entry has no message", body=body)

    data = envelope.get("data")
    if data is not None and not isinstance(data, dict):
        raise error.DecodeError("data is not an object", body=body)

    return envelope


def extract_payload(data, operation, body: str) -> Any:
    """
    Walks `data` along the operation's result path and checks the payload shape.

    A presence-only operation succeeds as soon as its key exists, whatever its value.
    """
    if data is None:
        raise error.MissingDataError(f"data is nil: {body}", body=body)

    node = data
    walked = ["data"]
    for depth, key in enumerate(operation.result_path):
        if not isinstance(node, dict):
            raise error.ShapeMismatchError(
                f"{'.'.join(walked)} is not an object",
                path=".".join(walked), expected=SHAPE_OBJECT,
            )

        walked.append(key)
        if key not in node:
            raise error.MissingDataError(f"{key} is nil: {body}", body=body)

        node = node[key]
        is_last = depth == len(operation.result_path) - 1
        if is_last and operation.shape == SHAPE_PRESENCE:
            return node

        if node is None:
            raise error.MissingDataError(f"{key} is nil: {body}", body=body)

    path = ".".join(walked)
    if operation.shape == SHAPE_OBJECT and not isinstance(node, dict):
        raise error.ShapeMismatchError(
            f"{path} is not an object", path=path, expected=SHAPE_OBJECT
        )

    if operation.shape == SHAPE_LIST:
        if not isinstance(node, list):
            raise error.ShapeMismatchError(
                f"{path} is not a list", path=path, expected=SHAPE_LIST
            )
        if not all(isinstance(item, dict) for item in node):
            raise error.ShapeMismatchError(
                f"{path} contains a non-object entry", path=path, expected=SHAPE_LIST
            )

    return node


def decode_response(response, operation) -> Any:
    """
    Classifies a response and returns the payload at the operation's result path.

    Raises:
        StatusError: If the status code is not 200.
        BodyReadError: If the body could not be read.
        DecodeError: If the body is not a GraphQL envelope.
        QueryError: If the envelope lists GraphQL errors, with the first message.
        MissingDataError: If data, or any key on the result path, is absent or null.
        ShapeMismatchError: If the payload is not of the expected structural type.
    """
    check_status(response, operation)

    body = read_body(response)
    envelope = parse_envelope(body)

    errors = envelope.get("errors")
    if errors:
        raise error.QueryError(errors[0]["message"], operation.document, errors)

    return extract_payload(envelope.get("data"), operation, body)
