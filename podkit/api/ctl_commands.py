"""
podkit | API | CTL Commands

Pod lifecycle operations. Each one encodes its operation, runs it through the
shared GraphQL pipeline and types the payload.
"""

from typing import Any, List, Optional

from .graphql import run_graphql_operation
from .models import CreatePodInput, Pod, PodState
from .mutations import pods as pod_mutations
from .queries import pods as pod_queries


def get_pods(api_key: Optional[str] = None, transport: Optional[Any] = None) -> List[Pod]:
    """
    Get all pods

    Args:
        api_key: Optional API key to use for this query.
        transport: Optional transport to send the query with.
    """
    raw_pods = run_graphql_operation(
        pod_queries.generate_pod_list_query(), api_key=api_key, transport=transport
    )
    return [Pod.from_dict(raw_pod) for raw_pod in raw_pods]


def create_pod(
    pod_input: CreatePodInput,
    api_key: Optional[str] = None,
    transport: Optional[Any] = None,
) -> PodState:
    """
    Create a pod

    :param pod_input: the description of the pod, an empty name is derived from the image
    :param api_key: optional API key to use for this mutation
    :param transport: optional transport to send the mutation with

    :example:

    >>> pod = podkit.create_pod(CreatePodInput(image_name="runpod/stack:latest",
    ...                                        gpu_type_id="NVIDIA GeForce RTX 3070"))
    >>> pod.id
    """
    raw_pod = run_graphql_operation(
        pod_mutations.generate_pod_deployment_mutation(pod_input),
        api_key=api_key, transport=transport,
    )
    return PodState.from_dict(raw_pod)


def stop_pod(
    pod_id: str, api_key: Optional[str] = None, transport: Optional[Any] = None
) -> PodState:
    """
    Stop a pod

    :param pod_id: the id of the pod

    :example:

    >>> podkit.stop_pod(pod.id)
    """
    raw_pod = run_graphql_operation(
        pod_mutations.generate_pod_stop_mutation(pod_id),
        api_key=api_key, transport=transport,
    )
    return PodState.from_dict(raw_pod)


def terminate_pod(
    pod_id: str, api_key: Optional[str] = None, transport: Optional[Any] = None
) -> bool:
    """
    Terminate a pod

    Returns True once the service acknowledged the termination.
    A response without `podTerminate` raises MissingDataError.

    :param pod_id: the id of the pod
    """
    run_graphql_operation(
        pod_mutations.generate_pod_terminate_mutation(pod_id),
        api_key=api_key, transport=transport,
    )
    return True


def resume_pod(
    pod_id: str, api_key: Optional[str] = None, transport: Optional[Any] = None
) -> PodState:
    """
    Resume a stopped pod on demand

    :param pod_id: the id of the pod

    :example:

    >>> podkit.stop_pod(pod.id)
    >>> podkit.resume_pod(pod.id)
    """
    raw_pod = run_graphql_operation(
        pod_mutations.generate_pod_resume_mutation(pod_id),
        api_key=api_key, transport=transport,
    )
    return PodState.from_dict(raw_pod)


def resume_spot_pod(
    pod_id: str,
    bid_per_gpu: float,
    api_key: Optional[str] = None,
    transport: Optional[Any] = None,
) -> PodState:
    """
    Resume a stopped pod as a spot instance

    :param pod_id: the id of the pod
    :param bid_per_gpu: the hourly price offered per GPU
    """
    raw_pod = run_graphql_operation(
        pod_mutations.generate_pod_bid_resume_mutation(pod_id, bid_per_gpu),
        api_key=api_key, transport=transport,
    )
    return PodState.from_dict(raw_pod)
