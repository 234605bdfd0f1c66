"""
podkit | API | Mutations | Pods

Documents are fixed, only the variables change with the input.
"""

from ..envelope import SHAPE_OBJECT, SHAPE_PRESENCE
from ..graphql import GraphQLOperation
from ..models import CreatePodInput

MUTATION_POD_DEPLOY = """
mutation createPod($input: PodFindAndDeployOnDemandInput!) {
    podFindAndDeployOnDemand(input: $input) {
        id
        costPerHr
        desiredStatus
        lastStatusChange
    }
}
"""

MUTATION_POD_STOP = """
mutation stopPod($podId: String!) {
    podStop(input: {podId: $podId}) {
        id
        desiredStatus
        lastStatusChange
    }
}
"""

MUTATION_POD_TERMINATE = """
mutation terminatePod($podId: String!) {
    podTerminate(input: {podId: $podId})
}
"""

MUTATION_POD_RESUME = """
mutation podResume($podId: String!) {
    podResume(input: {podId: $podId}) {
        id
        costPerHr
        desiredStatus
        lastStatusChange
    }
}
"""

MUTATION_POD_BID_RESUME = """
mutation podBidResume($podId: String!, $bidPerGpu: Float!) {
    podBidResume(input: {podId: $podId, bidPerGpu: $bidPerGpu}) {
        id
        costPerHr
        desiredStatus
        lastStatusChange
    }
}
"""


def generate_pod_deployment_mutation(pod_input: CreatePodInput) -> GraphQLOperation:
    """
    Generates a mutation to deploy a pod on demand.
    An empty name is derived from the image reference.
    """
    pod_input = pod_input.with_derived_name()
    return GraphQLOperation(
        name="createPod",
        document=MUTATION_POD_DEPLOY,
        variables={"input": pod_input.to_variables()},
        result_path=("podFindAndDeployOnDemand",),
        shape=SHAPE_OBJECT,
        is_mutation=True,
    )


def generate_pod_stop_mutation(pod_id: str) -> GraphQLOperation:
    """
    Generates a mutation to stop a pod.
    """
    return GraphQLOperation(
        name="stopPod",
        document=MUTATION_POD_STOP,
        variables={"podId": pod_id},
        result_path=("podStop",),
        shape=SHAPE_OBJECT,
        is_mutation=True,
    )


def generate_pod_terminate_mutation(pod_id: str) -> GraphQLOperation:
    """
    Generates a mutation to terminate a pod.
    The mutation has no sub-fields, success is the presence of `podTerminate`.
    """
    return GraphQLOperation(
        name="terminatePod",
        document=MUTATION_POD_TERMINATE,
        variables={"podId": pod_id},
        result_path=("podTerminate",),
        shape=SHAPE_PRESENCE,
        is_mutation=True,
    )


def generate_pod_resume_mutation(pod_id: str) -> GraphQLOperation:
    """
    Generates a mutation to resume a pod on demand.
    """
    return GraphQLOperation(
        name="podResume",
        document=MUTATION_POD_RESUME,
        variables={"podId": pod_id},
        result_path=("podResume",),
        shape=SHAPE_OBJECT,
        is_mutation=True,
    )


def generate_pod_bid_resume_mutation(pod_id: str, bid_per_gpu: float) -> GraphQLOperation:
    """
    Generates a mutation to resume a spot pod with a bid per GPU.
    """
    return GraphQLOperation(
        name="podBidResume",
        document=MUTATION_POD_BID_RESUME,
        variables={"podId": pod_id, "bidPerGpu": float(bid_per_gpu)},
        result_path=("podBidResume",),
        shape=SHAPE_OBJECT,
        is_mutation=True,
    )
