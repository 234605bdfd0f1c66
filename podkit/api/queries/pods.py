"""
podkit | API | Queries | Pods
"""

from ..envelope import SHAPE_LIST
from ..graphql import GraphQLOperation

QUERY_POD = """
query myPods {
    myself {
        pods {
            id
            containerDiskInGb
            costPerHr
            desiredStatus
            dockerArgs
            dockerId
            env
            gpuCount
            imageName
            lastStatusChange
            machineId
            memoryInGb
            name
            podType
            port
            ports
            uptimeSeconds
            vcpuCount
            volumeInGb
            volumeMountPath
            machine {
                gpuDisplayName
            }
        }
    }
}
"""


def generate_pod_list_query() -> GraphQLOperation:
    '''
    Generate the query listing every pod of the current user
    '''
    return GraphQLOperation(
        name="myPods",
        document=QUERY_POD,
        result_path=("myself", "pods"),
        shape=SHAPE_LIST,
    )
