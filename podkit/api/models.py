"""
podkit | API | Models

Typed snapshots of the objects exchanged with the pod service.
Wire objects use camelCase keys, the dataclasses use snake_case attributes.
"""

# pylint: disable=too-many-instance-attributes

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional


@dataclass
class Machine:
    """ The host machine a pod is placed on. """
    gpu_display_name: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Machine":
        """ Build a Machine from its wire object. """
        return cls(gpu_display_name=payload.get("gpuDisplayName"))


@dataclass
class Pod:
    """
    A leased compute instance as reported by the `myself.pods` query.
    Every attribute is a snapshot of server state at response time.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    desired_status: Optional[str] = None
    image_name: Optional[str] = None
    docker_args: Optional[str] = None
    docker_id: Optional[str] = None
    env: List[str] = field(default_factory=list)
    gpu_count: Optional[int] = None
    vcpu_count: Optional[int] = None
    memory_in_gb: Optional[int] = None
    container_disk_in_gb: Optional[int] = None
    volume_in_gb: Optional[int] = None
    volume_mount_path: Optional[str] = None
    cost_per_hr: Optional[float] = None
    pod_type: Optional[str] = None
    port: Optional[int] = None
    ports: Optional[str] = None
    machine_id: Optional[str] = None
    last_status_change: Optional[str] = None
    uptime_seconds: Optional[int] = None
    machine: Optional[Machine] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Pod":
        """ Build a Pod from its wire object, missing keys become None. """
        machine = payload.get("machine")
        return cls(
            id=payload.get("id"),
            name=payload.get("name"),
            desired_status=payload.get("desiredStatus"),
            image_name=payload.get("imageName"),
            docker_args=payload.get("dockerArgs"),
            docker_id=payload.get("dockerId"),
            env=list(payload.get("env") or []),
            gpu_count=payload.get("gpuCount"),
            vcpu_count=payload.get("vcpuCount"),
            memory_in_gb=payload.get("memoryInGb"),
            container_disk_in_gb=payload.get("containerDiskInGb"),
            volume_in_gb=payload.get("volumeInGb"),
            volume_mount_path=payload.get("volumeMountPath"),
            cost_per_hr=payload.get("costPerHr"),
            pod_type=payload.get("podType"),
            port=payload.get("port"),
            ports=payload.get("ports"),
            machine_id=payload.get("machineId"),
            last_status_change=payload.get("lastStatusChange"),
            uptime_seconds=payload.get("uptimeSeconds"),
            machine=Machine.from_dict(machine) if isinstance(machine, dict) else None,
        )


@dataclass
class PodState:
    """
    The short pod record returned by the create, stop and resume mutations.
    `cost_per_hr` is None for stop, which does not report it.
    """
    id: Optional[str] = None
    desired_status: Optional[str] = None
    cost_per_hr: Optional[float] = None
    last_status_change: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "PodState":
        """ Build a PodState from a mutation payload. """
        return cls(
            id=payload.get("id"),
            desired_status=payload.get("desiredStatus"),
            cost_per_hr=payload.get("costPerHr"),
            last_status_change=payload.get("lastStatusChange"),
        )


@dataclass
class PodEnv:
    """ A single environment variable entry, order in the list is kept. """
    key: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        ''' Wire representation. '''
        return {"key": self.key, "value": self.value}


@dataclass
class CreatePodInput:
    """
    Caller supplied description of a pod to provision on demand.
    Mirrors the service's `PodFindAndDeployOnDemandInput`.
    """
    image_name: str = ""
    name: str = ""
    cloud_type: str = "ALL"
    gpu_type_id: str = ""
    gpu_count: int = 1
    min_vcpu_count: int = 0
    min_memory_in_gb: int = 0
    container_disk_in_gb: int = 0
    volume_in_gb: int = 0
    volume_mount_path: str = ""
    docker_args: str = ""
    env: List[PodEnv] = field(default_factory=list)
    ports: str = ""
    template_id: str = ""
    deploy_cost: Optional[float] = None

    def with_derived_name(self) -> "CreatePodInput":
        """
        Returns a copy with `name` filled in from the image reference when it is empty.
        The name is the image reference up to its first ':'.
        """
        if self.name:
            return replace(self, env=list(self.env))
        return replace(self, name=self.image_name.split(":")[0], env=list(self.env))

    def to_variables(self) -> Dict[str, Any]:
        """
        Renders the input object sent as the `input` variable.
        `deployCost` is only sent when a ceiling is set.
        """
        variables = {
            "cloudType": self.cloud_type,
            "containerDiskInGb": self.container_disk_in_gb,
            "dockerArgs": self.docker_args,
            "env": [env.to_dict() for env in self.env],
            "gpuCount": self.gpu_count,
            "gpuTypeId": self.gpu_type_id,
            "imageName": self.image_name,
            "minMemoryInGb": self.min_memory_in_gb,
            "minVcpuCount": self.min_vcpu_count,
            "name": self.name,
            "ports": self.ports,
            "templateId": self.template_id,
            "volumeInGb": self.volume_in_gb,
            "volumeMountPath": self.volume_mount_path,
        }

        if self.deploy_cost:
            variables["deployCost"] = float(self.deploy_cost)

        return variables
