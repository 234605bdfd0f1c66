"""
podkit | CLI | Pod | Commands
"""

import click
from prettytable import PrettyTable

from podkit import (
    create_pod,
    get_pods,
    resume_pod,
    resume_spot_pod,
    stop_pod,
    terminate_pod,
)
from podkit.api.models import CreatePodInput, PodEnv
from podkit.error import PodKitError


def parse_env(env_pairs):
    """
    Turns KEY=VALUE strings into PodEnv entries, keeping their order.
    """
    env = []
    for pair in env_pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--env")
        env.append(PodEnv(key=key, value=value))
    return env


@click.group("pod", help="Manage pods.")
def pod_cli():
    """A collection of CLI functions for Pod."""


@pod_cli.command("list")
def list_pods():
    """
    Lists the pods for the current user.
    """
    try:
        pods = get_pods()
    except PodKitError as err:
        raise click.ClickException(str(err)) from err

    table = PrettyTable(["ID", "Name", "Status", "GPU", "Image", "$/hr"])
    for pod in pods:
        gpu = f"{pod.gpu_count} x {pod.machine.gpu_display_name}" if pod.machine else ""
        table.add_row((
            pod.id, pod.name, pod.desired_status,
            gpu, pod.image_name, pod.cost_per_hr,
        ))

    click.echo(table)


@pod_cli.command("create")
@click.argument("image")
@click.option("--name", default="", help="Pod name, defaults to the image name.")
@click.option("--gpu-type", default="", help="The GPU type to use for the pod.")
@click.option("--gpu-count", default=1, help="The number of GPUs to use for the pod.")
@click.option("--cloud-type", default="ALL",
              type=click.Choice(["ALL", "COMMUNITY", "SECURE"]), help="Cloud to deploy in.")
@click.option("--container-disk", default=20, help="Container disk size in GB.")
@click.option("--volume", default=1, help="Volume size in GB.")
@click.option("--volume-path", default="/workspace", help="Where to mount the volume.")
@click.option("--ports", default="", help='Ports to expose, e.g. "8888/http,22/tcp".')
@click.option("--env", "env_pairs", multiple=True, help="KEY=VALUE, may be repeated.")
@click.option("--docker-args", default="", help="Arguments passed to the container.")
@click.option("--vcpu", default=1, help="Minimum vCPU count.")
@click.option("--mem", default=20, help="Minimum memory in GB.")
@click.option("--template", default="", help="Template id to deploy from.")
@click.option("--cost", default=None, type=float, help="Maximum cost per hour.")
def create_new_pod(  # pylint: disable=too-many-arguments,too-many-locals
    image, name, gpu_type, gpu_count, cloud_type, container_disk, volume,
    volume_path, ports, env_pairs, docker_args, vcpu, mem, template, cost
):
    """
    Creates a pod.
    """
    pod_input = CreatePodInput(
        image_name=image,
        name=name,
        cloud_type=cloud_type,
        gpu_type_id=gpu_type,
        gpu_count=gpu_count,
        min_vcpu_count=vcpu,
        min_memory_in_gb=mem,
        container_disk_in_gb=container_disk,
        volume_in_gb=volume,
        volume_mount_path=volume_path,
        docker_args=docker_args,
        env=parse_env(env_pairs),
        ports=ports,
        template_id=template,
        deploy_cost=cost,
    )

    try:
        new_pod = create_pod(pod_input)
    except PodKitError as err:
        raise click.ClickException(str(err)) from err

    click.echo(f'Pod {new_pod.id} has been created.')


@pod_cli.command("stop")
@click.argument("pod_ids", nargs=-1, required=True)
def stop_pods(pod_ids):
    """
    Stops one or more pods.
    """
    for pod_id in pod_ids:
        try:
            pod = stop_pod(pod_id)
        except PodKitError as err:
            raise click.ClickException(f"{pod_id}: {err}") from err
        click.echo(f'Pod {pod.id} is {pod.desired_status}.')


@pod_cli.command("remove")
@click.argument("pod_ids", nargs=-1, required=True)
def remove_pods(pod_ids):
    """
    Terminates one or more pods.
    """
    for pod_id in pod_ids:
        try:
            terminate_pod(pod_id)
        except PodKitError as err:
            raise click.ClickException(f"{pod_id}: {err}") from err
        click.echo(f'Pod {pod_id} has been removed.')


@pod_cli.command("start")
@click.argument("pod_ids", nargs=-1, required=True)
@click.option("--bid", default=None, type=float, help="Bid per GPU, starts a spot pod.")
def start_pods(pod_ids, bid):
    """
    Starts one or more stopped pods, on demand unless a bid is given.
    """
    for pod_id in pod_ids:
        try:
            if bid is None:
                pod = resume_pod(pod_id)
            else:
                pod = resume_spot_pod(pod_id, bid)
        except PodKitError as err:
            raise click.ClickException(f"{pod_id}: {err}") from err
        click.echo(f'Pod {pod.id} is {pod.desired_status} at ${pod.cost_per_hr}/hr.')
