""" Example of managing a pod's lifecycle with the podkit API. """

import podkit
from podkit import CreatePodInput, PodEnv

# Set your global API key with `podkit config` or uncomment the line below:
# podkit.api_key = "YOUR_API_KEY"

try:

    pod = podkit.create_pod(CreatePodInput(
        image_name="runpod/pytorch:2.1.0-py3.10-cuda11.8.0-devel",
        gpu_type_id="NVIDIA GeForce RTX 3090",
        container_disk_in_gb=20,
        volume_in_gb=20,
        volume_mount_path="/workspace",
        env=[PodEnv("JUPYTER_PASSWORD", "change-me")],
        ports="8888/http,22/tcp",
    ))

    print(pod)

    for listed_pod in podkit.get_pods():
        print(listed_pod.id, listed_pod.desired_status, listed_pod.cost_per_hr)

    print(podkit.stop_pod(pod.id))
    print(podkit.resume_spot_pod(pod.id, bid_per_gpu=0.2))
    podkit.terminate_pod(pod.id)

except podkit.error.QueryError as err:
    print(err)
    print(err.errors)
except podkit.error.PodKitError as err:
    print(type(err).__name__, err)
