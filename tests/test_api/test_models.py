""" Tests for the API models """

import unittest

from podkit.api.models import CreatePodInput, Pod, PodEnv, PodState


class TestModels(unittest.TestCase):
    """Tests for the API models"""

    def test_pod_from_dict_defaults(self):
        """Missing fields become None."""
        pod = Pod.from_dict({"id": "POD_ID"})

        self.assertEqual(pod.id, "POD_ID")
        self.assertIsNone(pod.desired_status)
        self.assertIsNone(pod.machine)
        self.assertEqual(pod.env, [])

    def test_pod_state_from_dict(self):
        """Mutation payloads are mapped to PodState."""
        state = PodState.from_dict({"id": "POD_ID", "desiredStatus": "EXITED"})
        self.assertEqual(state, PodState(id="POD_ID", desired_status="EXITED"))

    def test_with_derived_name_returns_copy(self):
        """The caller's input is never changed."""
        env = [PodEnv("KEY", "VALUE")]
        pod_input = CreatePodInput(image_name="foo/bar:latest", env=env)

        derived = pod_input.with_derived_name()

        self.assertEqual(derived.name, "foo/bar")
        self.assertEqual(pod_input.name, "")
        self.assertIsNot(derived.env, pod_input.env)
        self.assertEqual(derived.env, env)

    def test_to_variables(self):
        """All input fields are rendered with their wire names."""
        variables = CreatePodInput(
            image_name="img", name="pod", cloud_type="SECURE", template_id="tpl"
        ).to_variables()

        self.assertEqual(variables, {
            "cloudType": "SECURE",
            "containerDiskInGb": 0,
            "dockerArgs": "",
            "env": [],
            "gpuCount": 1,
            "gpuTypeId": "",
            "imageName": "img",
            "minMemoryInGb": 0,
            "minVcpuCount": 0,
            "name": "pod",
            "ports": "",
            "templateId": "tpl",
            "volumeInGb": 0,
            "volumeMountPath": "",
        })


if __name__ == "__main__":
    unittest.main()
