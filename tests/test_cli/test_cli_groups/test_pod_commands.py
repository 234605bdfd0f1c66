""" Test CLI pod commands """

import unittest
from unittest.mock import patch

from click.testing import CliRunner

from podkit.api.models import CreatePodInput, Machine, Pod, PodEnv, PodState
from podkit.cli.entry import podkit_cli
from podkit.error import QueryError


class TestPodCommands(unittest.TestCase):
    """Test CLI pod commands"""

    def setUp(self):
        self.runner = CliRunner()

    @patch("podkit.cli.groups.pod.commands.get_pods")
    def test_list_pods(self, mock_get_pods):
        """
        Test list_pods
        """
        mock_get_pods.return_value = [
            Pod(id="1", name="Pod1", desired_status="RUNNING", image_name="Image1",
                gpu_count=1, cost_per_hr=0.44, machine=Machine("RTX 3090")),
            Pod(id="2", name="Pod2", desired_status="EXITED", image_name="Image2"),
        ]

        result = self.runner.invoke(podkit_cli, ["pod", "list"])

        assert result.exit_code == 0, result.exception
        self.assertIn("Pod1", result.output)
        self.assertIn("1 x RTX 3090", result.output)
        self.assertIn("EXITED", result.output)

    @patch("podkit.cli.groups.pod.commands.get_pods")
    def test_list_pods_error(self, mock_get_pods):
        """
        Test list_pods reports service errors
        """
        mock_get_pods.side_effect = QueryError("Unauthorized")

        result = self.runner.invoke(podkit_cli, ["pod", "list"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error: Unauthorized", result.output)

    @patch("podkit.cli.groups.pod.commands.create_pod")
    def test_create_new_pod(self, mock_create_pod):
        """
        Test create_new_pod
        """
        mock_create_pod.return_value = PodState(id="sample_id")

        result = self.runner.invoke(podkit_cli, [
            "pod", "create", "runpod/base:0.0.0",
            "--gpu-type", "NVIDIA GeForce RTX 3090",
            "--env", "A=1", "--env", "B=x=y",
            "--cost", "0.5",
        ])

        assert result.exit_code == 0, result.exception
        self.assertIn("Pod sample_id has been created.", result.output)

        pod_input = mock_create_pod.call_args[0][0]
        self.assertIsInstance(pod_input, CreatePodInput)
        self.assertEqual(pod_input.image_name, "runpod/base:0.0.0")
        self.assertEqual(pod_input.name, "")
        self.assertEqual(pod_input.gpu_type_id, "NVIDIA GeForce RTX 3090")
        self.assertEqual(pod_input.env, [PodEnv("A", "1"), PodEnv("B", "x=y")])
        self.assertEqual(pod_input.deploy_cost, 0.5)

    @patch("podkit.cli.groups.pod.commands.create_pod")
    def test_create_new_pod_bad_env(self, mock_create_pod):
        """
        Test create_new_pod rejects malformed env pairs
        """
        result = self.runner.invoke(podkit_cli, ["pod", "create", "img", "--env", "NOVALUE"])

        self.assertEqual(result.exit_code, 2)
        mock_create_pod.assert_not_called()

    @patch("podkit.cli.groups.pod.commands.stop_pod")
    def test_stop_pods(self, mock_stop_pod):
        """
        Test stop_pods
        """
        mock_stop_pod.side_effect = lambda pod_id: PodState(id=pod_id, desired_status="EXITED")

        result = self.runner.invoke(podkit_cli, ["pod", "stop", "a", "b"])

        assert result.exit_code == 0, result.exception
        self.assertIn("Pod a is EXITED.", result.output)
        self.assertIn("Pod b is EXITED.", result.output)

    @patch("podkit.cli.groups.pod.commands.terminate_pod")
    def test_remove_pods(self, mock_terminate_pod):
        """
        Test remove_pods stops at the first failure
        """
        mock_terminate_pod.side_effect = [True, QueryError("pod not found")]

        result = self.runner.invoke(podkit_cli, ["pod", "remove", "a", "b", "c"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Pod a has been removed.", result.output)
        self.assertIn("Error: b: pod not found", result.output)
        self.assertEqual(mock_terminate_pod.call_count, 2)

    @patch("podkit.cli.groups.pod.commands.resume_spot_pod")
    @patch("podkit.cli.groups.pod.commands.resume_pod")
    def test_start_pods(self, mock_resume_pod, mock_resume_spot_pod):
        """
        Test start_pods picks on-demand or spot resume
        """
        mock_resume_pod.return_value = PodState("a", "RUNNING", 0.44)
        mock_resume_spot_pod.return_value = PodState("a", "RUNNING", 0.2)

        result = self.runner.invoke(podkit_cli, ["pod", "start", "a"])
        assert result.exit_code == 0, result.exception
        mock_resume_pod.assert_called_once_with("a")
        self.assertIn("Pod a is RUNNING at $0.44/hr.", result.output)

        result = self.runner.invoke(podkit_cli, ["pod", "start", "a", "--bid", "0.2"])
        assert result.exit_code == 0, result.exception
        mock_resume_spot_pod.assert_called_once_with("a", 0.2)


if __name__ == "__main__":
    unittest.main()
