""" Tests for the user_agent module. """

import os
import unittest
from unittest.mock import patch

from podkit import __version__ as podkit_version
from podkit.user_agent import construct_user_agent


class TestConstructUserAgent(unittest.TestCase):
    """Test the construct_user_agent function."""

    @patch("podkit.user_agent.platform.system", return_value="Windows")
    @patch("podkit.user_agent.platform.release", return_value="10")
    @patch("podkit.user_agent.platform.machine", return_value="AMD64")
    @patch("podkit.user_agent.platform.python_version", return_value="3.8.10")
    @patch.dict(os.environ, {}, clear=False)
    def test_user_agent_without_integration(
        self, mock_python_version, mock_machine, mock_release, mock_system
    ):
        """Test the User-Agent string without specifying an integration method."""
        os.environ.pop("PODKIT_UA_INTEGRATION", None)

        expected_ua = f"PodKit-Python/{podkit_version} (Windows 10; AMD64) Language/Python 3.8.10"  # pylint: disable=line-too-long
        self.assertEqual(construct_user_agent(), expected_ua)

        assert mock_python_version.called
        assert mock_machine.called
        assert mock_release.called
        assert mock_system.called

    @patch("podkit.user_agent.platform.system", return_value="Linux")
    @patch("podkit.user_agent.platform.release", return_value="5.4")
    @patch("podkit.user_agent.platform.machine", return_value="x86_64")
    @patch("podkit.user_agent.platform.python_version", return_value="3.9.5")
    @patch.dict(os.environ, {"PODKIT_UA_INTEGRATION": "SkyPilot"})
    def test_user_agent_with_integration(
        self, mock_python_version, mock_machine, mock_release, mock_system
    ):
        """Test the User-Agent string with an integration method specified."""
        expected_ua = f"PodKit-Python/{podkit_version} (Linux 5.4; x86_64) Language/Python 3.9.5 Integration/SkyPilot"  # pylint: disable=line-too-long
        self.assertEqual(construct_user_agent(), expected_ua)

        assert mock_python_version.called
        assert mock_machine.called
        assert mock_release.called
        assert mock_system.called


if __name__ == "__main__":
    unittest.main()
