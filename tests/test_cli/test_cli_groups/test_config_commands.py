'''
podkit | Tests | CLI | Config Commands
'''

import unittest
from unittest.mock import patch
from click.testing import CliRunner

from podkit.cli.entry import podkit_cli

class TestConfigCommands(unittest.TestCase):
    ''' A collection of tests for the config command. '''

    def setUp(self):
        self.runner = CliRunner()

    def test_config_wizard(self):
        ''' Tests the config command. '''
        with patch('click.echo') as mock_echo, \
            patch('podkit.cli.groups.config.commands.set_credentials') as mock_set_credentials, \
            patch('podkit.cli.groups.config.commands.check_credentials') as mock_check_creds, \
            patch('click.confirm', return_value=True) as mock_confirm, \
            patch('click.prompt', return_value='KEY') as mock_prompt:

            # Credentials aren't set, no overwrite prompt
            mock_check_creds.return_value = (False, None)

            result = self.runner.invoke(podkit_cli, ['config', '--profile', 'test', 'KEY'])
            assert result.exit_code == 0
            mock_set_credentials.assert_called_with('KEY', 'test', overwrite=True)
            assert mock_echo.call_count == 1

            # Prompted key
            result = self.runner.invoke(podkit_cli, ['config', '--profile', 'test'])
            assert result.exit_code == 0
            mock_set_credentials.assert_called_with('KEY', 'test', overwrite=True)
            mock_prompt.assert_called_with('    > API Key', hide_input=False, confirmation_prompt=False) # pylint: disable=line-too-long

            # Existing credentials prompt for overwrite
            mock_check_creds.return_value = (True, None)
            result = self.runner.invoke(podkit_cli, ['config', '--profile', 'test'])
            mock_confirm.assert_called_with(
                'Credentials already set for profile: test. Overwrite?', abort=True)

            # Unsuccessful call
            mock_set_credentials.side_effect = ValueError()
            result = self.runner.invoke(podkit_cli, ['config', '--profile', 'test', 'KEY'])
            assert result.exit_code == 1

    def test_config_check(self):
        ''' Tests the --check flag. '''
        with patch('podkit.cli.groups.config.commands.check_credentials') as mock_check_creds:
            mock_check_creds.return_value = (True, None)
            result = self.runner.invoke(podkit_cli, ['config', '--check'])
            assert result.exit_code == 0
            assert 'Credentials already set for profile: default' in result.output

            mock_check_creds.return_value = (False, '~/.podkit/config.toml does not exist.')
            result = self.runner.invoke(podkit_cli, ['config', '--check'])
            assert result.exit_code == 1
            assert 'does not exist' in result.output
