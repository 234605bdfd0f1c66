'''
podkit | CLI | Entry

The entry point for the CLI.
'''
import click

from .groups.config.commands import config_wizard
from .groups.pod.commands import pod_cli

@click.group()
def podkit_cli():
    '''A collection of CLI functions for podkit.'''

podkit_cli.add_command(config_wizard) # podkit config
podkit_cli.add_command(pod_cli) # podkit pod
