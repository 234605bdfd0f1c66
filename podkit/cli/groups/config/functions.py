'''
podkit | cli | config | functions.py

A collection of functions to set and validate configurations.
Configurations are TOML files located under ~/.podkit/
'''
import os
from pathlib import Path

import tomli as toml
import tomlkit
from tomlkit import table

CREDENTIAL_FILE = os.path.expanduser('~/.podkit/config.toml')


def set_credentials(api_key: str, profile:str="default", overwrite=False) -> None:
    '''
    Sets the user's credentials in ~/.podkit/config.toml
    If the profile already exists, overwrite must be set.

    Args:
        api_key (str): The user's API key.
        profile (str): The profile to set the credentials for.
        overwrite (bool): Replace the profile if it already exists.

    Other profiles in the file are kept.

    --- File Structure ---

    [default]
    api_key = "PODKIT_API_KEY"
    '''
    os.makedirs(os.path.dirname(CREDENTIAL_FILE), exist_ok=True)
    Path(CREDENTIAL_FILE).touch(exist_ok=True)

    with open(CREDENTIAL_FILE, 'r', encoding="UTF-8") as cred_file:
        config = tomlkit.load(cred_file)

    if profile in config and not overwrite:
        raise ValueError('Profile already exists. Use `overwrite=True` to replace it.')

    profile_table = table()
    profile_table.add('api_key', api_key)
    config[profile] = profile_table

    with open(CREDENTIAL_FILE, 'w', encoding="UTF-8") as cred_file:
        tomlkit.dump(config, cred_file)


def check_credentials(profile:str="default"):
    '''
    Checks if the credentials file exists and is valid.
    '''
    if not os.path.exists(CREDENTIAL_FILE):
        return False, '~/.podkit/config.toml does not exist.'

    try:
        with open(CREDENTIAL_FILE, 'rb') as cred_file:
            config = toml.load(cred_file)

        if profile not in config:
            return False, f'~/.podkit/config.toml is missing {profile} profile.'

        if 'api_key' not in config[profile]:
            return False, f'~/.podkit/config.toml is missing api_key for {profile} profile.'

    except (TypeError, ValueError):
        return False, '~/.podkit/config.toml is not a valid TOML file.'

    return True, None


def get_credentials(profile='default'):
    '''
    Returns the credentials for the specified profile from ~/.podkit/config.toml
    '''
    if not os.path.exists(CREDENTIAL_FILE):
        return None

    with open(CREDENTIAL_FILE, 'rb') as cred_file:
        credentials = toml.load(cred_file)

    if profile not in credentials:
        return None

    return credentials[profile]
