""" podkit version """


from importlib.metadata import version, PackageNotFoundError

def get_version():
    """ Get the version of podkit """
    try:
        return version("podkit")
    except PackageNotFoundError:
        return "unknown"

__version__ = get_version()
