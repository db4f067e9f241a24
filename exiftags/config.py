"""
Read option defaults from an exiftags configuration file, if there is one.
"""
from configparser import ConfigParser
import os
import pathlib
import platform
import warnings


def exiftagsrc_fname():
    """Return the path to the configuration file.

    Search order:
        1) current working directory
        2) environ var XDG_CONFIG_HOME
        3) $HOME/.config/exiftags/exiftagsrc
    """

    # Current directory.
    path = pathlib.Path.cwd() / 'exiftagsrc'
    if path.exists():
        return path

    confdir_path = get_configdir()
    if confdir_path is not None:
        path = confdir_path / 'exiftagsrc'
        if path.exists():
            return path

    # didn't find a configuration file.
    return None


def read_config_file(known_options):
    """
    Extract option defaults from a configuration file.

    A section name plus an option name form the option key, so

        [parse]
        strict_ascii = yes

    sets 'parse.strict_ascii'.

    Parameters
    ----------
    known_options : dict
        Maps option keys to their built-in defaults.  Only boolean options
        are recognized.

    Returns
    -------
    dict
        Maps option keys to the values read from the file.  Empty if there
        is no configuration file.
    """
    filename = exiftagsrc_fname()
    if filename is None:
        return {}

    parser = ConfigParser()
    parser.read(filename)

    overrides = {}
    for section in parser.sections():
        for option in parser.options(section):
            key = f'{section}.{option}'
            if key not in known_options:
                msg = f'Unrecognized option "{key}" in {filename}.'
                warnings.warn(msg, UserWarning)
                continue
            try:
                overrides[key] = parser.getboolean(section, option)
            except ValueError:
                value = parser.get(section, option)
                msg = (
                    f'The value "{value}" for option "{key}" in {filename} '
                    f'is not a boolean.'
                )
                warnings.warn(msg, UserWarning)
    return overrides


def get_configdir():
    """Return string representing the configuration directory.

    Default is $HOME/.config/exiftags.  You can override this with the
    XDG_CONFIG_HOME environment variable.
    """
    if 'XDG_CONFIG_HOME' in os.environ:
        return pathlib.Path(os.environ['XDG_CONFIG_HOME']) / 'exiftags'

    if 'HOME' in os.environ and platform.system() != 'Windows':
        # HOME is set by WinPython to something unusual, so we don't
        # necessarily want that.
        return pathlib.Path(os.environ['HOME']) / '.config' / 'exiftags'

    # Last stand.  Should handle windows... others?
    return pathlib.Path.home() / 'exiftags'
