"""
Manage exiftags configuration settings.
"""
# Standard library imports
import copy

# Local imports
from . import config


_builtin_options = {
    'parse.strict_ascii': False,
    'parse.check_count': True,
    'print.short': False,
    'print.description': False,
}


def _load_defaults():
    """Built-in defaults, adjusted by any configuration file."""
    defaults = copy.deepcopy(_builtin_options)
    defaults.update(config.read_config_file(_builtin_options))
    return defaults


_original_options = _load_defaults()
_options = copy.deepcopy(_original_options)


def set_option(key, value):
    """Set the value of the specified option.

    Available options:

        parse.strict_ascii
        parse.check_count
        print.short
        print.description

    Parameters
    ----------
    key : str
        Name of a single option.
    value :
        New value of option.

    Option Descriptions
    -------------------
    parse.strict_ascii : bool
        When True, an ASCII field holding bytes outside of 7-bit ASCII is
        rejected with MalformedText, both when decoding and when encoding
        (EncodeError).  When False, such bytes are interpreted as UTF-8.
        [default: False]
    parse.check_count : bool
        When True, a warning is issued if the number of decoded elements
        differs from the fixed count documented for a field.
        [default: True]
    print.short : bool
        When True, only the field name, code, and datatype are displayed.
        [default: False]
    print.description : bool
        When True, the description of the field is displayed along with its
        value. [default: False]

    See also
    --------
    get_option
    """
    if key not in _options.keys():
        raise KeyError(f'{key} not valid.')

    if not isinstance(value, bool):
        msg = f'The value for {key} must be a bool, not {value!r}.'
        raise ValueError(msg)

    _options[key] = value


def get_option(key):
    """Return the value of the specified option

    Available options:

        parse.strict_ascii
        parse.check_count
        print.short
        print.description

    Parameter
    ---------
    key : str
        Name of a single option.

    Returns
    -------
    result : the value of the option.

    See also
    --------
    set_option
    """
    return _options[key]


def reset_option(key):
    """
    Reset one or more options to their default value.

    Pass "all" as argument to reset all options.

    Parameter
    ---------
    key : str
        Name of a single option.
    """
    global _options
    if key == 'all':
        _options = copy.deepcopy(_original_options)
    else:
        if key not in _options.keys():
            raise KeyError(f'{key} not valid.')
        _options[key] = _original_options[key]
