# @date 2018-08-07
# @author Frederic Scherma, All rights reserved without prejudices.
# @license Copyright (c) 2018 Dream Overflow
# Config parser

import copy
import json
import pathlib

import logging

logger = logging.getLogger('cvd.config')
error_logger = logging.getLogger('cvd.error.config')


def merge_parameters(default, user):
    """
    Merge the user parameters over the default ones, recursively for dict.
    A None user value keeps the default value.
    """
    def merge(a, b):
        if isinstance(a, dict) and isinstance(b, dict):
            d = copy.deepcopy(a)
            d.update({key: merge(a.get(key, None), b[key]) for key in b})
            return d

        return copy.deepcopy(a) if b is None else copy.deepcopy(b)

    return merge(default or {}, user or {})


def load_json(filename):
    """
    Load a json file content, empty dict if missing or on parsing error.
    """
    content = {}

    filepath = pathlib.Path(filename)
    if filepath.exists():
        try:
            with open(str(filepath), 'r') as f:
                content = json.load(f)
        except (OSError, ValueError) as e:
            error_logger.error("During parsing of %s : %s" % (filepath, repr(e)))

    return content


def load_config(options, attr_name, defaults=None):
    """
    Load and merge the configuration of attr_name, from :
        - the defaults (dict)
        - the default file <working-path>/config/<attr_name>.json
        - the user file <config-path>/<attr_name>.json
    """
    default_config = {}

    if options.get('working-path'):
        default_config = load_json(pathlib.Path(options['working-path'], 'config', attr_name + '.json'))

    user_config = {}

    if options.get('config-path'):
        user_config = load_json(pathlib.Path(options['config-path'], attr_name + '.json'))

    return merge_parameters(merge_parameters(defaults, default_config), user_config)
