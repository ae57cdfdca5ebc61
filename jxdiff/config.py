# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diff_format import TextCompareMode


CONFIG_BASENAME = 'jxdiff_config'


class JxdiffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """Directories searched for config files, in descending priority."""
    return [os.getcwd(), os.path.join(os.path.expanduser('~'), '.jxdiff')]


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn, lowest priority first.
    """
    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        loader = JSONFileConfigLoader(basefilename + '.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False, path=None):
    """Collect the effective config of an entry point.

    Class defaults are overridden by the values found in config files,
    following the class hierarchy of the entry point configurable.
    """
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    disk_config = {}
    if path is None:
        path = config_path()
    for c in _load_config_files(CONFIG_BASENAME, path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, JxdiffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if c.__name__ in disk_config:
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JxdiffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Comparing(JxdiffConfigurable):

    ignore_whitespace = Bool(
        False,
        help="collapse whitespace runs and ignore leading/trailing whitespace.",
    ).tag(config=True)

    ignore_case = Bool(
        False,
        help="compare case-insensitively.",
    ).tag(config=True)

    text_compare_mode = Enum(
        (TextCompareMode.LINE, TextCompareMode.WORD),
        TextCompareMode.LINE,
        help="granularity of the reported changes.",
    ).tag(config=True)

    max_search_distance = Integer(
        100,
        help="number of lines to look ahead for a matching line.",
    ).tag(config=True)


class Json(JxdiffConfigurable):

    ignore_key_order = Bool(
        False,
        help="ignore the order of keys in json objects.",
    ).tag(config=True)

    ignore_array_order = Bool(
        False,
        help="ignore the order of elements in json arrays.",
    ).tag(config=True)


class Xml(JxdiffConfigurable):

    ignore_attribute_order = Bool(
        False,
        help="ignore the order of attributes in xml elements.",
    ).tag(config=True)


class Diff(Global, Json, Xml, _Comparing):
    pass


class Validate(Global):

    basic_xml = Bool(
        False,
        help="validate xml by matching tags only, without a parser.",
    ).tag(config=True)


entrypoint_configurables = {
    'jxdiff-diff': Diff,
    'jxdiff-validate': Validate,
}
