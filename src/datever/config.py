# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


from datever import module_root_path
from datever.utils.data_utils import cached_property, LazyAttributeMeta, \
    deep_update
from datever.utils.logging_ import get_debug_printer
from datever.exceptions import ConfigurationError
from schema import Schema, SchemaError, And, Or
from functools import lru_cache
from inspect import ismodule
import json
import yaml
import os
import copy


# -----------------------------------------------------------------------------
# Schema Implementations
# -----------------------------------------------------------------------------

class Setting(object):
    """Setting subclasses implement lazy setting validators.
    """
    schema = Schema(object)

    def __init__(self, config, key):
        self.config = config
        self.key = key

    @property
    def _env_var_name(self):
        return "DATEVER_%s" % self.key.upper()

    def _parse_env_var(self, value):
        raise NotImplementedError

    def validate(self, data):
        try:
            data = self._validate(data)
            data = self.schema.validate(data)
        except SchemaError as e:
            raise ConfigurationError("Misconfigured setting '%s': %s"
                                     % (self.key, str(e)), cause=e)
        return data

    def _validate(self, data):
        # overridden settings take precedence. Note that `data` has already
        # taken override into account at this point
        if self.key in self.config.overrides:
            return data

        if not self.config.locked:

            # next, env-var
            value = os.getenv(self._env_var_name)
            if value is not None:
                return self._parse_env_var(value)

            # next, JSON-encoded env-var
            varname = self._env_var_name + "_JSON"
            value = os.getenv(varname)
            if value is not None:
                try:
                    return json.loads(value)
                except ValueError as e:
                    raise ConfigurationError(
                        "Expected $%s to be JSON-encoded string." % varname,
                        cause=e
                    )

        return data


class Str(Setting):
    schema = Schema(str)

    def _parse_env_var(self, value):
        return value


class Int(Setting):
    schema = Schema(int)

    def _parse_env_var(self, value):
        try:
            return int(value)
        except ValueError as e:
            raise ConfigurationError("Expected %s to be an integer"
                                     % self._env_var_name, cause=e)


class Bool(Setting):
    schema = Schema(bool)
    true_words = frozenset(["1", "true", "t", "yes", "y", "on"])
    false_words = frozenset(["0", "false", "f", "no", "n", "off"])
    all_words = true_words | false_words

    def _parse_env_var(self, value):
        value = value.lower()
        if value in self.true_words:
            return True
        elif value in self.false_words:
            return False
        else:
            raise ConfigurationError(
                "Expected $%s to be one of: %s"
                % (self._env_var_name, ", ".join(sorted(self.all_words))))


class CacheSize_(Int):
    schema = And(int, lambda x: x >= 0)


class RangeCompareMode_(Str):
    schema = Or("partial", "lexicographic")


config_schema = Schema({
    "parse_cache_size":                             CacheSize_,
    "range_compare_mode":                           RangeCompareMode_,
    "debug_parsing":                                Bool,
    "debug_resolve":                                Bool,
    "debug_file_loads":                             Bool,
    "debug_all":                                    Bool,
    "debug_none":                                   Bool,
    "quiet":                                        Bool,
})


# -----------------------------------------------------------------------------
# Config
# -----------------------------------------------------------------------------

class Config(object, metaclass=LazyAttributeMeta):
    """Datever configuration settings.

    Datever reads its settings from the module level `config` singleton.

    Config files are merged with other config files to create a `Config`
    instance. The 'dateverconfig.py' file in datever acts as the master -
    other config files update the master configuration to create the final
    config. See the comments at the top of 'dateverconfig.py' for more
    details.
    """
    schema = config_schema
    schema_error = ConfigurationError

    def __init__(self, filepaths, overrides=None, locked=False):
        """Create a config.

        Args:
            filepaths (list of str): List of config files to load.
            overrides (dict): A dict containing settings that override all
                others.
            locked: If True, settings overrides in environment variables are
                ignored.
        """
        self.filepaths = filepaths
        self._sourced_filepaths = None
        self.overrides = overrides or {}
        self.locked = locked

    def copy(self, overrides=None, locked=False):
        """Create a separate copy of this config."""
        other = copy.copy(self)

        if overrides is not None:
            other.overrides = overrides

        other.locked = locked

        other._uncache()
        return other

    def override(self, key, value):
        """Set a setting to the given value."""
        if key not in self._schema_keys:
            raise AttributeError("no such setting: %r" % key)

        self.overrides[key] = value
        self._uncache(key)

    def remove_override(self, key):
        """Remove a setting override, if one exists."""
        if key in self.overrides:
            del self.overrides[key]
            self._uncache(key)

    def debug(self, key):
        """Returns True if the debug setting is enabled."""
        return (
            not self.quiet and not self.debug_none
            and (self.debug_all or getattr(self, "debug_%s" % key))
        )

    def debug_printer(self, key):
        """Returns a printer object suitably enabled based on the given key."""
        enabled = self.debug(key)
        return get_debug_printer(enabled)

    @cached_property
    def sourced_filepaths(self):
        """Get the list of files actually sourced to create the config.

        Note:
            `self.filepaths` refers to the filepaths used to search for the
            configs, which does not necessarily match the files used. For
            example, some files may not exist, while others are chosen as
            dateverconfig.py in preference to dateverconfig.yaml.

        Returns:
            List of str: The sourced files.
        """
        _ = self._data  # noqa; force a config load
        return self._sourced_filepaths

    @property
    def data(self):
        """Returns the entire configuration as a dict."""
        return self.validated_data()

    def _uncache(self, key=None):
        # deleting the attribute falls back to the class attribute, which is
        # the cached_property descriptor
        if key:
            cached_property.uncache(self, key)

        # have to uncache entire data dict also, since overrides may have
        # been changed
        cached_property.uncache(self, "_data")

    def _swap(self, other):
        """Swap this config with another.

        This is used by the unit tests to swap the config to one that is
        shielded from any user config updates. Do not use this method unless
        you have good reason.
        """
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__

    def _validate_key(self, key, value, key_schema):
        if type(key_schema) is type and issubclass(key_schema, Setting):
            key_schema = key_schema(self, key)
        elif not isinstance(key_schema, Schema):
            key_schema = Schema(key_schema)

        return key_schema.validate(value)

    @cached_property
    def _data_without_overrides(self):
        data, self._sourced_filepaths = _load_config_from_filepaths(self.filepaths)

        debug_file_loads = data.get("debug_file_loads") and not self.locked
        if debug_file_loads or os.getenv("DATEVER_DEBUG_FILE_LOADS"):
            for filepath in self._sourced_filepaths:
                get_debug_printer()("Loaded config file %s", filepath)

        return data

    @cached_property
    def _data(self):
        data = copy.deepcopy(self._data_without_overrides)
        deep_update(data, self.overrides)
        return data

    @classmethod
    def _create_main_config(cls, overrides=None):
        """See comment block at top of 'dateverconfig.py' describing how the
        main config is assembled."""
        filepaths = []
        filepaths.append(get_module_root_config())
        filepath = os.getenv("DATEVER_CONFIG_FILE")
        if filepath:
            filepaths.extend(filepath.split(os.pathsep))

        if os.getenv("DATEVER_DISABLE_HOME_CONFIG", "").lower() not in ("1", "t", "true"):
            filepath = os.path.expanduser("~/.dateverconfig")
            filepaths.append(filepath)

        return Config(filepaths, overrides)

    def __str__(self):
        return "%r" % sorted(self._schema_keys)

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, str(self))


def _create_locked_config(overrides=None):
    """Create a locked config.

    The config created by this function only reads settings from the master
    config file, and ignores environment and user config files.
    """
    return Config([get_module_root_config()], overrides=overrides, locked=True)


@lru_cache()
def _load_config_py(filepath):
    reserved = dict(
        # Standard Python module variables
        # Made available from within the module,
        # and later excluded from the `Config` class
        __name__=os.path.splitext(os.path.basename(filepath))[0],
        __file__=filepath,
    )

    g = reserved.copy()
    result = {}

    with open(filepath) as f:
        try:
            code = compile(f.read(), filepath, 'exec')
            exec(code, g)
        except Exception as e:
            raise ConfigurationError("Error loading configuration from %s: %s"
                                     % (filepath, str(e)), cause=e)

    for k, v in g.items():
        if k != '__builtins__' \
                and not ismodule(v) \
                and k not in reserved:
            result[k] = v

    return result


@lru_cache()
def _load_config_yaml(filepath):
    with open(filepath) as f:
        content = f.read()
    try:
        doc = yaml.load(content, Loader=yaml.FullLoader) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError("Error loading configuration from %s: %s"
                                 % (filepath, str(e)), cause=e)

    if not isinstance(doc, dict):
        raise ConfigurationError("Error loading configuration from %s: Expected "
                                 "dict, got %s" % (filepath, type(doc).__name__))
    return doc


def _load_config_from_filepaths(filepaths):
    data = {}
    sourced_filepaths = []
    loaders = ((".py", _load_config_py),
               ("", _load_config_yaml))

    for filepath in filepaths:
        for extension, loader in loaders:
            if extension:
                no_ext = os.path.splitext(filepath)[0]
                filepath_with_ext = no_ext + extension
            else:
                filepath_with_ext = filepath

            if not os.path.isfile(filepath_with_ext):
                continue

            data_ = loader(filepath_with_ext)
            deep_update(data, data_)
            sourced_filepaths.append(filepath_with_ext)
            break

    return data, sourced_filepaths


def get_module_root_config():
    return os.path.join(module_root_path, "dateverconfig.py")


# singleton
config = Config._create_main_config()
