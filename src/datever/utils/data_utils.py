# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
Utilities related to managing data types.
"""
from schema import Schema, Optional


def deep_update(dict1, dict2):
    """Perform a deep merge of `dict2` into `dict1`.

    Note that `dict2` and any nested dicts are unchanged.
    """
    def flatten(v):
        if isinstance(v, dict):
            return dict((k, flatten(v_)) for k, v_ in v.items())
        else:
            return v

    def merge(v1, v2):
        if isinstance(v1, dict) and isinstance(v2, dict):
            deep_update(v1, v2)
            return v1
        else:
            return flatten(v2)

    for k1, v1 in dict1.items():
        if k1 not in dict2:
            dict1[k1] = flatten(v1)

    for k2, v2 in dict2.items():
        v1 = dict1.get(k2)
        dict1[k2] = merge(v1, v2)


class cached_property(object):
    """Simple property caching descriptor.

    Example:

        >>> class Foo(object):
        >>>     @cached_property
        >>>     def bah(self):
        >>>         print('bah')
        >>>         return 1
        >>>
        >>> f = Foo()
        >>> f.bah
        bah
        1
        >>> f.bah
        1
    """
    def __init__(self, func, name=None):
        self.func = func
        self.name = name or func.__name__

    def __get__(self, instance, owner=None):
        if instance is None:
            return self

        result = self.func(instance)
        try:
            setattr(instance, self.name, result)
        except AttributeError:
            raise AttributeError("can't set attribute %r on %r"
                                 % (self.name, instance))
        return result

    @classmethod
    def uncache(cls, instance, name):
        if name in instance.__dict__:
            delattr(instance, name)


class LazyAttributeMeta(type):
    """Metaclass for adding properties to a class for accessing top-level keys
    in its `_data` dictionary, and validating them on first reference.

    Property names are derived from the keys of the class's `schema` object.
    If a schema key is optional, then the class property will evaluate to None
    if the key is not present in `_data`.

    The attribute getters created by this metaclass call the class's
    `_validate_key` method, passing the key, key value and key schema.

    This metaclass creates the following attributes:
        - for each key in cls.schema, creates an attribute of the same name;
        - 'validate_data' (function): A method that validates all keys;
        - 'validated_data' (function): A method that returns the entire
          validated dict;
        - '_schema_keys' (frozenset): Keys in the schema.
    """
    def __new__(cls, name, parents, members):
        schema = members.get('schema')
        keys = set()

        if schema:
            for key, key_schema in schema.schema.items():
                optional = isinstance(key, Optional)
                while isinstance(key, Schema):
                    key = key.schema
                if isinstance(key, str):
                    if key in members:
                        raise Exception("Couldn't make attribute %r, already "
                                        "defined" % key)
                    keys.add(key)
                    members[key] = cls._make_getter(key, optional, key_schema)

            members["validate_data"] = cls._make_validate_data()
            members["validated_data"] = cls._make_validated_data()
            members["_schema_keys"] = frozenset(keys)

        return super(LazyAttributeMeta, cls).__new__(cls, name, parents, members)

    @classmethod
    def _make_validate_data(cls):
        def func(self):
            self.validated_data()
        return func

    @classmethod
    def _make_validated_data(cls):
        def func(self):
            return dict((key, getattr(self, key)) for key in self._schema_keys)
        return func

    @classmethod
    def _make_getter(cls, key, optional, key_schema):
        def getter(self):
            if key not in (self._data or {}):
                if optional:
                    return None
                raise self.schema_error("Required key is missing: %r" % key)

            return self._validate_key(key, self._data[key], key_schema)

        return cached_property(getter, name=key)
