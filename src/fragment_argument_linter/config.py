"""Linter configuration"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from graphql.pyutils import camel_to_snake, did_you_mean, inspect, suggestion_list

__all__ = ["FragmentArgumentLinterConfig", "get_config"]


# alternative names under which the options may appear in configuration files
_option_aliases = {"require_parameter_declarations": "require_argument_definitions"}


class FragmentArgumentLinterConfig(NamedTuple):
    """Configuration options for the fragment argument linter"""

    require_argument_definitions: bool = True
    """Require @argumentDefinitions on all fragment definitions"""

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> FragmentArgumentLinterConfig:
        """Create a configuration from a mapping of options.

        The option names may be given in snake case or in the camel case used by
        code generator configuration files, e.g. ``requireArgumentDefinitions``.
        """
        if not isinstance(options, Mapping):
            raise TypeError(f"Options must be a mapping, not {inspect(options)}.")
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = camel_to_snake(key)
            name = _option_aliases.get(name, name)
            if name not in cls._fields:
                raise TypeError(
                    f"Unknown linter option '{key}'."
                    + did_you_mean(suggestion_list(name, list(cls._fields)))
                )
            if not isinstance(value, bool):
                raise TypeError(
                    f"Linter option '{key}' must be a boolean, not {inspect(value)}."
                )
            kwargs[name] = value
        return cls(**kwargs)


def get_config(
    config: FragmentArgumentLinterConfig | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> FragmentArgumentLinterConfig:
    """Get a linter configuration from a config object, a mapping or keywords."""
    if config is None:
        return FragmentArgumentLinterConfig.from_dict(kwargs)
    if kwargs:
        raise TypeError("Pass either a configuration or keyword options, not both.")
    if isinstance(config, FragmentArgumentLinterConfig):
        return config
    return FragmentArgumentLinterConfig.from_dict(config)
