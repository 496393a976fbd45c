"""
Application Arguments
=====================

Access to the arguments the process was started with.

Option arguments use the ``--name=value`` or ``--name`` form. Everything else
(including a bare ``--``) is a non-option argument. The raw sequence is
kept as-is so it can be handed on unmodified.
"""
from typing import Dict, List, Optional, Sequence, Tuple


def property_key_to_env(name: str) -> str:
    """
    Relax a dotted property name to its environment variable form.

    ``server.port`` -> ``SERVER_PORT``,
    ``main.web-application-type`` -> ``MAIN_WEB_APPLICATION_TYPE``.
    """
    return name.strip().replace(".", "_").replace("-", "_").upper()


class ApplicationArguments:
    """
    Parsed view over the raw argument sequence.

    Attributes:
        source_args: The arguments exactly as given.
    """

    def __init__(self, args: Sequence[str]) -> None:
        self.source_args: Tuple[str, ...] = tuple(args)
        self._options: Dict[str, List[str]] = {}
        self._non_options: List[str] = []

        for arg in self.source_args:
            if arg.startswith("--") and len(arg) > 2:
                name, sep, value = arg[2:].partition("=")
                if not name:
                    self._non_options.append(arg)
                    continue
                values = self._options.setdefault(name, [])
                if sep:
                    values.append(value)
            else:
                self._non_options.append(arg)

    @property
    def option_names(self) -> List[str]:
        return list(self._options)

    def contains_option(self, name: str) -> bool:
        return name in self._options

    def get_option_values(self, name: str) -> Optional[List[str]]:
        """Values given for an option, ``[]`` for a bare flag, ``None`` if absent."""
        values = self._options.get(name)
        return list(values) if values is not None else None

    @property
    def non_option_args(self) -> List[str]:
        return list(self._non_options)

    def as_properties(self) -> Dict[str, str]:
        """
        Options that carry a value, keyed by environment variable name.

        When an option is repeated the last value wins.
        """
        properties: Dict[str, str] = {}
        for name, values in self._options.items():
            if values:
                properties[property_key_to_env(name)] = values[-1]
        return properties

    def __repr__(self) -> str:
        return f"ApplicationArguments({list(self.source_args)!r})"
