"""Reading and changing the environment variables of the current process."""

from __future__ import annotations

import os


def _check_name(name: str) -> None:
    if not name:
        raise ValueError("The provided name of environment variable is empty.")
    if "=" in name:
        raise ValueError(f"The name of environment variable contains '=': {name!r}")


def set_env(name: str, value: str) -> None:
    """Set ``name`` to ``value``, replacing any existing value.

    Raises ValueError if ``name`` is empty or contains ``=``.
    """
    _check_name(name)
    os.environ[name] = value


def unset_env(name: str) -> None:
    """Remove ``name`` from the environment; does nothing if it is not set.

    Raises ValueError if ``name`` is empty or contains ``=``.
    """
    _check_name(name)
    os.environ.pop(name, None)


def get_env(name: str) -> str:
    """The value of ``name``.

    Raises KeyError if it is not set and ValueError if ``name`` is empty.
    """
    if not name:
        raise ValueError("The provided name of environment variable is empty.")
    try:
        return os.environ[name]
    except KeyError:
        raise KeyError(f"no result found for {name}") from None


def get_env_or_default(name: str, default: str = "") -> str:
    """The value of ``name``, or ``default`` if it is not set.

    Raises ValueError if ``name`` is empty.
    """
    if not name:
        raise ValueError("The provided name of environment variable is empty.")
    return os.environ.get(name, default)


def has_env(name: str) -> bool:
    """Whether ``name`` is set. Raises ValueError if ``name`` is empty."""
    if not name:
        raise ValueError("The provided name of environment variable is empty.")
    return name in os.environ


def _entries() -> list[tuple[str, str]]:
    # Entries with no proper name (such as Windows' hidden "=C:" ones) are skipped.
    return [(name, value) for name, value in os.environ.items() if name and "=" not in name]


def list_names() -> list[str]:
    """A copy of the names of all environment variables."""
    return [name for name, _ in _entries()]


def list_all() -> list[tuple[str, str]]:
    """A copy of all environment variables as ``(name, value)`` pairs."""
    return _entries()