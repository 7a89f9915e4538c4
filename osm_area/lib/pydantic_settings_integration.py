import logging
from collections.abc import Callable
from sys import modules
from typing import Any, get_type_hints

from pydantic import create_model
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, SettingsConfigDict


def _is_setting_name(name: str) -> bool:
    return name[:1] != '_' and name.isupper()


def pydantic_settings_integration(
    caller_name: str,
    caller_globals: dict[str, Any],
    /,
    *,
    env_prefix: str = '',
    name_filter: Callable[[str], bool] = _is_setting_name,
) -> None:
    """
    Turn the UPPER_CASE globals of a config module into pydantic-settings fields.

    Values are loaded from the environment (and a .env file, if present),
    validated against the module annotations or the type of the default,
    and written back into the module globals.
    """
    settings = {k: v for k, v in caller_globals.items() if name_filter(k)}
    if not settings:
        logging.warning('No settings found in %s', caller_name)
        return

    type_hints = get_type_hints(modules[caller_name], caller_globals)
    fields: dict[str, tuple[Any, Any]] = {}
    for name, value in settings.items():
        annotation = type_hints.get(name)
        if annotation is None:
            annotation = Any if isinstance(value, FieldInfo) else type(value)
        fields[name] = (annotation, value)

    config = SettingsConfigDict(
        env_prefix=env_prefix,
        env_file='.env',
        extra='ignore',
    )
    base = type(f'{caller_name}_BaseSettings', (BaseSettings,), {'model_config': config})
    instance = create_model(f'{caller_name}_Settings', __base__=base, **fields)()  # type: ignore

    for name in settings:
        caller_globals[name] = getattr(instance, name)
