"""Typed, layered configuration loader with precedence handling."""
from __future__ import annotations

import os
import configparser
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Tuple

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

CONFIG_DIR = Path(__file__).resolve().parent
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
ENV_PREFIX = "CASETRACK_"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "General": {
        "app_name": "casetrack",
        "version": "",
    },
    "Logging": {
        "level": "WARNING",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },
    "Dates": {
        "display_format": "%d/%m/%Y",
        "input_formats": "%Y-%m-%d,%d/%m/%Y",
    },
    "Recipients": {
        "conjunctions": "e,and",
    },
}


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class GeneralConfig:
    app_name: str = "casetrack"
    version: str = ""


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class DatesConfig:
    display_format: str = "%d/%m/%Y"
    input_formats: tuple = ("%Y-%m-%d", "%d/%m/%Y")


@dataclass
class RecipientsConfig:
    conjunctions: tuple = ("e", "and")


@dataclass
class AppConfig:
    general: GeneralConfig
    logging: LoggingConfig
    dates: DatesConfig
    recipients: RecipientsConfig


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    # interpolation off: logging formats contain "%(...)s"
    cp = configparser.ConfigParser(interpolation=None)
    cp.read(path, encoding="utf-8")
    return _cp_to_dict(cp)


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _cast(value: Any, typ: Any) -> Any:
    if typ in (Path, "Path"):
        return Path(str(value)).expanduser()
    if typ in (bool, "bool"):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if typ in (int, "int"):
        return int(value)
    if typ in (float, "float"):
        return float(value)
    if typ in (tuple, "tuple"):
        if isinstance(value, (tuple, list)):
            return tuple(value)
        return tuple(part.strip() for part in str(value).split(",") if part.strip())
    return str(value)


def _build_dataclass(cls: type, data: Dict[str, Any]) -> Any:
    kwargs = {}
    for field in fields(cls):
        val = data.get(field.name, field.default)
        kwargs[field.name] = _cast(val, field.type)
    return cls(**kwargs)


def _env_overlays(environ: Dict[str, str] | None = None) -> Dict[str, Dict[str, Any]]:
    environ = os.environ if environ is None else environ
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        section = section.title()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "casetrack" / "config.ini"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "casetrack" / "config.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """Facade merging layered configuration with type safety.

    Layers (later wins): embedded defaults, ``defaults.ini``, environment
    variables ``CASETRACK_<SECTION>__<KEY>``, user/explicit config file.
    """

    def __init__(
        self,
        *,
        user_ini: Path | None = None,
        environ: Dict[str, str] | None = None,
    ) -> None:
        self._lock = RLock()
        self._user_ini = user_ini
        self._environ = environ
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}
            sources: Dict[Tuple[str, str], Dict[str, str]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS, "code", "embedded", sources)

            # Layer 1: defaults.ini
            if DEFAULTS_INI.exists():
                _apply(merged, _read_ini(DEFAULTS_INI), "defaults.ini", str(DEFAULTS_INI), sources)

            # Layer 2: environment variables
            env = _env_overlays(self._environ)
            _apply(merged, env, "env", "os.environ", sources)

            # Layer 3: user overrides
            user_ini = self._user_ini or _user_config_path()
            if user_ini.exists():
                _apply(merged, _read_ini(user_ini), "user", str(user_ini), sources)

            self._merged = merged
            self._sources = sources

            self.general = _build_dataclass(GeneralConfig, merged.get("General", {}))
            self.logging = _build_dataclass(LoggingConfig, merged.get("Logging", {}))
            self.dates = _build_dataclass(DatesConfig, merged.get("Dates", {}))
            self.recipients = _build_dataclass(RecipientsConfig, merged.get("Recipients", {}))

    # ------------------------------------------------------------------ #
    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))

    def as_app_config(self) -> AppConfig:
        return AppConfig(
            general=self.general,
            logging=self.logging,
            dates=self.dates,
            recipients=self.recipients,
        )


# Global singleton
config_service = ConfigService()
