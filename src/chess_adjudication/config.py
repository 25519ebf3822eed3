from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

_DEFAULTS: dict[str, object] = {
    "pgn": {
        "encoding": "utf-8",
    },
    "logging": {
        "level": "INFO",
    },
    "report": {
        "verbose": False,
    },
}


@dataclass(frozen=True)
class AnalyzerSettings:
    pgn_encoding: str
    verbose_report: bool
    log_level: str = "INFO"


def create_config(
    yaml_path: str = "cara.yaml",
    env_prefix: str = "CARA",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.
    """
    if defaults is None:
        defaults = _DEFAULTS
    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def _as_bool(value: object) -> bool:
    # env vars arrive as strings
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def load_settings(cfg: ConfigurationSet | None = None) -> AnalyzerSettings:
    if cfg is None:
        cfg = create_config()
    return AnalyzerSettings(
        pgn_encoding=str(cfg["pgn.encoding"]),
        verbose_report=_as_bool(cfg["report.verbose"]),
        log_level=str(cfg["logging.level"]),
    )
