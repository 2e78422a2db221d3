"""Configuration for adaptive-images"""
import pathlib

from dynaconf import Dynaconf, Validator

# Validators for adaptive-images settings.
_validators = [
    Validator("deployment.canary", is_type_of=bool),
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator(
        "logging.resolver_level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ),
    Validator("metrics.dev_logger", is_type_of=bool),
    Validator("metrics.host", is_type_of=str),
    Validator("metrics.port", gte=0, is_type_of=int),
    # Breakpoints may be given as a comma-separated string or a TOML list.
    Validator("resolver.resolutions", must_exist=True, is_type_of=(str, list)),
    Validator("resolver.cookie_name", must_exist=True, is_type_of=str, len_min=1),
    Validator("resolver.mobile_first", is_type_of=(bool, str)),
    Validator("resolver.variant", is_in=["extended", "legacy"]),
    Validator("resolver.database", is_type_of=str),
    Validator("resolver.max_width", is_type_of=(int, str)),
    Validator("media.url_prefix", is_type_of=str, must_exist=True),
    Validator("media.extension", is_type_of=str, must_exist=True),
    Validator("web.api.v1.path_character_max", is_type_of=int, gt=0, lte=2048),
    Validator("web.api.v1.script_cache_ttl_sec", is_type_of=int, gte=0),
    Validator("sentry.env", is_in=["prod", "stage", "dev"]),
    Validator("sentry.mode", is_in=["disabled", "release", "debug"]),
    Validator("sentry.traces_sample_rate", gte=0, lte=1),
]

# `root_path` = The directory holding `configs/`, DO NOT CHANGE.
# `envvar_prefix` = Export envvars with `export ADAPTIVE_IMAGES_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing` etc.
# `env_switcher` = Switch environments by `export ADAPTIVE_IMAGES_ENV=production`.
#                  Default: `development`.
# `merge_enabled` = Environment tables only override the keys they name.
# `validators` = Define validators for adaptive-images settings.

settings = Dynaconf(
    root_path=pathlib.Path(__file__).parent,
    envvar_prefix="ADAPTIVE_IMAGES",
    settings_files=[
        "configs/default.toml",
        "configs/development.toml",
        "configs/production.toml",
        "configs/ci.toml",
        "configs/testing.toml",
    ],
    environments=True,
    env_switcher="ADAPTIVE_IMAGES_ENV",
    merge_enabled=True,
    validators=_validators,
)
