"""Configuration for faviconfinder"""

from pathlib import Path

from dynaconf import Dynaconf, Validator

# Validators for faviconfinder settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator("finder.preferred_filename", is_type_of=str, must_exist=True, len_min=1),
    Validator("finder.follow_meta_refresh", is_type_of=bool, must_exist=True),
    Validator(
        "http.request_timeout_sec",
        "http.connect_timeout_sec",
        "http.pool_timeout_sec",
        is_type_of=float,
        gt=0,
        must_exist=True,
    ),
    Validator("http.max_connections", is_type_of=int, gte=1, must_exist=True),
    # Each hop is a full request, so keep the chain short.
    Validator("fetcher.max_meta_refresh_redirects", is_type_of=int, gte=0, lte=10),
]

# `root_path` = The package directory, so settings load regardless of the working directory.
# `envvar_prefix` = Export envvars with `export FAVICONFINDER_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing` etc.
# `env_switcher` = Switch environments by `export FAVICONFINDER_ENV=production`.
#                  Default: `development`.
# `merge_enabled` = Merge environment tables into the `default` tables instead of replacing them.
# `validators` = Define validators for faviconfinder settings.

settings = Dynaconf(
    root_path=str(Path(__file__).parent),
    envvar_prefix="FAVICONFINDER",
    settings_files=[
        "configs/default.toml",
        "configs/development.toml",
        "configs/production.toml",
        "configs/testing.toml",
    ],
    environments=True,
    env_switcher="FAVICONFINDER_ENV",
    merge_enabled=True,
    validators=_validators,
)
