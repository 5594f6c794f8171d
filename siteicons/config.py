"""Configuration for siteicons"""

from pathlib import Path

from dynaconf import Dynaconf, Validator

# Validators for siteicons settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator(
        "http.request_timeout_sec",
        "http.connect_timeout_sec",
        "http.pool_timeout_sec",
        is_type_of=float,
        gt=0,
        must_exist=True,
    ),
    Validator("http.max_connections", is_type_of=int, gte=1),
    Validator("http.follow_redirects", is_type_of=bool),
    # 0 disables the limit.
    Validator("http.max_content_length", is_type_of=int, gte=0),
    Validator("http.user_agent", is_type_of=str, must_exist=True),
    Validator(
        "discovery.default_favicon_path",
        is_type_of=str,
        must_exist=True,
        condition=lambda path: path.startswith("/"),
    ),
    # 0 means every candidate is resolved at once.
    Validator("discovery.max_concurrency", is_type_of=int, gte=0),
]

# `root_path` = The directory holding the `configs` folder, DO NOT CHANGE.
# `envvar_prefix` = Export envvars with `export SITEICONS_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing`.
# `merge_enabled` = Merge nested tables of an environment onto `[default]`.
# `env_switcher` = Switch environments by `export SITEICONS_ENV=production`.
#                  Default: `development`.
# `validators` = Define validators for siteicons settings.

settings = Dynaconf(
    root_path=str(Path(__file__).parent),
    envvar_prefix="SITEICONS",
    settings_files=[
        "configs/default.toml",
        "configs/testing.toml",
    ],
    environments=True,
    merge_enabled=True,
    env_switcher="SITEICONS_ENV",
    validators=_validators,
)
