"""Typed provisioning settings extracted from a parsed config document.

Responsibilities:
- Map the generic section/key document onto typed, frozen settings objects.
- Fail loudly with `ConfigFieldError` when required fields are missing or mistyped.
- Substitute the runtime CPU count for `auto` values in `sql_config`.

Key types:
- `FtpSettings`: installation media download location and credentials.
- `PathSettings`: install root, SQL Server version, and instance name.
- `ProvisioningConfig`: all settings for one provisioning run.
- `ConfigLoader`: static construction helpers for `ProvisioningConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigFieldError
from .parsing import describe_value_type, format_scalar, normalize_optional_string
from .reader import ConfigDocument, ConfigValue, is_auto, load_document

_MASKED_SECRET = "********"


@dataclass(frozen=True, slots=True)
class FtpSettings:
    """FTP location of the installation ISO.

    Attributes:
        url: FTP directory URL.
        username: FTP login name.
        password: FTP password (never rendered by `as_summary`).
        iso_name: File name of the installation ISO inside `url`.
    """

    url: str
    username: str
    password: str
    iso_name: str


@dataclass(frozen=True, slots=True)
class PathSettings:
    """Filesystem layout for one SQL Server instance.

    Attributes:
        root: Root folder for installation media and instance data.
        version: SQL Server version label, for example `2019`.
        instance_name: Named instance to install.
    """

    root: Path
    version: str
    instance_name: str

    @property
    def instance_root(self) -> Path:
        """Return the per-instance folder below `root`."""

        return self.root / self.version / self.instance_name


@dataclass(frozen=True, slots=True)
class ProvisioningConfig:
    """Settings for one provisioning run.

    Attributes:
        ftp: Installation media location.
        paths: Install folder layout.
        install_options: Feature toggles from the `install_options` section.
        sql_config: Instance tuning values with `auto` already resolved.
        ola_schedules: Maintenance job family -> job attribute mapping.
    """

    ftp: FtpSettings
    paths: PathSettings
    install_options: dict[str, bool] = field(default_factory=dict)
    sql_config: dict[str, ConfigValue] = field(default_factory=dict)
    ola_schedules: dict[str, dict[str, ConfigValue]] = field(default_factory=dict)

    def install_option(self, name: str, default: bool = False) -> bool:
        """Return one install toggle, falling back to `default` when absent."""

        return self.install_options.get(name, default)

    def as_summary(self) -> dict[str, str]:
        """Return display-safe `section.key` strings with secrets masked."""

        summary = {
            "ftp.url": self.ftp.url,
            "ftp.username": self.ftp.username,
            "ftp.password": _MASKED_SECRET,
            "ftp.iso_name": self.ftp.iso_name,
            "paths.root": str(self.paths.root),
            "paths.version": self.paths.version,
            "paths.instance_name": self.paths.instance_name,
        }
        for key in sorted(self.install_options):
            summary[f"install_options.{key}"] = format_scalar(self.install_options[key])
        for key in sorted(self.sql_config):
            summary[f"sql_config.{key}"] = format_scalar(self.sql_config[key])
        for family in sorted(self.ola_schedules):
            attributes = self.ola_schedules[family]
            for key in sorted(attributes):
                summary[f"ola_schedules.{family}.{key}"] = format_scalar(attributes[key])
        return summary


class ConfigLoader:
    """Factory methods for creating `ProvisioningConfig` from config documents."""

    _FTP_KEYS = ("url", "username", "password", "iso_name")
    _PATH_KEYS = ("root", "version", "instance_name")

    @staticmethod
    def from_file(
        path: Path | str, *, strict: bool = False, cpu_count: int | None = None
    ) -> ProvisioningConfig:
        """Load a config document from disk and extract provisioning settings."""

        document = load_document(path, strict=strict)
        return ConfigLoader.from_document(document, cpu_count=cpu_count)

    @staticmethod
    def from_document(
        document: ConfigDocument, *, cpu_count: int | None = None
    ) -> ProvisioningConfig:
        """Extract provisioning settings from a parsed document.

        Args:
            document: Parsed section mapping.
            cpu_count: Value substituted for `auto` in `sql_config`. Defaults to
                `os.cpu_count()`.

        Raises:
            ConfigFieldError: If a required section or key is absent or mistyped.
        """

        ftp_section = ConfigLoader._required_section(document, "ftp")
        ftp = FtpSettings(
            **{
                key: ConfigLoader._required_string(ftp_section, "ftp", key)
                for key in ConfigLoader._FTP_KEYS
            }
        )

        paths_section = ConfigLoader._required_section(document, "paths")
        paths = PathSettings(
            root=Path(ConfigLoader._required_string(paths_section, "paths", "root")),
            version=ConfigLoader._required_text(paths_section, "paths", "version"),
            instance_name=ConfigLoader._required_string(
                paths_section, "paths", "instance_name"
            ),
        )

        return ProvisioningConfig(
            ftp=ftp,
            paths=paths,
            install_options=ConfigLoader._boolean_map(document, "install_options"),
            sql_config=ConfigLoader._resolved_sql_config(
                document, ConfigLoader._resolve_cpu_count(cpu_count)
            ),
            ola_schedules=ConfigLoader._nested_scalar_map(document, "ola_schedules"),
        )

    @staticmethod
    def _required_section(document: ConfigDocument, name: str) -> Mapping[str, Any]:
        """Return a required top-level section."""

        section = document.get(name)
        if section is None:
            raise ConfigFieldError(name, "section is required.")
        return section

    @staticmethod
    def _optional_section(document: ConfigDocument, name: str) -> Mapping[str, Any]:
        """Return an optional top-level section, or an empty mapping when absent."""

        return document.get(name) or {}

    @staticmethod
    def _required_string(section: Mapping[str, Any], section_name: str, key: str) -> str:
        """Read a required non-empty string leaf."""

        path = f"{section_name}.{key}"
        if key not in section:
            raise ConfigFieldError(path, "is required.")
        value = section[key]
        if not isinstance(value, str):
            raise ConfigFieldError(
                path, f"must be a string, got {describe_value_type(value)}."
            )
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ConfigFieldError(path, "must be a non-empty string.")
        return normalized

    @staticmethod
    def _required_text(section: Mapping[str, Any], section_name: str, key: str) -> str:
        """Read a required string-or-integer leaf as text."""

        path = f"{section_name}.{key}"
        if key not in section:
            raise ConfigFieldError(path, "is required.")
        value = section[key]
        if isinstance(value, bool) or isinstance(value, dict):
            raise ConfigFieldError(
                path, f"must be a string or integer, got {describe_value_type(value)}."
            )
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ConfigFieldError(path, "must be a non-empty value.")
        return normalized

    @staticmethod
    def _boolean_map(document: ConfigDocument, section_name: str) -> dict[str, bool]:
        """Read an optional section whose leaves must all be booleans."""

        section = ConfigLoader._optional_section(document, section_name)
        parsed: dict[str, bool] = {}
        for key, value in section.items():
            if not isinstance(value, bool):
                raise ConfigFieldError(
                    f"{section_name}.{key}",
                    f"must be `true` or `false`, got {describe_value_type(value)}.",
                )
            parsed[key] = value
        return parsed

    @staticmethod
    def _resolved_sql_config(
        document: ConfigDocument, cpu_count: int
    ) -> dict[str, ConfigValue]:
        """Read `sql_config` leaves, replacing `auto` with the CPU count."""

        section = ConfigLoader._optional_section(document, "sql_config")
        resolved: dict[str, ConfigValue] = {}
        for key, value in section.items():
            if isinstance(value, dict):
                raise ConfigFieldError(
                    f"sql_config.{key}", "must be a scalar value, got section."
                )
            resolved[key] = cpu_count if is_auto(value) else value
        return resolved

    @staticmethod
    def _nested_scalar_map(
        document: ConfigDocument, section_name: str
    ) -> dict[str, dict[str, ConfigValue]]:
        """Read an optional section made only of sub-sections."""

        section = ConfigLoader._optional_section(document, section_name)
        parsed: dict[str, dict[str, ConfigValue]] = {}
        for family, attributes in section.items():
            if not isinstance(attributes, dict):
                raise ConfigFieldError(
                    f"{section_name}.{family}",
                    f"must be a sub-section, got {describe_value_type(attributes)}.",
                )
            parsed[family] = dict(attributes)
        return parsed

    @staticmethod
    def _resolve_cpu_count(cpu_count: int | None) -> int:
        """Return the value substituted for `auto`, never less than 1."""

        if cpu_count is None:
            cpu_count = os.cpu_count() or 1
        return max(1, int(cpu_count))
