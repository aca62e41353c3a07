"""
PassShield Configuration Management
====================================

Centralised configuration for the PassShield password-analysis toolkit
using Python dataclasses and TOML-based persistence.

The analysis core itself is configuration-free (a pure function of the
password); these settings only shape logging, the engine facade, password
generation defaults, and console/report output.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared by every PassShield component.

    Controls logging verbosity, log destinations, and where reports land.
    """

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    output_dir: str = "output"
    report_format: str = "html"
    debug: bool = False
    version: str = "1.0.0"


@dataclass(frozen=False, slots=True)
class AnalysisConfig:
    """Presentation settings for password analysis results.

    The plaintext password is masked in console and report output unless
    ``mask_password`` is explicitly disabled.
    """

    mask_password: bool = True
    max_suggestions: int = 10
    show_patterns: bool = True
    output_format: str = "console"


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Defaults for random password and passphrase generation."""

    length: int = 16
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False
    passphrase_words: int = 4
    separator: str = "-"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PassShieldConfig:
    """Master configuration aggregating every section.

    Usage:
        >>> config = PassShieldConfig.load()               # from default path
        >>> config = PassShieldConfig.load("custom.toml")  # from custom path
        >>> config.generator.length
        16
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PassShieldConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`PassShieldConfig` instance.

        Raises:
            FileNotFoundError: If *path* was given explicitly and does not
                exist.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            analysis=cls._build_section(AnalysisConfig, raw.get("analysis", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate dataclass *cls* from the keys it declares.

        Unknown keys are ignored so newer config files keep loading.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> PassShieldConfig:
    """Cached wrapper around :meth:`PassShieldConfig.load`.

    Passing an explicit *path* always reloads.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = PassShieldConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
