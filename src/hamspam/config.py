# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating hamspam configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/hamspam/  (default: ~/.config/hamspam/)
#   - Data:    $XDG_DATA_HOME/hamspam/    (default: ~/.local/share/hamspam/)
#
# Files:
#   - config.toml: User configuration (corpus location, analysis settings)
#   - trainingData.data: Default corpus location (in data directory)
#
# Command-line flags override anything set in config.toml.
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "hamspam"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for hamspam.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/hamspam/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_data_home() -> Path:
    """
    Returns the XDG data directory for hamspam.

    Respects $XDG_DATA_HOME if set, otherwise uses ~/.local/share/hamspam/
    This is where the default corpus lives.
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        base = Path(xdg_data)
    else:
        base = Path.home() / ".local" / "share"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class CorpusConfig:
    """
    Configuration for corpus loading and splitting.

    Attributes:
        path: Corpus file. Empty means the default location in the data dir.
        delimiter: Separator between class label and message text.
        train_ratio: Share of the corpus used for training in batch mode.
        seed: Shuffle seed for reproducible splits (None = random each run).
    """
    path: str = ""
    delimiter: str = "\t"
    train_ratio: float = 0.75
    seed: int | None = None


@dataclass
class AnalysisConfig:
    """
    Configuration for the analysis variants and report.

    Attributes:
        common_words: How many common English words the last variant removes.
        top_words: How many of each class's most frequent words to report.
        probe: Message to classify instead of running a batch evaluation.
               Empty means batch mode.
    """
    common_words: int = 100
    top_words: int = 5
    probe: str = ""


@dataclass
class Config:
    """
    Main configuration container for hamspam.

    Attributes:
        corpus: Corpus loading configuration.
        analysis: Analysis and report configuration.

    Usage:
        >>> config = Config.load()
        >>> config.corpus.train_ratio
        0.75
    """
    corpus: CorpusConfig = field(default_factory=CorpusConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def default_corpus_path() -> Path:
        """Returns the default corpus location."""
        return get_xdg_data_home() / "trainingData.data"

    def corpus_path(self) -> Path:
        """Returns the configured corpus path, or the default one."""
        if self.corpus.path:
            return Path(self.corpus.path).expanduser()
        return self.default_corpus_path()

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Uses the XDG location if None.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        config = cls._from_dict(data)
        config.validate()
        return config

    def save(self, path: Path | None = None) -> Path:
        """
        Save configuration to a config file.

        Creates the config directory if it doesn't exist.

        Returns:
            The path written to.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

        return config_path

    def validate(self) -> None:
        """
        Check that settings have the right types and are in range.

        TOML values arrive untyped, so e.g. a string where an integer belongs
        is rejected here instead of failing halfway through an analysis.

        Raises:
            ConfigError: If any setting is invalid.
        """
        _check_type("corpus.path", self.corpus.path, str)
        _check_type("corpus.delimiter", self.corpus.delimiter, str)
        _check_type("corpus.train_ratio", self.corpus.train_ratio, (int, float))
        if self.corpus.seed is not None:
            _check_type("corpus.seed", self.corpus.seed, int)
        _check_type("analysis.common_words", self.analysis.common_words, int)
        _check_type("analysis.top_words", self.analysis.top_words, int)
        _check_type("analysis.probe", self.analysis.probe, str)

        if not self.corpus.delimiter:
            raise ConfigError("corpus.delimiter must not be empty")
        if not 0.0 < self.corpus.train_ratio < 1.0:
            raise ConfigError(
                f"corpus.train_ratio must be between 0 and 1 (exclusive), got {self.corpus.train_ratio}"
            )
        if not 0 <= self.analysis.common_words <= 100:
            raise ConfigError(
                f"analysis.common_words must be between 0 and 100, got {self.analysis.common_words}"
            )
        if self.analysis.top_words < 0:
            raise ConfigError(f"analysis.top_words must not be negative, got {self.analysis.top_words}")

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).
        """
        config = cls()

        # Corpus settings
        corpus = data.get("corpus", {})
        config.corpus = CorpusConfig(
            path=corpus.get("path", ""),
            delimiter=corpus.get("delimiter", "\t"),
            train_ratio=corpus.get("train_ratio", 0.75),
            seed=corpus.get("seed"),
        )

        # Analysis settings
        analysis = data.get("analysis", {})
        config.analysis = AnalysisConfig(
            common_words=analysis.get("common_words", 100),
            top_words=analysis.get("top_words", 5),
            probe=analysis.get("probe", ""),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.

        TOML has no null, so an unset seed is left out.
        """
        data: dict[str, Any] = {}

        # Corpus settings
        data["corpus"] = {
            "path": self.corpus.path,
            "delimiter": self.corpus.delimiter,
            "train_ratio": self.corpus.train_ratio,
        }
        if self.corpus.seed is not None:
            data["corpus"]["seed"] = self.corpus.seed

        # Analysis settings
        data["analysis"] = {
            "common_words": self.analysis.common_words,
            "top_words": self.analysis.top_words,
            "probe": self.analysis.probe,
        }

        return data


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


def _check_type(name: str, value: Any, expected: type | tuple[type, ...]) -> None:
    """Raise ConfigError unless value has the expected type (bools never pass)."""
    if isinstance(value, bool) or not isinstance(value, expected):
        if isinstance(expected, tuple):
            wanted = " or ".join(t.__name__ for t in expected)
        else:
            wanted = expected.__name__
        raise ConfigError(f"{name} must be {wanted}, got {value!r}")


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    Useful for users wondering where their config/data is stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"Data:    {get_xdg_data_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Corpus:       {Config.default_corpus_path()}")
