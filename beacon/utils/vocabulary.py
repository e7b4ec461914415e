"""
Vocabulary configuration for the text signal engine.

The action-verb list, resume heading noise, month tokens and job-description
section labels are configuration data, not code. They live in
beacon/data/vocabulary.yaml (or the file named by BEACON_VOCABULARY_PATH) and
are loaded once into a frozen Vocabulary. Every engine function accepts an
optional Vocabulary so tests and callers can swap tables without touching the
algorithms.

Examples:
    >>> vocab = default_vocabulary()
    >>> "managed" in vocab.action_verbs
    True
    >>> vocab.leading_verb_pattern.match("Led a team").group(1)
    'Led'
"""

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from beacon.utils.exceptions import VocabularyConfigError

load_dotenv()
DEFAULT_VOCABULARY_PATH = Path(__file__).resolve().parent.parent / "data" / "vocabulary.yaml"
VOCABULARY_PATH = Path(os.getenv("BEACON_VOCABULARY_PATH", str(DEFAULT_VOCABULARY_PATH)))

REQUIRED_KEYS = ("action_verbs", "heading_noise", "months", "section_labels")


@dataclass(frozen=True)
class Vocabulary:
    """
    Immutable lookup tables used by the normalizer, seeder, scorer and section parser.

    Attributes:
        action_verbs: Resume action verbs, lowercase, in match-priority order
        heading_noise: Lowercase resume headings dropped during normalization
        months: Lowercase month tokens for date-range detection
        section_labels: Ordered (section key, heading labels) pairs
    """

    action_verbs: Tuple[str, ...]
    heading_noise: frozenset
    months: Tuple[str, ...]
    section_labels: Tuple[Tuple[str, Tuple[str, ...]], ...]

    @property
    def leading_verb_pattern(self) -> re.Pattern:
        """Vocabulary verb at the very start of a line (group 1 holds the verb)."""
        return _compile_verb_pattern(self.action_verbs, leading=True)

    @property
    def any_verb_pattern(self) -> re.Pattern:
        """Vocabulary verb anywhere in a line, whole word (group 1 holds the verb)."""
        return _compile_verb_pattern(self.action_verbs, leading=False)

    @property
    def date_range_pattern(self) -> re.Pattern:
        """Full-line date or date range such as "Jan 2020 - Current"."""
        return _compile_date_range_pattern(self.months)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vocabulary":
        """
        Build a Vocabulary from a plain mapping with the config file's keys.

        Raises:
            VocabularyConfigError: If a key is missing or has the wrong shape
        """
        for key in REQUIRED_KEYS:
            if key not in data:
                raise VocabularyConfigError("Vocabulary config is missing a required key", key=key)

        for key in ("action_verbs", "heading_noise", "months"):
            if not isinstance(data[key], (list, tuple)):
                raise VocabularyConfigError("Expected a list of strings", key=key)

        labels = data["section_labels"]
        if not isinstance(labels, dict):
            raise VocabularyConfigError("Expected a mapping of section key to labels", key="section_labels")

        return cls(
            action_verbs=tuple(str(v).strip().lower() for v in data["action_verbs"] if str(v).strip()),
            heading_noise=frozenset(str(h).strip().lower() for h in data["heading_noise"]),
            months=tuple(str(m).strip().lower() for m in data["months"] if str(m).strip()),
            section_labels=tuple(
                (str(key), tuple(str(label).lower() for label in values))
                for key, values in labels.items()
            ),
        )


@lru_cache(maxsize=None)
def _compile_verb_pattern(verbs: Tuple[str, ...], leading: bool) -> re.Pattern:
    alternation = "|".join(re.escape(verb) for verb in verbs)
    if not alternation:
        # Matches nothing
        return re.compile(r"(?!x)x")
    anchor = "^" if leading else r"\b"
    return re.compile(rf"{anchor}({alternation})\b", re.IGNORECASE)


@lru_cache(maxsize=None)
def _compile_date_range_pattern(months: Tuple[str, ...]) -> re.Pattern:
    month = "(?:" + "|".join(re.escape(m) for m in months) + ")" if months else r"(?!x)x"
    token = rf"(?:{month}\s+\d{{4}}|\d{{4}})"
    return re.compile(rf"{token}(?:\s*[–-]\s*(?:{month}\s+\d{{4}}|\d{{4}}|current))?", re.IGNORECASE)


def load_vocabulary(config_path: Path = None) -> Vocabulary:
    """
    Load a vocabulary YAML file.

    Args:
        config_path: Optional path to the config file (defaults to BEACON_VOCABULARY_PATH,
                     falling back to the packaged beacon/data/vocabulary.yaml)

    Returns:
        Frozen Vocabulary

    Raises:
        VocabularyConfigError: If the file cannot be read or is malformed
    """
    if config_path is None:
        config_path = VOCABULARY_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise VocabularyConfigError("Vocabulary config not found", config_path=config_path)

    try:
        data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise VocabularyConfigError(f"Vocabulary config could not be parsed: {e}", config_path=config_path) from e
    if not isinstance(data, dict):
        raise VocabularyConfigError("Vocabulary config must be a mapping", config_path=config_path)

    try:
        return Vocabulary.from_dict(data)
    except VocabularyConfigError as e:
        raise VocabularyConfigError(e.message, config_path=config_path, key=e.key) from e


@lru_cache(maxsize=1)
def default_vocabulary() -> Vocabulary:
    """Vocabulary loaded from the configured path, cached for the process lifetime."""
    return load_vocabulary()
