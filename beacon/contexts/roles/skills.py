"""
Skill dictionary matching for the Roles context.

detect_skills() is a plain substring counter with no tokenization or stemming,
so "sql" matches inside "nosql".

Confidence reaches 1.0 once half of an entry's keywords have matched.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from dotenv import load_dotenv

from beacon.contexts.roles.data_structures import DetectedSkill, SkillDictionaryEntry
from beacon.contexts.roles.exceptions import SkillDictionaryError

load_dotenv()
DEFAULT_SKILLS_PATH = Path(__file__).resolve().parents[2] / "data" / "skills.json"
SKILLS_PATH = Path(os.getenv("BEACON_SKILLS_PATH", str(DEFAULT_SKILLS_PATH)))

SkillDictionary = Dict[str, SkillDictionaryEntry]
EntryLike = Union[SkillDictionaryEntry, Mapping[str, Any]]


def count_occurrences(text: str, keyword: str) -> List[int]:
    """
    Start indices of non-overlapping keyword occurrences.

    Scanning resumes at the end of each match, so "aaaa" holds two "aa".

    Example:
        >>> count_occurrences("python and python", "python")
        [0, 11]
    """
    if not keyword:
        return []

    indices = []
    start = 0
    while start < len(text):
        index = text.find(keyword, start)
        if index == -1:
            break
        indices.append(index)
        start = index + len(keyword)
    return indices


def _as_entry(entry: EntryLike) -> SkillDictionaryEntry:
    if isinstance(entry, SkillDictionaryEntry):
        return entry
    return SkillDictionaryEntry.from_mapping(entry)


def detect_skills(text: str, dictionary: Mapping[str, EntryLike]) -> List[DetectedSkill]:
    """
    Find dictionary skills in text.

    Args:
        text: Text to scan (typically consolidated job description sections)
        dictionary: Skill key -> SkillDictionaryEntry, or a plain
                    {id, label, keywords} mapping as loaded from JSON

    Returns:
        Detected skills sorted by frequency, then confidence, both descending.
        Skills without a single match are omitted.

    Example:
        >>> dictionary = {"python": {"id": "py", "label": "Python", "keywords": ["python", "django"]}}
        >>> [(s.frequency, s.confidence) for s in detect_skills("Built a Python service with Django", dictionary)]
        [(2, 1.0)]
    """
    normalized = (text or "").lower()
    detections = []

    for key, raw_entry in dictionary.items():
        entry = _as_entry(raw_entry)

        matches = []
        for keyword in entry.keywords:
            keyword = keyword.strip()
            if not keyword:
                continue
            occurrences = count_occurrences(normalized, keyword.lower())
            matches.extend(keyword for _ in occurrences)

        if not matches:
            continue

        unique_matches = {match.lower() for match in matches}
        confidence = min(1.0, len(unique_matches) / max(1, len(entry.keywords) / 2))

        detections.append(
            DetectedSkill(
                key=key,
                id=entry.id,
                label=entry.label,
                matches=tuple(matches),
                frequency=len(matches),
                confidence=confidence,
            )
        )

    # sorted() is stable, so dictionary order breaks remaining ties
    return sorted(detections, key=lambda skill: (-skill.frequency, -skill.confidence))


def parse_skill_dictionary(data: Any, source: Path = None) -> SkillDictionary:
    """
    Validate a decoded JSON payload into a skill dictionary.

    Raises:
        SkillDictionaryError: If the payload or any entry has the wrong shape
    """
    if not isinstance(data, Mapping):
        raise SkillDictionaryError("Skill dictionary must be a JSON object", source=source)

    dictionary = {}
    for key, value in data.items():
        if not isinstance(value, Mapping):
            raise SkillDictionaryError("Entry must be an object", source=source, skill_key=key)
        keywords = value.get("keywords")
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise SkillDictionaryError(
                "Entry 'keywords' must be a list of strings", source=source, skill_key=key
            )
        dictionary[key] = SkillDictionaryEntry.from_mapping(value)
    return dictionary


def load_skill_dictionary(path: Path = None) -> SkillDictionary:
    """
    Load a skill dictionary JSON file.

    Args:
        path: Optional path (defaults to BEACON_SKILLS_PATH, falling back to the
              packaged beacon/data/skills.json)

    Returns:
        Mapping of skill key to SkillDictionaryEntry

    Raises:
        SkillDictionaryError: If the file is missing, not JSON, or malformed
    """
    if path is None:
        path = SKILLS_PATH
    path = Path(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SkillDictionaryError("Skill dictionary not found", source=path) from e
    except json.JSONDecodeError as e:
        raise SkillDictionaryError(f"Skill dictionary is not valid JSON: {e}", source=path) from e

    return parse_skill_dictionary(data, source=path)
