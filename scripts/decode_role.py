#!/usr/bin/env python3
"""
Role Decoder CLI

Splits a job description into labeled sections and ranks the dictionary
skills it mentions.

Usage:
    python scripts/decode_role.py job.txt
    python scripts/decode_role.py job.txt --skills my_skills.json --markdown outs/role.md
    python scripts/decode_role.py job.txt --json
    python scripts/decode_role.py job.txt --vocabulary my_vocabulary.yaml
"""

import json
import os
import time
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from beacon.contexts.export.docx import write_export
from beacon.contexts.export.markdown import render_role_markdown
from beacon.contexts.roles.decoder import decode_role
from beacon.contexts.roles.exceptions import SkillDictionaryError
from beacon.contexts.roles.logger import log_decoding_result, setup_roles_logger
from beacon.contexts.roles.skills import SKILLS_PATH, load_skill_dictionary
from beacon.utils.exceptions import VocabularyConfigError
from beacon.utils.timestamp import compact_now
from beacon.utils.vocabulary import load_vocabulary

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Decode a job description into sections and skills",
    add_completion=False,
)


@app.command()
def main(
    job_file: Annotated[
        Path,
        typer.Argument(
            help="Plain-text job description",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        )
    ],
    skills_path: Annotated[
        Optional[Path],
        typer.Option("--skills", help="Skill dictionary JSON (defaults to BEACON_SKILLS_PATH)")
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the decoding as JSON")
    ] = False,
    markdown: Annotated[
        Optional[Path],
        typer.Option("--markdown", "-m", help="Write a Markdown snapshot to this path", dir_okay=False)
    ] = None,
    vocabulary_path: Annotated[
        Optional[Path],
        typer.Option("--vocabulary", help="Vocabulary YAML (defaults to BEACON_VOCABULARY_PATH)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every detected skill")
    ] = False,
):
    """Decode a job description and display its sections and skills."""
    start_time = time.time()

    try:
        dictionary = load_skill_dictionary(skills_path)
        vocabulary = load_vocabulary(vocabulary_path)
    except (SkillDictionaryError, VocabularyConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    log_dir = LOGS_PATH / f"decode_{compact_now()}"
    setup_roles_logger(log_dir, skills_path or SKILLS_PATH)

    decoding = decode_role(job_file.read_text(encoding="utf-8"), dictionary, vocabulary)
    log_decoding_result(decoding, time.time() - start_time, verbose=verbose)

    if markdown:
        typer.echo(f"Markdown written: {write_export(markdown, render_role_markdown(decoding))}")

    if as_json:
        typer.echo(json.dumps(decoding.to_dict(), indent=2))
        return

    typer.echo(f"\n=== Sections ({len(decoding.post.sections)}) ===")
    for section in decoding.post.sections:
        typer.echo(f"  {section.key}: {section.heading or '(untitled)'} ({len(section.lines)} lines)")

    typer.echo(f"\n=== Skills ({len(decoding.skills)}) ===")
    if not decoding.skills:
        typer.echo("  (none detected)")
    for skill in decoding.skills:
        typer.echo(f"  {skill.label}: {skill.frequency} hits ({skill.confidence:.0%} confidence)")
        for line in decoding.contexts.get(skill.key, ()):
            typer.echo(f"    - {line}")

    typer.secho(f"\nFit coverage: {decoding.fit_coverage:.0%}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
