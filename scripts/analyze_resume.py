#!/usr/bin/env python3
"""
Resume Signal Analysis CLI

Extracts bullets from a plain-text resume, scores them, and proposes
restructured versions. Results can be exported as Markdown or DOCX.

With --session, the analysis is saved to a JSON store. If the store already
holds a session for the same resume text, that session (including any edited
fields) is reused instead of re-analyzing.

Usage:
    python scripts/analyze_resume.py resume.txt
    python scripts/analyze_resume.py resume.txt --markdown outs/resume.md --docx outs/resume.docx
    python scripts/analyze_resume.py resume.txt --session outs/session.json --json
"""

import json
import os
import time
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from beacon.contexts.export.docx import build_docx, write_export
from beacon.contexts.export.markdown import render_resume_markdown
from beacon.contexts.resume.data_structures import EMPTY_SESSION
from beacon.contexts.resume.logger import (
    log_analysis_result,
    log_analysis_start,
    setup_resume_logger,
)
from beacon.contexts.resume.scoring import score_label
from beacon.contexts.resume.session import analyze_resume, restore_session
from beacon.utils.exceptions import VocabularyConfigError
from beacon.utils.text_processing import truncate_display
from beacon.utils.timestamp import compact_now, now, time_since
from beacon.utils.vocabulary import VOCABULARY_PATH, load_vocabulary

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
DISPLAY_WIDTH = 100

app = typer.Typer(
    help="Score resume bullets and propose restructured versions",
    add_completion=False,
)


def load_session_store(store: Path, vocabulary):
    """
    Read a stored session.

    Returns:
        Restored ResumeSession, EMPTY_SESSION if the store is missing or unreadable
    """
    if not store.exists():
        return EMPTY_SESSION

    try:
        data = json.loads(store.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        typer.secho(f"Notice: ignoring unreadable session store {store} ({e})", fg=typer.colors.YELLOW, err=True)
        return EMPTY_SESSION

    return restore_session(data, vocabulary)


@app.command()
def main(
    resume_file: Annotated[
        Path,
        typer.Argument(
            help="Plain-text resume",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        )
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the session as JSON")
    ] = False,
    markdown: Annotated[
        Optional[Path],
        typer.Option("--markdown", "-m", help="Write a Markdown report to this path", dir_okay=False)
    ] = None,
    docx: Annotated[
        Optional[Path],
        typer.Option("--docx", "-d", help="Write the report as a .docx to this path", dir_okay=False)
    ] = None,
    session_store: Annotated[
        Optional[Path],
        typer.Option("--session", "-s", help="JSON file to restore and save the session", dir_okay=False)
    ] = None,
    vocabulary_path: Annotated[
        Optional[Path],
        typer.Option("--vocabulary", help="Vocabulary YAML (defaults to BEACON_VOCABULARY_PATH)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every bullet")
    ] = False,
):
    """
    Analyze a resume and report its bullet signal.

    Examples:

        # Score bullets and print a summary
        python analyze_resume.py resume.txt

        # Export a Markdown report and a Word document
        python analyze_resume.py resume.txt -m report.md -d report.docx
    """
    start_time = time.time()

    try:
        vocabulary = load_vocabulary(vocabulary_path)
    except VocabularyConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    log_dir = LOGS_PATH / f"analyze_{compact_now()}"
    log_file = setup_resume_logger(log_dir, vocabulary_path or VOCABULARY_PATH)
    log_analysis_start(resume_file, log_file)

    text = resume_file.read_text(encoding="utf-8")

    session = EMPTY_SESSION
    if session_store:
        session = load_session_store(session_store, vocabulary)
    if session.resume_text != text or not session.bullets:
        session = analyze_resume(text, analyzed_at=now(), vocabulary=vocabulary)
    else:
        analyzed = "an earlier run"
        if session.last_analyzed_at:
            analyzed = time_since(session.last_analyzed_at)
        typer.echo(f"Reusing stored session ({analyzed})")

    log_analysis_result(session, time.time() - start_time, verbose=verbose)

    if session_store:
        write_export(session_store, json.dumps(session.to_dict(), indent=2))
        typer.echo(f"Session saved: {session_store}")

    if markdown or docx:
        report = render_resume_markdown(session, session.last_analyzed_at)
        if markdown:
            typer.echo(f"Markdown written: {write_export(markdown, report)}")
        if docx:
            typer.echo(f"DOCX written: {write_export(docx, build_docx(report))}")

    if as_json:
        typer.echo(json.dumps(session.to_dict(), indent=2))
        return

    report = session.signal_report
    typer.echo()
    typer.echo(f"Visible signal: {report.visible}%  Hidden value: {report.hidden}%")
    typer.echo(f"Quantified bullets: {report.numbers}  Action verbs: {report.verbs}")
    for i, bullet in enumerate(session.bullets, 1):
        label = score_label(bullet.baseline_score)
        original = truncate_display(bullet.original, DISPLAY_WIDTH)
        typer.echo(f"{i:>3}. [{bullet.baseline_score:>3}] {label.label}: {original}")
        if bullet.improved and bullet.improved != bullet.original:
            improved = truncate_display(bullet.improved, DISPLAY_WIDTH)
            typer.echo(f"     [{bullet.improved_score:>3}] {improved}")


if __name__ == "__main__":
    app()
