from __future__ import annotations

import logging
import time

from . import __version__
from .config import AnalyzerConfig
from .console import Console
from .pipeline import SAMPLE_PASSAGE, analyze_passage
from .report import (
    render_banner,
    render_footer,
    render_menu,
    render_progress,
    render_report,
)

LOGGER = logging.getLogger(__name__)

CUSTOM_SELECTION = 1


def read_selection(console: Console) -> int | None:
    """
    Prompt for the menu choice; None when the reply is missing or not a number.
    Blank lines are skipped so an early Enter keeps waiting for the number.
    """
    console.write("Please enter selection (1 or 2): ", newline=False)
    reply = console.read_line()
    while reply is not None and not reply.strip():
        reply = console.read_line()
    if reply is None:
        return None
    try:
        return int(reply.strip())
    except ValueError:
        LOGGER.warning("Unrecognized menu selection %r.", reply)
        return None


def read_passage(console: Console) -> str:
    """Collect lines until a blank line follows some content, or input ends."""
    console.write("INPUT REQUEST: Please enter the text passage for analysis")
    console.write(
        "INSTRUCTION: Type the complete passage and press Enter twice when finished"
    )
    console.write("-" * 50)

    parts: list[str] = []
    while True:
        line = console.read_line()
        if line is None:
            break
        if not line:
            if parts:
                break
            continue
        parts.append(line)
    return " ".join(parts)


def show_progress(console: Console, config: AnalyzerConfig) -> None:
    for step in range(1, config.progress_steps + 1):
        console.write(render_progress(step, config.progress_steps))
        if config.progress_delay > 0:
            time.sleep(config.progress_delay)


def run_demonstration(console: Console, config: AnalyzerConfig | None = None) -> None:
    """Analyze the built-in sample passage without progress or vocabulary listing."""
    cfg = config or AnalyzerConfig()
    console.write("DEMONSTRATION MODE: Analyzing sample passage for educational purposes")
    console.write("-" * 60)
    console.write("SAMPLE PASSAGE FOR ANALYSIS:")
    console.write(f'"{SAMPLE_PASSAGE}"')
    console.write()

    report = analyze_passage(SAMPLE_PASSAGE, cfg)
    console.write_lines(
        render_report(report, cfg, include_vocabulary=False, include_summary=False)
    )


def run_custom_analysis(
    console: Console, passage: str, config: AnalyzerConfig | None = None
) -> None:
    """Analyze a user-supplied passage with the full report."""
    cfg = config or AnalyzerConfig()
    console.write()
    console.write("INITIATING COMPREHENSIVE TEXT ANALYSIS...")
    show_progress(console, cfg)
    console.write()
    console.write("ANALYSIS COMPLETE - Generating Professional Results...")

    report = analyze_passage(passage, cfg)
    console.write_lines(render_report(report, cfg))


def run_session(console: Console, config: AnalyzerConfig | None = None) -> int:
    """Run one pass of the interactive workflow and return the exit code."""
    cfg = config or AnalyzerConfig()
    console.write_lines(render_banner(__version__))
    console.write_lines(render_menu())

    selection = read_selection(console)
    if selection == CUSTOM_SELECTION:
        console.write()
        console.write("USER INPUT MODE ACTIVATED")
        passage = read_passage(console)
        if passage:
            LOGGER.info("Analyzing custom passage of %d characters.", len(passage))
            run_custom_analysis(console, passage, cfg)
        else:
            LOGGER.warning("No passage provided; falling back to the sample passage.")
            console.write("ERROR: No input provided. Switching to demonstration mode.")
            run_demonstration(console, cfg)
    else:
        console.write()
        console.write("DEMONSTRATION MODE ACTIVATED")
        run_demonstration(console, cfg)

    console.write_lines(render_footer())
    return 0
