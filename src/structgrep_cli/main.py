import difflib
import json
import logging
import tomllib
from pathlib import Path
from typing import Callable, Optional

import typer
from structgrep import (
    ASTWalker,
    Language,
    StructGrepError,
    compile_rule_config,
    edits_for_matches,
    replace_meta_var_in_string,
    to_matcher,
)
from structgrep.rule_config import load_rule_config

from .config import SearchConfig
from .converters import node_to_match_report
from .models import FileReport

logger = logging.getLogger(__name__)

app = typer.Typer(help="structgrep - structural search and rewrite for source code")


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _first_line(text: str) -> str:
    return text.splitlines()[0] if text else ""


def _process_files(
    files: list[Path],
    build_matcher: Callable[[Language], object],
    config: SearchConfig,
    lang: Optional[str],
    rewrite: Optional[str],
    update_all: bool,
    json_output: bool,
):
    reports: list[FileReport] = []
    total = 0

    for file_path in files:
        try:
            language = config.language_for(file_path, lang)
            source = file_path.read_text(encoding="utf-8")
            root = language.parse(source, str(file_path))
            matcher = build_matcher(language)
        except (StructGrepError, OSError) as exc:
            typer.echo(f"Error: {file_path}: {exc}")
            raise typer.Exit(code=1)

        logger.info("Searching %s as %s", file_path, language.name)
        fix = rewrite if rewrite is not None else getattr(matcher, "fix", None)
        rule_id = getattr(matcher, "id", None)
        message = getattr(matcher, "message", None)
        matches = list(root.root().find_all(matcher))
        total += len(matches)

        report = FileReport(file_path=str(file_path), language=language.name, errors=root.errors)
        for match in matches:
            replacement = replace_meta_var_in_string(fix, match.get_env()) if fix is not None else None
            report.matches.append(node_to_match_report(match, file_path, replacement, rule_id, message))
        reports.append(report)

        if fix is not None and matches:
            edits = edits_for_matches(matches, fix)
            new_source = root.root().commit_edits(edits)
            if update_all:
                file_path.write_text(new_source, encoding="utf-8")
                typer.echo(f"Updated {file_path} ({len(edits)} replacements)")
            elif not json_output:
                diff = difflib.unified_diff(
                    source.splitlines(keepends=True),
                    new_source.splitlines(keepends=True),
                    fromfile=str(file_path),
                    tofile=str(file_path),
                )
                typer.echo("".join(diff), nl=False)
        elif not json_output:
            for item in report.matches:
                prefix = f"[{rule_id}] " if rule_id else ""
                typer.echo(f"{item.file_path}:{item.line_number}:{item.column}: {prefix}{_first_line(item.text)}")

    if json_output:
        typer.echo(json.dumps([r.model_dump() for r in reports], indent=2))
    elif not update_all:
        typer.echo(f"\nTotal matches found: {total} in {len(files)} file(s)")


@app.command()
def run(
    files: list[Path] = typer.Argument(..., help="Files to search"),
    pattern: str = typer.Option(..., "--pattern", "-p", help="Pattern to search for"),
    rewrite: Optional[str] = typer.Option(None, "--rewrite", "-r", help="Template for the replacement"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Language of the files"),
    update_all: bool = typer.Option(False, "--update-all", "-U", help="Write rewrites back to the files"),
    json_output: bool = typer.Option(False, "--json", help="Print matches as JSON"),
    config_file: Path = typer.Option(Path("pyproject.toml"), "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Search files for a pattern and optionally rewrite the matches"""
    _setup_logging(verbose)
    config = SearchConfig(config_file)
    _process_files(
        files,
        lambda language: to_matcher(pattern, language),
        config,
        lang,
        rewrite,
        update_all,
        json_output,
    )


@app.command()
def scan(
    files: list[Path] = typer.Argument(..., help="Files to scan"),
    rule: Path = typer.Option(..., "--rule", help="TOML file holding one rule configuration"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Language of the files"),
    update_all: bool = typer.Option(False, "--update-all", "-U", help="Apply the rule's fix to the files"),
    json_output: bool = typer.Option(False, "--json", help="Print matches as JSON"),
    config_file: Path = typer.Option(Path("pyproject.toml"), "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Scan files with a rule configuration (rule, constraints, utils, transform, fix)"""
    _setup_logging(verbose)
    config = SearchConfig(config_file)
    try:
        with open(rule, "rb") as f:
            rule_config = load_rule_config(tomllib.load(f))
    except (OSError, tomllib.TOMLDecodeError, StructGrepError) as exc:
        typer.echo(f"Error: {rule}: {exc}")
        raise typer.Exit(code=1)

    _process_files(
        files,
        lambda language: compile_rule_config(rule_config, language),
        config,
        lang or rule_config.language,
        None,
        update_all,
        json_output,
    )


@app.command()
def dump(
    file: Path = typer.Argument(..., help="File to dump"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Language of the file"),
    named_only: bool = typer.Option(False, "--named-only", help="Hide anonymous tokens"),
    config_file: Path = typer.Option(Path("pyproject.toml"), "--config", help="Path to config file"),
):
    """Print the syntax tree of a file"""
    config = SearchConfig(config_file)
    try:
        language = config.language_for(file, lang)
        root = language.parse(file.read_text(encoding="utf-8"), str(file))
    except (StructGrepError, OSError) as exc:
        typer.echo(f"Error: {file}: {exc}")
        raise typer.Exit(code=1)

    typer.echo(ASTWalker.dump(root.root(), show_anonymous=not named_only))
    for error in root.errors:
        typer.echo(f"ERROR: {error}")


if __name__ == "__main__":
    app()
