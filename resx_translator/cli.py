"""Command-line interface for the resource translator."""

import click
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table
from rich.panel import Panel

from . import __version__
from .config import Config, load_config
from .errors import InputError, ResxTranslatorError, ServiceError
from .extraction import derive_target_path, load_resource_set, save_resource_set
from .languages import display_name
from .logger import configure_logging
from .models.resource_set import ResourceSet
from .models.translation_result import QualityReport, TranslationStats
from .translation.clients import DeepLClient, TranslationService, create_service
from .translation.translator import ResxTranslator
from .validation.quality_scorer import QualityScorer

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx):
    """Translate .resx resource files while preserving markup."""
    config = load_config()
    configure_logging(config.log_mode, config.log_file or None)
    ctx.obj = config


def _build_service(config: Config) -> TranslationService:
    """Validate the configuration and create the translation backend."""
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()
    return create_service(config)


def _load(path: str) -> ResourceSet:
    try:
        return load_resource_set(path)
    except (InputError, ValueError) as e:
        console.print(f"[red]Cannot read {path}:[/red] {e}")
        raise click.Abort()


def _progress() -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    )


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the source resource file (.resx or .json)"
)
@click.option(
    "--languages", "-l",
    default=None,
    help="Comma-separated list of target language codes (defaults to TARGET_LANGUAGES)"
)
@click.option(
    "--source-language", "-s",
    default=None,
    help="Source language code (defaults to SOURCE_LANGUAGE)"
)
@click.option(
    "--mode", "-m",
    type=click.Choice(["missing", "all"]),
    default="missing",
    show_default=True,
    help="Translate only missing entries, or re-translate the whole file"
)
@click.option(
    "--output-dir", "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the target files (defaults to the source file's directory)"
)
@click.option(
    "--provider",
    type=click.Choice(["deepl", "openai"]),
    default=None,
    help="Translation provider (defaults to TRANSLATION_PROVIDER)"
)
@click.option(
    "--keep-partial/--discard-partial",
    default=None,
    help="Save entries translated before a failure in missing mode"
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Preview translations without saving"
)
@click.pass_obj
def translate(
    config: Config,
    input_path: str,
    languages: Optional[str],
    source_language: Optional[str],
    mode: str,
    output_dir: Optional[str],
    provider: Optional[str],
    keep_partial: Optional[bool],
    dry_run: bool,
):
    """Translate a resource file into target languages."""
    if provider:
        config.provider = provider
    if keep_partial is not None:
        config.keep_partial_on_failure = keep_partial

    target_langs = _parse_languages(languages) if languages else config.target_languages
    if not target_langs:
        console.print("[red]No target languages given (use --languages or TARGET_LANGUAGES)[/red]")
        raise click.Abort()

    source_lang = source_language or config.source_language
    translator = ResxTranslator(_build_service(config))

    console.print(f"[blue]Reading:[/blue] {input_path}")
    source = _load(input_path)
    console.print(f"[green]Found:[/green] {source.translatable_count} translatable strings")
    console.print(f"[blue]Target languages:[/blue] {', '.join(target_langs)}")

    failed = []
    for lang in target_langs:
        target_path = derive_target_path(input_path, lang)
        if output_dir:
            target_path = Path(output_dir) / target_path.name

        console.print(f"\n[bold cyan]Translating to {lang} ({display_name(lang)})...[/bold cyan]")
        console.print(f"  [blue]Target file:[/blue] {target_path}")

        try:
            if mode == "all":
                result, stats = _translate_all(translator, source, lang, source_lang)
            else:
                result, stats = _translate_missing(
                    translator, source, target_path, lang, source_lang,
                    config.keep_partial_on_failure,
                )
        except ServiceError as e:
            _report_service_error(e)
            failed.append(lang)
            if mode == "missing" and e.partial_result is not None:
                _save(e.partial_result, target_path, dry_run, partial=True)
            else:
                console.print("  [yellow]No changes saved[/yellow]")
            continue
        except ResxTranslatorError as e:
            console.print(f"  [red]Error:[/red] {e}")
            failed.append(lang)
            continue

        if stats.up_to_date:
            console.print(f"  [green]No missing entries found for {lang}[/green]")
            continue

        _print_stats(stats, lang)
        _save(result, target_path, dry_run)

    if failed:
        console.print(f"\n[red]Failed languages:[/red] {', '.join(failed)}")
        raise SystemExit(1)


def _translate_all(translator: ResxTranslator, source: ResourceSet, lang: str, source_lang: str):
    with _progress() as progress:
        task = progress.add_task(f"Translating to {lang}", total=len(source))

        def update_progress(current, total, key):
            progress.update(task, completed=current, description=f"[{lang}] {key[:40]}")

        return translator.translate_all(
            source, lang, source_lang, progress_callback=update_progress
        )


def _translate_missing(
    translator: ResxTranslator,
    source: ResourceSet,
    target_path: Path,
    lang: str,
    source_lang: str,
    keep_partial: bool,
):
    target = _load(str(target_path)) if target_path.exists() else None
    missing_count = len(source.missing_keys(target)) if target is not None else len(source)

    with _progress() as progress:
        task = progress.add_task(f"Translating to {lang}", total=missing_count)

        def update_progress(current, total, key):
            progress.update(task, completed=current, description=f"[{lang}] {key[:40]}")

        return translator.reconcile_missing(
            source,
            target,
            lang,
            source_lang,
            progress_callback=update_progress,
            keep_partial=keep_partial,
        )


def _save(resource_set: ResourceSet, path: Path, dry_run: bool, partial: bool = False):
    if dry_run:
        console.print("  [yellow]Dry run - no changes saved[/yellow]")
        return
    save_resource_set(resource_set, str(path))
    label = "Saved partial result" if partial else "Written"
    console.print(f"  [green]{label}:[/green] {path}")


def _report_service_error(error: ServiceError):
    where = f" at '{error.key}'" if error.key else ""
    console.print(f"  [red]Translation failed{where}:[/red] {error}")
    if error.retryable:
        console.print("  [dim]This error is transient; running the command again may succeed.[/dim]")


def _print_stats(stats: TranslationStats, lang: str):
    """Print translation statistics."""
    table = Table(title=f"Translation Stats for {lang}")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")

    table.add_row("Processed", str(stats.total))
    table.add_row("Translated", str(stats.translated_count))
    table.add_row("Empty (copied)", str(stats.skipped_count))
    table.add_row("Placeholder warnings", str(len(stats.placeholder_warnings)))

    console.print(table)

    if stats.placeholder_warnings:
        console.print(
            "[yellow]Check placeholders in:[/yellow] " + ", ".join(stats.placeholder_warnings)
        )


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the reference resource file"
)
@click.option(
    "--target", "-t",
    "target_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the translated resource file"
)
@click.option(
    "--language", "-l",
    required=True,
    help="Language code of the translated file"
)
@click.option(
    "--source-language", "-s",
    default=None,
    help="Reference language code (defaults to SOURCE_LANGUAGE)"
)
@click.option(
    "--min-rating",
    type=click.IntRange(1, 5),
    default=5,
    show_default=True,
    help="Only list entries rated at or below this value"
)
@click.pass_obj
def quality(
    config: Config,
    input_path: str,
    target_path: str,
    language: str,
    source_language: Optional[str],
    min_rating: int,
):
    """Rate translations by back-translating them into the reference language."""
    source_lang = source_language or config.source_language
    scorer = QualityScorer(_build_service(config), skip_errors=config.skip_quality_errors)

    source = _load(input_path)
    target = _load(target_path)
    console.print(f"[cyan]Checking quality of {target_path} against {input_path}[/cyan]")

    try:
        with _progress() as progress:
            task = progress.add_task(f"Back-translating {language}", total=None)

            def update_progress(current, total, key):
                progress.update(task, completed=current, total=total, description=f"[{language}] {key[:40]}")

            report = scorer.score(
                source, target, source_lang, language, progress_callback=update_progress
            )
    except ServiceError as e:
        _report_service_error(e)
        raise SystemExit(1)

    _print_quality_report(report, min_rating)


def _print_quality_report(report: QualityReport, min_rating: int):
    """Print ratings worst first."""
    table = Table(show_header=True)
    table.add_column("Key", style="dim", max_width=40)
    table.add_column("Rating", justify="center", width=8)
    table.add_column("Similarity", justify="right")
    table.add_column("Back-translation", max_width=60)

    for r in report.sorted_by_rating():
        if r.rating > min_rating:
            continue
        color = "green" if r.rating >= 4 else "yellow" if r.rating == 3 else "red"
        table.add_row(
            r.key[:40],
            f"[{color}]{r.rating}[/{color}]",
            f"{r.similarity:.2f}",
            r.back_translation[:60],
        )

    console.print(table)

    panel_content = (
        f"[bold]Scored:[/bold] {len(report)}\n"
        f"[bold]Average rating:[/bold] {report.average_rating:.2f}\n"
        f"[red]Failed:[/red] {len(report.failures)}"
    )
    console.print(Panel(panel_content, title="Quality Summary"))

    for failure in report.failures:
        console.print(f"  [red]{failure.key}:[/red] {failure.error}")


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the reference resource file"
)
@click.option(
    "--target", "-t",
    "target_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Path to the translated resource file"
)
@click.option(
    "--limit",
    type=int,
    default=20,
    help="Limit number of keys to show"
)
def missing(input_path: str, target_path: str, limit: int):
    """Show keys of the reference file that the target file lacks."""
    source = _load(input_path)
    target = _load(target_path) if Path(target_path).exists() else ResourceSet()

    missing_keys = source.missing_keys(target)
    console.print(f"[cyan]Missing entries in {target_path}:[/cyan] {len(missing_keys)} total")

    if not missing_keys:
        console.print("[green]No missing entries found.[/green]")
        return

    table = Table(show_header=True)
    table.add_column("Key", style="dim", max_width=40)
    table.add_column("Source Value", max_width=60)

    for key in missing_keys[:limit]:
        table.add_row(key[:40], source.get(key).value[:60])

    console.print(table)

    if len(missing_keys) > limit:
        console.print(f"\n[dim]... and {len(missing_keys) - limit} more[/dim]")


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a resource file"
)
def stats(input_path: str):
    """Show statistics for a resource file."""
    resource_set = _load(input_path)

    table = Table(title=f"Statistics for {Path(input_path).name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Total entries", str(len(resource_set)))
    table.add_row("Translatable entries", str(resource_set.translatable_count))
    table.add_row(
        "Whitespace preserved",
        str(sum(1 for entry in resource_set if entry.preserve_whitespace)),
    )
    table.add_row("With comments", str(sum(1 for entry in resource_set if entry.comment)))
    table.add_row("Non-text nodes", str(len(resource_set.raw_nodes)))
    for name, value in resource_set.headers.items():
        table.add_row(f"  {name}", value[:60])

    console.print(table)


@cli.command()
@click.option(
    "--resources-dir", "-d",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding Strings.<lang>.resx files (defaults to RESOURCES_PATH)"
)
@click.option(
    "--base-name",
    default="Strings",
    show_default=True,
    help="Base name of the resource files"
)
@click.pass_obj
def languages(config: Config, resources_dir: Optional[str], base_name: str):
    """List configured languages and their resource files."""
    directory = resources_dir or config.resources_path
    codes = [config.source_language] + [
        lang for lang in config.target_languages if lang != config.source_language
    ]

    table = Table(title="Languages")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("File")
    table.add_column("Items", justify="right")
    table.add_column("Updated")

    for code in codes:
        file_name, items, updated = "", "", ""
        if directory:
            path = Path(directory) / f"{base_name}.{code}.resx"
            if path.exists():
                file_name = path.name
                try:
                    items = str(len(load_resource_set(str(path))))
                except InputError:
                    items = "?"
                updated = datetime.fromtimestamp(path.stat().st_mtime).strftime("%Y-%m-%d %H:%M")
        table.add_row(code, display_name(code), file_name, items, updated)

    console.print(table)


@cli.command()
@click.pass_obj
def usage(config: Config):
    """Show DeepL character usage."""
    if not config.deepl_api_key:
        console.print("[red]Error: DEEPL_API_KEY is not set[/red]")
        raise click.Abort()

    try:
        usage_info = DeepLClient(api_key=config.deepl_api_key).get_usage()
    except ServiceError as e:
        _report_service_error(e)
        raise SystemExit(1)

    limit = usage_info["character_limit"]
    count = usage_info["character_count"]
    share = f" ({count / limit * 100:.1f}%)" if limit else ""
    console.print(f"[cyan]Characters used:[/cyan] {count:,} of {limit:,}{share}")


def _parse_languages(value: str) -> List[str]:
    return [lang.strip() for lang in value.split(",") if lang.strip()]


if __name__ == "__main__":
    cli()
