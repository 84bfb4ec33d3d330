"""Command-line interface for the JSON Minifier."""

import logging
import os
import click
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Tuple
from . import __version__
from .filtering import should_minify
from .minifier import JSONMinifier
from .profiler import MinificationProfiler
from .types import MinificationError


def _collect_files(paths: Tuple[Path, ...],
                   extensions: FrozenSet[str]) -> List[Tuple[Path, Path, bool]]:
    """
    Collect (file, path relative to its root, named explicitly) for each candidate.

    Files found in a directory are relative to that directory; files named
    explicitly are relative to the deepest directory containing all of them.
    """
    explicit = [path.resolve() for path in paths if not path.is_dir()]
    common_root = Path(os.path.commonpath([str(path.parent) for path in explicit])) if explicit else None

    files = []
    for path in paths:
        if path.is_dir():
            for candidate in sorted(path.rglob("*")):
                if candidate.is_file() and candidate.suffix[1:] in extensions:
                    files.append((candidate, candidate.relative_to(path), False))
        else:
            files.append((path, path.resolve().relative_to(common_root), True))
    return files


def _check_output_collisions(files: List[Tuple[Path, Path, bool]], output: Path) -> None:
    """Raise UsageError if two inputs would be written to the same output file."""
    seen: Dict[Path, Path] = {}
    for source, relative, _ in files:
        if relative in seen:
            raise click.UsageError(f"{seen[relative]} and {source} would both be written to "
                                   f"{output / relative}")
        seen[relative] = source


@click.group()
@click.version_option(version=__version__)
def main():
    """JSON Minifier - Strip insignificant whitespace from JSON files."""
    pass


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option('--in-place', '-i', is_flag=True, help='Overwrite each file with its minified content')
@click.option('--output', '-o', type=click.Path(file_okay=False, path_type=Path),
              help='Write minified files under this directory')
@click.option('--force', '-f', is_flag=True, help='Minify explicitly named files even if normally skipped')
@click.option('--profile', '-p', is_flag=True, help='Report size, timing and memory figures')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def minify(paths: Tuple[Path, ...], in_place: bool, output: Optional[Path],
           force: bool, profile: bool, verbose: bool):
    """Minify JSON files, or every JSON file under a directory."""
    if in_place and output:
        raise click.UsageError("--in-place and --output cannot be used together")

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    minifier = JSONMinifier()
    profiler = MinificationProfiler()
    to_stdout = not in_place and output is None
    failures: List[Path] = []

    candidates = _collect_files(paths, minifier.get_supported_extensions())
    selected = []
    for source, relative, explicit in candidates:
        if not minifier.should_minify(source) and not (explicit and force):
            click.echo(f"⏭  Skipping {source}", err=True)
            continue
        selected.append((source, relative, explicit))

    if output is not None:
        _check_output_collisions(selected, output)

    for source, relative, _ in selected:
        try:
            content = source.read_text(encoding='utf-8')
            with profiler.profile(source, content) as run:
                run["output"] = minifier.minify(content, source)
            result = run["output"]

            if to_stdout:
                click.echo(result)
                continue

            target = source if in_place else output / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(result, encoding='utf-8')
            click.echo(f"✅ {source} -> {target}", err=True)

        except MinificationError as e:
            click.echo(f"❌ {e}: {e.cause}", err=True)
            failures.append(source)
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"❌ Error processing {source}: {e}", err=True)
            failures.append(source)

    if profile:
        summary = profiler.get_summary()
        click.echo(f"📊 Files: {summary['total_files']}", err=True)
        if summary["total_files"]:
            click.echo(f"📊 Size: {summary['total_input_bytes']} -> {summary['total_output_bytes']} bytes "
                       f"(saved {summary['total_bytes_saved']}, "
                       f"ratio {summary['overall_compression_ratio']:.2f})", err=True)
            click.echo(f"📊 Time: {summary['total_duration']:.3f}s, "
                       f"memory peak {summary['memory_peak_mb']:.1f} MB", err=True)

    if failures:
        click.echo(f"❌ {len(failures)} file(s) failed", err=True)
        raise SystemExit(1)


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(path_type=Path))
def check(paths: Tuple[Path, ...]):
    """Show whether each path would be minified or skipped."""
    for path in paths:
        decision = "minify" if should_minify(path) else "skip"
        click.echo(f"{decision}\t{path}")


if __name__ == '__main__':
    main()
