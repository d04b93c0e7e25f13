import json
import logging
import sys
from pathlib import Path

import click

from .errors import SvgToVueError
from .pipeline import OutputConfig, OutputMode, SvgToVueGenerator, TransformConfig
from .query import parse_query
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


def _output_path(source: Path, path: Path, output: Path) -> Path:
    if path.is_dir():
        return output / source.relative_to(path).with_suffix(".js")
    return output


@click.command()
@click.option("--query", "-q", default=None, type=str, help='Loader query, e.g. "?-svgo" or "?{svgo: {remove_metadata: true}}"')
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--no-svgo", is_flag=True, default=False, help="Skip markup optimization")
@click.option("--preserve-whitespace", is_flag=True, default=False)
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite existing output files")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def svg_to_vue(query, config, no_svgo, preserve_whitespace, force, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            base_config = json.load(f)
    else:
        base_config = {}

    options = parse_query(query) if query else {}

    path = Path(path)
    output = Path(output)
    sources = sorted(path.rglob("*.svg")) if path.is_dir() else [path]

    writer = AtomicWriter(OutputConfig(mode=OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS))

    failed = []
    for source in sources:
        transform_config = TransformConfig.from_dict(base_config)
        transform_config.svgo_path = str(source)
        if "svgo" in options:
            transform_config.svgo_config = options["svgo"]
        # CLI flags override config file and query
        if no_svgo:
            transform_config.svgo_config = False
        if preserve_whitespace:
            transform_config.preserve_whitespace = True

        codegen = SvgToVueGenerator(transform_config)
        target = _output_path(source, path, output)
        try:
            out = codegen.generate(source.read_text(encoding="utf-8"))
            logger.debug("Generated %d characters for %s", len(out), source)
            writer.write(target, out)
        except SvgToVueError as e:
            # Report and keep converting the remaining files
            click.echo(f"{source}: {type(e).__name__}: {e}", err=True)
            failed.append(source)
            continue
        click.echo(f"{source} -> {target}")

    if failed:
        click.echo(f"{len(failed)} of {len(sources)} file(s) failed", err=True)
        sys.exit(1)
