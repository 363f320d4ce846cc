"""Typer CLI entrypoint and command definitions for strhash."""

import json
import logging

import typer

from strhash.core.defaults import DEFAULT_CONFIG_DIR, EXIT_MISMATCH, EXIT_USAGE_ERROR

app = typer.Typer()

_ALGORITHM_HELP = "md5 | sha256 | sha512 (or DIGEST_128 | DIGEST_256 | DIGEST_512); defaults to the configured algorithm"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Hash, salt, and verify strings."""
    from strhash.core.logging import SanitizingFilter, install_sanitizing_filter

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    if verbose:
        logging.getLogger("strhash").setLevel(logging.DEBUG)
    root = logging.getLogger()
    installed = any(isinstance(f, SanitizingFilter) for h in root.handlers for f in h.filters)
    if not installed:
        install_sanitizing_filter(root, handler_level=True)


def _resolve(algorithm: str | None, config_dir: str):
    from strhash.core.config import HasherConfig
    from strhash.core.errors import UnsupportedAlgorithmError
    from strhash.core.types import resolve_algorithm

    if algorithm is None:
        return HasherConfig(config_dir).default_algorithm
    try:
        return resolve_algorithm(algorithm)
    except UnsupportedAlgorithmError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_USAGE_ERROR)


def _report_match(matched: bool) -> None:
    if matched:
        typer.echo("match")
        return
    typer.echo("mismatch")
    raise typer.Exit(code=EXIT_MISMATCH)


# -- hashing ------------------------------------------------------------------


@app.command("digest")
def digest_cmd(
    text: str = typer.Option(..., "--text", help="String to hash"),
    algorithm: str | None = typer.Option(None, "--algorithm", "-a", help=_ALGORITHM_HELP),
    config_dir: str = typer.Option(DEFAULT_CONFIG_DIR, help="Directory holding config.json"),
) -> None:
    """Print the hex digest of a string."""
    from strhash.core.digest import compute_digest

    typer.echo(compute_digest(_resolve(algorithm, config_dir), text))


@app.command("salted")
def salted_cmd(
    text: str = typer.Option(..., "--text", help="String to hash"),
    algorithm: str | None = typer.Option(None, "--algorithm", "-a", help=_ALGORITHM_HELP),
    config_dir: str = typer.Option(DEFAULT_CONFIG_DIR, help="Directory holding config.json"),
    as_json: bool = typer.Option(False, "--json", help="Print algorithm, salt and digest as JSON"),
) -> None:
    """Print salt + digest of a string under a fresh random salt."""
    from strhash.core.salting import salt_digest

    salted = salt_digest(_resolve(algorithm, config_dir), text)
    if as_json:
        typer.echo(salted.model_dump_json())
    else:
        typer.echo(salted.render())


# -- verification -------------------------------------------------------------


@app.command("verify")
def verify_cmd(
    text: str = typer.Option(..., "--text", help="Candidate string"),
    digest: str = typer.Option(..., "--digest", help="Stored hex digest"),
    algorithm: str | None = typer.Option(None, "--algorithm", "-a", help=_ALGORITHM_HELP),
    config_dir: str = typer.Option(DEFAULT_CONFIG_DIR, help="Directory holding config.json"),
) -> None:
    """Check a string against a plain digest.  Exit code 1 on mismatch."""
    from strhash.core.verify import verify

    _report_match(verify(_resolve(algorithm, config_dir), text, digest))


@app.command("verify-salted")
def verify_salted_cmd(
    text: str = typer.Option(..., "--text", help="Candidate string"),
    digest: str = typer.Option(..., "--digest", help="Stored salt + digest"),
    algorithm: str | None = typer.Option(None, "--algorithm", "-a", help=_ALGORITHM_HELP),
    config_dir: str = typer.Option(DEFAULT_CONFIG_DIR, help="Directory holding config.json"),
) -> None:
    """Check a string against a salted digest.  Exit code 1 on mismatch, 2 if malformed."""
    from strhash.core.errors import MalformedDigestError
    from strhash.core.verify import verify_salted

    algo = _resolve(algorithm, config_dir)
    try:
        matched = verify_salted(algo, text, digest)
    except MalformedDigestError as exc:
        typer.echo(f"Malformed salted digest: {exc}", err=True)
        raise typer.Exit(code=EXIT_USAGE_ERROR)
    _report_match(matched)


@app.command("algorithms")
def algorithms_cmd() -> None:
    """List supported algorithms with digest and salt sizes."""
    from strhash.core.types import ALGORITHMS

    for algo in ALGORITHMS:
        typer.echo(
            f"{algo.name:<12} {algo.value:<8} digest={algo.digest_size} bytes "
            f"({algo.hex_length} hex), salted={algo.hex_length * 2} hex"
        )


# -- config -------------------------------------------------------------------
config_app = typer.Typer()
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show_cmd(
    config_dir: str = typer.Option(DEFAULT_CONFIG_DIR, help="Directory holding config.json"),
) -> None:
    """Print the effective configuration as JSON."""
    from strhash.core.config import HasherConfig

    typer.echo(json.dumps(HasherConfig(config_dir).as_dict(), indent=2))


@config_app.command("set-algorithm")
def config_set_algorithm_cmd(
    algorithm: str = typer.Argument(..., help="md5 | sha256 | sha512"),
    config_dir: str = typer.Option(DEFAULT_CONFIG_DIR, help="Directory holding config.json"),
) -> None:
    """Persist the algorithm used when --algorithm is omitted."""
    from strhash.core.config import HasherConfig

    cfg = HasherConfig(config_dir)
    cfg.default_algorithm = _resolve(algorithm, config_dir)
    typer.echo(f"Default algorithm set to {cfg.default_algorithm.name} ({cfg.default_algorithm.value})")
    typer.echo(f"Wrote {cfg.path}")
