"""End-to-end CLI tests for strhash commands.

Tests invoke the Typer CLI via CliRunner with an isolated config directory
and verify exit codes and printed output.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

from strhash.cli.main import app
from strhash.core.digest import compute_digest
from strhash.core.salting import compute_salted_digest

runner = CliRunner()


@pytest.fixture()
def config_dir(tmp_path: Path) -> str:
    return str(tmp_path / "cfg")


class TestDigest:
    def test_known_vector(self, config_dir: str) -> None:
        result = runner.invoke(app, [
            "digest", "--text", "abc", "--algorithm", "sha256", "--config-dir", config_dir,
        ])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == compute_digest("sha256", "abc")

    def test_empty_text(self, config_dir: str) -> None:
        result = runner.invoke(app, ["digest", "--text", "", "-a", "md5", "--config-dir", config_dir])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "d41d8cd98f00b204e9800998ecf8427e"

    def test_defaults_to_sha256(self, config_dir: str) -> None:
        result = runner.invoke(app, ["digest", "--text", "abc", "--config-dir", config_dir])
        assert result.output.strip() == compute_digest("sha256", "abc")

    def test_unsupported_algorithm_exits_2(self, config_dir: str) -> None:
        result = runner.invoke(app, ["digest", "--text", "abc", "-a", "sha1", "--config-dir", config_dir])
        assert result.exit_code == 2
        assert "Unsupported digest algorithm" in result.output


class TestSalted:
    def test_plain_output_verifies(self, config_dir: str) -> None:
        result = runner.invoke(app, ["salted", "--text", "pw", "-a", "md5", "--config-dir", config_dir])
        assert result.exit_code == 0, result.output
        value = result.output.strip()
        assert re.fullmatch(r"[0-9a-f]{64}", value)

    def test_json_output(self, config_dir: str) -> None:
        result = runner.invoke(app, [
            "salted", "--text", "pw", "-a", "sha512", "--json", "--config-dir", config_dir,
        ])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["algorithm"] == "sha512"
        assert len(payload["salt_hex"]) == len(payload["digest_hex"]) == 128
        assert payload["digest_hex"] == compute_digest("sha512", payload["salt_hex"] + "pw")


class TestVerify:
    def test_match_exits_0(self, config_dir: str) -> None:
        digest = compute_digest("md5", "abc").upper()
        result = runner.invoke(app, [
            "verify", "--text", "abc", "--digest", digest, "-a", "md5", "--config-dir", config_dir,
        ])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "match"

    def test_mismatch_exits_1(self, config_dir: str) -> None:
        digest = compute_digest("md5", "abc")
        result = runner.invoke(app, [
            "verify", "--text", "abd", "--digest", digest, "-a", "md5", "--config-dir", config_dir,
        ])
        assert result.exit_code == 1
        assert result.output.strip() == "mismatch"


class TestVerifySalted:
    def test_match_exits_0(self, config_dir: str) -> None:
        stored = compute_salted_digest("sha256", "secret")
        result = runner.invoke(app, [
            "verify-salted", "--text", "secret", "--digest", stored, "--config-dir", config_dir,
        ])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "match"

    def test_mismatch_exits_1(self, config_dir: str) -> None:
        stored = compute_salted_digest("sha256", "secret")
        result = runner.invoke(app, [
            "verify-salted", "--text", "guess", "--digest", stored, "--config-dir", config_dir,
        ])
        assert result.exit_code == 1
        assert "mismatch" in result.output

    def test_malformed_exits_2(self, config_dir: str) -> None:
        result = runner.invoke(app, [
            "verify-salted", "--text", "secret", "--digest", "abc", "--config-dir", config_dir,
        ])
        assert result.exit_code == 2
        assert "Malformed salted digest" in result.output


class TestAlgorithms:
    def test_lists_all(self) -> None:
        result = runner.invoke(app, ["algorithms"])
        assert result.exit_code == 0, result.output
        for name in ("DIGEST_128", "DIGEST_256", "DIGEST_512"):
            assert name in result.output
        assert "digest=64 bytes (128 hex), salted=256 hex" in result.output


class TestConfig:
    def test_show_defaults(self, config_dir: str) -> None:
        result = runner.invoke(app, ["config", "show", "--config-dir", config_dir])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"default_algorithm": "sha256"}

    def test_set_algorithm_changes_default(self, config_dir: str) -> None:
        result = runner.invoke(app, ["config", "set-algorithm", "md5", "--config-dir", config_dir])
        assert result.exit_code == 0, result.output
        assert "DIGEST_128" in result.output

        result = runner.invoke(app, ["digest", "--text", "", "--config-dir", config_dir])
        assert result.output.strip() == "d41d8cd98f00b204e9800998ecf8427e"

    def test_set_unknown_algorithm_exits_2(self, config_dir: str) -> None:
        result = runner.invoke(app, ["config", "set-algorithm", "rot13", "--config-dir", config_dir])
        assert result.exit_code == 2
        assert not (Path(config_dir) / "config.json").exists()


def test_verbose_flag_accepted(config_dir: str) -> None:
    result = runner.invoke(app, ["--verbose", "digest", "--text", "abc", "--config-dir", config_dir])
    assert result.exit_code == 0, result.output
    assert compute_digest("sha256", "abc") in result.output
