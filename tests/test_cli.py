"""
Tests for the command-line interface.
"""

import logging

import pytest

from simfinder.cli import format_summary, main, parse_arguments
from simfinder.config import DEFAULT_QUEUE_SIZE, DEFAULT_THRESHOLD, DEFAULT_WORKERS
from simfinder.models import Finding, FindingKind, ScanResult


@pytest.fixture
def info_logs(caplog):
    caplog.set_level(logging.INFO)
    return caplog


class TestArgumentParsing:

    def test_defaults(self, temp_dir):
        args = parse_arguments([str(temp_dir)])
        assert args.directory == temp_dir
        assert args.threshold == DEFAULT_THRESHOLD
        assert args.workers >= 1
        assert args.verbose is False

    def test_overrides(self, temp_dir):
        args = parse_arguments([str(temp_dir), '-t', '3', '--workers', '2', '-q', '8', '-v'])
        assert args.threshold == 3
        assert args.workers == 2
        assert args.queue_size == 8
        assert args.verbose is True

    def test_directory_is_required(self):
        with pytest.raises(SystemExit) as excinfo:
            parse_arguments([])
        assert excinfo.value.code == 2

    @pytest.mark.parametrize("flags", [['-t', '-1'], ['-w', '0'], ['-q', '0']])
    def test_invalid_numbers_rejected(self, temp_dir, flags):
        with pytest.raises(SystemExit) as excinfo:
            parse_arguments([str(temp_dir)] + flags)
        assert excinfo.value.code == 2

    def test_env_default_threshold(self, temp_dir, monkeypatch, isolated_user_config):
        monkeypatch.setenv('SIMFINDER_THRESHOLD', '9')
        assert parse_arguments([str(temp_dir)]).threshold == 9

    @pytest.mark.parametrize("env_var, value, attr, default", [
        ('SIMFINDER_THRESHOLD', '-1', 'threshold', DEFAULT_THRESHOLD),
        ('SIMFINDER_WORKERS', '0', 'workers', DEFAULT_WORKERS),
        ('SIMFINDER_QUEUE_SIZE', '0', 'queue_size', DEFAULT_QUEUE_SIZE),
    ])
    def test_out_of_range_env_default_ignored(self, temp_dir, monkeypatch, isolated_user_config,
                                              env_var, value, attr, default):
        monkeypatch.setenv(env_var, value)
        assert getattr(parse_arguments([str(temp_dir)]), attr) == default


class TestMain:

    def test_reports_duplicate_pair(self, duplicate_dir, temp_dir, info_logs):
        assert main([str(temp_dir)]) == 0

        duplicate_lines = [m for m in info_logs.messages if m.startswith('possible duplicate:')]
        assert len(duplicate_lines) == 1
        assert duplicate_dir['a'] in duplicate_lines[0]
        assert duplicate_dir['b'] in duplicate_lines[0]
        assert not any(duplicate_dir['c'] in m for m in info_logs.messages if 'phash' in m)
        assert 'Scanned 3 images: 1 possible duplicate, 0 close matches' in info_logs.messages

    def test_empty_directory_succeeds(self, temp_dir, info_logs):
        assert main([str(temp_dir)]) == 0
        assert 'Scanned 0 images: 0 possible duplicates, 0 close matches' in info_logs.messages

    def test_corrupt_file_fails(self, corrupt_dir, temp_dir, info_logs):
        assert main([str(temp_dir), '--workers', '2']) == 1

        errors = [r for r in info_logs.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].getMessage().startswith('error: ')
        assert corrupt_dir in errors[0].getMessage()

    def test_missing_directory_fails(self, temp_dir, info_logs):
        assert main([str(temp_dir / 'missing')]) == 1

    @pytest.mark.parametrize("env_var, value", [
        ('SIMFINDER_THRESHOLD', '-1'),
        ('SIMFINDER_WORKERS', '0'),
        ('SIMFINDER_QUEUE_SIZE', '0'),
    ])
    def test_out_of_range_config_still_scans(self, duplicate_dir, temp_dir, info_logs,
                                             monkeypatch, isolated_user_config, env_var, value):
        monkeypatch.setenv(env_var, value)

        assert main([str(temp_dir)]) == 0
        assert 'Scanned 3 images: 1 possible duplicate, 0 close matches' in info_logs.messages

    def test_invalid_scan_parameter_reports_error(self, temp_dir, info_logs, monkeypatch):
        def reject(*args, **kwargs):
            raise ValueError("workers must be at least 1, got 0")

        monkeypatch.setattr('simfinder.cli.orchestrator.scan_directory', reject)

        assert main([str(temp_dir)]) == 1
        errors = [r.getMessage() for r in info_logs.records if r.levelno == logging.ERROR]
        assert errors == ['error: workers must be at least 1, got 0']


class TestSummary:

    def test_pluralization(self):
        result = ScanResult(files_scanned=1, findings=[
            Finding(FindingKind.CLOSE, "/b", "/a", 1, distance=1),
        ])
        assert format_summary(result) == 'Scanned 1 image: 0 possible duplicates, 1 close match'

    def test_large_counts_use_separators(self):
        assert format_summary(ScanResult(files_scanned=12345)).startswith('Scanned 12,345 images')
