import json
from datetime import datetime

import evaluation


VERBOSE_OUTPUT = """\
============================= test session starts ==============================
collected 4 items

tests/test_huffman_service.py::test_single_symbol_source PASSED          [ 25%]
tests/test_huffman_service.py::test_empty_source FAILED                  [ 50%]
tests/test_huffman_core.py::test_build_is_deterministic SKIPPED (why)    [ 75%]
tests/test_frequency.py::test_split_lines_marks_terminated_lines ERROR   [100%]
=========================== short test summary info ============================
FAILED tests/test_huffman_service.py::test_empty_source - AssertionError
"""


def test_parse_pytest_verbose_output():
	tests = evaluation.parse_pytest_verbose_output(VERBOSE_OUTPUT)
	assert [t["outcome"] for t in tests] == ["passed", "failed", "skipped", "error"]
	assert tests[0]["nodeid"] == "tests/test_huffman_service.py::test_single_symbol_source"
	assert tests[0]["name"] == "test_single_symbol_source"


def test_summarize_counts_outcomes():
	tests = evaluation.parse_pytest_verbose_output(VERBOSE_OUTPUT)
	assert evaluation.summarize(tests) == {
		"total": 4,
		"passed": 1,
		"failed": 1,
		"errors": 1,
		"skipped": 1,
	}


def test_environment_info_has_expected_keys():
	info = evaluation.get_environment_info()
	assert set(info) == {"python_version", "platform", "git_commit"}
	json.dumps(info)


def test_report_path_uses_run_start_time():
	started_at = datetime(2026, 10, 19, 8, 5, 3)
	path = evaluation.report_path(started_at)
	assert path.parts[-4:] == ("evaluation", "2026-10-19", "08-05-03", "report.json")


def test_generate_run_id_is_short_hex():
	run_id = evaluation.generate_run_id()
	assert len(run_id) == 8
	int(run_id, 16)
