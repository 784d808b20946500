"""Tests for the command-line driver in main.py"""

import io

import pytest

from main import EXIT_FAILURE, EXIT_MALFORMED, EXIT_OK, allowlist, connect, generate, main
from unionfind import Variant
from utils.loader import path_to_data

TINY_ACCEPTED = ["4 3", "3 8", "6 5", "9 4", "2 1", "5 0", "7 2", "6 1"]


def run_connect(text: str, variant=Variant.WEIGHTED_PC, verify=False):
    out = io.StringIO()
    status = connect(io.StringIO(text), variant, out=out, verify=verify)
    return status, out.getvalue().splitlines()


class TestConnect:
    @pytest.mark.parametrize("variant", list(Variant))
    def test_tiny(self, variant):
        with open(path_to_data("tinyUF.txt")) as file:
            out = io.StringIO()
            status = connect(file, variant, out=out)
        assert status == EXIT_OK
        assert out.getvalue().splitlines() == TINY_ACCEPTED + ["2 components"]

    def test_scenario(self):
        status, lines = run_connect("10\n4 3\n3 8\n6 5\n9 4\n2 1\n")
        assert status == EXIT_OK
        assert lines[-1] == "5 components"

    def test_skips_connected_pairs(self):
        status, lines = run_connect("3\n0 1\n1 0\n0 0\n")
        assert lines == ["0 1", "2 components"]

    def test_stops_at_first_out_of_range(self):
        status, lines = run_connect("3\n0 1\n1 5\n2 0\n")
        assert status == EXIT_FAILURE
        assert lines == ["0 1", "index 5 is not between 0 and 2"]

    def test_negative_element(self):
        status, lines = run_connect("3\n-1 0\n", Variant.QUICK_FIND)
        assert status == EXIT_FAILURE
        assert lines == ["index -1 is not between 0 and 2"]

    def test_non_integer_ends_the_pairs(self):
        """The count is still printed for the pairs read so far."""
        status, lines = run_connect("3\n0 1\nx 2\n")
        assert status == EXIT_OK
        assert lines == ["0 1", "2 components"]

    def test_malformed_size(self):
        status, lines = run_connect("three\n0 1\n")
        assert status == EXIT_MALFORMED
        assert lines == []

    def test_empty_input(self):
        status, lines = run_connect("")
        assert status == EXIT_MALFORMED

    @pytest.mark.parametrize("variant", list(Variant))
    def test_verify(self, variant):
        status, lines = run_connect("6\n0 1\n2 3\n1 3\n4 4\n", variant, verify=True)
        assert status == EXIT_OK
        assert lines[-1] == "3 components"


class TestAllowlist:
    def test_tiny(self):
        out = io.StringIO()
        with open(path_to_data("tinyT.txt")) as keys:
            status = allowlist(path_to_data("tinyW.txt"), keys, out=out)
        assert status == EXIT_OK
        assert out.getvalue().split() == [
            "23", "10", "18", "23", "98", "84", "11", "10",
            "48", "77", "54", "98", "77", "77", "68",
        ]

    def test_missing_allowlist(self, tmp_path):
        path = str(tmp_path / "missing.txt")
        out = io.StringIO()
        status = allowlist(path, ["1\n"], out=out)
        assert status == EXIT_FAILURE
        assert out.getvalue() == f"failed to open {path}\n"

    def test_non_integer_key_ends_the_input(self, tmp_path):
        path = tmp_path / "allow.txt"
        path.write_text("1\n2\n")
        out = io.StringIO()
        assert allowlist(str(path), ["2 x 1\n"], out=out) == EXIT_OK
        assert out.getvalue() == "2\n"


class TestGenerate:
    def test_chain_round_trip(self):
        out = io.StringIO()
        assert generate(5, 0, "chain", out=out) == EXIT_OK
        status, lines = run_connect(out.getvalue(), Variant.QUICK_UNION)
        assert lines == ["0 1", "1 2", "2 3", "3 4", "1 components"]

    def test_random(self):
        out = io.StringIO()
        generate(20, 15, "random", seed=4, out=out)
        lines = out.getvalue().splitlines()
        assert lines[0] == "20"
        assert len(lines) == 16


class TestMain:
    def test_connect_file(self, capsys):
        status = main(["connect", path_to_data("tinyUF.txt"), "--variant", "quick-find"])
        assert status == EXIT_OK
        assert capsys.readouterr().out.splitlines() == TINY_ACCEPTED + ["2 components"]

    def test_connect_verify(self, capsys):
        status = main(["connect", path_to_data("tinyUF.txt"), "--verify"])
        assert status == EXIT_OK

    def test_connect_missing_file(self, tmp_path, capsys):
        path = str(tmp_path / "missing.txt")
        assert main(["connect", path]) == EXIT_FAILURE
        assert capsys.readouterr().out == f"failed to open {path}\n"

    def test_allowlist_missing_keys_file(self, tmp_path, capsys):
        path = str(tmp_path / "missing.txt")
        assert main(["allowlist", path_to_data("tinyW.txt"), path]) == EXIT_FAILURE
        assert capsys.readouterr().out == f"failed to open {path}\n"

    def test_allowlist(self, capsys):
        status = main(["allowlist", path_to_data("tinyW.txt"), path_to_data("tinyT.txt")])
        assert status == EXIT_OK
        assert capsys.readouterr().out.split()[:3] == ["23", "10", "18"]

    def test_generate(self, capsys):
        assert main(["generate", "4", "--kind", "binomial"]) == EXIT_OK
        assert capsys.readouterr().out == "4\n0 1\n2 3\n0 2\n"

    def test_generate_negative(self, capsys):
        assert main(["generate", "0", "3"]) == EXIT_MALFORMED

    def test_benchmark(self, capsys):
        status = main(
            ["benchmark", "--n", "50", "--m", "80", "--variant", "weighted", "--variant", "quick-find"]
        )
        assert status == EXIT_OK
        out = capsys.readouterr().out
        assert "weighted" in out
        assert "quick-find" in out

    def test_unknown_variant(self):
        with pytest.raises(SystemExit):
            main(["connect", "--variant", "rank"])
