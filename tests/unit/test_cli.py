"""
Тесты консольной точки входа python -m src.rsa
"""

import json

import pytest

from src.rsa.cli import main


TEXTBOOK_ARGS = ["--p", "61", "--q", "53", "--e", "17"]


class TestCli:
    def test_textbook_output(self, capsys):
        assert main(TEXTBOOK_ARGS + ["--message", "65"]) == 0
        out = capsys.readouterr().out
        assert "P = 61" in out
        assert "Q = 53" in out
        assert "N = 3233" in out
        assert "Phi(N) = 3120" in out
        assert "e = 17" in out
        assert "d = 2753" in out
        assert "C = 2790" in out
        assert out.strip().splitlines()[-1] == "M = 65"

    def test_prompts_for_message(self, capsys):
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return " 65 \n"

        assert main(TEXTBOOK_ARGS, input_fn=fake_input) == 0
        assert prompts == ["Enter 0 <= M < 3233: "]
        assert "C = 2790" in capsys.readouterr().out

    def test_invalid_message_input(self, capsys):
        assert main(TEXTBOOK_ARGS, input_fn=lambda prompt: "abc") == 1
        assert "plaintext must be an integer" in capsys.readouterr().err

    def test_json_output(self, capsys):
        assert main(TEXTBOOK_ARGS + ["--message", "65", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["key_pair"]["d"] == 2753
        assert payload["exchange"]["ciphertext"] == 2790
        assert payload["exchange"]["round_trip_ok"] is True

    def test_seeded_generation_reproducible(self, capsys):
        assert main(["--seed", "11", "--message", "5", "--json"]) == 0
        first = capsys.readouterr().out
        assert main(["--seed", "11", "--message", "5", "--json"]) == 0
        assert capsys.readouterr().out == first

    def test_exponent_not_coprime(self, capsys):
        assert main(["--p", "61", "--q", "53", "--e", "3", "--message", "65"]) == 1
        assert "not coprime" in capsys.readouterr().err

    def test_no_reduce_rejects_large_plaintext(self, capsys):
        assert main(TEXTBOOK_ARGS + ["--message", "5000", "--no-reduce"]) == 1
        assert "out of range" in capsys.readouterr().err

    def test_overflow_reported(self, capsys):
        assert main(["--p", "999983", "--q", "1000003", "--e", "65537", "--message", "1"]) == 1
        assert "does not fit uint32" in capsys.readouterr().err

    def test_unbounded_kind(self, capsys):
        args = ["--p", "999983", "--q", "1000003", "--e", "65537", "--message", "42", "--kind", "none"]
        assert main(args) == 0
        assert capsys.readouterr().out.strip().splitlines()[-1] == "M = 42"

    def test_unknown_kind_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(TEXTBOOK_ARGS + ["--message", "1", "--kind", "int7"])
        assert exc_info.value.code == 2
        assert "Unknown integer kind" in capsys.readouterr().err

    def test_closed_input(self, capsys):
        def closed_input(prompt):
            raise EOFError

        assert main(TEXTBOOK_ARGS, input_fn=closed_input) == 1
        assert "input closed" in capsys.readouterr().err

    def test_key_file_from_json_output(self, capsys, tmp_path):
        assert main(TEXTBOOK_ARGS + ["--message", "65", "--json"]) == 0
        key_file = tmp_path / "run.json"
        key_file.write_text(capsys.readouterr().out, encoding="utf-8")

        assert main(["--key-file", str(key_file), "--message", "100"]) == 0
        out = capsys.readouterr().out
        assert "d = 2753" in out
        assert out.strip().splitlines()[-1] == "M = 100"

    def test_key_file_inconsistent(self, capsys, tmp_path):
        key_file = tmp_path / "key.json"
        key_file.write_text(
            json.dumps({"p": 61, "q": 53, "n": 3233, "phi": 3120, "e": 17, "d": 2752}),
            encoding="utf-8",
        )
        assert main(["--key-file", str(key_file), "--message", "1"]) == 1
        assert "rsa_key_pair contract violated" in capsys.readouterr().err

    def test_key_file_missing(self, capsys, tmp_path):
        assert main(["--key-file", str(tmp_path / "absent.json"), "--message", "1"]) == 1
        assert "error:" in capsys.readouterr().err

    def test_key_file_with_factors_is_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--key-file", str(tmp_path / "k.json")] + TEXTBOOK_ARGS)
        assert exc_info.value.code == 2

    def test_p_without_q(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--p", "61", "--message", "1"])
        assert exc_info.value.code == 2
