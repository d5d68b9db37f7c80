"""
Тесты командной строки pi-digits
"""

import json

import pytest

from src.composer.cli import build_parser, main

PI_100_FRACTION = (
    "1415926535897932384626433832795028841971693993751058209749445923078164"
    "062862089986280348253421170679"
)


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.digits == 10000
        assert args.identity == "gauss"
        assert args.limb_digits == 4
        assert args.max_divisor == 450
        assert args.guard_limbs == 2
        assert args.unchecked is False

    def test_unknown_identity(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--identity", "euler"])


class TestMain:
    """Тесты запуска main()."""

    def test_print_100_digits(self, capsys):
        assert main(["--digits", "100"]) == 0
        out = capsys.readouterr().out
        expected = (
            "Pi/4 = 12*arctan(1/18)+8*arctan(1/57)-5*arctan(1/239) (Gauss)\n"
            "\n"
            "3.\n"
            + PI_100_FRACTION + " " * 13 + "100\n"
            + "\n"
        )
        assert out == expected

    def test_json_output(self, capsys):
        assert main(["--digits", "30", "--identity", "machin", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["identity"] == "Machin"
        assert data["decimal"] == "3." + PI_100_FRACTION[:30]

    def test_unchecked(self, capsys):
        assert main(["--digits", "20", "--unchecked", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["decimal"] == "3." + PI_100_FRACTION[:20]

    def test_list_identities(self, capsys):
        assert main(["--list-identities"]) == 0
        lines = capsys.readouterr().out.strip().split("\n")
        assert len(lines) == 4
        assert lines[-1].startswith("gauss    E=1.786")

    def test_identity_file(self, tmp_path, capsys):
        path = tmp_path / "stormer.json"
        path.write_text(json.dumps({
            "name": "Stormer",
            "terms": [
                {"coefficient": 6, "p": 8},
                {"coefficient": 2, "p": 57},
                {"coefficient": 1, "p": 239},
            ],
        }))
        assert main(["--digits", "40", "--identity-file", str(path), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["identity"] == "Stormer"
        assert data["decimal"] == "3." + PI_100_FRACTION[:40]

    def test_invalid_identity_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"name": "bad", "terms": [{"coefficient": 1, "p": 1}]}))
        with pytest.raises(SystemExit) as exc:
            main(["--digits", "10", "--identity-file", str(path)])
        assert exc.value.code == 2

    def test_non_positive_digits(self):
        with pytest.raises(SystemExit) as exc:
            main(["--digits", "0"])
        assert exc.value.code == 2

    def test_bad_limb_digits(self):
        with pytest.raises(SystemExit):
            main(["--digits", "10", "--limb-digits", "0"])

    def test_small_max_divisor(self, capsys):
        """Знаменатель ряда k не ограничен квадратом --max-divisor."""
        assert main(["--digits", "1000", "--max-divisor", "20", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["decimal"].startswith("3." + PI_100_FRACTION)
        assert len(data["decimal"]) == 1002

    def test_contract_violation_reported(self, capsys):
        """p = 18 за порогом 2 делится на 18 > 2*2: ошибка через parser.error."""
        with pytest.raises(SystemExit) as exc:
            main(["--digits", "10", "--max-divisor", "2"])
        assert exc.value.code == 2
        assert "div_scalar: scalar 18 outside [1, 4]" in capsys.readouterr().err
