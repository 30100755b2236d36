"""Tests for the CLI entry point."""

import json

import pytest

from ipv4calc.cli.main import main


@pytest.fixture(autouse=True)
def _no_local_config(isolated_cwd):
    return isolated_cwd


class TestMainArgParsing:
    def test_no_arguments_is_an_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2

    def test_invalid_address(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["999.1.1.1"])
        assert exc.value.code == 2
        assert "Sorry. '999.1.1.1' is not a valid IPv4 address." in capsys.readouterr().err

    @pytest.mark.parametrize("value", ["33", "-1", "abc"])
    def test_invalid_cidr(self, value, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["10.0.0.1", f"--cidr={value}"])
        assert exc.value.code == 2
        assert "is not a valid CIDR" in capsys.readouterr().err

    def test_cidr_and_netmask_are_exclusive(self):
        with pytest.raises(SystemExit) as exc:
            main(["10.0.0.1", "-c", "24", "-m", "255.255.255.0"])
        assert exc.value.code == 2


class TestTableOutput:
    def test_class_c(self, capsys):
        assert main(["192.168.1.100", "-c", "24"]) == 0
        out = capsys.readouterr().out
        assert "192.168.1.0/24 Class C" in out
        assert "255.255.255.0 = 24" in out
        assert "192.168.1.254" in out
        assert "Hosts/Net │ 254 " in out

    def test_classful_default(self, capsys):
        assert main(["10.0.0.1"]) == 0
        assert "10.0.0.0/8 Class A" in capsys.readouterr().out

    def test_point_to_point(self, capsys):
        assert main(["172.16.5.4", "-c", "31"]) == 0
        out = capsys.readouterr().out
        assert "172.16.5.5" in out
        assert "N/A/31 Class B" in out
        assert "Hosts/Net │ 2 " in out

    def test_loopback(self, capsys):
        assert main(["127.0.0.1"]) == 0
        out = capsys.readouterr().out
        assert "Netmask   │ N/A" in out
        assert "Hosts/Net │ N/A" in out

    def test_netmask_option(self, capsys):
        assert main(["192.168.1.100", "-m", "255.255.255.252"]) == 0
        out = capsys.readouterr().out
        assert "255.255.255.252 = 30" in out
        assert "192.168.1.100/30 Class C" in out

    @pytest.mark.parametrize("flag", ["-b", "--binary", "-v", "--verbose"])
    def test_binary_flags(self, flag, capsys):
        assert main(["192.168.1.100", "-c", "24", flag]) == 0
        assert "11000000.10101000.00000001.01100100" in capsys.readouterr().out

    def test_plain_when_not_a_tty(self, capsys):
        main(["192.168.1.100", "-c", "24"])
        assert "\033[" not in capsys.readouterr().out

    def test_color_always(self, capsys):
        main(["192.168.1.100", "-c", "24", "--color", "always"])
        assert "\033[32mClass C\033[0m" in capsys.readouterr().out


class TestFailures:
    def test_non_contiguous_mask(self, capsys):
        assert main(["192.168.1.100", "-m", "255.0.255.0"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Something bad happened." in captured.err
        assert "InvalidMask" in captured.err


class TestJsonOutput:
    def test_format_json(self, capsys):
        assert main(["192.168.1.100", "-c", "24", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["network"] == "192.168.1.0"
        assert data["hosts"] == 254

    def test_json_with_binary(self, capsys):
        main(["10.0.0.1", "--format", "json", "-b"])
        data = json.loads(capsys.readouterr().out)
        assert data["binary"]["network"] == "00001010.00000000.00000000.00000000"


class TestConfig:
    def test_local_config_sets_defaults(self, isolated_cwd, capsys):
        (isolated_cwd / "ipv4calc.toml").write_text('[display]\nformat = "json"\n')
        assert main(["10.0.0.1"]) == 0
        assert json.loads(capsys.readouterr().out)["prefix_length"] == 8

    def test_flags_override_config(self, isolated_cwd, capsys):
        (isolated_cwd / "ipv4calc.toml").write_text('[display]\nformat = "json"\n')
        assert main(["10.0.0.1", "--format", "table"]) == 0
        assert "10.0.0.0/8 Class A" in capsys.readouterr().out

    def test_config_binary_default(self, isolated_cwd, capsys):
        (isolated_cwd / "ipv4calc.toml").write_text("[display]\nbinary = true\n")
        main(["10.0.0.1"])
        assert "00001010.00000000.00000000.00000001" in capsys.readouterr().out

    def test_missing_config(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["10.0.0.1", "--config", str(tmp_path / "missing.toml")])
        assert exc.value.code == 1
        assert "config file not found" in capsys.readouterr().err

    def test_invalid_config(self, isolated_cwd, capsys):
        (isolated_cwd / "ipv4calc.toml").write_text('[display]\ncolor = "purple"\n')
        with pytest.raises(SystemExit) as exc:
            main(["10.0.0.1"])
        assert exc.value.code == 1
        assert "invalid config" in capsys.readouterr().err
