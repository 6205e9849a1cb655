import click.testing

import gfss
import gfss.cli


def _invoke(*args, input=None):
    runner = click.testing.CliRunner()
    return runner.invoke(gfss.cli.cli, list(args), input=input)


def test_version():
    result = _invoke("version")
    assert result.exit_code == 0
    assert gfss.__version__ in result.output


def test_help():
    result = _invoke("--help")
    assert result.exit_code == 0
    for command in ["split", "join", "new-share", "random"]:
        assert command in result.output


def test_split_join():
    result = _invoke("split", "deadbeef", "-n", "4", "-t", "2")
    assert result.exit_code == 0, result.output

    shares = result.output.split()
    assert len(shares) == 4
    assert all(share.startswith("8") for share in shares)

    result = _invoke("join", shares[3], shares[1])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "deadbeef"


def test_split_bits_option():
    result = _invoke("split", "c0ffee", "--num-shares", "3", "--threshold", "3", "--bits", "12", "-p", "0")
    assert result.exit_code == 0, result.output

    shares = result.output.split()
    assert all(share.startswith("C") for share in shares)
    assert gfss.combine(shares) == "c0ffee"


def test_join_stdin():
    shares = gfss.share("c0ffee", 3, 2)
    result = _invoke("join", input="\n".join(shares[:2]) + "\n")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "c0ffee"


def test_join_no_shares():
    result = _invoke("join", input="")
    assert result.exit_code != 0
    assert "No shares given" in result.output


def test_new_share():
    shares = gfss.share("c0ffee", 3, 2)
    result = _invoke("new-share", "3", shares[0], shares[1])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == shares[2]


def test_random():
    result = _invoke("random", "16")
    assert result.exit_code == 0, result.output
    assert len(result.output.strip()) == 32


def test_invalid_input():
    result = _invoke("split", "xyz")
    assert result.exit_code != 0
    assert "Error: secret must consist only of hexadecimal digits." in result.output

    result = _invoke("split", "ab", "-n", "8", "-b", "3")
    assert result.exit_code != 0
    assert "specify at least 4 bits" in result.output

    result = _invoke("join", "8zz")
    assert result.exit_code != 0
    assert "Error: Malformed share" in result.output

    result = _invoke("random", "0")
    assert result.exit_code != 0
    assert "n_bytes must be in the range" in result.output


def test_parse_logging_config():
    log_cfg = gfss.cli._parse_logging_config(0)
    assert log_cfg.fmt == gfss.cli.LOG_FORMAT_DEFAULT
    log_cfg = gfss.cli._parse_logging_config(2)
    assert log_cfg.fmt == gfss.cli.LOG_FORMAT_VERBOSE
