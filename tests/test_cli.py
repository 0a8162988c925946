import json

from typer.testing import CliRunner

from cipherkit.cli import app

runner = CliRunner()


def test_ciphers_lists_plugins():
    result = runner.invoke(app, ["ciphers"])
    assert result.exit_code == 0
    names = [line.split()[0] for line in result.stdout.splitlines()]
    assert names == ["caesar", "otp", "vigenere"]


def test_table_shows_27_rows():
    result = runner.invoke(app, ["table"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 27
    assert lines[0].split() == ["0", "A"]
    assert lines[-1].split() == ["26", "<space>"]


def test_encrypt_then_decrypt():
    enc = runner.invoke(app, ["encrypt", "-c", "caesar", "-k", "D", "BIKINI BOTTOM"])
    assert enc.exit_code == 0
    assert enc.stdout == "ELNLQLCERWWRP\n"

    dec = runner.invoke(app, ["decrypt", "-c", "caesar", "-k", "D", "ELNLQLCERWWRP"])
    assert dec.exit_code == 0
    assert dec.stdout == "BIKINI BOTTOM\n"


def test_encrypt_json_output():
    result = runner.invoke(app, ["encrypt", "--cipher", "vigenere", "--key", "DINGUS", "--json", "bikini bottom"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["text"] == "EQXOG CJAZMFP"
    assert payload["operation"] == "encrypt"


def test_short_otp_key_is_usage_error():
    result = runner.invoke(app, ["encrypt", "-c", "otp", "-k", "AB", "BIKINI BOTTOM"])
    assert result.exit_code == 2


def test_bad_symbol_is_usage_error():
    result = runner.invoke(app, ["decrypt", "-c", "vigenere", "-k", "DINGUS", "HELLO!"])
    assert result.exit_code == 2


def test_unknown_cipher_is_usage_error():
    result = runner.invoke(app, ["encrypt", "-c", "enigma", "-k", "A", "ABC"])
    assert result.exit_code == 2


def test_pad_prints_quoted_key():
    result = runner.invoke(app, ["pad", "20"])
    assert result.exit_code == 0
    key = json.loads(result.stdout)
    assert len(key) == 20

    enc = runner.invoke(app, ["encrypt", "-c", "otp", "-k", key, "BIKINI BOTTOM"])
    assert enc.exit_code == 0
    dec = runner.invoke(app, ["decrypt", "-c", "otp", "-k", key, enc.stdout.rstrip("\n")])
    assert dec.stdout == "BIKINI BOTTOM\n"


def test_verbose_flag_accepted():
    result = runner.invoke(app, ["--verbose", "ciphers"])
    assert result.exit_code == 0
