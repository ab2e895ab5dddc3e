import re

from enclavesim.tools.keygen import main

_KEY_LINE = re.compile(r"^(Public|Private) Key: \[((?:[0-9a-f]{2}, )*[0-9a-f]{2})\]$")


def _keys(out):
    found = {}
    for line in out.splitlines():
        match = _KEY_LINE.match(line)
        if match:
            found[match.group(1)] = match.group(2).split(", ")
    return found


def test_prints_header(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "[KeyGen] Generating simulated keypair..."


def test_prints_two_32_byte_keys(capsys):
    main([])
    keys = _keys(capsys.readouterr().out)
    assert set(keys) == {"Public", "Private"}
    assert len(keys["Public"]) == 32
    assert len(keys["Private"]) == 32


def test_keys_differ_between_runs(capsys):
    main([])
    first = _keys(capsys.readouterr().out)
    main([])
    second = _keys(capsys.readouterr().out)
    assert first["Public"] != second["Public"]