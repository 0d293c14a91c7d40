import pytest
import toml
from click.testing import CliRunner
from trie_proofs import _cli
from trie_proofs.params import MAX_TRIE_NODE_LENGTH
from .conftest import ADDRESS, SLOT, STATE_ROOT, STORAGE_ROOT, FakeSource


@pytest.fixture
def runner(monkeypatch):
    src = FakeSource(latest=77)
    monkeypatch.setattr(_cli, "make_source", lambda rpc_url: src)
    return CliRunner()


def toml_output(output: str, first_key: str) -> dict:
    # progress lines are echoed before the Toml document
    return toml.loads(output[output.index(first_key):])


def test_state_proof(runner):
    result = runner.invoke(_cli.cli, ["--rpc-url", "http://localhost:8545", "--max-depth", "4",
                                      "state-proof", "--address", "0x" + ADDRESS.hex()])
    assert result.exit_code == 0, result.output
    out = toml_output(result.output, "state_root")
    assert out["state_root"] == ["0x%02x" % b for b in STATE_ROOT]
    assert out["state_proof"]["depth"] == "0x03"
    assert out["state_proof"]["key"] == ["0x%02x" % b for b in ADDRESS]
    assert len(out["state_proof"]["proof"]) == 4 * MAX_TRIE_NODE_LENGTH
    assert "block 77" in result.output


def test_storage_proof_custom_names(runner):
    result = runner.invoke(_cli.cli, ["-r", "http://localhost:8545", "-m", "3", "-b", "12",
                                      "--root-name", "root", "--proof-name", "slot_proof",
                                      "storage-proof", "-a", ADDRESS.hex(), "-k", "0x2"])
    assert result.exit_code == 0, result.output
    out = toml_output(result.output, "root =")
    assert out["root"] == ["0x%02x" % b for b in STORAGE_ROOT]
    assert out["slot_proof"]["key"] == ["0x%02x" % b for b in SLOT]
    assert out["slot_proof"]["depth"] == "0x02"
    assert len(out["slot_proof"]["value"]) == 32
    assert "block 12" in result.output


def test_rpc_url_from_env(runner):
    result = runner.invoke(_cli.cli, ["-m", "4", "state-proof", "-a", ADDRESS.hex()],
                           env={"RPC_URL": "http://localhost:8545"})
    assert result.exit_code == 0, result.output


def test_missing_max_depth(runner):
    result = runner.invoke(_cli.cli, ["-r", "http://localhost:8545", "state-proof", "-a", ADDRESS.hex()])
    assert result.exit_code == 2
    assert "--max-depth must be specified!" in result.output


def test_missing_rpc_url(runner):
    result = runner.invoke(_cli.cli, ["-m", "4", "state-proof", "-a", ADDRESS.hex()], env={"RPC_URL": None})
    assert result.exit_code == 2
    assert "--rpc-url must be specified!" in result.output


def test_bad_address(runner):
    result = runner.invoke(_cli.cli, ["-r", "http://localhost:8545", "-m", "4", "state-proof", "-a", "0x1234"])
    assert result.exit_code == 2
    assert "expected 20 bytes" in result.output


def test_depth_exceeded(runner):
    result = runner.invoke(_cli.cli, ["-r", "http://localhost:8545", "-m", "2", "state-proof", "-a", ADDRESS.hex()])
    assert result.exit_code == 1
    assert "exceeds the maximum depth specified (2)" in result.output
