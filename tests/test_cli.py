import json

from click.testing import CliRunner

from vsss.cli import cli

PRIME = 2**61 - 1
Q = 2**255 - 19


def test_demo():
    result = CliRunner().invoke(cli, ["demo"])
    assert result.exit_code == 0, result.output
    assert "Reconstructed Secret: 12345" in result.output
    assert "Reconstructed Secret: 986743267" in result.output


def test_split_and_combine():
    runner = CliRunner()
    split = runner.invoke(cli, ["split", "42", "-t", "2", "-n", "3", "-m", str(PRIME)])
    assert split.exit_code == 0, split.output
    data = json.loads(split.output)
    assert data["modulus"] == PRIME
    assert [x for x, _ in data["shares"]] == [1, 2, 3]

    args = [f"{x}:{y}" for x, y in data["shares"][1:]]
    combine = runner.invoke(cli, ["combine", "-m", str(PRIME), *args])
    assert combine.exit_code == 0, combine.output
    assert combine.output.strip() == "42"


def test_combine_duplicates_has_no_result():
    result = CliRunner().invoke(cli, ["combine", "-m", "11", "1:4", "1:4"])
    assert result.exit_code == 1
    assert "no result" in result.output


def test_combine_rejects_malformed_share():
    result = CliRunner().invoke(cli, ["combine", "-m", "11", "abc"])
    assert result.exit_code == 2


def test_split_rejects_invalid_parameters():
    result = CliRunner().invoke(cli, ["split", "42", "-t", "4", "-n", "3", "-m", str(PRIME)])
    assert result.exit_code == 1
    assert "num_shares" in result.output


def test_deal_and_verify(tmp_path):
    runner = CliRunner()
    deal = runner.invoke(cli, ["deal", "1234", "-t", "3", "-n", "5", "-q", str(Q)])
    assert deal.exit_code == 0, deal.output
    data = json.loads(deal.output)
    assert data["g"] == 2
    assert data["q"] == Q
    assert len(data["commitments"]) == 3

    dealing = tmp_path / "dealing.json"
    dealing.write_text(deal.output)

    verify = runner.invoke(cli, ["verify", str(dealing)])
    assert verify.exit_code == 0, verify.output
    assert verify.output.count(": ok") == 5

    index, value = data["shares"][0]
    tampered = runner.invoke(cli, ["verify", str(dealing), "--index", str(index), "--value", str(value + 1)])
    assert tampered.exit_code == 1
    assert f"share {index}: INVALID" in tampered.output


def test_verify_requires_index_and_value(tmp_path):
    dealing = tmp_path / "dealing.json"
    dealing.write_text(json.dumps({"g": 2, "q": Q, "shares": [], "commitments": [1]}))
    result = CliRunner().invoke(cli, ["verify", str(dealing), "--index", "1"])
    assert result.exit_code == 2


def test_verify_rejects_malformed_dealing(tmp_path):
    dealing = tmp_path / "dealing.json"
    dealing.write_text(json.dumps({"g": 1, "q": Q, "commitments": []}))
    result = CliRunner().invoke(cli, ["verify", str(dealing)])
    assert result.exit_code == 1
    assert "malformed dealing" in result.output


def test_bench():
    result = CliRunner().invoke(cli, ["bench", "--iterations", "1", "--bits", "64"])
    assert result.exit_code == 0, result.output
    assert "VSS Share Verification" in result.output


def test_verify_rejects_malformed_share_entries(tmp_path):
    dealing = tmp_path / "dealing.json"
    dealing.write_text(json.dumps({"g": 2, "q": Q, "shares": [[1]], "commitments": [1]}))
    result = CliRunner().invoke(cli, ["verify", str(dealing)])
    assert result.exit_code == 1
    assert "malformed dealing" in result.output

    dealing.write_text(json.dumps({"g": 2, "q": Q, "shares": [["one", "two"]], "commitments": [1]}))
    result = CliRunner().invoke(cli, ["verify", str(dealing)])
    assert result.exit_code == 1
    assert "malformed dealing" in result.output
