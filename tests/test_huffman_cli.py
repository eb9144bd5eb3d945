import logging
import os
import sys
import pytest

SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC_DIR not in sys.path:
	sys.path.insert(0, SRC_DIR)

import huffman_cli
from huffman_config import DEBUG_HIGH, HuffConfig


def test_cli_roundtrip(tmp_path):
	src = tmp_path / "input.txt"
	packed = tmp_path / "input.txt.hf"
	restored = tmp_path / "restored.txt"
	src.write_bytes(b"command line round trip\n" * 30)

	assert huffman_cli.main(["compress", str(src), str(packed)]) == 0
	assert packed.read_bytes()[:4] == b"\xfa\xce\x82\x01"
	assert huffman_cli.main(["decompress", str(packed), str(restored)]) == 0
	assert restored.read_bytes() == src.read_bytes()


def test_cli_empty_file(tmp_path):
	src = tmp_path / "empty"
	packed = tmp_path / "empty.hf"
	restored = tmp_path / "empty.out"
	src.write_bytes(b"")

	assert huffman_cli.main(["compress", str(src), str(packed)]) == 0
	assert huffman_cli.main(["decompress", str(packed), str(restored)]) == 0
	assert restored.read_bytes() == b""


def test_cli_missing_input(tmp_path, caplog):
	dst = tmp_path / "out.hf"
	assert huffman_cli.main(["compress", str(tmp_path / "nope"), str(dst)]) == 1
	assert not dst.exists()
	assert "compress" in caplog.text


def test_cli_bad_marker_reports_and_keeps_output(tmp_path, caplog):
	src = tmp_path / "not_huffman.bin"
	dst = tmp_path / "out.bin"
	src.write_bytes(b"plain text, not compressed")

	assert huffman_cli.main(["decompress", str(src), str(dst)]) == 1
	assert dst.exists()
	assert "format" in caplog.text


def test_cli_debug_logs_codes(tmp_path, caplog):
	caplog.set_level(logging.DEBUG)
	src = tmp_path / "input.txt"
	src.write_bytes(b"abc")

	assert huffman_cli.main(["--debug", str(DEBUG_HIGH), "-v", "compress", str(src), str(tmp_path / "o")]) == 0
	assert "codes:" in caplog.text
	assert "compress: read" in caplog.text


def test_cli_requires_command():
	with pytest.raises(SystemExit) as excinfo:
		huffman_cli.main([])
	assert excinfo.value.code == 2


def test_config_from_env():
	assert HuffConfig.from_env({}).debug == 0
	assert HuffConfig.from_env({"HUFF_DEBUG": "4"}).debug == 4
	assert HuffConfig.from_env({"HUFF_DEBUG": "loud"}).debug == 0
	assert HuffConfig.from_env({"HUFF_DEBUG": "-3"}).debug == 0
