"""Tests for the per-mate chunking pipeline."""

import gzip
import math
import tempfile
from pathlib import Path

import pytest

from fastq_chunker.chunk.chunk import chunk_file
from fastq_chunker.chunk.types import Mate
from fastq_chunker.config import ChunkConfig
from fastq_chunker.errors import DirectoryCreateError, OpenError


def make_records(count: int, tag: str = "r") -> list[str]:
    """Build ``count`` four-line FASTQ records as a flat list of lines."""
    lines = []
    for i in range(count):
        lines.extend([f"@{tag}{i}", "ACGTACGT", "+", "IIIIIIII"])
    return lines


def write_lines(path: Path, lines: list[str]) -> None:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")


def read_chunk_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


class TestChunkFile:
    """Test cases for chunk_file."""

    def test_splits_into_full_chunks_and_remainder(self) -> None:
        """Test 3 records at 2 records per chunk: 8 lines, then 4 lines."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            lines = make_records(3)
            input_path = tmp_path / "in_R1.fastq"
            write_lines(input_path, lines)

            config = ChunkConfig(records_per_chunk=2, prefix="prefix", output_dir=tmp_path / "out")
            result = chunk_file(input_path, Mate.R1, config)

            assert [p.name for p in result.paths] == ["prefix_0_R1.fastq", "prefix_1_R1.fastq"]
            assert read_chunk_lines(result.paths[0]) == lines[:8]
            assert read_chunk_lines(result.paths[1]) == lines[8:]
            assert result.stats.lines_read == 12
            assert result.stats.chunks_written == 2
            assert result.stats.trailing_partial_lines == 0

    @pytest.mark.parametrize("record_count", [1, 5, 6, 7, 20])
    def test_chunk_counts_and_sizes(self, record_count: int) -> None:
        """Test ceil(L / T) files, all full except possibly the last."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            lines = make_records(record_count)
            input_path = tmp_path / "in.fastq"
            write_lines(input_path, lines)

            config = ChunkConfig(records_per_chunk=3, output_dir=tmp_path / "out")
            result = chunk_file(input_path, Mate.R2, config)

            threshold = config.lines_per_chunk
            assert len(result.paths) == math.ceil(len(lines) / threshold)

            sizes = [len(read_chunk_lines(p)) for p in result.paths]
            assert all(size == threshold for size in sizes[:-1])
            assert sizes[-1] == (len(lines) % threshold or threshold)

    def test_concatenated_chunks_reproduce_input(self) -> None:
        """Test that chunks in index order round-trip the input lines."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            lines = make_records(11)
            input_path = tmp_path / "in.fastq"
            write_lines(input_path, lines)

            config = ChunkConfig(records_per_chunk=4, output_dir=tmp_path / "out")
            result = chunk_file(input_path, Mate.R1, config)

            rebuilt = []
            for path in result.paths:
                rebuilt.extend(read_chunk_lines(path))
            assert rebuilt == lines

    def test_gzip_and_plain_produce_identical_chunks(self) -> None:
        """Test that compression does not change chunked output bytes."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            content = "".join(f"{line}\n" for line in make_records(9))
            plain_path = tmp_path / "in.fastq"
            gz_path = tmp_path / "in.fastq.gz"
            plain_path.write_text(content, encoding="utf-8")
            with gzip.open(gz_path, "wt", encoding="utf-8") as gz:
                gz.write(content)

            plain = chunk_file(
                plain_path, Mate.R1, ChunkConfig(records_per_chunk=2, output_dir=tmp_path / "plain")
            )
            packed = chunk_file(
                gz_path, Mate.R1, ChunkConfig(records_per_chunk=2, output_dir=tmp_path / "gz")
            )

            assert [p.name for p in plain.paths] == [p.name for p in packed.paths]
            for a, b in zip(plain.paths, packed.paths, strict=True):
                assert a.read_bytes() == b.read_bytes()

    def test_empty_input_produces_one_empty_chunk(self) -> None:
        """Test that empty input yields exactly chunk 0, empty."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            input_path = tmp_path / "empty.fastq"
            input_path.write_bytes(b"")

            config = ChunkConfig(records_per_chunk=2, output_dir=tmp_path / "out")
            result = chunk_file(input_path, Mate.R1, config)

            assert result.paths == (tmp_path / "out" / "chunk_0_R1.fastq",)
            assert result.paths[0].read_bytes() == b""
            assert result.stats.chunks_written == 1

    def test_exact_multiple_has_no_trailing_empty_file(self) -> None:
        """Test that a full final chunk is not followed by an empty one."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            input_path = tmp_path / "in.fastq"
            write_lines(input_path, make_records(4))

            config = ChunkConfig(records_per_chunk=2, output_dir=tmp_path / "out")
            result = chunk_file(input_path, Mate.R1, config)

            assert len(result.paths) == 2
            assert sorted(p.name for p in (tmp_path / "out").iterdir()) == [
                "chunk_0_R1.fastq",
                "chunk_1_R1.fastq",
            ]

    def test_partial_trailing_record_is_kept(self) -> None:
        """Test that 1-3 leftover lines land in the last chunk unvalidated."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            lines = make_records(2) + ["@orphan", "ACGT"]
            input_path = tmp_path / "in.fastq"
            write_lines(input_path, lines)

            config = ChunkConfig(records_per_chunk=2, output_dir=tmp_path / "out")
            result = chunk_file(input_path, Mate.R1, config)

            assert len(result.paths) == 2
            assert read_chunk_lines(result.paths[1]) == ["@orphan", "ACGT"]
            assert result.stats.trailing_partial_lines == 2

    def test_creates_nested_output_dir(self) -> None:
        """Test that missing parent directories are created."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            input_path = tmp_path / "in.fastq"
            write_lines(input_path, make_records(1))
            out_dir = tmp_path / "a" / "b" / "c"

            result = chunk_file(input_path, Mate.R2, ChunkConfig(output_dir=out_dir))

            assert out_dir.is_dir()
            assert result.paths == (out_dir / "chunk_0_R2.fastq",)

    def test_missing_input_raises_open_error_without_output(self) -> None:
        """Test that a missing input fails before the output dir is made."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            out_dir = tmp_path / "out"

            with pytest.raises(OpenError):
                chunk_file(tmp_path / "missing.fastq", Mate.R1, ChunkConfig(output_dir=out_dir))

            assert not out_dir.exists()

    def test_output_dir_blocked_by_file_raises(self) -> None:
        """Test that a regular file in place of the output dir is an error."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            input_path = tmp_path / "in.fastq"
            write_lines(input_path, make_records(1))
            blocker = tmp_path / "out"
            blocker.write_text("not a directory")

            with pytest.raises(DirectoryCreateError):
                chunk_file(input_path, Mate.R1, ChunkConfig(output_dir=blocker))


def test_chunk_config_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        ChunkConfig(records_per_chunk=0)


def test_chunk_config_defaults() -> None:
    config = ChunkConfig()
    assert config.records_per_chunk == 1000
    assert config.lines_per_chunk == 4000
    assert config.prefix == "chunk"
    assert config.output_dir == Path("chunks")
