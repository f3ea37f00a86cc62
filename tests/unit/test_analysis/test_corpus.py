"""Tests for source corpus collection."""

from pathlib import Path

import pytest

from depcheck.analysis import corpus as corpus_module
from depcheck.analysis.corpus import SourceCorpus
from depcheck.core.exceptions.errors import CorpusReadError


class TestSourceCorpus:
    """Tests for SourceCorpus."""

    @pytest.fixture
    def project(self, temp_dir: Path) -> Path:
        """Create a project tree with sources and vendored modules."""
        (temp_dir / "lib").mkdir()
        (temp_dir / "node_modules" / "chalk").mkdir(parents=True)
        (temp_dir / "index.js").write_text("require('./lib/util');\n")
        (temp_dir / "lib" / "util.js").write_text("module.exports = {};\n")
        (temp_dir / "lib" / "types.ts").write_text("export type A = string;\n")
        (temp_dir / "node_modules" / "chalk" / "index.js").write_text("// vendored\n")
        return temp_dir

    def test_find_files(self, project: Path) -> None:
        """Test matching files are found relative to root, sorted."""
        corpus = SourceCorpus(project)
        assert corpus.find_files() == [Path("index.js"), Path("lib/util.js")]

    def test_excluded_directory_only(self, project: Path) -> None:
        """Test a file named like an excluded directory is still scanned."""
        (project / "node_modules.js").write_text("require('x');\n")

        files = SourceCorpus(project).find_files()

        assert Path("node_modules.js") in files
        assert not any("node_modules" in f.parts[:-1] for f in files)

    def test_custom_pattern_and_exclusions(self, project: Path) -> None:
        """Test pattern and exclusions are configurable."""
        corpus = SourceCorpus(project, pattern="**/*.ts", exclude_dirs=("lib",))
        assert corpus.find_files() == []

    def test_load(self, project: Path) -> None:
        """Test file contents are loaded."""
        contents = SourceCorpus(project).load()

        assert contents == {
            Path("index.js"): "require('./lib/util');\n",
            Path("lib/util.js"): "module.exports = {};\n",
        }

    def test_defaults_to_working_directory(self, project: Path, monkeypatch) -> None:
        """Test the working directory is the default root."""
        monkeypatch.chdir(project)
        assert SourceCorpus().root == Path.cwd()
        assert len(SourceCorpus().load()) == 2

    def test_empty_project(self, temp_dir: Path) -> None:
        """Test an empty project yields an empty corpus."""
        assert SourceCorpus(temp_dir).load() == {}

    def test_unreadable_file_fails_whole_load(self, project: Path) -> None:
        """Test one undecodable file fails the corpus."""
        (project / "lib" / "binary.js").write_bytes(b"\xff\xfe\x00broken")

        with pytest.raises(CorpusReadError) as exc_info:
            SourceCorpus(project).load()

        assert "binary.js" in exc_info.value.message
        assert exc_info.value.details["file_path"] == str(Path("lib/binary.js"))

    def test_excluded_directories_are_not_walked(self, project: Path, monkeypatch) -> None:
        """Test excluded directories are pruned instead of filtered afterwards."""
        walk = corpus_module.os.walk
        visited: list[Path] = []

        def recording_walk(top, *args, **kwargs):
            for dirpath, dirnames, filenames in walk(top, *args, **kwargs):
                visited.append(Path(dirpath))
                yield dirpath, dirnames, filenames

        monkeypatch.setattr(corpus_module.os, "walk", recording_walk)

        SourceCorpus(project).find_files()

        assert project / "lib" in visited
        assert not any("node_modules" in path.parts for path in visited)

    def test_hidden_entries_skipped(self, project: Path) -> None:
        """Test dot-files and dot-directories are not collected."""
        (project / ".eslintrc.js").write_text("module.exports = {};\n")
        (project / ".cache").mkdir()
        (project / ".cache" / "bundle.js").write_text("require('chalk');\n")

        assert SourceCorpus(project).find_files() == [Path("index.js"), Path("lib/util.js")]

    def test_anchored_pattern(self, temp_dir: Path) -> None:
        """Test a pattern anchored to a subdirectory matches at any depth below it."""
        (temp_dir / "src" / "deep").mkdir(parents=True)
        (temp_dir / "other").mkdir()
        (temp_dir / "src" / "a.mjs").write_text("")
        (temp_dir / "src" / "deep" / "b.mjs").write_text("")
        (temp_dir / "other" / "c.mjs").write_text("")
        (temp_dir / "top.mjs").write_text("")

        files = SourceCorpus(temp_dir, pattern="src/**/*.mjs").find_files()

        assert files == [Path("src/a.mjs"), Path("src/deep/b.mjs")]
