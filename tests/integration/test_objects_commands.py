"""Integration tests for cat-file, ls-tree and count-objects."""

import pytest
from click.testing import CliRunner

from loosecat.cli.main import cli
from tests.conftest import make_oid


@pytest.fixture
def in_repo(populated_repo, monkeypatch):
    """Run commands from inside the populated repository."""
    monkeypatch.chdir(populated_repo.work_tree)
    return populated_repo


class TestCatFileCommand:
    """Tests for loosecat cat-file."""

    def test_type(self, in_repo):
        """Test -t prints the object type."""
        for kind, expected in [('blob', 'blob'), ('tree', 'tree'), ('commit', 'commit')]:
            result = CliRunner().invoke(cli, ['cat-file', '-t', in_repo.oids[kind]])
            assert result.exit_code == 0
            assert result.output.strip() == expected

    def test_size(self, in_repo):
        """Test -s prints the declared size."""
        result = CliRunner().invoke(cli, ['cat-file', '-s', in_repo.oids['blob']])
        assert result.exit_code == 0
        assert result.output.strip() == '14'

    def test_pretty_blob(self, in_repo):
        """Test -p prints blob content, using an abbreviated id."""
        result = CliRunner().invoke(cli, ['cat-file', '-p', in_repo.oids['blob'][:7]])
        assert result.exit_code == 0
        assert 'Hello, World!' in result.output

    def test_pretty_binary_blob(self, in_repo):
        """Test binary blobs are summarized."""
        result = CliRunner().invoke(cli, ['cat-file', '-p', in_repo.oids['binary']])
        assert result.exit_code == 0
        assert '<binary data:' in result.output

    def test_pretty_commit(self, in_repo):
        """Test commit bodies are printed raw."""
        result = CliRunner().invoke(cli, ['cat-file', '-p', in_repo.oids['commit']])
        assert result.exit_code == 0
        assert f"tree {in_repo.oids['tree']}" in result.output
        assert 'Initial commit' in result.output

    def test_pretty_tree(self, in_repo):
        """Test trees are listed entry by entry."""
        result = CliRunner().invoke(cli, ['cat-file', '-p', '--mode-types', in_repo.oids['tree']])
        assert result.exit_code == 0
        assert f"100755 blob {make_oid(2).hex()}\tbuild.sh" in result.output

    def test_requires_one_flag(self, in_repo):
        """Test exactly one of -t, -s, -p is needed."""
        result = CliRunner().invoke(cli, ['cat-file', in_repo.oids['blob']])
        assert result.exit_code == 1
        result = CliRunner().invoke(cli, ['cat-file', '-t', '-s', in_repo.oids['blob']])
        assert result.exit_code == 1

    def test_unknown_object(self, in_repo):
        """Test missing object is reported."""
        result = CliRunner().invoke(cli, ['cat-file', '-t', '0' * 40])
        assert result.exit_code == 1
        assert 'not found' in result.output

    def test_empty_repository(self, temp_dir, isolated_home, monkeypatch):
        """Test lookups in a repository without objects."""
        empty = temp_dir / 'empty'
        (empty / '.git').mkdir(parents=True)
        monkeypatch.chdir(empty)
        result = CliRunner().invoke(cli, ['cat-file', '-t', 'abcd'])
        assert result.exit_code == 1


class TestLsTreeCommand:
    """Tests for loosecat ls-tree."""

    def test_ls_tree(self, in_repo):
        """Test entries are listed in stored order."""
        result = CliRunner().invoke(cli, ['ls-tree', in_repo.oids['tree']])
        assert result.exit_code == 0
        lines = result.output.strip().split('\n')
        assert [line.split()[-1] for line in lines] == ['README.md', 'build.sh', 'src', 'link']
        assert lines[2].startswith('040000 040000 ')

    def test_name_only(self, in_repo):
        """Test --name-only."""
        result = CliRunner().invoke(cli, ['ls-tree', '--name-only', in_repo.oids['tree']])
        assert result.output.split() == ['README.md', 'build.sh', 'src', 'link']

    def test_abbrev(self, in_repo):
        """Test --abbrev shortens ids."""
        result = CliRunner().invoke(cli, ['ls-tree', '--abbrev', '7', in_repo.oids['tree']])
        assert f"{make_oid(1).hex()[:7]}\tREADME.md" in result.output
        assert make_oid(1).hex() not in result.output

    def test_mode_types_from_repo_config(self, in_repo):
        """Test decode.mode_types from the repository config."""
        CliRunner().invoke(cli, ['config', 'set', 'decode.mode_types', 'true'])
        result = CliRunner().invoke(cli, ['ls-tree', in_repo.oids['tree']])
        assert '040000 tree ' in result.output

    def test_not_a_tree(self, in_repo):
        """Test non-tree objects are refused."""
        result = CliRunner().invoke(cli, ['ls-tree', in_repo.oids['blob']])
        assert result.exit_code == 1
        assert 'Not a tree object' in result.output


class TestCountObjectsCommand:
    """Tests for loosecat count-objects."""

    def test_count(self, in_repo):
        """Test total count."""
        result = CliRunner().invoke(cli, ['count-objects'])
        assert result.exit_code == 0
        assert '4 objects' in result.output

    def test_verbose(self, in_repo):
        """Test breakdown by type."""
        result = CliRunner().invoke(cli, ['count-objects', '-v'])
        assert result.exit_code == 0
        assert 'blob:' in result.output
        assert 'tree:' in result.output
        assert 'commit:' in result.output

    def test_verbose_counts_invalid(self, in_repo):
        """Test unreadable objects are counted separately."""
        path = in_repo.object_path('ee' * 20)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b'junk')
        result = CliRunner().invoke(cli, ['count-objects', '-v'])
        assert result.exit_code == 0
        assert 'invalid:' in result.output
        assert '5 objects' in result.output
