"""Shared pytest fixtures for loosecat tests."""

import hashlib
import shutil
import tempfile
import zlib
from pathlib import Path

import pytest

from loosecat.core.repository import Repository


def make_oid(seed: int) -> bytes:
    """Deterministic 20-byte object id."""
    return hashlib.sha1(str(seed).encode()).digest()


def tree_entry_bytes(mode: str, path: str, oid: bytes) -> bytes:
    """Encode one tree entry: <mode> <path>\\0<20-byte oid>."""
    return f"{mode} {path}".encode() + b'\0' + oid


def loose_object(obj_type: str, content: bytes) -> bytes:
    """Decompressed loose object: header plus content."""
    return f"{obj_type} {len(content)}".encode() + b'\0' + content


def write_loose_object(repo, obj_type: str, content: bytes) -> str:
    """
    Store an object in the repository's loose object directory.

    Returns:
        str: 40-character object id
    """
    data = loose_object(obj_type, content)
    oid = hashlib.sha1(data).hexdigest()
    path = repo.object_path(oid)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(zlib.compress(data))
    return oid


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def isolated_home(temp_dir, monkeypatch):
    """Point HOME at an empty directory and clear LOOSECAT_* variables."""
    home = temp_dir / 'home'
    home.mkdir()
    monkeypatch.setenv('HOME', str(home))
    for key in ('LOOSECAT_DECODE_MODE_TYPES', 'LOOSECAT_DECODE_STRICT_SIZE',
                'LOOSECAT_COLOR_UI'):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def repo(temp_dir, isolated_home):
    """Create a work tree with an empty .git/objects directory."""
    work_tree = temp_dir / 'work'
    (work_tree / '.git' / 'objects').mkdir(parents=True)
    return Repository(str(work_tree))


@pytest.fixture
def sample_tree_content():
    """Tree content with a file, an executable, a directory and a symlink."""
    return b''.join([
        tree_entry_bytes('100644', 'README.md', make_oid(1)),
        tree_entry_bytes('100755', 'build.sh', make_oid(2)),
        tree_entry_bytes('40000', 'src', make_oid(3)),
        tree_entry_bytes('120000', 'link', make_oid(4)),
    ])


@pytest.fixture
def populated_repo(repo, sample_tree_content):
    """Repository holding a blob, a binary blob, a tree and a commit."""
    repo.oids = {
        'blob': write_loose_object(repo, 'blob', b'Hello, World!\n'),
        'binary': write_loose_object(repo, 'blob', b'\x00\xff\xfe binary'),
        'tree': write_loose_object(repo, 'tree', sample_tree_content),
    }
    commit = (f"tree {repo.oids['tree']}\n"
              "author Test User <test@example.com> 1705693906 +0100\n"
              "committer Test User <test@example.com> 1705693906 +0100\n"
              "\n"
              "Initial commit\n").encode()
    repo.oids['commit'] = write_loose_object(repo, 'commit', commit)
    return repo
