import os
import stat

import pytest


def _build(base, tree):
    for name, content in tree.items():
        path = base / name
        if isinstance(content, dict):
            path.mkdir()
            _build(path, content)
        else:
            path.write_bytes(b"x" * content if isinstance(content, int) else content)


@pytest.fixture
def make_tree(tmp_path):
    """
    Build a directory tree from a nested dict under a fresh directory,
    ints giving file sizes and dicts giving subdirectories
    """
    def _make_tree(tree, name="root"):
        root = tmp_path / name
        root.mkdir()
        _build(root, tree)
        return root
    return _make_tree


@pytest.fixture
def reference_scan():
    """
    Independent (size, count, sizes by lower-cased name) scan using
    os.walk
    """
    def _reference_scan(root):
        total, count, sizes = 0, 0, {}
        for dirpath, _, filenames in os.walk(root):
            for name in filenames:
                s = os.lstat(os.path.join(dirpath, name))
                if stat.S_ISREG(s.st_mode):
                    total += s.st_size
                    count += 1
                    sizes[name.lower()] = s.st_size
        return total, count, sizes
    return _reference_scan


@pytest.fixture
def sample_tree(make_tree):
    return make_tree({
        "a.txt": 10,
        "b.TXT": 20,
        "c.conf": 5,
        ".bashrc": 7,
        "Makefile": 3,
        "src": {
            "main.py": 100,
            "util.PY": 50,
            ".hidden.py": 1,
            "deep": {
                "deeper": {
                    "archive.tar.gz": 1000,
                },
            },
        },
        ".git": {
            "config": 40,
        },
        "empty": {},
    })
